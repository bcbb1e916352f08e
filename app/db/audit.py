"""
Storage-level interceptor that stamps audit columns on flush.

The acting identity is read from session.info["actor"], which the request's
Principal dependency sets. Anything written outside a request is attributed
to "system".
"""

from sqlalchemy import event
from sqlalchemy.orm import Session

from app.core.clock import utcnow
from app.db.base import AuditMixin

SYSTEM_ACTOR = "system"


def set_actor(session, actor: str) -> None:
    """Record who is acting on this session. Works for Session and AsyncSession."""
    session.info["actor"] = actor


@event.listens_for(Session, "before_flush")
def stamp_audit_columns(session: Session, flush_context, instances) -> None:
    actor = session.info.get("actor", SYSTEM_ACTOR)
    now = utcnow()

    for obj in session.new:
        if isinstance(obj, AuditMixin):
            obj.created_by = actor
            obj.created_date = now

    for obj in session.dirty:
        if isinstance(obj, AuditMixin) and session.is_modified(obj, include_collections=False):
            obj.modified_by = actor
            obj.modified_date = now
