"""
Request identity.

Callers identify themselves with optional headers:
  X-Actor:      display name recorded in audit columns and logs
  X-Partner-Id: partner the caller acts for (omit for platform operators)

No credentials are checked here; authentication belongs in front of the API.
The resulting Principal is what the show access policy evaluates.
"""

from typing import Optional

import structlog
from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.audit import set_actor
from app.db.session import get_db
from app.services.interfaces.access_policy import Principal


async def get_current_principal(
    x_actor: Optional[str] = Header(None, max_length=100),
    x_partner_id: Optional[int] = Header(None, gt=0),
    db: AsyncSession = Depends(get_db),
) -> Principal:
    principal = Principal(name=x_actor or "anonymous", partner_id=x_partner_id)

    # Audit columns written in this request are attributed to the caller
    set_actor(db, principal.name)
    structlog.contextvars.bind_contextvars(actor=principal.name)
    return principal
