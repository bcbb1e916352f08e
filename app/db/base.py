"""
Declarative base and the audit column mixin shared by all entities.
"""

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class AuditMixin:
    """
    Who created / last modified a row, and when.
    Values are filled in by the before_flush listener in app.db.audit,
    never by services.
    """

    created_by = Column(String(100), nullable=True)
    created_date = Column(DateTime(timezone=True), nullable=False)
    modified_by = Column(String(100), nullable=True)
    modified_date = Column(DateTime(timezone=True), nullable=True)
