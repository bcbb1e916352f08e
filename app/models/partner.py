"""
Partner: the organisation that owns theatres (e.g. PVR, INOX, Cinepolis).
Partner ownership of a theatre is what the access policy checks.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base, AuditMixin


class Partner(Base, AuditMixin):
    __tablename__ = "partners"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)

    theatres = relationship("Theatre", back_populates="partner")

    def __repr__(self) -> str:
        return f"<Partner(id={self.id}, name={self.name})>"
