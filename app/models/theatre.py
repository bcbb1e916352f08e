"""
Theatre model. Belongs to one city and one partner.

City and partner are joined-loaded: every show response needs the city name,
and the access policy needs the partner id.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base, AuditMixin


class Theatre(Base, AuditMixin):
    __tablename__ = "theatres"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=False, index=True)
    partner_id = Column(Integer, ForeignKey("partners.id"), nullable=False, index=True)

    city = relationship("City", back_populates="theatres", lazy="joined")
    partner = relationship("Partner", back_populates="theatres", lazy="joined")
    shows = relationship("Show", back_populates="theatre", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Theatre(id={self.id}, name={self.name}, city={self.city_id})>"
