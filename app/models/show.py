"""
Show model: one screening of a movie at a theatre.

Key design decisions:
- No status column. Whether a show can still be changed is derived on demand
  from its bookings (see booking_service.has_future_bookings).
- movie and theatre are joined-loaded so a Show can always be mapped to its
  response shape without further queries (required under AsyncSession).
- Bookings cascade at the database level; the ORM never loads them to delete.
"""

from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from app.db.base import Base, AuditMixin


class Show(Base, AuditMixin):
    __tablename__ = "shows"

    id = Column(Integer, primary_key=True, index=True)
    movie_id = Column(Integer, ForeignKey("movies.id"), nullable=False, index=True)
    theatre_id = Column(Integer, ForeignKey("theatres.id"), nullable=False, index=True)
    show_time = Column(DateTime(timezone=True), nullable=False)

    movie = relationship("Movie", back_populates="shows", lazy="joined")
    theatre = relationship("Theatre", back_populates="shows", lazy="joined")
    bookings = relationship(
        "Booking",
        back_populates="show",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        # Search by day and the future-booking guard both filter on show_time
        Index("ix_shows_show_time", "show_time"),
        Index("ix_shows_theatre_time", "theatre_id", "show_time"),
    )

    def __repr__(self) -> str:
        return f"<Show(id={self.id}, movie={self.movie_id}, theatre={self.theatre_id}, at={self.show_time})>"
