"""
Booking model representing a customer's reservation for a show.

Key design decisions:
- Seats live in a child table with an explicit position so the order the
  customer chose is preserved.
- Status field allows cancellation without deleting records.
- Deleting a show removes its bookings via ON DELETE CASCADE.
"""

import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base, AuditMixin


class BookingStatus(str, enum.Enum):
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class Booking(Base, AuditMixin):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    show_id = Column(Integer, ForeignKey("shows.id", ondelete="CASCADE"), nullable=False, index=True)
    customer_name = Column(String(255), nullable=False)
    booking_time = Column(DateTime(timezone=True), nullable=False)
    status = Column(
        Enum(BookingStatus, name="booking_status", native_enum=False, length=20),
        nullable=False,
        default=BookingStatus.CONFIRMED,
    )

    show = relationship("Show", back_populates="bookings")
    seat_rows = relationship(
        "BookingSeat",
        back_populates="booking",
        order_by="BookingSeat.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    __table_args__ = (
        CheckConstraint("status IN ('CONFIRMED', 'CANCELLED')", name="check_booking_status"),
    )

    @property
    def seats(self) -> list[str]:
        return [row.seat_number for row in self.seat_rows]

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, show={self.show_id}, status={self.status})>"


class BookingSeat(Base):
    __tablename__ = "booking_seats"

    id = Column(Integer, primary_key=True)
    booking_id = Column(Integer, ForeignKey("bookings.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    seat_number = Column(String(20), nullable=False)

    booking = relationship("Booking", back_populates="seat_rows")

    __table_args__ = (
        UniqueConstraint("booking_id", "seat_number", name="uq_booking_seat"),
    )
