"""
Booking service: the future-booking guard plus booking create/cancel.

LOCKING STRATEGY
================

Problem:
  Show update/delete checks "does this show have future bookings?" and then
  mutates the show. A booking inserted between the check and the mutation
  would be silently orphaned or moved to another time.

Solution:
  Every code path that either reads the guard or inserts a booking first
  takes a row lock on the show (SELECT ... FOR UPDATE). The guard check,
  the mutation and the booking insert then serialize per show. The lock is
  released when the per-request transaction commits or rolls back.

  On SQLite FOR UPDATE is not rendered; the database-level write lock
  serializes writers instead.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import select, exists
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException, status

from app.core.clock import utcnow
from app.core.exceptions import EntityNotFoundError, SeatAlreadyBookedError
from app.core.logging import get_logger
from app.core.metrics import record_booking_attempt
from app.models.booking import Booking, BookingSeat, BookingStatus
from app.models.show import Show
from app.schemas.booking import BookingCreate

logger = get_logger(__name__)


async def lock_show(db: AsyncSession, show_id: int) -> None:
    """Take a row lock on the show, if it exists. Does not load it."""
    await db.execute(select(Show.id).where(Show.id == show_id).with_for_update())


async def has_future_bookings(
    db: AsyncSession,
    show_id: int,
    now: Optional[datetime] = None,
) -> bool:
    """
    True if any booking exists for the show and the show starts after `now`.
    Booking status is not consulted. Runs as a single EXISTS query.
    """
    now = now or utcnow()
    query = select(
        exists().where(
            Booking.show_id == Show.id,
            Booking.show_id == show_id,
            Show.show_time > now,
        )
    )
    result = await db.execute(query)
    return bool(result.scalar())


async def _taken_seats(db: AsyncSession, show_id: int, seats: list[str]) -> set[str]:
    result = await db.execute(
        select(BookingSeat.seat_number)
        .join(Booking, BookingSeat.booking_id == Booking.id)
        .where(
            Booking.show_id == show_id,
            Booking.status == BookingStatus.CONFIRMED,
            BookingSeat.seat_number.in_(seats),
        )
    )
    return set(result.scalars().all())


async def create_booking(db: AsyncSession, booking_data: BookingCreate) -> Booking:
    """
    Book seats for a show.
    Raises 404 if the show does not exist, 409 if any seat is already taken.
    """
    await lock_show(db, booking_data.show_id)

    show = await db.get(Show, booking_data.show_id)
    if not show:
        record_booking_attempt("not_found")
        raise EntityNotFoundError("Show", booking_data.show_id)

    taken = await _taken_seats(db, show.id, booking_data.seats)
    if taken:
        record_booking_attempt("conflict")
        logger.warning(
            "booking_failed_seats_taken",
            show_id=show.id,
            requested=booking_data.seats,
            taken=sorted(taken),
        )
        raise SeatAlreadyBookedError(show.id, taken)

    booking = Booking(
        show_id=show.id,
        customer_name=booking_data.customer_name,
        booking_time=utcnow(),
        status=BookingStatus.CONFIRMED,
        seat_rows=[
            BookingSeat(position=position, seat_number=seat)
            for position, seat in enumerate(booking_data.seats)
        ],
    )
    db.add(booking)
    await db.flush()

    record_booking_attempt("success")
    logger.info(
        "booking_created",
        booking_id=booking.id,
        show_id=show.id,
        seats=booking.seats,
    )
    return booking


async def get_booking(db: AsyncSession, booking_id: int) -> Booking:
    booking = await db.get(Booking, booking_id)
    if not booking:
        raise EntityNotFoundError("Booking", booking_id)
    return booking


async def list_bookings_for_show(db: AsyncSession, show_id: int) -> list[Booking]:
    """All bookings for a show, oldest first. 404 if the show does not exist."""
    if not await db.get(Show, show_id):
        raise EntityNotFoundError("Show", show_id)

    result = await db.execute(
        select(Booking)
        .where(Booking.show_id == show_id)
        .order_by(Booking.booking_time.asc(), Booking.id.asc())
    )
    return list(result.scalars().all())


async def cancel_booking(db: AsyncSession, booking_id: int) -> Booking:
    """Mark a booking as cancelled. Its seats become bookable again."""
    booking = await get_booking(db, booking_id)

    if booking.status == BookingStatus.CANCELLED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Booking is already cancelled",
        )

    booking.status = BookingStatus.CANCELLED
    await db.flush()

    logger.info("booking_cancelled", booking_id=booking.id, show_id=booking.show_id)
    return booking
