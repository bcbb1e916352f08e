"""
Pydantic schemas for booking-related request/response validation.
"""

from datetime import datetime

from pydantic import Field, field_validator

from app.models.booking import BookingStatus
from app.core.clock import as_utc
from app.schemas.base import ApiModel


class BookingCreate(ApiModel):
    show_id: int = Field(..., gt=0)
    customer_name: str = Field(..., min_length=1, max_length=255)
    seats: list[str] = Field(..., min_length=1, max_length=20)

    @field_validator("seats")
    @classmethod
    def seats_must_be_distinct(cls, seats: list[str]) -> list[str]:
        cleaned = [seat.strip().upper() for seat in seats]
        if any(not seat for seat in cleaned):
            raise ValueError("seat identifiers must not be blank")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("seat identifiers must be unique")
        return cleaned


class BookingResponse(ApiModel):
    id: int
    show_id: int
    customer_name: str
    booking_time: datetime
    seats: list[str]
    status: BookingStatus

    @field_validator("booking_time")
    @classmethod
    def normalize_booking_time(cls, value: datetime) -> datetime:
        return as_utc(value)
