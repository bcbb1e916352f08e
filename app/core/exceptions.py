"""
Domain errors raised by the service layer.

Each error is an HTTPException so FastAPI renders it as {"detail": ...}
with the right status code, while callers can still catch the specific type.
"""

from typing import Iterable

from fastapi import HTTPException, status


class EntityNotFoundError(HTTPException):
    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{entity} with id {entity_id} not found",
        )


class ShowHasFutureBookingsError(HTTPException):
    def __init__(self, show_id: int):
        self.show_id = show_id
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Cannot modify or delete show {show_id} as it has future bookings",
        )


class AccessDeniedError(HTTPException):
    def __init__(self, detail: str = "Not allowed to manage shows for this theatre"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class DuplicateEntityError(HTTPException):
    def __init__(self, entity: str, name: str):
        self.entity = entity
        self.name = name
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"{entity} '{name}' already exists",
        )


class SeatAlreadyBookedError(HTTPException):
    def __init__(self, show_id: int, seats: Iterable[str]):
        self.show_id = show_id
        self.seats = sorted(seats)
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Seats already booked for show {show_id}: {', '.join(self.seats)}",
        )
