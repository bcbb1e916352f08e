"""
Pydantic schemas for show requests and the flattened show representation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from app.models.show import Show
from app.core.clock import as_utc
from app.schemas.base import ApiModel


class ShowRequest(ApiModel):
    """Body for both create and update."""

    movie_id: int = Field(..., gt=0)
    theatre_id: int = Field(..., gt=0)
    show_time: datetime

    @field_validator("show_time")
    @classmethod
    def normalize_show_time(cls, value: datetime) -> datetime:
        return as_utc(value)


class ShowResponse(ApiModel):
    show_id: int
    movie_title: str
    language: Optional[str] = None
    genre: Optional[str] = None
    theatre_name: str
    city_name: str
    show_time: datetime

    @field_validator("show_time")
    @classmethod
    def normalize_show_time(cls, value: datetime) -> datetime:
        return as_utc(value)

    @classmethod
    def from_show(cls, show: Show) -> "ShowResponse":
        return cls(
            show_id=show.id,
            movie_title=show.movie.title,
            language=show.movie.language,
            genre=show.movie.genre,
            theatre_name=show.theatre.name,
            city_name=show.theatre.city.name,
            show_time=show.show_time,
        )

    @classmethod
    def from_shows(cls, shows: list[Show]) -> list["ShowResponse"]:
        return [cls.from_show(show) for show in shows]
