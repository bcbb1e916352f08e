"""
Pydantic schemas for the catalogue entities: movies, cities, partners, theatres.
"""

from typing import Optional

from pydantic import Field

from app.models.theatre import Theatre
from app.schemas.base import ApiModel


class MovieCreate(ApiModel):
    title: str = Field(..., min_length=1, max_length=255)
    language: Optional[str] = Field(None, max_length=50)
    genre: Optional[str] = Field(None, max_length=50)
    duration_in_minutes: int = Field(0, ge=0, le=1000)


class MovieResponse(ApiModel):
    id: int
    title: str
    language: Optional[str]
    genre: Optional[str]
    duration_in_minutes: int


class CityCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)


class CityResponse(ApiModel):
    id: int
    name: str


class PartnerCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)


class PartnerResponse(ApiModel):
    id: int
    name: str


class TheatreCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    city_id: int = Field(..., gt=0)
    partner_id: int = Field(..., gt=0)


class TheatreResponse(ApiModel):
    id: int
    name: str
    city_id: int
    city_name: str
    partner_id: int
    partner_name: str

    @classmethod
    def from_theatre(cls, theatre: Theatre) -> "TheatreResponse":
        return cls(
            id=theatre.id,
            name=theatre.name,
            city_id=theatre.city_id,
            city_name=theatre.city.name,
            partner_id=theatre.partner_id,
            partner_name=theatre.partner.name,
        )
