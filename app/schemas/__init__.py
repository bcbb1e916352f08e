from app.schemas.show import ShowRequest, ShowResponse
from app.schemas.booking import BookingCreate, BookingResponse
from app.schemas.catalogue import (
    MovieCreate, MovieResponse, CityCreate, CityResponse,
    PartnerCreate, PartnerResponse, TheatreCreate, TheatreResponse,
)

__all__ = [
    "ShowRequest", "ShowResponse",
    "BookingCreate", "BookingResponse",
    "MovieCreate", "MovieResponse", "CityCreate", "CityResponse",
    "PartnerCreate", "PartnerResponse", "TheatreCreate", "TheatreResponse",
]
