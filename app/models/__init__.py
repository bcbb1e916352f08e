from app.models.city import City
from app.models.partner import Partner
from app.models.movie import Movie
from app.models.theatre import Theatre
from app.models.show import Show
from app.models.booking import Booking, BookingSeat, BookingStatus

__all__ = [
    "City", "Partner", "Movie", "Theatre", "Show",
    "Booking", "BookingSeat", "BookingStatus",
]
