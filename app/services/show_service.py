"""
Show lifecycle service.

Business rules:
- A show always points at an existing movie and theatre.
- A show with future bookings cannot be updated or deleted. The guard runs
  before the show is loaded, so for a show id with future bookings the
  conflict is reported even before existence is checked.
- Show times in the past are accepted on create and update.

Mutations consult the configured ShowAccessPolicy once the theatre is known.
"""

from datetime import date

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import day_window
from app.core.exceptions import AccessDeniedError, EntityNotFoundError, ShowHasFutureBookingsError
from app.core.logging import get_logger
from app.core.metrics import (
    record_future_booking_rejection,
    record_show_operation,
    show_search_results,
)
from app.models.city import City
from app.models.movie import Movie
from app.models.show import Show
from app.models.theatre import Theatre
from app.schemas.show import ShowRequest
from app.services import booking_service
from app.services.interfaces.access_policy import Principal
from app.services.strategy_factory import get_access_policy

logger = get_logger(__name__)


async def _resolve_movie(db: AsyncSession, movie_id: int, operation: str) -> Movie:
    movie = await db.get(Movie, movie_id)
    if not movie:
        logger.error("movie_not_found", movie_id=movie_id, operation=operation)
        record_show_operation(operation, "not_found")
        raise EntityNotFoundError("Movie", movie_id)
    return movie


async def _resolve_theatre(db: AsyncSession, theatre_id: int, operation: str) -> Theatre:
    theatre = await db.get(Theatre, theatre_id)
    if not theatre:
        logger.error("theatre_not_found", theatre_id=theatre_id, operation=operation)
        record_show_operation(operation, "not_found")
        raise EntityNotFoundError("Theatre", theatre_id)
    return theatre


async def _load_show(db: AsyncSession, show_id: int, operation: str) -> Show:
    show = await db.get(Show, show_id)
    if not show:
        logger.error("show_not_found", show_id=show_id, operation=operation)
        record_show_operation(operation, "not_found")
        raise EntityNotFoundError("Show", show_id)
    return show


async def _guard_future_bookings(db: AsyncSession, show_id: int, operation: str) -> None:
    """Lock the show row, then refuse if it has future bookings."""
    await booking_service.lock_show(db, show_id)

    if await booking_service.has_future_bookings(db, show_id):
        logger.warning("show_has_future_bookings", show_id=show_id, operation=operation)
        record_show_operation(operation, "conflict")
        record_future_booking_rejection(operation)
        raise ShowHasFutureBookingsError(show_id)


def _authorize(principal: Principal, theatre: Theatre, operation: str) -> None:
    try:
        get_access_policy().authorize(principal, theatre, operation)
    except AccessDeniedError:
        record_show_operation(operation, "denied")
        raise


async def create_show(db: AsyncSession, show_data: ShowRequest, principal: Principal) -> Show:
    """Create a show for an existing movie and theatre."""
    logger.info(
        "show_create_requested",
        movie_id=show_data.movie_id,
        theatre_id=show_data.theatre_id,
        show_time=show_data.show_time.isoformat(),
    )

    movie = await _resolve_movie(db, show_data.movie_id, "create")
    theatre = await _resolve_theatre(db, show_data.theatre_id, "create")
    _authorize(principal, theatre, "create")

    show = Show(movie=movie, theatre=theatre, show_time=show_data.show_time)
    db.add(show)
    await db.flush()

    record_show_operation("create", "success")
    logger.info("show_created", show_id=show.id, movie_id=movie.id, theatre_id=theatre.id)
    return show


async def update_show(
    db: AsyncSession,
    show_id: int,
    show_data: ShowRequest,
    principal: Principal,
) -> Show:
    """
    Point an existing show at a (possibly different) movie, theatre and time.
    Refused with 409 while the show has future bookings.
    """
    logger.info("show_update_requested", show_id=show_id)

    await _guard_future_bookings(db, show_id, "update")
    show = await _load_show(db, show_id, "update")
    _authorize(principal, show.theatre, "update")

    movie = await _resolve_movie(db, show_data.movie_id, "update")
    theatre = await _resolve_theatre(db, show_data.theatre_id, "update")
    if theatre.id != show.theatre_id:
        # Moving a show to another theatre needs rights on the target too
        _authorize(principal, theatre, "update")

    show.movie = movie
    show.theatre = theatre
    show.show_time = show_data.show_time
    await db.flush()

    record_show_operation("update", "success")
    logger.info("show_updated", show_id=show.id)
    return show


async def delete_show(db: AsyncSession, show_id: int, principal: Principal) -> None:
    """Delete a show. Refused with 409 while the show has future bookings."""
    logger.info("show_delete_requested", show_id=show_id)

    await _guard_future_bookings(db, show_id, "delete")
    show = await _load_show(db, show_id, "delete")
    _authorize(principal, show.theatre, "delete")

    await db.delete(show)
    await db.flush()

    record_show_operation("delete", "success")
    logger.info("show_deleted", show_id=show_id)


async def get_show(db: AsyncSession, show_id: int) -> Show:
    show = await _load_show(db, show_id, "get")
    logger.debug("show_fetched", show_id=show_id)
    return show


async def list_shows(db: AsyncSession) -> list[Show]:
    """All shows, earliest first."""
    result = await db.execute(select(Show).order_by(Show.show_time.asc(), Show.id.asc()))
    shows = list(result.scalars().all())
    logger.debug("shows_listed", count=len(shows))
    return shows


async def search_shows(
    db: AsyncSession,
    movie_title: str,
    city_name: str,
    day: date,
) -> list[Show]:
    """
    Shows of a movie in a city on a given day.

    Title and city are matched case-insensitively; both sides are lowered by
    the database so the comparison follows a single collation. The day
    window is [00:00:00, 23:59:59.999999] UTC, inclusive.
    """
    start, end = day_window(day)
    logger.info(
        "show_search_requested",
        movie=movie_title,
        city=city_name,
        date=day.isoformat(),
    )

    query = (
        select(Show)
        .join(Movie, Show.movie_id == Movie.id)
        .join(Theatre, Show.theatre_id == Theatre.id)
        .join(City, Theatre.city_id == City.id)
        .where(
            func.lower(Movie.title) == func.lower(movie_title),
            func.lower(City.name) == func.lower(city_name),
            Show.show_time.between(start, end),
        )
        .order_by(Show.show_time.asc(), Show.id.asc())
    )
    result = await db.execute(query)
    shows = list(result.scalars().all())

    show_search_results.observe(len(shows))
    record_show_operation("search", "success")
    logger.debug("show_search_completed", count=len(shows), movie=movie_title, city=city_name)
    return shows
