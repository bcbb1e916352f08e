"""
Show endpoints: search, CRUD, and the bookings of a show.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.security import get_current_principal
from app.db.session import get_db
from app.schemas.booking import BookingResponse
from app.schemas.show import ShowRequest, ShowResponse
from app.services import show_service
from app.services.booking_service import list_bookings_for_show
from app.services.interfaces.access_policy import Principal

logger = get_logger(__name__)
router = APIRouter(prefix="/shows", tags=["Shows"])


@router.get(
    "/search",
    response_model=list[ShowResponse],
    responses={204: {"description": "No shows match"}},
)
async def search_shows_endpoint(
    movie: str = Query(..., min_length=1),
    city: str = Query(..., min_length=1),
    date_param: str = Query(..., alias="date", description="Calendar date, YYYY-MM-DD"),
    db: AsyncSession = Depends(get_db),
):
    """
    Find shows of a movie in a city on a given date.
    Returns 204 when nothing matches, 400 if the date cannot be parsed.
    """
    try:
        day = date.fromisoformat(date_param)
    except ValueError:
        logger.info("show_search_bad_date", date=date_param)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid date '{date_param}', expected YYYY-MM-DD",
        )

    shows = await show_service.search_shows(db, movie, city, day)
    if not shows:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    logger.info("show_search_results", count=len(shows))
    return ShowResponse.from_shows(shows)


@router.post("", response_model=ShowResponse)
async def create_show_endpoint(
    show_data: ShowRequest,
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    """Create a show. Movie and theatre must exist."""
    show = await show_service.create_show(db, show_data, principal)
    return ShowResponse.from_show(show)


@router.put("/{show_id}", response_model=ShowResponse)
async def update_show_endpoint(
    show_id: int,
    show_data: ShowRequest,
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    """Update a show. 409 while the show has future bookings."""
    show = await show_service.update_show(db, show_id, show_data, principal)
    return ShowResponse.from_show(show)


@router.delete("/{show_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_show_endpoint(
    show_id: int,
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    """Delete a show. 409 while the show has future bookings."""
    await show_service.delete_show(db, show_id, principal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{show_id}", response_model=ShowResponse)
async def get_show_endpoint(show_id: int, db: AsyncSession = Depends(get_db)):
    show = await show_service.get_show(db, show_id)
    return ShowResponse.from_show(show)


@router.get("", response_model=list[ShowResponse])
async def list_shows_endpoint(db: AsyncSession = Depends(get_db)):
    shows = await show_service.list_shows(db)
    return ShowResponse.from_shows(shows)


@router.get("/{show_id}/bookings", response_model=list[BookingResponse])
async def list_show_bookings_endpoint(show_id: int, db: AsyncSession = Depends(get_db)):
    """All bookings for a show, confirmed and cancelled."""
    bookings = await list_bookings_for_show(db, show_id)
    return [BookingResponse.model_validate(booking) for booking in bookings]
