"""
Tests for show endpoints: CRUD, the future-booking guard, and search.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from app.models import Booking, BookingStatus
from tests.factories import add_booking, add_show, at_hour, parse_api_datetime


@pytest.mark.asyncio
async def test_create_show(client: AsyncClient, movie, theatre):
    """Created show carries the referenced movie and theatre."""
    show_time = at_hour(1, 18)
    response = await client.post(
        "/api/shows",
        json={"movieId": movie.id, "theatreId": theatre.id, "showTime": show_time.isoformat()},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["showId"] > 0
    assert data["movieTitle"] == "Inception"
    assert data["language"] == "English"
    assert data["genre"] == "Sci-Fi"
    assert data["theatreName"] == "PVR"
    assert data["cityName"] == "Hyderabad"
    assert parse_api_datetime(data["showTime"]) == show_time


@pytest.mark.asyncio
async def test_create_show_accepts_snake_case_body(client: AsyncClient, movie, theatre):
    response = await client.post(
        "/api/shows",
        json={"movie_id": movie.id, "theatre_id": theatre.id, "show_time": at_hour(2, 21).isoformat()},
    )
    assert response.status_code == 200
    assert response.json()["theatreName"] == "PVR"


@pytest.mark.asyncio
async def test_create_show_in_the_past_is_accepted(client: AsyncClient, movie, theatre):
    response = await client.post(
        "/api/shows",
        json={"movieId": movie.id, "theatreId": theatre.id, "showTime": at_hour(-3, 10).isoformat()},
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_create_show_missing_movie(client: AsyncClient, theatre):
    """Unknown movie returns 404 naming the movie."""
    response = await client.post(
        "/api/shows",
        json={"movieId": 9999, "theatreId": theatre.id, "showTime": at_hour(1, 18).isoformat()},
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Movie with id 9999 not found"


@pytest.mark.asyncio
async def test_create_show_missing_movie_and_theatre_reports_movie(client: AsyncClient):
    response = await client.post(
        "/api/shows",
        json={"movieId": 9999, "theatreId": 8888, "showTime": at_hour(1, 18).isoformat()},
    )
    assert response.status_code == 404
    assert response.json()["detail"].startswith("Movie")


@pytest.mark.asyncio
async def test_create_show_missing_theatre(client: AsyncClient, movie):
    response = await client.post(
        "/api/shows",
        json={"movieId": movie.id, "theatreId": 9999, "showTime": at_hour(1, 18).isoformat()},
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Theatre with id 9999 not found"


@pytest.mark.asyncio
async def test_create_show_invalid_body(client: AsyncClient, movie):
    """Missing theatre and unparsable time are rejected before the service runs."""
    response = await client.post(
        "/api/shows",
        json={"movieId": movie.id, "showTime": "tomorrow evening"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_show_round_trip(client: AsyncClient, movie, theatre):
    show_time = at_hour(1, 18)
    created = await client.post(
        "/api/shows",
        json={"movieId": movie.id, "theatreId": theatre.id, "showTime": show_time.isoformat()},
    )
    show_id = created.json()["showId"]

    first = await client.get(f"/api/shows/{show_id}")
    second = await client.get(f"/api/shows/{show_id}")

    assert first.status_code == 200
    assert first.json() == second.json()
    assert first.json() == created.json()


@pytest.mark.asyncio
async def test_get_show_not_found(client: AsyncClient):
    response = await client.get("/api/shows/99999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Show with id 99999 not found"


@pytest.mark.asyncio
async def test_list_shows_empty(client: AsyncClient):
    response = await client.get("/api/shows")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_shows_ordered_by_time(client: AsyncClient, db_session, movie, theatre):
    later = await add_show(db_session, movie, theatre, at_hour(3, 20))
    earlier = await add_show(db_session, movie, theatre, at_hour(2, 9))

    response = await client.get("/api/shows")
    assert response.status_code == 200
    assert [s["showId"] for s in response.json()] == [earlier.id, later.id]


@pytest.mark.asyncio
async def test_update_show(client: AsyncClient, future_show, other_movie, other_theatre):
    """Show without bookings can be moved to another movie, theatre and time."""
    new_time = at_hour(4, 13)
    response = await client.put(
        f"/api/shows/{future_show.id}",
        json={"movieId": other_movie.id, "theatreId": other_theatre.id, "showTime": new_time.isoformat()},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["showId"] == future_show.id
    assert data["movieTitle"] == "Interstellar"
    assert data["theatreName"] == "INOX Garuda"
    assert data["cityName"] == "Bengaluru"
    assert parse_api_datetime(data["showTime"]) == new_time


@pytest.mark.asyncio
async def test_update_show_with_future_bookings(client: AsyncClient, db_session, future_show, movie, theatre):
    """Show with a booking on a future screening returns 409."""
    await add_booking(db_session, future_show, ["A1"])

    response = await client.put(
        f"/api/shows/{future_show.id}",
        json={"movieId": movie.id, "theatreId": theatre.id, "showTime": at_hour(5, 18).isoformat()},
    )
    assert response.status_code == 409
    assert response.json()["detail"] == (
        f"Cannot modify or delete show {future_show.id} as it has future bookings"
    )


@pytest.mark.asyncio
async def test_update_past_show_with_bookings(client: AsyncClient, db_session, past_show, movie, theatre):
    """Bookings on a show that already ran do not block changes."""
    await add_booking(db_session, past_show, ["B4"])

    response = await client.put(
        f"/api/shows/{past_show.id}",
        json={"movieId": movie.id, "theatreId": theatre.id, "showTime": at_hour(-1, 20).isoformat()},
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_update_show_not_found(client: AsyncClient, movie, theatre):
    response = await client.put(
        "/api/shows/99999",
        json={"movieId": movie.id, "theatreId": theatre.id, "showTime": at_hour(1, 18).isoformat()},
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Show with id 99999 not found"


@pytest.mark.asyncio
async def test_update_show_missing_movie(client: AsyncClient, future_show, theatre):
    response = await client.put(
        f"/api/shows/{future_show.id}",
        json={"movieId": 9999, "theatreId": theatre.id, "showTime": at_hour(1, 18).isoformat()},
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Movie with id 9999 not found"


@pytest.mark.asyncio
async def test_update_show_missing_theatre(client: AsyncClient, future_show, movie):
    response = await client.put(
        f"/api/shows/{future_show.id}",
        json={"movieId": movie.id, "theatreId": 9999, "showTime": at_hour(1, 18).isoformat()},
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Theatre with id 9999 not found"


@pytest.mark.asyncio
async def test_delete_show(client: AsyncClient, future_show):
    response = await client.delete(f"/api/shows/{future_show.id}")
    assert response.status_code == 204

    get_response = await client.get(f"/api/shows/{future_show.id}")
    assert get_response.status_code == 404


@pytest.mark.asyncio
async def test_delete_show_with_future_bookings(client: AsyncClient, db_session, future_show):
    await add_booking(db_session, future_show, ["C7", "C8"])

    response = await client.delete(f"/api/shows/{future_show.id}")
    assert response.status_code == 409

    # Still there
    get_response = await client.get(f"/api/shows/{future_show.id}")
    assert get_response.status_code == 200


@pytest.mark.asyncio
async def test_delete_show_cancelled_bookings_still_block(client: AsyncClient, db_session, future_show):
    """The guard counts every booking, whatever its status."""
    await add_booking(db_session, future_show, ["D1"], status=BookingStatus.CANCELLED)

    response = await client.delete(f"/api/shows/{future_show.id}")
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_delete_past_show_removes_its_bookings(client: AsyncClient, db_session, past_show):
    booking = await add_booking(db_session, past_show, ["E2"])
    booking_id = booking.id

    response = await client.delete(f"/api/shows/{past_show.id}")
    assert response.status_code == 204

    db_session.expunge_all()
    result = await db_session.execute(select(Booking.id).where(Booking.id == booking_id))
    assert result.first() is None


@pytest.mark.asyncio
async def test_delete_show_not_found(client: AsyncClient):
    response = await client.delete("/api/shows/99999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_search_shows(client: AsyncClient, future_show):
    """Search matches title and city regardless of case."""
    day = future_show.show_time.date().isoformat()
    response = await client.get(
        "/api/shows/search",
        params={"movie": "inCEPtion", "city": "HYDERABAD", "date": day},
    )
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["showId"] == future_show.id
    assert data[0]["movieTitle"] == "Inception"


@pytest.mark.asyncio
async def test_search_shows_other_day_is_empty(client: AsyncClient, future_show):
    day = at_hour(10, 18).date().isoformat()
    response = await client.get(
        "/api/shows/search",
        params={"movie": "Inception", "city": "Hyderabad", "date": day},
    )
    assert response.status_code == 204
    assert response.content == b""


@pytest.mark.asyncio
async def test_search_shows_filters_city_and_movie(
    client: AsyncClient, db_session, future_show, other_movie, other_theatre
):
    show_time = future_show.show_time
    await add_show(db_session, other_movie, future_show.theatre, show_time)
    in_bengaluru = await add_show(db_session, future_show.movie, other_theatre, show_time)

    response = await client.get(
        "/api/shows/search",
        params={"movie": "Inception", "city": "Bengaluru", "date": show_time.date().isoformat()},
    )
    assert response.status_code == 200
    assert [s["showId"] for s in response.json()] == [in_bengaluru.id]


@pytest.mark.asyncio
async def test_search_shows_bad_date(client: AsyncClient):
    response = await client.get(
        "/api/shows/search",
        params={"movie": "Inception", "city": "Hyderabad", "date": "17/10/2026"},
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_search_shows_missing_params(client: AsyncClient):
    response = await client.get("/api/shows/search", params={"movie": "Inception"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_show_bookings(client: AsyncClient, db_session, future_show):
    await add_booking(db_session, future_show, ["F1", "F2"])

    response = await client.get(f"/api/shows/{future_show.id}/bookings")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["showId"] == future_show.id
    assert data[0]["seats"] == ["F1", "F2"]


@pytest.mark.asyncio
async def test_list_bookings_unknown_show(client: AsyncClient):
    response = await client.get("/api/shows/99999/bookings")
    assert response.status_code == 404
