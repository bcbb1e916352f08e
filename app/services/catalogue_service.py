"""
Catalogue service: movies, cities, partners and theatres.
"""

from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import DuplicateEntityError, EntityNotFoundError
from app.core.logging import get_logger
from app.models.city import City
from app.models.movie import Movie
from app.models.partner import Partner
from app.models.theatre import Theatre
from app.schemas.catalogue import CityCreate, MovieCreate, PartnerCreate, TheatreCreate

logger = get_logger(__name__)


async def create_movie(db: AsyncSession, movie_data: MovieCreate) -> Movie:
    movie = Movie(**movie_data.model_dump())
    db.add(movie)
    await db.flush()

    logger.info("movie_created", movie_id=movie.id, title=movie.title)
    return movie


async def get_movie(db: AsyncSession, movie_id: int) -> Movie:
    movie = await db.get(Movie, movie_id)
    if not movie:
        raise EntityNotFoundError("Movie", movie_id)
    return movie


async def find_movie_by_title(db: AsyncSession, title: str) -> Optional[Movie]:
    """Case-insensitive exact title match. First by id when titles repeat."""
    result = await db.execute(
        select(Movie)
        .where(func.lower(Movie.title) == func.lower(title))
        .order_by(Movie.id)
    )
    return result.scalars().first()


async def list_movies(db: AsyncSession, title: Optional[str] = None) -> list[Movie]:
    query = select(Movie).order_by(Movie.id)
    if title:
        query = query.where(func.lower(Movie.title) == func.lower(title))
    result = await db.execute(query)
    return list(result.scalars().all())


async def _ensure_unique_name(db: AsyncSession, model, entity: str, name: str) -> None:
    result = await db.execute(
        select(model.id).where(func.lower(model.name) == func.lower(name))
    )
    if result.first() is not None:
        logger.warning("duplicate_entity", entity=entity, name=name)
        raise DuplicateEntityError(entity, name)


async def create_city(db: AsyncSession, city_data: CityCreate) -> City:
    await _ensure_unique_name(db, City, "City", city_data.name)

    city = City(name=city_data.name)
    db.add(city)
    await db.flush()

    logger.info("city_created", city_id=city.id, name=city.name)
    return city


async def list_cities(db: AsyncSession) -> list[City]:
    result = await db.execute(select(City).order_by(City.name))
    return list(result.scalars().all())


async def create_partner(db: AsyncSession, partner_data: PartnerCreate) -> Partner:
    await _ensure_unique_name(db, Partner, "Partner", partner_data.name)

    partner = Partner(name=partner_data.name)
    db.add(partner)
    await db.flush()

    logger.info("partner_created", partner_id=partner.id, name=partner.name)
    return partner


async def list_partners(db: AsyncSession) -> list[Partner]:
    result = await db.execute(select(Partner).order_by(Partner.name))
    return list(result.scalars().all())


async def create_theatre(db: AsyncSession, theatre_data: TheatreCreate) -> Theatre:
    """Create a theatre. The city and partner must already exist."""
    city = await db.get(City, theatre_data.city_id)
    if not city:
        raise EntityNotFoundError("City", theatre_data.city_id)

    partner = await db.get(Partner, theatre_data.partner_id)
    if not partner:
        raise EntityNotFoundError("Partner", theatre_data.partner_id)

    theatre = Theatre(name=theatre_data.name, city=city, partner=partner)
    db.add(theatre)
    await db.flush()

    logger.info(
        "theatre_created",
        theatre_id=theatre.id,
        name=theatre.name,
        city_id=city.id,
        partner_id=partner.id,
    )
    return theatre


async def get_theatre(db: AsyncSession, theatre_id: int) -> Theatre:
    theatre = await db.get(Theatre, theatre_id)
    if not theatre:
        raise EntityNotFoundError("Theatre", theatre_id)
    return theatre


async def list_theatres(db: AsyncSession, city_id: Optional[int] = None) -> list[Theatre]:
    query = select(Theatre).order_by(Theatre.id)
    if city_id is not None:
        query = query.where(Theatre.city_id == city_id)
    result = await db.execute(query)
    return list(result.scalars().all())
