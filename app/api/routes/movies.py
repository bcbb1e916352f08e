"""
Movie catalogue endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import get_current_principal
from app.db.session import get_db
from app.schemas.catalogue import MovieCreate, MovieResponse
from app.services.catalogue_service import create_movie, get_movie, list_movies
from app.services.interfaces.access_policy import Principal

router = APIRouter(prefix="/movies", tags=["Movies"])


@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
async def create_movie_endpoint(
    movie_data: MovieCreate,
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    movie = await create_movie(db, movie_data)
    return MovieResponse.model_validate(movie)


@router.get("", response_model=list[MovieResponse])
async def list_movies_endpoint(
    title: Optional[str] = Query(None, description="Exact title, case-insensitive"),
    db: AsyncSession = Depends(get_db),
):
    movies = await list_movies(db, title)
    return [MovieResponse.model_validate(movie) for movie in movies]


@router.get("/{movie_id}", response_model=MovieResponse)
async def get_movie_endpoint(movie_id: int, db: AsyncSession = Depends(get_db)):
    movie = await get_movie(db, movie_id)
    return MovieResponse.model_validate(movie)
