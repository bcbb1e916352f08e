"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from app.api.routes import shows, bookings, movies, theatres

api_router = APIRouter(prefix="/api")
api_router.include_router(shows.router)
api_router.include_router(bookings.router)
api_router.include_router(movies.router)
api_router.include_router(theatres.router)
