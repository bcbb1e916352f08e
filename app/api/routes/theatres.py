"""
Theatre endpoints, plus the cities and partners theatres belong to.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import get_current_principal
from app.db.session import get_db
from app.schemas.catalogue import (
    CityCreate, CityResponse, PartnerCreate, PartnerResponse, TheatreCreate, TheatreResponse,
)
from app.services import catalogue_service
from app.services.interfaces.access_policy import Principal

router = APIRouter(tags=["Theatres"])


@router.post("/cities", response_model=CityResponse, status_code=status.HTTP_201_CREATED)
async def create_city_endpoint(
    city_data: CityCreate,
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    """Create a city. 409 if the name exists (case-insensitive)."""
    city = await catalogue_service.create_city(db, city_data)
    return CityResponse.model_validate(city)


@router.get("/cities", response_model=list[CityResponse])
async def list_cities_endpoint(db: AsyncSession = Depends(get_db)):
    cities = await catalogue_service.list_cities(db)
    return [CityResponse.model_validate(city) for city in cities]


@router.post("/partners", response_model=PartnerResponse, status_code=status.HTTP_201_CREATED)
async def create_partner_endpoint(
    partner_data: PartnerCreate,
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    partner = await catalogue_service.create_partner(db, partner_data)
    return PartnerResponse.model_validate(partner)


@router.get("/partners", response_model=list[PartnerResponse])
async def list_partners_endpoint(db: AsyncSession = Depends(get_db)):
    partners = await catalogue_service.list_partners(db)
    return [PartnerResponse.model_validate(partner) for partner in partners]


@router.post("/theatres", response_model=TheatreResponse, status_code=status.HTTP_201_CREATED)
async def create_theatre_endpoint(
    theatre_data: TheatreCreate,
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    """Create a theatre in an existing city, owned by an existing partner."""
    theatre = await catalogue_service.create_theatre(db, theatre_data)
    return TheatreResponse.from_theatre(theatre)


@router.get("/theatres", response_model=list[TheatreResponse])
async def list_theatres_endpoint(
    city_id: Optional[int] = Query(None, alias="cityId", gt=0),
    db: AsyncSession = Depends(get_db),
):
    theatres = await catalogue_service.list_theatres(db, city_id)
    return [TheatreResponse.from_theatre(theatre) for theatre in theatres]


@router.get("/theatres/{theatre_id}", response_model=TheatreResponse)
async def get_theatre_endpoint(theatre_id: int, db: AsyncSession = Depends(get_db)):
    theatre = await catalogue_service.get_theatre(db, theatre_id)
    return TheatreResponse.from_theatre(theatre)
