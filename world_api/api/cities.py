# world_api/api/cities.py
# City API
#
# Features:
# 1. List every city
# 2. Look up a city by exact name
# 3. Add a city
#
# Routes:
#   GET  /cities              all cities
#   GET  /cities/{city_name}  one city, 404 if absent
#   POST /addcity             insert, echoes the submitted fields

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from world_api.core.exceptions import BackingStoreError, CityNotFoundError
from world_api.core.logging import get_logger
from world_api.schemas.city import CityCreate, CityResponse
from world_api.services.city_service import CityService, get_city_service

logger = get_logger(__name__)

router = APIRouter(tags=["Cities"])


@router.get("/cities", response_model=List[CityResponse])
async def list_cities(service: CityService = Depends(get_city_service)):
    """All cities; an empty table gives []"""
    try:
        return await service.list_all()
    except BackingStoreError as e:
        logger.error(f"Listing cities failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )


@router.get("/cities/{city_name}", response_model=CityResponse)
async def get_city(
    city_name: str,
    service: CityService = Depends(get_city_service),
):
    """City by exact name"""
    try:
        return await service.find_by_name(city_name)
    except CityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except BackingStoreError as e:
        logger.error(f"City lookup {city_name!r} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )


@router.post(
    "/addcity",
    response_model=CityResponse,
    response_model_exclude_none=True,
)
async def add_city(
    data: CityCreate,
    service: CityService = Depends(get_city_service),
):
    """
    Insert a city

    Responds 200 with the submitted fields (no ID). A malformed body is
    rejected with 400 by the app's validation handler before this runs.
    """
    try:
        return await service.insert(data)
    except BackingStoreError as e:
        logger.error(f"Adding city {data.name!r} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
