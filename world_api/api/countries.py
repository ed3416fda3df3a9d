# world_api/api/countries.py
# Country API (read only)
#
# Features:
# 1. Country lookup by exact name, with the capital city embedded
#
# Routes:
#   GET /countries/{country_name}
#
# An unknown country answers 400, not 404. Existing clients depend on it.

from fastapi import APIRouter, Depends, HTTPException, status

from world_api.core.exceptions import BackingStoreError, CountryNotFoundError
from world_api.core.logging import get_logger
from world_api.schemas.country import CountryResponse
from world_api.services.country_service import CountryService, get_country_service

logger = get_logger(__name__)

router = APIRouter(prefix="/countries", tags=["Countries"])


@router.get("/{country_name}", response_model=CountryResponse)
async def get_country(
    country_name: str,
    service: CountryService = Depends(get_country_service),
):
    """Country by exact name; capitalCity is null when it cannot be resolved"""
    try:
        return await service.get_with_capital(country_name)
    except CountryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except BackingStoreError as e:
        logger.error(f"Country lookup {country_name!r} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
