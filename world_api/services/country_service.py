# world_api/services/country_service.py
# Country data access and capital resolution
#
# Features:
# 1. Exact-name country lookup
# 2. Capital resolution: country.Capital -> city record, or None
# 3. Country with its capital embedded
#
# Usage:
#   service = CountryService(session, CityService(session))
#   country = await service.get_with_capital("Japan")
#
# A failed capital lookup never fails the country lookup; the country is
# returned with capital_city = None.

from typing import Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from world_api.core.database import get_db
from world_api.core.exceptions import (
    BackingStoreError,
    CityNotFoundError,
    CountryNotFoundError,
)
from world_api.core.logging import get_logger, log_context
from world_api.models.country import Country
from world_api.schemas.city import CityResponse
from world_api.schemas.country import CountryResponse, to_country_response
from world_api.services.city_service import CityService, get_city_service

logger = get_logger(__name__)


class CountryService:
    """
    Queries against the country table

    Capital lookups go through the CityService it is given.
    """

    def __init__(self, session: AsyncSession, city_service: CityService):
        self.session = session
        self.city_service = city_service

    async def find_by_name(self, name: str) -> CountryResponse:
        """
        Look up a country by exact name (capital not resolved)

        Raises:
            CountryNotFoundError: no country has this name
            BackingStoreError: the query failed
        """
        stmt = select(Country).where(Country.name == name).order_by(Country.code).limit(1)
        try:
            result = await self.session.execute(stmt)
            country = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(
                f"[CountryService] lookup of {name!r} failed: {e}",
                extra=log_context(table="country", key=name, outcome="error"),
            )
            raise BackingStoreError(str(e)) from e

        if country is None:
            logger.info(
                f"[CountryService] no country named {name!r}",
                extra=log_context(table="country", key=name, outcome="not_found"),
            )
            raise CountryNotFoundError(name)

        logger.debug(
            f"[CountryService] found country {name!r}",
            extra=log_context(table="country", key=name, outcome="found", code=country.code),
        )
        return to_country_response(country)

    async def resolve_capital(self, capital: Optional[int]) -> Optional[CityResponse]:
        """
        Fetch the city a country's capital field points at

        Returns None when there is no capital on record (None or 0), when
        the ID matches no city, or when the lookup fails.
        """
        if not capital:
            return None

        try:
            return await self.city_service.find_by_id(capital)
        except CityNotFoundError:
            logger.warning(
                f"[CountryService] capital city ID {capital} not found",
                extra=log_context(table="city", key=capital, outcome="not_found"),
            )
        except BackingStoreError as e:
            logger.warning(
                f"[CountryService] capital city ID {capital} lookup failed: {e}",
                extra=log_context(table="city", key=capital, outcome="error"),
            )
        return None

    async def get_with_capital(self, name: str) -> CountryResponse:
        """
        Look up a country and embed its capital city

        Raises:
            CountryNotFoundError: no country has this name
            BackingStoreError: the country query failed
        """
        country = await self.find_by_name(name)
        country.capital_city = await self.resolve_capital(country.capital)
        return country


def get_country_service(
    session: AsyncSession = Depends(get_db),
    city_service: CityService = Depends(get_city_service),
) -> CountryService:
    """Request dependency: a CountryService on the request's session."""
    return CountryService(session, city_service)
