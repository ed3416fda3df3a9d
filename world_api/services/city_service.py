# world_api/services/city_service.py
# City data access
#
# Features:
# 1. Exact-name and ID lookups
# 2. Full-table listing
# 3. Insert of a new city
#
# Usage:
#   service = CityService(session)
#   city = await service.find_by_name("Kabul")
#
# Errors:
#   CityNotFoundError   no row matched
#   BackingStoreError   any other SQLAlchemy failure

from typing import List

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from world_api.core.database import get_db
from world_api.core.exceptions import BackingStoreError, CityNotFoundError
from world_api.core.logging import get_logger, log_context
from world_api.models.city import City
from world_api.schemas.city import (
    CityCreate,
    CityResponse,
    echo_city,
    to_city_model,
    to_city_response,
)

logger = get_logger(__name__)


class CityService:
    """
    Queries against the city table

    Bound to one session; holds no other state.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_name(self, name: str) -> CityResponse:
        """
        Look up a city by exact name

        Comparison follows the connection collation. When several cities
        share a name, the one with the lowest ID wins.

        Raises:
            CityNotFoundError: no city has this name
            BackingStoreError: the query failed
        """
        stmt = select(City).where(City.name == name).order_by(City.id).limit(1)
        try:
            result = await self.session.execute(stmt)
            city = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(
                f"[CityService] lookup of {name!r} failed: {e}",
                extra=log_context(table="city", key=name, outcome="error"),
            )
            raise BackingStoreError(str(e)) from e

        if city is None:
            logger.info(
                f"[CityService] no city named {name!r}",
                extra=log_context(table="city", key=name, outcome="not_found"),
            )
            raise CityNotFoundError(name)

        logger.debug(
            f"[CityService] found city {name!r}",
            extra=log_context(table="city", key=name, outcome="found", id=city.id),
        )
        return to_city_response(city)

    async def find_by_id(self, city_id: int) -> CityResponse:
        """
        Look up a city by ID

        Raises:
            CityNotFoundError: no city has this ID
            BackingStoreError: the query failed
        """
        try:
            city = await self.session.get(City, city_id)
        except SQLAlchemyError as e:
            logger.error(
                f"[CityService] lookup of ID {city_id} failed: {e}",
                extra=log_context(table="city", key=city_id, outcome="error"),
            )
            raise BackingStoreError(str(e)) from e

        if city is None:
            raise CityNotFoundError(city_id, field="ID")
        return to_city_response(city)

    async def list_all(self) -> List[CityResponse]:
        """Every city, ordered by ID. Unbounded."""
        try:
            result = await self.session.execute(select(City).order_by(City.id))
            cities = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(
                f"[CityService] listing cities failed: {e}",
                extra=log_context(table="city", outcome="error"),
            )
            raise BackingStoreError(str(e)) from e

        logger.debug(
            f"[CityService] listed {len(cities)} cities",
            extra=log_context(table="city", outcome="found", rows=len(cities)),
        )
        return [to_city_response(c) for c in cities]

    async def insert(self, data: CityCreate) -> CityResponse:
        """
        Insert a city and echo the submitted fields

        The generated ID is not read back.

        Raises:
            BackingStoreError: the insert or commit failed (rolled back)
        """
        self.session.add(to_city_model(data))
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                f"[CityService] insert of {data.name!r} failed: {e}",
                extra=log_context(table="city", key=data.name, outcome="error"),
            )
            raise BackingStoreError(str(e)) from e

        logger.info(
            f"[CityService] inserted city: {data.name}",
            extra=log_context(
                table="city",
                key=data.name,
                outcome="inserted",
                country_code=data.country_code,
                district=data.district,
                population=data.population,
            ),
        )
        return echo_city(data)


def get_city_service(session: AsyncSession = Depends(get_db)) -> CityService:
    """Request dependency: a CityService on the request's session."""
    return CityService(session)
