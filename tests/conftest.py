# tests/conftest.py
# Pytest configuration
#
# Features:
# 1. Loads .env
# 2. In-memory fake services standing in for the database
# 3. App with dependency overrides, sync and async clients
#
# No live database is needed: the API tests replace the service
# dependencies, the service tests use AsyncMock sessions.

from typing import Dict, List, Optional

import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.ext.asyncio import AsyncSession

from world_api.core.exceptions import BackingStoreError, CityNotFoundError, CountryNotFoundError
from world_api.models.city import City
from world_api.models.country import Country
from world_api.schemas.city import CityCreate, CityResponse, echo_city, to_city_response
from world_api.schemas.country import CountryResponse, to_country_response
from world_api.services.city_service import CityService, get_city_service
from world_api.services.country_service import CountryService, get_country_service


# ==================== Environment ====================

def pytest_configure(config):
    """Load .env before the tests run"""
    from dotenv import load_dotenv
    load_dotenv()


# ==================== Sample rows ====================

def make_city(id: int, name: str, country_code: str, district: str, population: int) -> City:
    return City(
        id=id,
        name=name,
        country_code=country_code,
        district=district,
        population=population,
    )


def make_country(code: str, name: str, capital: Optional[int], **overrides) -> Country:
    fields = dict(
        code=code,
        code2=code[:2],
        name=name,
        local_name=name,
        continent="Asia",
        region="Eastern Asia",
        surface_area=377829.0,
        population=126714000,
        life_expectancy=80.7,
        gnp=3787042.0,
        gnp_old=4192638.0,
        indep_year=-660,
        government_form="Constitutional Monarchy",
        head_of_state="Akihito",
        capital=capital,
    )
    fields.update(overrides)
    return Country(**fields)


@pytest.fixture
def sample_cities() -> List[City]:
    return [
        make_city(1, "Kabul", "AFG", "Kabol", 1780000),
        make_city(1532, "Tokyo", "JPN", "Tokyo-to", 7980230),
        make_city(1533, "Jokohama [Yokohama]", "JPN", "Kanagawa", 3339594),
    ]


@pytest.fixture
def sample_countries() -> List[Country]:
    return [
        make_country("JPN", "Japan", 1532),
        make_country(
            "ATA", "Antarctica", None,
            continent="Antarctica", region="Antarctica", surface_area=13120000.0,
            population=0, life_expectancy=None, gnp=0.0, gnp_old=None,
            indep_year=None, government_form="Co-administrated", head_of_state="",
        ),
        make_country("NOC", "Nocapitalia", 0, head_of_state=None),
        make_country("DNG", "Danglia", 999999),
    ]


# ==================== Fake services ====================

class FakeCityService(CityService):
    """
    CityService over a list of City rows

    Names compare case-insensitively, like the default collation.
    fail=True makes every call raise BackingStoreError.
    """

    def __init__(self, cities: Optional[List[City]] = None, fail: bool = False):
        super().__init__(session=None)
        self.cities: List[City] = list(cities or [])
        self.fail = fail
        self.inserted: List[CityCreate] = []

    def _check(self):
        if self.fail:
            raise BackingStoreError("(2003, \"Can't connect to MySQL server on 'db'\")")

    async def find_by_name(self, name: str) -> CityResponse:
        self._check()
        for city in sorted(self.cities, key=lambda c: c.id):
            if city.name.casefold() == name.casefold():
                return to_city_response(city)
        raise CityNotFoundError(name)

    async def find_by_id(self, city_id: int) -> CityResponse:
        self._check()
        for city in self.cities:
            if city.id == city_id:
                return to_city_response(city)
        raise CityNotFoundError(city_id, field="ID")

    async def list_all(self) -> List[CityResponse]:
        self._check()
        return [to_city_response(c) for c in sorted(self.cities, key=lambda c: c.id)]

    async def insert(self, data: CityCreate) -> CityResponse:
        self._check()
        next_id = max((c.id for c in self.cities), default=0) + 1
        self.cities.append(
            make_city(next_id, data.name, data.country_code, data.district, data.population)
        )
        self.inserted.append(data)
        return echo_city(data)


class FakeCountryService(CountryService):
    """CountryService over a list of Country rows; capital resolution is the real one."""

    def __init__(self, countries: List[Country], city_service: CityService, fail: bool = False):
        super().__init__(session=None, city_service=city_service)
        self.countries: Dict[str, Country] = {c.name.casefold(): c for c in countries}
        self.fail = fail

    async def find_by_name(self, name: str) -> CountryResponse:
        if self.fail:
            raise BackingStoreError("(1146, \"Table 'world.country' doesn't exist\")")
        country = self.countries.get(name.casefold())
        if country is None:
            raise CountryNotFoundError(name)
        return to_country_response(country)


@pytest.fixture
def city_service(sample_cities) -> FakeCityService:
    return FakeCityService(sample_cities)


@pytest.fixture
def country_service(sample_countries, city_service) -> FakeCountryService:
    return FakeCountryService(sample_countries, city_service)


# ==================== App and clients ====================

@pytest.fixture
def app(city_service, country_service):
    """The FastAPI app with the service dependencies replaced by fakes"""
    from world_api.main import app as world_app

    world_app.dependency_overrides[get_city_service] = lambda: city_service
    world_app.dependency_overrides[get_country_service] = lambda: country_service
    yield world_app
    world_app.dependency_overrides.clear()


@pytest.fixture
def api_client(app):
    """Test client"""
    from fastapi.testclient import TestClient

    with TestClient(app) as client:
        yield client


@pytest_asyncio.fixture
async def async_api_client(app):
    """Async test client"""
    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


# ==================== Session mocks ====================

@pytest.fixture
def mock_session():
    """AsyncSession mock: execute/get/commit/rollback are AsyncMocks, add is a MagicMock"""
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    return session


@pytest.fixture
def scalars_result():
    """Factory for mocked execute() results whose scalars() yields the given rows"""
    def _make(rows: list) -> MagicMock:
        result = MagicMock()
        result.scalars.return_value.first.return_value = rows[0] if rows else None
        result.scalars.return_value.all.return_value = rows
        return result
    return _make
