# world_api/schemas/__init__.py
# Request/response schemas
#
# Usage: from world_api.schemas import CityCreate, CityResponse

from world_api.schemas.city import CityCreate, CityResponse
from world_api.schemas.country import CountryResponse

__all__ = [
    "CityCreate",
    "CityResponse",
    "CountryResponse",
]
