# world_api/models/__init__.py
# Table models
#
# Usage: from world_api.models import City, Country

from world_api.models.city import City
from world_api.models.country import Country

__all__ = [
    "City",
    "Country",
]
