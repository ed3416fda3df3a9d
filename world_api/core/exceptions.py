# world_api/core/exceptions.py
# Application errors
#
# Services raise these; the API layer maps them to HTTP responses.
#
#   WorldAPIError
#   ├── NotFoundError
#   │   ├── CityNotFoundError
#   │   └── CountryNotFoundError
#   └── BackingStoreError


class WorldAPIError(Exception):
    """Base class for errors raised by world_api."""


class NotFoundError(WorldAPIError):
    """No row matched the lookup key."""

    resource = "record"

    def __init__(self, key, field: str = "Name"):
        self.key = key
        self.field = field
        super().__init__(f"No such {self.resource} {field} = {key}")


class CityNotFoundError(NotFoundError):
    resource = "city"


class CountryNotFoundError(NotFoundError):
    resource = "country"


class BackingStoreError(WorldAPIError):
    """
    Query or connection failure other than "no rows"

    Raised with ``from`` so the driver exception stays available as
    ``__cause__``; str() is the driver's error text.
    """
