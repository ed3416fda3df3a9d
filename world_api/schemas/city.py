# world_api/schemas/city.py
# City request/response schemas
#
# Features:
# 1. Wire format of a city (JSON keys: ID, name, countryCode, district, population)
# 2. Validation of the add-city request body
# 3. Explicit conversion between City rows and wire records
#
# Naming:
# - CityCreate: request body of POST /addcity (no ID)
# - CityResponse: returned by every city endpoint

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from world_api.models.city import City


class CityCreate(BaseModel):
    """
    Add-city request body

    Any ID in the body is ignored; the database assigns it.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="City name", examples=["Testville"])
    # older clients send the misspelled key
    country_code: str = Field(
        ...,
        validation_alias=AliasChoices("countryCode", "cuntryCode"),
        serialization_alias="countryCode",
        description="Country code (country.Code)",
        examples=["ZZZ"],
    )
    district: str = Field(..., description="District", examples=["Test"])
    population: int = Field(..., ge=0, description="Population", examples=[100])


class CityResponse(BaseModel):
    """City record"""
    model_config = ConfigDict(populate_by_name=True)

    # None until the database has assigned one (add-city echo)
    id: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("ID", "id"),
        serialization_alias="ID",
    )
    name: str
    country_code: str = Field(
        ...,
        validation_alias=AliasChoices("countryCode", "cuntryCode", "country_code"),
        serialization_alias="countryCode",
    )
    district: str
    population: int


def to_city_response(city: City) -> CityResponse:
    """Map a city row to its wire record."""
    return CityResponse(
        id=city.id,
        name=city.name,
        country_code=city.country_code,
        district=city.district,
        population=city.population,
    )


def to_city_model(data: CityCreate) -> City:
    """Build a new city row from a request body; ID is left to the database."""
    return City(
        name=data.name,
        country_code=data.country_code,
        district=data.district,
        population=data.population,
    )


def echo_city(data: CityCreate) -> CityResponse:
    """The submitted fields as a CityResponse without an ID."""
    return CityResponse(
        name=data.name,
        country_code=data.country_code,
        district=data.district,
        population=data.population,
    )
