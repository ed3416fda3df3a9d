# world_api/schemas/country.py
# Country response schema
#
# Read only: there is a response record and no Create/Update.
# JSON keys are camelCase (surfaceArea, indepYear, capitalCity, ...).

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from world_api.models.country import Country
from world_api.schemas.city import CityResponse


class CountryResponse(BaseModel):
    """Country record with its capital city embedded when known"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    code: str = Field(..., description="ISO 3166-1 alpha-3")
    name: str
    continent: str
    region: str
    surface_area: float
    indep_year: Optional[int] = None
    population: int
    life_expectancy: Optional[float] = None
    gnp: Optional[float] = None
    gnp_old: Optional[float] = None
    local_name: str
    government_form: str
    head_of_state: Optional[str] = None
    capital: Optional[int] = Field(None, description="city.ID of the capital, 0/null if none")
    code2: str = Field(..., description="ISO 3166-1 alpha-2")
    capital_city: Optional[CityResponse] = None


def to_country_response(
    country: Country,
    capital_city: Optional[CityResponse] = None,
) -> CountryResponse:
    """Map a country row (and an optional resolved capital) to its wire record."""
    return CountryResponse(
        code=country.code,
        name=country.name,
        continent=country.continent,
        region=country.region,
        surface_area=country.surface_area,
        indep_year=country.indep_year,
        population=country.population,
        life_expectancy=country.life_expectancy,
        gnp=country.gnp,
        gnp_old=country.gnp_old,
        local_name=country.local_name,
        government_form=country.government_form,
        head_of_state=country.head_of_state,
        capital=country.capital,
        code2=country.code2,
        capital_city=capital_city,
    )
