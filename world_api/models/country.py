# world_api/models/country.py
# Country table model
#
# Features:
# 1. Country - the `country` table of the world database (read only)
#
# Usage:
#   from world_api.models.country import Country

from typing import Optional

from sqlalchemy import CHAR, Integer, Numeric, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from world_api.core.database import Base


class Country(Base):
    """
    Country table

    Preloaded reference data; this service never writes to it.

    Column groups:
    - Identity: code, code2, name, local_name
    - Geography: continent, region, surface_area
    - Demography: population, life_expectancy
    - Economy: gnp, gnp_old
    - Government: indep_year, government_form, head_of_state, capital
    """

    __tablename__ = "country"

    # ==================== Identity ====================
    code: Mapped[str] = mapped_column(
        "Code",
        CHAR(3),
        primary_key=True,
        comment="ISO 3166-1 alpha-3, e.g. JPN",
    )
    code2: Mapped[str] = mapped_column(
        "Code2",
        CHAR(2),
        nullable=False,
        default="",
        comment="ISO 3166-1 alpha-2, e.g. JP",
    )
    name: Mapped[str] = mapped_column(
        "Name",
        CHAR(52),
        nullable=False,
        default="",
    )
    local_name: Mapped[str] = mapped_column(
        "LocalName",
        CHAR(45),
        nullable=False,
        default="",
    )

    # ==================== Geography ====================
    # ENUM in the world schema; read as plain text
    continent: Mapped[str] = mapped_column(
        "Continent",
        String(13),
        nullable=False,
        default="Asia",
    )
    region: Mapped[str] = mapped_column(
        "Region",
        CHAR(26),
        nullable=False,
        default="",
    )
    # DECIMAL columns come back as float, not Decimal
    surface_area: Mapped[float] = mapped_column(
        "SurfaceArea",
        Numeric(10, 2, asdecimal=False),
        nullable=False,
        default=0.0,
    )

    # ==================== Demography ====================
    population: Mapped[int] = mapped_column(
        "Population",
        Integer,
        nullable=False,
        default=0,
    )
    life_expectancy: Mapped[Optional[float]] = mapped_column(
        "LifeExpectancy",
        Numeric(3, 1, asdecimal=False),
        nullable=True,
    )

    # ==================== Economy ====================
    gnp: Mapped[Optional[float]] = mapped_column(
        "GNP",
        Numeric(10, 2, asdecimal=False),
        nullable=True,
    )
    gnp_old: Mapped[Optional[float]] = mapped_column(
        "GNPOld",
        Numeric(10, 2, asdecimal=False),
        nullable=True,
    )

    # ==================== Government ====================
    indep_year: Mapped[Optional[int]] = mapped_column(
        "IndepYear",
        SmallInteger,
        nullable=True,
    )
    government_form: Mapped[str] = mapped_column(
        "GovernmentForm",
        CHAR(45),
        nullable=False,
        default="",
    )
    head_of_state: Mapped[Optional[str]] = mapped_column(
        "HeadOfState",
        CHAR(60),
        nullable=True,
    )
    # city.ID of the capital; NULL or 0 when none is on record
    capital: Mapped[Optional[int]] = mapped_column(
        "Capital",
        Integer,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Country {self.code} {self.name}>"
