# world_api/models/city.py
# City table model
#
# Features:
# 1. City - the `city` table of the world database
#
# Usage:
#   from world_api.models.city import City

from sqlalchemy import CHAR, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from world_api.core.database import Base


class City(Base):
    """
    City table

    Attribute names are snake_case; the column names are the world schema's
    CamelCase ones. ID is assigned by the database on insert.
    """

    __tablename__ = "city"

    id: Mapped[int] = mapped_column(
        "ID",
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        "Name",
        CHAR(35),
        nullable=False,
        default="",
    )
    # references country.Code; not enforced by this service
    country_code: Mapped[str] = mapped_column(
        "CountryCode",
        CHAR(3),
        nullable=False,
        default="",
    )
    district: Mapped[str] = mapped_column(
        "District",
        String(20),
        nullable=False,
        default="",
    )
    population: Mapped[int] = mapped_column(
        "Population",
        Integer,
        nullable=False,
        default=0,
    )

    def __repr__(self) -> str:
        return f"<City {self.id} {self.name} ({self.country_code})>"
