# world_api/core/config.py
# Configuration module
#
# Features:
# 1. Loads settings from environment variables with Pydantic Settings
# 2. Reads a .env file when present
# 3. Assembles the database URL and per-connection driver options
#
# Usage:
#   from world_api.core.config import settings
#   print(settings.APP_NAME)

from datetime import datetime
from functools import lru_cache
from typing import List, Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """
    Application settings

    Every field can be overridden by an environment variable of the same
    (upper case) name, e.g. DB_HOSTNAME=db.internal.
    """

    # ==================== Application ====================
    APP_NAME: str = "World API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False                # echo SQL and log engine activity

    # ==================== Logging ====================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # console: colored output for development; json: one object per line
    LOG_FORMAT: Literal["console", "json"] = "console"

    # ==================== HTTP server ====================
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 1323
    CORS_ORIGINS: List[str] = ["*"]

    # ==================== Database ====================
    # Credentials of the world database. Names match the variables used by
    # the existing deployment.
    DB_HOSTNAME: str = "localhost"
    DB_PORT: int = 3306
    DB_USERNAME: str = "root"
    DB_PASSWORD: str = ""
    DB_DATABASE: str = "world"

    # SQLAlchemy dialect+driver
    DB_DRIVER: str = "mysql+aiomysql"

    # Connection character set and collation. The collation decides how
    # name lookups compare (utf8mb4_unicode_ci: case and accent insensitive).
    DB_CHARSET: str = "utf8mb4"
    DB_COLLATION: str = "utf8mb4_unicode_ci"

    # Session time zone applied to every new connection. Sent to MySQL as a
    # fixed UTC offset, so zones with daylight saving time are rejected.
    DB_TIMEZONE: str = "Asia/Tokyo"

    # Pool sizing
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600    # seconds, stays below MySQL wait_timeout

    # Full URL, takes precedence over the DB_* parts when set
    DATABASE_URL: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    @field_validator("DB_TIMEZONE")
    @classmethod
    def fixed_offset_zone(cls, v: str) -> str:
        try:
            zone = ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown time zone: {v}") from e

        year = datetime.now().year
        offsets = {datetime(year, month, 1, tzinfo=zone).utcoffset() for month in (1, 7)}
        if len(offsets) > 1:
            raise ValueError(
                f"{v} observes daylight saving time; "
                f"use a fixed-offset zone such as Asia/Tokyo, UTC or Etc/GMT-1"
            )
        return v

    @property
    def database_url(self) -> URL:
        """SQLAlchemy URL for the backing store."""
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)
        return URL.create(
            self.DB_DRIVER,
            username=self.DB_USERNAME,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOSTNAME,
            port=self.DB_PORT,
            database=self.DB_DATABASE,
        )

    @property
    def db_timezone_offset(self) -> str:
        """
        UTC offset of DB_TIMEZONE in MySQL's "+HH:MM" form

        MySQL only understands named zones when its time zone tables are
        loaded, so the offset is sent instead. DB_TIMEZONE is validated
        to have a single offset all year.
        """
        offset = datetime.now(ZoneInfo(self.DB_TIMEZONE)).strftime("%z")
        return f"{offset[:3]}:{offset[3:]}"

    @property
    def db_connect_args(self) -> dict:
        """Keyword arguments passed to the driver's connect()."""
        init_command = (
            f"SET time_zone = '{self.db_timezone_offset}', "
            f"collation_connection = '{self.DB_COLLATION}'"
        )
        return {"charset": self.DB_CHARSET, "init_command": init_command}


@lru_cache()
def get_settings() -> Settings:
    """
    Return the settings instance

    Cached so the environment and .env file are read once per process.
    """
    return Settings()


settings = get_settings()
