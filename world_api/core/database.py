# world_api/core/database.py
# Database engine and sessions
#
# Features:
# 1. One process-wide async engine (and its connection pool), created on first use
# 2. Session factory bound to that engine
# 3. get_db dependency: one session per request, closed when the request ends
#
# Usage:
#   from world_api.core.database import get_db
#
#   @router.get("/cities")
#   async def list_cities(session: AsyncSession = Depends(get_db)):
#       ...

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from world_api.core.config import settings
from world_api.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base for the world tables."""
    pass


@lru_cache()
def get_engine() -> AsyncEngine:
    """
    Return the shared engine, creating it on the first call

    The engine owns the connection pool. Each new pool connection runs the
    init_command from settings (time zone and collation).
    """
    url = settings.database_url
    engine = create_async_engine(
        url,
        echo=settings.DEBUG,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,
        connect_args=settings.db_connect_args,
    )
    logger.info(f"Database engine created: {url.render_as_string(hide_password=True)}")
    return engine


@lru_cache()
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Return the session factory bound to the shared engine."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Request dependency yielding a session

    The session checks a connection out of the pool on its first query and
    returns it when the block exits.
    """
    async with get_session_maker()() as session:
        yield session


async def close_db() -> None:
    """Dispose the engine if it was ever created."""
    if get_engine.cache_info().currsize == 0:
        return
    await get_engine().dispose()
    get_session_maker.cache_clear()
    get_engine.cache_clear()
    logger.info("Database engine disposed")
