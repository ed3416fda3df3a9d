# world_api/main.py
# FastAPI application
#
# Features:
# 1. Creates the FastAPI app
# 2. Middleware (CORS, request logging)
# 3. Exception handlers
# 4. Router registration
# 5. Lifespan: engine disposal on shutdown
#
# Start:
#   uvicorn world_api.main:app --reload --host 0.0.0.0 --port 1323
#   python -m world_api
#
# API docs:
#   - Swagger UI: http://localhost:1323/docs
#   - ReDoc: http://localhost:1323/redoc

import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from world_api.api import cities, countries, health
from world_api.core.config import settings
from world_api.core.database import close_db
from world_api.core.logging import RequestLoggingMiddleware, get_logger, setup_logging


setup_logging()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup and shutdown

    The engine is created lazily by the first request, so startup only logs.
    Shutdown disposes the engine and its pool.
    """
    logger.info(f"Starting {settings.APP_NAME} {settings.APP_VERSION}")
    logger.info(
        f"Database: {settings.database_url.render_as_string(hide_password=True)} "
        f"(time zone {settings.DB_TIMEZONE}, collation {settings.DB_COLLATION})"
    )

    yield

    logger.info("Shutting down...")
    try:
        await close_db()
    except Exception as e:
        logger.warning(f"Error while closing the database engine: {e}")
    logger.info("Shutdown complete")


# ==================== App ====================

app = FastAPI(
    title=settings.APP_NAME,
    description="Read/write access to the world dataset: cities and countries.",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# ==================== Middleware ====================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)


# ==================== Exception handlers ====================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed input (bad JSON, missing field, wrong type) is a 400"""
    logger.warning(f"{request.method} {request.url.path}: invalid request: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_errors(exc)},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {type(exc).__name__}: {str(exc)}")
    traceback.print_exc()

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"Internal server error: {str(exc)}"},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors without the non-serializable ctx/input values."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


# ==================== Routers ====================

# - GET /health
# - GET /health/detailed
app.include_router(health.router)

# - GET  /cities
# - GET  /cities/{city_name}
# - POST /addcity
app.include_router(cities.router)

# - GET /countries/{country_name}
app.include_router(countries.router)


@app.get("/", tags=["Root"])
async def root():
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health",
    }
