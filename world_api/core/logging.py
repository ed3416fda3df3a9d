# world_api/core/logging.py
# Logging setup
#
# Features:
# 1. Console (colored) or JSON output, chosen by LOG_FORMAT
# 2. Structured context: extra=log_context(...) is rendered as key=value
#    pairs on the console and as an "extra" object in JSON
# 3. Request logging middleware (method, path, status, duration)
#
# Usage:
#   from world_api.core.logging import get_logger, log_context
#   logger = get_logger(__name__)
#   logger.info("[CityService] inserted city", extra=log_context(table="city", key="Testville"))

import json
import logging
import sys
import time
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from world_api.core.config import settings


RESET = "\033[0m"
CYAN = "\033[36m"
GRAY = "\033[90m"

LEVEL_COLORS = {
    "DEBUG": "\033[34m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}


def log_context(**fields) -> dict:
    """Build the ``extra`` argument carrying structured fields for a log call."""
    return {"extra_data": fields}


def context_of(record: logging.LogRecord) -> dict:
    return getattr(record, "extra_data", None) or {}


# ==================== Formatters ====================

class ColoredFormatter(logging.Formatter):
    """
    Console formatter

    2026-01-30 12:00:00 | INFO     | world_api.services.city_service:insert:143 - [CityService] inserted city: Testville table=city key=Testville outcome=inserted
    """

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelname, RESET)
        line = (
            f"{CYAN}{self.formatTime(record, '%Y-%m-%d %H:%M:%S')}{RESET} | "
            f"{color}{record.levelname:8}{RESET} | "
            f"{GRAY}{record.name}:{record.funcName}:{record.lineno}{RESET} - "
            f"{record.getMessage()}"
        )

        context = context_of(record)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            line += f" {GRAY}{pairs}{RESET}"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line

    {"timestamp": "...", "level": "WARNING", "logger": "world_api.services.country_service",
     "message": "...", "extra": {"table": "city", "key": 999999, "outcome": "not_found"}}
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "location": f"{record.funcName}:{record.lineno}",
            "message": record.getMessage(),
        }

        context = context_of(record)
        if context:
            payload["extra"] = context

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


# ==================== Setup ====================

def setup_logging() -> None:
    """Route all logging to stdout in the configured format; called once by world_api.main."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if settings.LOG_FORMAT == "json" else ColoredFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.LOG_LEVEL)

    # SQL statements only in DEBUG mode
    library_levels = {
        "uvicorn.access": logging.INFO,
        "uvicorn.error": logging.INFO,
        "sqlalchemy.engine": logging.INFO if settings.DEBUG else logging.WARNING,
    }
    for name, level in library_levels.items():
        logging.getLogger(name).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==================== Request logging middleware ====================

def level_for_status(status_code: int) -> int:
    """ERROR for 5xx, WARNING for 4xx, INFO otherwise."""
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per request

    INFO | GET /cities/Kabul -> 200 (4ms) method=GET path=/cities/Kabul status=200 duration_ms=4
    """

    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or get_logger("world_api.request")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        target = request.url.path
        if request.url.query:
            target += f"?{request.url.query}"

        try:
            response = await call_next(request)
        except Exception as e:
            self._log(request.method, target, 500, started, error=str(e))
            raise

        self._log(request.method, target, response.status_code, started)
        return response

    def _log(self, method: str, target: str, status_code: int, started: float, **fields) -> None:
        duration_ms = round((time.perf_counter() - started) * 1000)
        self.logger.log(
            level_for_status(status_code),
            f"{method} {target} -> {status_code} ({duration_ms}ms)",
            extra=log_context(
                method=method,
                path=target,
                status=status_code,
                duration_ms=duration_ms,
                **fields,
            ),
        )
