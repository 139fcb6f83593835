import logging
import logging.config
import time
import uuid
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from laptop_api.core.config import Settings
from laptop_api.core.errors import INTERNAL_ERROR_BODY


class RequestIdFilter(logging.Filter):
    """Attach request_id to log records if present in record.extra, else '-'."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not hasattr(record, "request_id"):
            record.request_id = "-"  # type: ignore[attr-defined]
        return True


class SimpleConsoleFormatter(logging.Formatter):
    """Minimal, readable console format for terminal use."""

    default_time_format = "%Y-%m-%d %H:%M:%S"
    default_msec_format = "%s.%03d"

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        record.message = record.getMessage()
        asctime = self.formatTime(record, self.datefmt)
        rid = getattr(record, "request_id", "-")
        line = f"{asctime} | {record.levelname} | {record.name} | {record.message} | rid={rid}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    log_level = settings.LOG_LEVEL.upper()
    sqlalchemy_level = settings.SQLALCHEMY_LOG_LEVEL.upper()

    handler: Dict[str, Any] = {
        "class": "logging.StreamHandler",
        "level": log_level,
        "formatter": "simple",
        "filters": ["request_id"],
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "request_id": {"()": RequestIdFilter},
        },
        "formatters": {
            "simple": {"()": SimpleConsoleFormatter},
        },
        "handlers": {
            "console": handler,
        },
        "loggers": {
            "": {"handlers": ["console"], "level": log_level, "propagate": False},
            "uvicorn": {"handlers": ["console"], "level": log_level, "propagate": False},
            "uvicorn.access": {"handlers": ["console"], "level": ("INFO" if settings.UVICORN_ACCESS_LOG else "WARNING"), "propagate": False},
            "sqlalchemy.engine": {"handlers": ["console"], "level": sqlalchemy_level, "propagate": False},
            "aiosqlite": {"handlers": ["console"], "level": "WARNING", "propagate": False},
            # Quiet noisy libraries
            "httpx": {"handlers": ["console"], "level": "WARNING", "propagate": False},
            "httpcore": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        },
    }


def configure_logging(settings: Settings) -> None:
    """Configure application-wide logging.

    Levels come from settings (LOG_LEVEL, SQLALCHEMY_LOG_LEVEL, UVICORN_ACCESS_LOG).
    """
    logging.config.dictConfig(build_logging_config(settings))


def install_request_logging(app: FastAPI) -> None:
    """Add request/response logging middleware.

    REQUEST_LOGS_ENABLED=false silences the per-request lines; the request id
    and the last-resort 500 apply either way.
    """

    @app.middleware("http")
    async def log_requests(request: Request, call_next):  # type: ignore[override]
        logger = logging.getLogger("http")
        enabled = request.app.state.settings.REQUEST_LOGS_ENABLED
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        request.state.request_id = request_id
        start = time.perf_counter()
        if enabled:
            logger.info("HTTP %s %s start", request.method, request.url.path, extra={"request_id": request_id})
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("HTTP %s %s error status=500 err=%s", request.method, request.url.path, exc, extra={"request_id": request_id})
            return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500, headers={"x-request-id": request_id})
        if enabled:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info("HTTP %s %s %s %.2fms", request.method, request.url.path, response.status_code, elapsed_ms, extra={"request_id": request_id})
        response.headers["x-request-id"] = request_id
        return response
