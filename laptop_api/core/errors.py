import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from laptop_api.parsers.request import RequestParseError


INTERNAL_ERROR_BODY = "Internal error"
ROUTE_NOT_FOUND_BODY = "404 not found"


class LaptopNotFoundError(LookupError):
    """A well-formed laptop id matched no row."""

    def __init__(self, laptop_id: int) -> None:
        super().__init__(f"laptop {laptop_id} not found")
        self.laptop_id = laptop_id


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or request.headers.get("x-request-id") or "-"


def install_exception_handlers(app: FastAPI) -> None:
    """Map domain, parse and storage errors onto plain-text HTTP responses.

    Parse and storage failures both become a bare 500; the detail only goes to
    the server log.
    """
    logger = logging.getLogger("laptop_api.errors")

    @app.exception_handler(RequestParseError)
    async def request_parse_error_handler(request: Request, exc: RequestParseError):  # type: ignore[override]
        logger.warning("unparsable request path=%s err=%s", request.url.path, exc, extra={"request_id": _request_id(request)})
        return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500)

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):  # type: ignore[override]
        logger.error("storage error path=%s err=%s", request.url.path, exc, extra={"request_id": _request_id(request)})
        return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500)

    # Drivers such as asyncpg raise OSError subclasses on connect, unwrapped by SQLAlchemy
    @app.exception_handler(OSError)
    async def store_connection_error_handler(request: Request, exc: OSError):  # type: ignore[override]
        logger.error("store connection error path=%s err=%s", request.url.path, exc, extra={"request_id": _request_id(request)})
        return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500)

    @app.exception_handler(LaptopNotFoundError)
    async def laptop_not_found_handler(request: Request, exc: LaptopNotFoundError):  # type: ignore[override]
        return PlainTextResponse("Laptop not found", status_code=404)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):  # type: ignore[override]
        # Unknown paths and unsupported methods on known paths look the same to clients
        if exc.status_code in (404, 405):
            return PlainTextResponse(ROUTE_NOT_FOUND_BODY, status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):  # type: ignore[override]
        logger.error("unhandled exception path=%s err=%s", request.url.path, exc, extra={"request_id": _request_id(request)})
        return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500)
