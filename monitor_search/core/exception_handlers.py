"""Error responses for the search API.

Every error answer shares one body, ``{"error", "message", "details"}``, so a
host can tell a failed search from an empty one (``{"results": []}``). Store
failures are not caught by the search service; they reach the catch-all
handler here and become a 500.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from monitor_search.core.config import get_settings
from monitor_search.domain.exceptions import MonitorSearchException

logger = logging.getLogger(__name__)

_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,  # malformed view-levels header
    "SERVICE_UNAVAILABLE": 503,  # no DATABASE_URL
}


def error_body(error: str, message: Any, details: Any = None) -> dict[str, Any]:
    return {
        "error": error,
        "message": message,
        "details": {} if details is None else details,
    }


def _search_exception_handler(
    request: Request, exc: MonitorSearchException
) -> JSONResponse:
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("Search unavailable (%s): %s", exc.error_code, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 for query parameters FastAPI could not bind."""
    return JSONResponse(
        status_code=422,
        content=error_body(
            "VALIDATION_ERROR",
            "Invalid search parameters",
            jsonable_encoder(exc.errors()),
        ),
    )


def _rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.info("Search rate limit hit: %s %s", request.url.path, exc.detail)
    return JSONResponse(
        status_code=429,
        content=error_body("RATE_LIMITED", f"Search rate limit exceeded: {exc.detail}"),
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body("HTTP_ERROR", exc.detail),
    )


def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is only exposed when debug is True."""
    logger.exception("Search request failed: %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content=error_body("INTERNAL_ERROR", message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the search API's error handlers on the app (call once)."""
    app.add_exception_handler(MonitorSearchException, _search_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
