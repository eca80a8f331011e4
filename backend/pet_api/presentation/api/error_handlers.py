"""Error handlers — map domain exceptions to ``{"error": message}`` responses.

    - ValidationError → 400
    - EntityNotFoundError → 404
    - RequestValidationError (bad JSON body, malformed UUID path) → 400
    - HTTPException (undecodable body, unknown route, wrong method) → its own status
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pet_api.domain.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning(
            "Rejected %s %s: %s (field=%s, kind=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.field,
            exc.kind.value,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": exc.message},
        )

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        logger.info("%s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = _format_request_errors(exc)
        logger.warning("Malformed request on %s: %s", request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(
            "%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.detail
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _format_request_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic's error list into one human-readable line."""
    parts = []
    for error in exc.errors():
        # int parts are list indices or JSON decode offsets, not field names
        loc = ".".join(
            str(p)
            for p in error.get("loc", ())
            if p not in ("body", "path") and not isinstance(p, int)
        )
        msg = error.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"
