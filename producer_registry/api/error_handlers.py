"""Error Handlers — global exception handlers for the registry API.

Invariants:
    - ProducerRegistryError → its own status and envelope (to_response), logged at the
      level matching its severity with code, category and severity as extras
    - RequestValidationError → 400 {"errors": [...]} with one entry per failing field
    - Exception (catch-all) → 500 {"error": "Internal Server Error"}, no internal details

Design Decisions:
    - Three-layer handler: domain (ProducerRegistryError), validation (Pydantic), catch-all
    - Validation entries share the shape produced by core/area_rules.py
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from producer_registry.core.errors import (
    INTERNAL_ERROR_MESSAGE, ErrorSeverity, ProducerRegistryError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_registry_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_registry_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ProducerRegistryError)
    async def registry_error_handler(request: Request, exc: ProducerRegistryError):
        """Handle all registry domain/infrastructure errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{exc.code}: {exc.message}",
            extra={
                "error_code": exc.code,
                "category": exc.category.value,
                "severity": exc.severity.value,
                "path": request.url.path,
                "producer_id": exc.context.producer_id,
                "operation": getattr(exc, "operation", None),
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc.errors()),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def build_validation_error_response(errors) -> dict:
    """Flatten Pydantic error dicts into {"errors": [{field, message, type, location}]}."""
    return {
        "errors": [
            {
                "field": _field_name(e),
                "message": e["msg"],
                "type": e["type"],
                "location": str(e["loc"][0]) if e["loc"] else "body",
            }
            for e in errors
        ],
    }


def _field_name(error: dict) -> str:
    # json_invalid carries a character offset in loc, not a field
    if error["type"] == "json_invalid":
        return ""
    return ".".join(str(loc) for loc in error["loc"][1:])
