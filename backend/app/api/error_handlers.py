"""Error Handlers — global exception handlers for the counter API.

Invariants:
    - CounterError → its http_status with {success: false, message}
    - RequestValidationError → 400 with the same envelope
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (CounterError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module to wiring only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import CounterError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_counter_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_counter_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CounterError)
    async def counter_error_handler(request: Request, exc: CounterError):
        """Handle all counter domain/infrastructure errors."""
        logger.warning(
            f"CounterError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "counter": exc.context.counter,
                "key": exc.context.key,
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
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Invalid request data"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "An unexpected error occurred"},
        )
