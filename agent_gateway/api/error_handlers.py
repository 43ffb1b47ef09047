"""Error Handlers — global exception handlers for the gateway API.

Invariants:
    - GatewayError → its own status with {"error": ...} (+ "details" for generic failures)
    - RequestValidationError → 400 {"error": "Invalid request format"}; field errors only logged
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (GatewayError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module to wiring only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from agent_gateway.core.errors import (
    ErrorSeverity, GatewayError, InvalidRequestFormatError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_gateway_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_gateway_error_handler(app: FastAPI) -> None:

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        """Handle all gateway domain errors."""
        log = (
            logger.error if exc.severity is ErrorSeverity.CRITICAL
            else logger.warning
        )
        log(
            f"GatewayError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "user_id": exc.context.user_id,
                "agent_key": exc.context.agent_key,
                "action": exc.context.action,
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
            content=InvalidRequestFormatError().to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )
