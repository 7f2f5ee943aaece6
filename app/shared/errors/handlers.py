"""
Centralized error handlers for FastAPI.

Maps gateway failures and request validation errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.interfaces.accounts.gateway import GatewayError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _describe_validation(exc: RequestValidationError) -> str:
    """Summarize request validation errors without echoing input values."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(GatewayError)
    async def handle_gateway_error(
        _request: Request, exc: GatewayError
    ) -> JSONResponse:
        """Report an account failure with the status chosen by the gateway."""
        if exc.status_code >= HTTP_500:
            logger.error("Account operation failed: %s", exc.kind.value)
        else:
            logger.warning("Account request rejected: %s", exc.kind.value)
        return _error_response(exc.status_code, exc.kind.value, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Reject malformed parameters and bodies with 400."""
        logger.warning("Malformed request: %d error(s)", len(exc.errors()))
        return _error_response(HTTP_400, "validation_error", _describe_validation(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
