"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the `{status, message}` envelope.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.users.errors import (
    DuplicateEmailError,
    InvalidBatchRequestError,
    MalformedIdentifierError,
    NoMatchingUsersError,
    NoOpUpdateError,
    UserDomainError,
    UserNotFoundError,
    ValidationFailureError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500


def _error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build a consistent JSON error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "message": message},
        headers=headers,
    )


def _describe_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return ", ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(MalformedIdentifierError)
    async def handle_malformed_identifier(
        _request: Request, exc: MalformedIdentifierError
    ) -> JSONResponse:
        """Handle ids that are not canonical UUIDs."""
        logger.warning("Malformed user id: %r", exc.user_id)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(ValidationFailureError)
    async def handle_validation_failure(
        _request: Request, exc: ValidationFailureError
    ) -> JSONResponse:
        """Handle payloads breaking field rules."""
        logger.warning("User payload rejected: %d violation(s)", len(exc.messages))
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(UserNotFoundError)
    async def handle_user_not_found(
        _request: Request, exc: UserNotFoundError
    ) -> JSONResponse:
        """Handle missing user errors."""
        logger.warning("User not found: %s", exc.user_id)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(NoMatchingUsersError)
    async def handle_no_matching_users(
        _request: Request, exc: NoMatchingUsersError
    ) -> JSONResponse:
        """Handle batch deletes that match no stored user."""
        logger.warning("Batch delete matched no users")
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(DuplicateEmailError)
    async def handle_duplicate_email(
        _request: Request, exc: DuplicateEmailError
    ) -> JSONResponse:
        """Handle email uniqueness conflicts."""
        logger.warning("Duplicate email rejected")
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(NoOpUpdateError)
    async def handle_no_op_update(
        _request: Request, exc: NoOpUpdateError
    ) -> JSONResponse:
        """Handle updates that change nothing."""
        logger.warning("No-op update for user: %s", exc.user_id)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(InvalidBatchRequestError)
    async def handle_invalid_batch(
        _request: Request, exc: InvalidBatchRequestError
    ) -> JSONResponse:
        """Handle malformed batch delete requests."""
        logger.warning("Invalid batch request: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(UserDomainError)
    async def handle_user_domain(
        _request: Request, exc: UserDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled users domain errors."""
        logger.error("Unhandled users domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle bodies FastAPI cannot parse (bad JSON, wrong types)."""
        logger.warning("Malformed request body")
        return _error_response(HTTP_400, _describe_request_errors(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Wrap framework HTTP errors (unknown route, bad method) in the envelope."""
        return _error_response(
            exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
