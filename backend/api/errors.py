"""
Error handlers for the application.

Domain errors raised anywhere below a route are rendered as
{"error", "message", "details"} with a status chosen by error class.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from modules.auth.exceptions import AuthBackendError
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    LaunchKitError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# First match wins
ERROR_STATUS_CODES: list[tuple[type[LaunchKitError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ExternalServiceError, status.HTTP_502_BAD_GATEWAY),
]


def status_code_for(exc: LaunchKitError) -> int:
    """HTTP status for a domain error."""
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    if isinstance(exc, AuthBackendError):
        # Client errors are the caller's; anything else is a bad upstream
        if exc.status_code and 400 <= exc.status_code < 500:
            return exc.status_code
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def launchkit_exception_handler(request: Request, exc: LaunchKitError) -> JSONResponse:
    """
    Handle domain errors
    """
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.code} on {request.url.path}: {exc.message}")

    body = exc.to_dict()
    if not body["message"]:
        body["message"] = "An error occurred"
    return JSONResponse(status_code=status_code, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LaunchKitError, launchkit_exception_handler)
