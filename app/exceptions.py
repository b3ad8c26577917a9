# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# A missing user is not an error here: lookups return null.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class UserApiException(Exception):
    """
    Base exception for the User API.

    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "USER_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


class ServiceNotReadyError(UserApiException):
    """Raised when a request arrives before a service has been wired."""

    def __init__(self, service: str):
        super().__init__(
            message=f"Service not initialized: {service}",
            code="SERVICE_NOT_READY",
            status_code=503,
            suggestion="Retry once application startup has completed",
            details={"service": service}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def user_api_exception_handler(
    request: Request,
    exc: UserApiException
) -> JSONResponse:
    """Convert UserApiException to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors (e.g. a body that isn't a JSON object).
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": jsonable_encoder(exc.errors()),
        }
    )
