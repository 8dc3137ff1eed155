# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the server.
# The echo routes never fail on bad input; these exist for the decoder's
# internal signalling and for unexpected errors.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class SaludosException(Exception):
    """
    Base exception for the Saludos server.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "SALUDOS_ERROR",
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


# =============================================================================
# Form Exceptions
# =============================================================================

class FormDecodeError(SaludosException):
    """Raised when a urlencoded payload cannot be decoded."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to decode form data: {error}",
            code="FORM_DECODE_ERROR",
            status_code=400,
            suggestion="Send an application/x-www-form-urlencoded body in the declared charset",
            details={"error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def saludos_exception_handler(
    request: Request,
    exc: SaludosException
) -> JSONResponse:
    """
    Convert SaludosException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Log an unexpected error and hide its details from the client."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


async def method_not_allowed_handler(
    request: Request,
    exc: Exception
) -> PlainTextResponse:
    """A known path with the wrong method is answered like an unknown path."""
    return PlainTextResponse("Not Found", status_code=404)
