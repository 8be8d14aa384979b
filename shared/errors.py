"""
Shared error handling for Token Guard.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    status_code: Optional[int] = None
    details: Dict[str, Any] = {}


class TokenGuardException(Exception):
    """Base exception for Token Guard."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            status_code=self.status_code,
            details=self.details
        )


class TokenError(TokenGuardException):
    """Base class for token classification errors."""


class InvalidClaimsError(TokenError):
    """Claim set is incomplete or carries an out-of-order timestamp."""

    def __init__(
        self,
        message: str = "Token claims are invalid",
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 400,
    ):
        super().__init__("INVALID_CLAIMS", message, details, status_code)


class TokenExpiredError(TokenError):
    """Token is past its expiry or its refresh window."""

    def __init__(
        self,
        message: str = "Token has expired",
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 401,
    ):
        super().__init__("TOKEN_EXPIRED", message, details, status_code)


class BackendUnavailableError(TokenGuardException):
    """Storage backend could not be reached."""

    def __init__(
        self,
        backend: str,
        message: str = "Storage backend unavailable",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.backend = backend
        super().__init__("BACKEND_UNAVAILABLE", f"{backend}: {message}", details, 503)


class StoredValueError(TokenGuardException):
    """A stored entry could not be decoded, e.g. written by another client."""

    def __init__(
        self,
        backend: str,
        message: str = "Stored value could not be decoded",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.backend = backend
        super().__init__("STORED_VALUE_INVALID", f"{backend}: {message}", details, 500)
