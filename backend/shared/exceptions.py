"""
Base exception classes for the Toolshelf backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to one HTTP status, so a module only has
to pick the right parent for a new error to be reported consistently.
"""

from typing import Optional, Any


class ToolshelfError(Exception):
    """
    Base exception for all Toolshelf errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(ToolshelfError):
    """Input validation failed. Caller's fault, never retried."""

    pass


class AuthenticationError(ToolshelfError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(ToolshelfError):
    """Authorization failed (identity known, insufficient role)."""

    pass


class NotFoundError(ToolshelfError):
    """Referenced resource not found."""

    pass


class ConflictError(ToolshelfError):
    """A uniqueness constraint was violated."""

    pass


class UnavailableError(ToolshelfError):
    """
    Transient failure talking to the store (timeout, connection drop).

    Safe to retry with backoff.
    """

    def __init__(
        self,
        message: str,
        service: str = "store",
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class UnexpectedError(ToolshelfError):
    """Anything else. Logged and surfaced without internal detail."""

    pass
