"""
Preferences module exceptions.
"""

from shared.exceptions import AuthorizationError, ValidationError


class InvalidLimitError(ValidationError):
    """Raised when a ranking read asks for fewer than one item."""

    def __init__(self, limit: int):
        super().__init__(
            f"Limit must be at least 1, got {limit}",
            code="INVALID_LIMIT",
            details={"limit": limit},
        )


class ForeignPreferenceError(AuthorizationError):
    """Raised when a caller tries to write another user's preference."""

    def __init__(self, user_id: str):
        super().__init__(
            "Cannot record tool usage for another user.",
            code="FOREIGN_PREFERENCE",
            details={"user_id": user_id},
        )
