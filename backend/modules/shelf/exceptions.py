"""
Shelf module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class ShelfEntryNotFoundError(NotFoundError):
    """Raised when a shelf entry is not found."""

    def __init__(self, entry_id: str):
        super().__init__(
            f"Shelf entry not found: {entry_id}",
            code="SHELF_ENTRY_NOT_FOUND",
            details={"entry_id": entry_id},
        )


class MasterToolNotFoundError(NotFoundError):
    """Raised when a catalog tool is not found."""

    def __init__(self, master_tool_id: str):
        super().__init__(
            f"Catalog tool not found: {master_tool_id}",
            code="MASTER_TOOL_NOT_FOUND",
            details={"master_tool_id": master_tool_id},
        )


class DuplicateShelfEntryError(ConflictError):
    """Raised when a catalog tool is already on the team's shelf."""

    def __init__(self, team_id: str, master_tool_id: str):
        super().__init__(
            "Tool is already on this team's shelf.",
            code="DUPLICATE_SHELF_ENTRY",
            details={"team_id": team_id, "master_tool_id": master_tool_id},
        )


class InvalidCustomEntryError(ValidationError):
    """Raised when a custom entry lacks a title or link."""

    def __init__(self, missing: list[str]):
        super().__init__(
            "Title and Link are required for custom tools.",
            code="INVALID_CUSTOM_ENTRY",
            details={"missing": missing},
        )


class InvalidShelfEntryError(ValidationError):
    """Raised for a stored entry with both or neither variant populated."""

    def __init__(self, entry_id: str, reason: str):
        super().__init__(
            f"Shelf entry {entry_id} is malformed: {reason}",
            code="INVALID_SHELF_ENTRY",
            details={"entry_id": entry_id, "reason": reason},
        )
