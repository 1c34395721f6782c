"""
Preferences module interface.

Per-user pin and recency state over shelf entries, and the two cross-team
ranking reads built on it.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from modules.shelf.models import ResolvedTool


@runtime_checkable
class IPreferenceService(Protocol):
    """
    Interface for preference operations.
    """

    async def touch(self, acting_user: AuthenticatedUser, shelf_entry_id: str) -> None:
        """
        Record that the user just used an entry.

        Creates the preference when absent. Pin state is left alone.

        Raises:
            NotFoundError: If the entry does not exist
            AuthorizationError: If the user is not a member of the entry's team
        """
        ...

    async def toggle_pin(self, acting_user: AuthenticatedUser, shelf_entry_id: str) -> bool:
        """
        Flip the user's pin on an entry and return the new state.

        Raises:
            NotFoundError: If the entry does not exist
            AuthorizationError: If the user is not a member of the entry's team
        """
        ...

    async def recent_tools(
        self,
        acting_user: AuthenticatedUser,
        limit: int = 5,
    ) -> list[ResolvedTool]:
        """
        Most recently used entries across all of the user's teams, newest first.

        Raises:
            ValidationError: If limit is less than 1
        """
        ...

    async def pinned_tools(self, acting_user: AuthenticatedUser) -> list[ResolvedTool]:
        """Pinned entries across all teams, most recently used first."""
        ...
