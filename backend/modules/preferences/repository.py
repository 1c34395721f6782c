"""
Preference repository for database access.

Encapsulates all Supabase queries for ``user_tool_preferences``. Writes are
single upserts keyed on (user_id, team_shelf_tool_id), so a user can never
end up with two rows for the same entry.
"""

from datetime import datetime
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Preference

PREFERENCE_KEY = "user_id,team_shelf_tool_id"


class PreferenceRepository(BaseRepository[Preference]):
    """Repository for user tool preferences."""

    def get(self, user_id: str, entry_id: str) -> Optional[Preference]:
        result = self._execute(
            self._db.table("user_tool_preferences")
            .select("*")
            .eq("user_id", user_id)
            .eq("team_shelf_tool_id", entry_id)
            .limit(1)
        )
        if not result.data:
            return None
        return self._map_to_preference(result.data[0])

    def get_for_entries(self, user_id: str, entry_ids: list[str]) -> dict[str, Preference]:
        """The user's preferences for the given entries, keyed by entry ID."""
        if not entry_ids:
            return {}
        result = self._execute(
            self._db.table("user_tool_preferences")
            .select("*")
            .eq("user_id", user_id)
            .in_("team_shelf_tool_id", entry_ids)
        )
        prefs = [self._map_to_preference(row) for row in result.data]
        return {p.shelf_entry_id: p for p in prefs}

    def list_used(self, user_id: str) -> list[Preference]:
        """Preferences with a last_used_at timestamp."""
        result = self._execute(
            self._db.table("user_tool_preferences")
            .select("*")
            .eq("user_id", user_id)
            .not_.is_("last_used_at", "null")
        )
        return [self._map_to_preference(row) for row in result.data]

    def list_pinned(self, user_id: str) -> list[Preference]:
        result = self._execute(
            self._db.table("user_tool_preferences")
            .select("*")
            .eq("user_id", user_id)
            .eq("is_pinned", True)
        )
        return [self._map_to_preference(row) for row in result.data]

    def upsert_last_used(self, user_id: str, entry_id: str, used_at: datetime) -> None:
        """Set last_used_at, creating the row if needed. is_pinned is untouched."""
        self._execute(
            self._db.table("user_tool_preferences").upsert(
                {
                    "user_id": user_id,
                    "team_shelf_tool_id": entry_id,
                    "last_used_at": used_at.isoformat(),
                },
                on_conflict=PREFERENCE_KEY,
            )
        )

    def upsert_pin(self, user_id: str, entry_id: str, is_pinned: bool) -> None:
        """Set is_pinned, creating the row if needed. last_used_at is untouched."""
        self._execute(
            self._db.table("user_tool_preferences").upsert(
                {
                    "user_id": user_id,
                    "team_shelf_tool_id": entry_id,
                    "is_pinned": is_pinned,
                },
                on_conflict=PREFERENCE_KEY,
            )
        )

    def _map_to_preference(self, data: dict[str, Any]) -> Preference:
        """Map database row to Preference model."""
        return Preference(
            user_id=str(data["user_id"]),
            shelf_entry_id=str(data["team_shelf_tool_id"]),
            is_pinned=bool(data.get("is_pinned")),
            last_used_at=data.get("last_used_at"),
        )
