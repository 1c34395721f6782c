"""
Shelf repository for database access.

Encapsulates all Supabase queries and data mapping for ``team_shelf_tools``.
A row stores the catalog variant in ``master_tool_id`` and the custom
variant in the ``custom_*`` columns; mapping enforces that exactly one of
the two is populated.
"""

import logging
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import CatalogRef, CustomEntry, ShelfEntry, ShelfVariant
from .exceptions import InvalidShelfEntryError

logger = logging.getLogger(__name__)

CUSTOM_COLUMNS = (
    "custom_title",
    "custom_description",
    "custom_external_link",
    "custom_category",
)


class ShelfRepository(BaseRepository[ShelfEntry]):
    """
    Repository for shelf entries.

    Note: This repository does NOT perform authorization checks.
    """

    def create_entry(
        self,
        team_id: str,
        added_by_user_id: str,
        variant: ShelfVariant,
    ) -> ShelfEntry:
        """
        Insert a shelf entry.

        Raises:
            ConflictError: The catalog tool is already on the team's shelf.
        """
        data = {"team_id": team_id, "added_by_user_id": added_by_user_id}
        data.update(self._variant_to_row(variant))
        result = self._execute(self._db.table("team_shelf_tools").insert(data))
        return self._map_to_entry(result.data[0])

    def get_entry(self, entry_id: str) -> Optional[ShelfEntry]:
        """
        Get one entry.

        Raises:
            InvalidShelfEntryError: The stored row is malformed.
        """
        result = self._execute(
            self._db.table("team_shelf_tools").select("*").eq("id", entry_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_entry(result.data[0])

    def get_entries(self, entry_ids: list[str]) -> list[ShelfEntry]:
        """Load several entries. Missing and malformed rows are skipped."""
        if not entry_ids:
            return []
        result = self._execute(
            self._db.table("team_shelf_tools").select("*").in_("id", entry_ids)
        )
        return self._map_valid_rows(result.data)

    def list_team_entries(self, team_id: str) -> list[ShelfEntry]:
        """All well-formed entries on a team's shelf."""
        result = self._execute(
            self._db.table("team_shelf_tools").select("*").eq("team_id", team_id)
        )
        return self._map_valid_rows(result.data)

    def list_catalog_tool_ids(self, team_id: str) -> set[str]:
        """IDs of catalog tools already on a team's shelf."""
        result = self._execute(
            self._db.table("team_shelf_tools")
            .select("master_tool_id")
            .eq("team_id", team_id)
            .not_.is_("master_tool_id", "null")
        )
        return {str(row["master_tool_id"]) for row in result.data}

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_valid_rows(self, rows: list[dict[str, Any]]) -> list[ShelfEntry]:
        entries = []
        for row in rows:
            try:
                entries.append(self._map_to_entry(row))
            except InvalidShelfEntryError as e:
                logger.warning("Skipping shelf entry: %s", e.message)
        return entries

    def _variant_to_row(self, variant: ShelfVariant) -> dict[str, Any]:
        """Columns for one variant. The other variant's columns stay null."""
        if isinstance(variant, CatalogRef):
            return {"master_tool_id": variant.master_tool_id}
        return {
            "master_tool_id": None,
            "custom_title": variant.title,
            "custom_description": variant.description,
            "custom_external_link": variant.external_link,
            "custom_category": variant.category,
        }

    def _map_to_entry(self, data: dict[str, Any]) -> ShelfEntry:
        """Map database row to ShelfEntry, rejecting both-or-neither rows."""
        entry_id = str(data["id"])
        master_tool_id = data.get("master_tool_id")
        has_custom = any(data.get(col) for col in CUSTOM_COLUMNS)

        if master_tool_id and has_custom:
            raise InvalidShelfEntryError(entry_id, "both catalog and custom fields set")

        variant: ShelfVariant
        if master_tool_id:
            variant = CatalogRef(master_tool_id=str(master_tool_id))
        elif data.get("custom_title") and data.get("custom_external_link"):
            variant = CustomEntry(
                title=data["custom_title"],
                description=data.get("custom_description") or "",
                external_link=data["custom_external_link"],
                category=data.get("custom_category"),
            )
        else:
            raise InvalidShelfEntryError(
                entry_id, "neither a catalog reference nor a complete custom entry"
            )

        return ShelfEntry(
            id=entry_id,
            team_id=str(data["team_id"]),
            added_by_user_id=(
                str(data["added_by_user_id"]) if data.get("added_by_user_id") else None
            ),
            variant=variant,
            created_at=data.get("created_at"),
        )
