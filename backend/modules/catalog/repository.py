"""
Catalog repository.

Read-only access to ``master_tools``. The catalog is written by a separate
curation process, never by this service.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import MasterTool


class CatalogRepository(BaseRepository[MasterTool]):
    """Repository for the master tool catalog."""

    def list_tools(self) -> list[MasterTool]:
        result = self._execute(self._db.table("master_tools").select("*"))
        return [self._map_to_tool(row) for row in result.data]

    def get_tool(self, tool_id: str) -> Optional[MasterTool]:
        result = self._execute(
            self._db.table("master_tools").select("*").eq("id", tool_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_tool(result.data[0])

    def get_tools(self, tool_ids: list[str]) -> dict[str, MasterTool]:
        """Load several tools, keyed by ID. Missing IDs are absent."""
        if not tool_ids:
            return {}
        result = self._execute(
            self._db.table("master_tools").select("*").in_("id", tool_ids)
        )
        tools = [self._map_to_tool(row) for row in result.data]
        return {t.id: t for t in tools}

    def _map_to_tool(self, data: dict[str, Any]) -> MasterTool:
        """Map database row to MasterTool model."""
        return MasterTool(
            id=str(data["id"]),
            title=data.get("title") or "",
            description=data.get("description") or "",
            external_link=data.get("external_link") or "",
            category=data.get("category"),
            tags=data.get("tags") or [],
        )
