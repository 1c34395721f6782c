"""
Shelf service implementation.

Composes a team's shelf from catalog references and custom entries and
attaches the acting user's pin state.
"""

import logging
from typing import Optional

from shared.exceptions import ConflictError, ValidationError
from shared.models import AuthenticatedUser

from modules.catalog.repository import CatalogRepository
from modules.preferences.repository import PreferenceRepository
from modules.teams.interfaces import ITeamService

from .interfaces import IShelfService
from .models import (
    AddCustomEntryRequest,
    CatalogItem,
    CatalogRef,
    CustomEntry,
    ResolvedTool,
    ShelfEntry,
)
from .repository import ShelfRepository
from .resolution import matches_query, resolve_tool, shelf_sort_key
from .exceptions import (
    DuplicateShelfEntryError,
    InvalidCustomEntryError,
    MasterToolNotFoundError,
    ShelfEntryNotFoundError,
)

logger = logging.getLogger(__name__)


class ShelfService(IShelfService):
    """
    Shelf service with Supabase backend.

    Any member of a team may add to its shelf; the role is not consulted.
    """

    def __init__(
        self,
        repository: ShelfRepository,
        catalog: CatalogRepository,
        preferences: PreferenceRepository,
        teams: ITeamService,
    ):
        self._repo = repository
        self._catalog = catalog
        self._preferences = preferences
        self._teams = teams

    async def browse_catalog(
        self,
        query: Optional[str] = None,
        team_id: Optional[str] = None,
        acting_user: Optional[AuthenticatedUser] = None,
    ) -> list[CatalogItem]:
        on_shelf: set[str] = set()
        if team_id:
            if acting_user is None:
                raise ValidationError("A user is required to browse against a team")
            await self._teams.require_membership(acting_user.id, team_id)
            on_shelf = self._repo.list_catalog_tool_ids(team_id)

        tools = [t for t in self._catalog.list_tools() if t.matches(query or "")]
        tools.sort(key=lambda t: (t.title.lower(), t.id))

        return [
            CatalogItem(tool=tool, already_on_shelf=tool.id in on_shelf)
            for tool in tools
        ]

    async def add_catalog_entry(
        self,
        acting_user: AuthenticatedUser,
        team_id: str,
        master_tool_id: str,
    ) -> ShelfEntry:
        await self._teams.require_membership(acting_user.id, team_id)

        if self._catalog.get_tool(master_tool_id) is None:
            raise MasterToolNotFoundError(master_tool_id)

        try:
            entry = self._repo.create_entry(
                team_id,
                acting_user.id,
                CatalogRef(master_tool_id=master_tool_id),
            )
        except ConflictError as e:
            raise DuplicateShelfEntryError(team_id, master_tool_id) from e

        logger.info(
            "Catalog tool %s added to team %s by %s", master_tool_id, team_id, acting_user.id
        )
        return entry

    async def add_custom_entry(
        self,
        acting_user: AuthenticatedUser,
        team_id: str,
        fields: AddCustomEntryRequest,
    ) -> ShelfEntry:
        await self._teams.require_membership(acting_user.id, team_id)

        title = fields.title.strip()
        link = fields.external_link.strip()
        missing = [name for name, value in (("title", title), ("external_link", link)) if not value]
        if missing:
            raise InvalidCustomEntryError(missing)

        variant = CustomEntry(
            title=title,
            description=fields.description.strip(),
            external_link=link,
            category=(fields.category or "").strip() or None,
        )
        entry = self._repo.create_entry(team_id, acting_user.id, variant)

        logger.info("Custom tool %s added to team %s by %s", entry.id, team_id, acting_user.id)
        return entry

    async def list_shelf(
        self,
        acting_user: AuthenticatedUser,
        team_id: str,
        query: Optional[str] = None,
    ) -> list[ResolvedTool]:
        await self._teams.require_membership(acting_user.id, team_id)

        entries = self._repo.list_team_entries(team_id)
        resolved = await self.resolve_entries(entries)
        prefs = self._preferences.get_for_entries(acting_user.id, [e.id for e in entries])

        tools = []
        for tool in resolved:
            pref = prefs.get(tool.id)
            if pref is not None:
                tool = tool.model_copy(
                    update={"is_pinned": pref.is_pinned, "last_used_at": pref.last_used_at}
                )
            if matches_query(tool, query):
                tools.append(tool)

        logger.debug("Shelf for team %s: %d entries", team_id, len(tools))
        return sorted(tools, key=shelf_sort_key)

    async def get_entry(self, entry_id: str) -> ShelfEntry:
        entry = self._repo.get_entry(entry_id)
        if entry is None:
            raise ShelfEntryNotFoundError(entry_id)
        return entry

    async def get_entries(self, entry_ids: list[str]) -> list[ShelfEntry]:
        return self._repo.get_entries(entry_ids)

    async def resolve_entries(self, entries: list[ShelfEntry]) -> list[ResolvedTool]:
        master_ids = sorted({e.master_tool_id for e in entries if e.master_tool_id})
        masters = self._catalog.get_tools(master_ids)
        teams = await self._teams.lookup_teams([e.team_id for e in entries])

        resolved = []
        for entry in entries:
            team = teams.get(entry.team_id)
            master = masters.get(entry.master_tool_id) if entry.master_tool_id else None
            resolved.append(resolve_tool(entry, master, team.name if team else None))
        return resolved
