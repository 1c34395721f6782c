"""
Preference service implementation.

Writes are single upserts on (user_id, team_shelf_tool_id). Ranking reads
resolve entries through the shelf service and drop anything the user can
no longer see.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from shared.models import AuthenticatedUser

from modules.shelf.interfaces import IShelfService
from modules.shelf.models import ResolvedTool
from modules.teams.interfaces import ITeamService

from .interfaces import IPreferenceService
from .models import Preference
from .repository import PreferenceRepository
from .exceptions import InvalidLimitError

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PreferenceService(IPreferenceService):
    """Preference service with Supabase backend."""

    def __init__(
        self,
        repository: PreferenceRepository,
        shelf: IShelfService,
        teams: ITeamService,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._repo = repository
        self._shelf = shelf
        self._teams = teams
        self._clock = clock

    async def touch(self, acting_user: AuthenticatedUser, shelf_entry_id: str) -> None:
        entry = await self._shelf.get_entry(shelf_entry_id)
        await self._teams.require_membership(acting_user.id, entry.team_id)

        self._repo.upsert_last_used(acting_user.id, entry.id, self._clock())
        logger.debug("Entry %s touched by %s", entry.id, acting_user.id)

    async def toggle_pin(self, acting_user: AuthenticatedUser, shelf_entry_id: str) -> bool:
        entry = await self._shelf.get_entry(shelf_entry_id)
        await self._teams.require_membership(acting_user.id, entry.team_id)

        current = self._repo.get(acting_user.id, entry.id)
        pinned = not (current is not None and current.is_pinned)
        self._repo.upsert_pin(acting_user.id, entry.id, pinned)

        logger.info(
            "Entry %s %s by %s", entry.id, "pinned" if pinned else "unpinned", acting_user.id
        )
        return pinned

    async def recent_tools(
        self,
        acting_user: AuthenticatedUser,
        limit: int = 5,
    ) -> list[ResolvedTool]:
        if limit < 1:
            raise InvalidLimitError(limit)

        prefs = self._repo.list_used(acting_user.id)
        prefs.sort(key=lambda p: p.shelf_entry_id)
        prefs.sort(key=lambda p: p.last_used_at, reverse=True)

        return (await self._resolve_visible(acting_user, prefs))[:limit]

    async def pinned_tools(self, acting_user: AuthenticatedUser) -> list[ResolvedTool]:
        prefs = self._repo.list_pinned(acting_user.id)
        used = sorted(
            (p for p in prefs if p.last_used_at is not None),
            key=lambda p: p.shelf_entry_id,
        )
        used.sort(key=lambda p: p.last_used_at, reverse=True)
        never_used = sorted(
            (p for p in prefs if p.last_used_at is None),
            key=lambda p: p.shelf_entry_id,
        )

        return await self._resolve_visible(acting_user, used + never_used)

    async def _resolve_visible(
        self,
        acting_user: AuthenticatedUser,
        prefs: list[Preference],
    ) -> list[ResolvedTool]:
        """
        Resolve preferences in order, skipping deleted entries and entries
        in teams the user no longer belongs to.
        """
        if not prefs:
            return []

        entries = await self._shelf.get_entries([p.shelf_entry_id for p in prefs])
        member_of = {t.id for t in await self._teams.list_teams(acting_user)}
        visible = {e.id: e for e in entries if e.team_id in member_of}

        skipped = len(prefs) - len(visible)
        if skipped:
            logger.warning(
                "Skipped %d preferences of %s with missing or hidden entries",
                skipped, acting_user.id,
            )

        ordered = [visible[p.shelf_entry_id] for p in prefs if p.shelf_entry_id in visible]
        resolved = await self._shelf.resolve_entries(ordered)

        by_id = {p.shelf_entry_id: p for p in prefs}
        return [
            tool.model_copy(
                update={
                    "is_pinned": by_id[tool.id].is_pinned,
                    "last_used_at": by_id[tool.id].last_used_at,
                }
            )
            for tool in resolved
        ]
