"""
Display-field resolution and shelf ordering.

One rule for every read that shows a tool: the catalog wins for catalog
references, inline fields are used for custom entries.
"""

from typing import Optional

from modules.catalog.models import MasterTool

from .models import CustomEntry, ResolvedTool, ShelfEntry

UNTITLED_TOOL = "Untitled Tool"
UNKNOWN_TEAM = "Unknown Team"


def resolve_tool(
    entry: ShelfEntry,
    master: Optional[MasterTool],
    team_name: Optional[str],
) -> ResolvedTool:
    """
    Resolve an entry's display fields.

    A catalog reference whose tool was deleted after the entry was read
    resolves to the placeholder title rather than failing.
    """
    if isinstance(entry.variant, CustomEntry):
        title = entry.variant.title
        description = entry.variant.description
        external_link = entry.variant.external_link
        category = entry.variant.category
    elif master is not None:
        title = master.title
        description = master.description
        external_link = master.external_link
        category = master.category
    else:
        title, description, external_link, category = "", "", "", None

    return ResolvedTool(
        id=entry.id,
        team_id=entry.team_id,
        team_name=team_name or UNKNOWN_TEAM,
        source=entry.source,
        master_tool_id=entry.master_tool_id,
        title=title or UNTITLED_TOOL,
        description=description or "",
        external_link=external_link or "",
        category=category,
    )


def shelf_sort_key(tool: ResolvedTool) -> tuple[int, str, str]:
    """Pinned first, then case-insensitive title, then entry ID."""
    return (0 if tool.is_pinned else 1, tool.title.lower(), tool.id)


def matches_query(tool: ResolvedTool, query: Optional[str]) -> bool:
    """Case-insensitive substring match on resolved title or description."""
    needle = (query or "").strip().lower()
    if not needle:
        return True
    return needle in tool.title.lower() or needle in tool.description.lower()
