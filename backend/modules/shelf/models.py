"""
Shelf module data models.

A shelf entry is either a reference into the master catalog or a custom
entry whose fields are owned inline. Exactly one of the two, never both.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field

from modules.catalog.models import MasterTool


class EntrySource(str, Enum):
    """Where a shelf entry's display fields come from."""

    CATALOG = "catalog"
    CUSTOM = "custom"


class CatalogRef(BaseModel):
    """Variant: display fields are looked up in the master catalog."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["catalog"] = "catalog"
    master_tool_id: str = Field(..., min_length=1)


class CustomEntry(BaseModel):
    """Variant: display fields are owned by the entry."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["custom"] = "custom"
    title: str = Field(..., min_length=1)
    description: str = ""
    external_link: str = Field(..., min_length=1)
    category: Optional[str] = None


ShelfVariant = Annotated[Union[CatalogRef, CustomEntry], Field(discriminator="kind")]


class ShelfEntry(BaseModel):
    """A team-scoped shelf entry. Immutable once created."""

    model_config = {"frozen": True}

    id: str
    team_id: str
    added_by_user_id: Optional[str] = None
    variant: ShelfVariant
    created_at: Optional[datetime] = None

    @property
    def source(self) -> EntrySource:
        return EntrySource(self.variant.kind)

    @property
    def master_tool_id(self) -> Optional[str]:
        if isinstance(self.variant, CatalogRef):
            return self.variant.master_tool_id
        return None


class ResolvedTool(BaseModel):
    """
    A shelf entry with its display fields resolved.

    Carries the requesting user's pin and recency state; both default to
    "never interacted" when the user has no preference for the entry.
    """

    id: str = Field(..., description="Shelf entry ID")
    team_id: str
    team_name: str
    source: EntrySource
    master_tool_id: Optional[str] = None
    title: str
    description: str = ""
    external_link: str = ""
    category: Optional[str] = None
    is_pinned: bool = False
    last_used_at: Optional[datetime] = None


class CatalogItem(BaseModel):
    """A catalog search hit, annotated for a selected team."""

    tool: MasterTool
    already_on_shelf: bool = False


class AddCatalogEntryRequest(BaseModel):
    """Request to put a catalog tool on a team shelf."""

    master_tool_id: str = Field(..., min_length=1)


class AddCustomEntryRequest(BaseModel):
    """Fields for a custom shelf entry. Title and link are required."""

    title: str = ""
    description: str = ""
    external_link: str = ""
    category: Optional[str] = None
