"""
Preferences module data models.

Per-user pin and recency state layered over shelf entries.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Preference(BaseModel):
    """
    One user's state for one shelf entry.

    Absence of a row means "not pinned, never used".
    """

    user_id: str
    shelf_entry_id: str
    is_pinned: bool = False
    last_used_at: Optional[datetime] = None


class PinResponse(BaseModel):
    """New pin state after a toggle."""

    shelf_entry_id: str
    is_pinned: bool


class TouchToolRequest(BaseModel):
    """Body of the touch_tool RPC."""

    tool_id: str = Field(..., min_length=1, description="Shelf entry ID")
    user_id: Optional[str] = Field(None, description="Must match the caller when given")
