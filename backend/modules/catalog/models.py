"""
Catalog module data models.
"""

from typing import Optional
from pydantic import BaseModel, Field


class MasterTool(BaseModel):
    """A curated tool in the global master catalog."""

    id: str
    title: str
    description: str = ""
    external_link: str = ""
    category: Optional[str] = None
    tags: list[str] = Field(default_factory=list)

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title or description."""
        needle = query.strip().lower()
        if not needle:
            return True
        return needle in self.title.lower() or needle in self.description.lower()
