"""
Shelf module.

Team-scoped collections of catalog references and custom entries.

Public API:
- IShelfService: Interface for shelf operations
- ShelfEntry, CatalogRef, CustomEntry, ResolvedTool, CatalogItem: Data models
- Shelf exceptions
"""

from .interfaces import IShelfService
from .models import (
    ShelfEntry,
    CatalogRef,
    CustomEntry,
    ResolvedTool,
    CatalogItem,
    EntrySource,
)
from .exceptions import (
    ShelfEntryNotFoundError,
    MasterToolNotFoundError,
    DuplicateShelfEntryError,
    InvalidCustomEntryError,
    InvalidShelfEntryError,
)

__all__ = [
    "IShelfService",
    "ShelfEntry",
    "CatalogRef",
    "CustomEntry",
    "ResolvedTool",
    "CatalogItem",
    "EntrySource",
    "ShelfEntryNotFoundError",
    "MasterToolNotFoundError",
    "DuplicateShelfEntryError",
    "InvalidCustomEntryError",
    "InvalidShelfEntryError",
]
