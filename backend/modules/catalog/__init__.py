"""
Catalog module.

The global, read-mostly master tool list that team shelves draw from.
"""

from .models import MasterTool
from .repository import CatalogRepository

__all__ = ["MasterTool", "CatalogRepository"]
