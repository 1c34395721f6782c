"""
Shelf and catalog API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_shelf_service
from shared.models import AuthenticatedUser

from .interfaces import IShelfService
from .models import (
    AddCatalogEntryRequest,
    AddCustomEntryRequest,
    CatalogItem,
    ResolvedTool,
    ShelfEntry,
)

router = APIRouter()


@router.get("/catalog", response_model=list[CatalogItem])
async def browse_catalog(
    q: Optional[str] = Query(default=None, description="Title or description substring"),
    team_id: Optional[str] = Query(default=None, description="Annotate against this team's shelf"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IShelfService = Depends(get_shelf_service),
) -> list[CatalogItem]:
    """
    Search the master catalog.

    With ``team_id``, each item reports whether it is already on that
    team's shelf.
    """
    return await service.browse_catalog(q, team_id=team_id, acting_user=user)


@router.get("/teams/{team_id}/shelf", response_model=list[ResolvedTool])
async def list_shelf(
    team_id: str,
    q: Optional[str] = Query(default=None, description="Title or description substring"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IShelfService = Depends(get_shelf_service),
) -> list[ResolvedTool]:
    """
    The team's shelf with the caller's pins, pinned entries first.
    """
    return await service.list_shelf(user, team_id, q)


@router.post("/teams/{team_id}/shelf/catalog", response_model=ShelfEntry, status_code=201)
async def add_catalog_entry(
    team_id: str,
    request: AddCatalogEntryRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IShelfService = Depends(get_shelf_service),
) -> ShelfEntry:
    return await service.add_catalog_entry(user, team_id, request.master_tool_id)


@router.post("/teams/{team_id}/shelf/custom", response_model=ShelfEntry, status_code=201)
async def add_custom_entry(
    team_id: str,
    request: AddCustomEntryRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IShelfService = Depends(get_shelf_service),
) -> ShelfEntry:
    """
    Add a custom tool. Title and link are required.
    """
    return await service.add_custom_entry(user, team_id, request)
