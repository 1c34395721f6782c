"""
Preference API endpoints.

Pin toggling, the touch RPC and the two cross-team ranking reads.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from api.middleware.auth import get_current_user
from api.dependencies import get_preference_service
from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser

from modules.shelf.models import ResolvedTool

from .interfaces import IPreferenceService
from .models import PinResponse, TouchToolRequest
from .exceptions import ForeignPreferenceError

router = APIRouter()


@router.post("/shelf-entries/{entry_id}/pin", response_model=PinResponse)
async def toggle_pin(
    entry_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPreferenceService = Depends(get_preference_service),
) -> PinResponse:
    """
    Flip the caller's pin on a shelf entry.
    """
    pinned = await service.toggle_pin(user, entry_id)
    return PinResponse(shelf_entry_id=entry_id, is_pinned=pinned)


@router.post("/rpc/touch_tool", status_code=204)
async def touch_tool(
    request: TouchToolRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPreferenceService = Depends(get_preference_service),
) -> Response:
    """
    Record that the caller opened a tool.

    ``user_id`` is accepted for compatibility and must name the caller.
    """
    if request.user_id is not None and request.user_id != user.id:
        raise ForeignPreferenceError(request.user_id)

    await service.touch(user, request.tool_id)
    return Response(status_code=204)


@router.get("/me/recent-tools", response_model=list[ResolvedTool])
async def recent_tools(
    limit: Optional[int] = Query(default=None, description="Maximum items to return"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPreferenceService = Depends(get_preference_service),
    settings: Settings = Depends(get_settings),
) -> list[ResolvedTool]:
    """
    The caller's most recently used tools across all teams.
    """
    return await service.recent_tools(
        user, limit if limit is not None else settings.recent_tools_limit
    )


@router.get("/me/pinned-tools", response_model=list[ResolvedTool])
async def pinned_tools(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPreferenceService = Depends(get_preference_service),
) -> list[ResolvedTool]:
    return await service.pinned_tools(user)
