"""
Invite function endpoint.

Answers in the edge-function shape: ``{"message": ...}`` on success and
``{"error": ...}`` with a status code on failure.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials

from api.middleware.auth import bearer_scheme
from api.dependencies import get_invite_service
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ToolshelfError,
    UnavailableError,
)

from .interfaces import IInviteService

logger = logging.getLogger(__name__)

router = APIRouter()

STATUS_BY_ERROR = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (UnavailableError, 503),
)


def error_status(error: ToolshelfError) -> int:
    """HTTP status for a failed admission. Anything unlisted is a 400."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return 400


@router.post("/invite-member")
async def invite_member(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    service: IInviteService = Depends(get_invite_service),
) -> JSONResponse:
    """
    Invite a user to a team by email.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    token = credentials.credentials if credentials else None
    try:
        result = await service.admit(token, payload)
    except ToolshelfError as e:
        if not isinstance(e, (AuthenticationError, ConflictError)):
            logger.warning("Invite failed: %s", e.message)
        return JSONResponse(status_code=error_status(e), content={"error": e.message})
    except Exception:
        logger.exception("Unexpected invite failure")
        return JSONResponse(status_code=400, content={"error": "Invite failed."})

    return JSONResponse(status_code=200, content=result.model_dump())
