"""
Invite service implementation.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from modules.auth.interfaces import IAuthService
from modules.teams.interfaces import ITeamService
from modules.teams.models import TeamRole

from .interfaces import IInviteService
from .models import InviteRequest, InviteResult
from .exceptions import InvalidInviteRequestError, InviteeNotFoundError

logger = logging.getLogger(__name__)


class InviteService(IInviteService):
    """
    Invite admission over the identity context and the membership store.

    There is no existence pre-check before the insert. The unique
    (team_id, user_id) constraint decides between concurrent invites.
    """

    def __init__(self, auth: IAuthService, teams: ITeamService):
        self._auth = auth
        self._teams = teams

    async def admit(self, credential: Optional[str], payload: Any) -> InviteResult:
        caller = await self._auth.validate_token(credential)
        request = self._parse(payload)

        await self._teams.require_admin(caller.id, request.team_id)

        invitee = await self._auth.get_user_by_email(request.email)
        if invitee is None:
            raise InviteeNotFoundError(request.email)

        await self._teams.add_member(request.team_id, invitee.id, TeamRole.VIEWER)

        logger.info(
            "User %s invited to team %s by %s", invitee.id, request.team_id, caller.id
        )
        return InviteResult()

    def _parse(self, payload: Any) -> InviteRequest:
        if not isinstance(payload, dict):
            raise InvalidInviteRequestError("body must be a JSON object")
        try:
            return InviteRequest.model_validate(payload)
        except PydanticValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            raise InvalidInviteRequestError(
                "missing or invalid " + ", ".join(fields), fields
            ) from e
