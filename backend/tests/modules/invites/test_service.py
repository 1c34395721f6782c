"""Tests for the invite admission protocol."""

import asyncio

import httpx
import pytest

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)
from modules.invites.exceptions import InviteeNotFoundError
from modules.teams.exceptions import AlreadyMemberError
from modules.teams.models import TeamRole

from tests.conftest import ALICE, BOB, CAROL, create_test_token


def token_for(user) -> str:
    return create_test_token(user.id, user.email)


@pytest.fixture
def invites(container):
    return container.invites


async def infra(container):
    team = await container.teams.create_team("Infra", ALICE)
    await container.teams.add_member(team.id, CAROL.id, TeamRole.EDITOR)
    return team


class TestAdmit:
    @pytest.mark.asyncio
    async def test_admin_invites_by_email(self, invites, container):
        team = await infra(container)

        result = await invites.admit(
            token_for(ALICE), {"team_id": team.id, "email": "bob@example.com"}
        )

        assert result.message == "Member invited successfully."
        membership = await container.teams.require_membership(BOB.id, team.id)
        assert membership.role == TeamRole.VIEWER

    @pytest.mark.asyncio
    async def test_email_is_normalized(self, invites, container):
        team = await infra(container)
        await invites.admit(token_for(ALICE), {"team_id": team.id, "email": " BOB@Example.com "})
        await container.teams.require_membership(BOB.id, team.id)

    @pytest.mark.asyncio
    async def test_unknown_email(self, invites, container, db):
        team = await infra(container)
        before = db.count("team_members")

        with pytest.raises(InviteeNotFoundError) as exc_info:
            await invites.admit(
                token_for(ALICE), {"team_id": team.id, "email": "nobody@example.com"}
            )

        assert exc_info.value.message == "User with that email does not exist."
        assert isinstance(exc_info.value, NotFoundError)
        assert db.count("team_members") == before

    @pytest.mark.asyncio
    async def test_existing_member_is_conflict(self, invites, container):
        team = await infra(container)

        with pytest.raises(AlreadyMemberError) as exc_info:
            await invites.admit(
                token_for(ALICE), {"team_id": team.id, "email": "carol@example.com"}
            )

        assert isinstance(exc_info.value, ConflictError)
        assert (await container.teams.require_membership(CAROL.id, team.id)).role == TeamRole.EDITOR

    @pytest.mark.asyncio
    async def test_editor_cannot_invite(self, invites, container, db):
        team = await infra(container)

        with pytest.raises(AuthorizationError):
            await invites.admit(token_for(CAROL), {"team_id": team.id, "email": "bob@example.com"})

        assert ("users", "select") not in db.calls

    @pytest.mark.asyncio
    async def test_owner_without_admin_role_cannot_invite(self, invites, container, db):
        team = await infra(container)
        await container.teams.add_member(team.id, BOB.id, TeamRole.ADMIN)
        alice_membership = await container.teams.require_membership(ALICE.id, team.id)
        await container.teams.change_role(BOB, alice_membership.id, "viewer")

        with pytest.raises(AuthorizationError):
            await invites.admit(
                token_for(ALICE), {"team_id": team.id, "email": "dave@example.com"}
            )

    @pytest.mark.asyncio
    async def test_bad_credential(self, invites, container, db):
        team = await infra(container)
        calls_before = len(db.calls)

        with pytest.raises(AuthenticationError):
            await invites.admit("garbage", {"team_id": team.id, "email": "bob@example.com"})

        assert len(db.calls) == calls_before

    @pytest.mark.asyncio
    async def test_missing_credential(self, invites):
        with pytest.raises(AuthenticationError):
            await invites.admit(None, {"team_id": "t", "email": "bob@example.com"})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            None,
            [],
            {},
            {"email": "bob@example.com"},
            {"team_id": "", "email": "bob@example.com"},
            {"team_id": "t1", "email": "not-an-email"},
            {"team_id": "t1"},
        ],
    )
    async def test_malformed_payload(self, invites, payload):
        with pytest.raises(ValidationError):
            await invites.admit(token_for(ALICE), payload)

    @pytest.mark.asyncio
    async def test_concurrent_duplicates_admit_once(self, invites, container, db):
        team = await infra(container)
        payload = {"team_id": team.id, "email": "bob@example.com"}

        results = await asyncio.gather(
            invites.admit(token_for(ALICE), payload),
            invites.admit(token_for(ALICE), payload),
            return_exceptions=True,
        )

        successes = [r for r in results if not isinstance(r, Exception)]
        conflicts = [r for r in results if isinstance(r, ConflictError)]
        assert len(successes) == 1
        assert len(conflicts) == 1
        bob_rows = [r for r in db.tables["team_members"] if r["user_id"] == BOB.id]
        assert len(bob_rows) == 1

    @pytest.mark.asyncio
    async def test_insert_attempted_once(self, invites, container, db):
        team = await infra(container)
        await invites.admit(token_for(ALICE), {"team_id": team.id, "email": "bob@example.com"})
        inserts = [c for c in db.calls if c == ("team_members", "insert")]
        # one for the creator, one for carol, one for the invite
        assert len(inserts) == 3

    @pytest.mark.asyncio
    async def test_store_timeout_is_unavailable(self, invites, container, db):
        team = await infra(container)
        db.fail_on("team_members", "insert", httpx.ReadTimeout("timed out"))

        with pytest.raises(UnavailableError):
            await invites.admit(token_for(ALICE), {"team_id": team.id, "email": "bob@example.com"})
