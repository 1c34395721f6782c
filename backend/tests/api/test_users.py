"""Tests for the /users/me profile endpoint."""

from tests.conftest import ALICE, BOB, bearer


class TestProfile:
    def test_new_user_has_no_teams(self, client):
        response = client.get("/api/users/me", headers=bearer(BOB))

        assert response.status_code == 200
        assert response.json()["teams"] == []

    def test_lists_team_roles_by_name(self, client):
        zeta = client.post("/api/teams", json={"name": "zeta"}, headers=bearer(ALICE)).json()
        alpha = client.post("/api/teams", json={"name": "Alpha"}, headers=bearer(BOB)).json()
        client.post(
            "/functions/v1/invite-member",
            json={"team_id": alpha["id"], "email": ALICE.email},
            headers=bearer(BOB),
        )

        response = client.get("/api/users/me", headers=bearer(ALICE))

        assert response.status_code == 200
        assert response.json()["teams"] == [
            {"team_id": alpha["id"], "team_name": "Alpha", "role": "viewer"},
            {"team_id": zeta["id"], "team_name": "zeta", "role": "admin"},
        ]
