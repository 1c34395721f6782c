"""
End-to-end walkthrough over HTTP: team creation, invite, shelf, pins and
recency, all against one fake store.
"""

from tests.conftest import ALICE, BOB, bearer


def test_infra_team_walkthrough(client, db):
    db.seed(
        "master_tools",
        {"id": "t1", "title": "Terraform", "description": "Infrastructure as code",
         "external_link": "https://terraform.example.com"},
    )

    # A creates "Infra" and adds catalog tool T1
    team = client.post("/api/teams", json={"name": "Infra"}, headers=bearer(ALICE)).json()
    entry = client.post(
        f"/api/teams/{team['id']}/shelf/catalog",
        json={"master_tool_id": "t1"},
        headers=bearer(ALICE),
    ).json()

    shelf = client.get(f"/api/teams/{team['id']}/shelf", headers=bearer(ALICE)).json()
    assert [(t["id"], t["title"], t["is_pinned"]) for t in shelf] == [
        (entry["id"], "Terraform", False)
    ]

    # B joins as a viewer and pins T1
    invite = client.post(
        "/functions/v1/invite-member",
        json={"team_id": team["id"], "email": BOB.email},
        headers=bearer(ALICE),
    )
    assert invite.status_code == 200
    pin = client.post(f"/api/shelf-entries/{entry['id']}/pin", headers=bearer(BOB))
    assert pin.json()["is_pinned"] is True

    bob_shelf = client.get(f"/api/teams/{team['id']}/shelf", headers=bearer(BOB)).json()
    alice_shelf = client.get(f"/api/teams/{team['id']}/shelf", headers=bearer(ALICE)).json()
    assert [(t["id"], t["is_pinned"]) for t in bob_shelf] == [(entry["id"], True)]
    assert [(t["id"], t["is_pinned"]) for t in alice_shelf] == [(entry["id"], False)]

    # A uses T1; only A's recency changes
    touched = client.post(
        "/api/rpc/touch_tool",
        json={"tool_id": entry["id"], "user_id": ALICE.id},
        headers=bearer(ALICE),
    )
    assert touched.status_code == 204

    alice_recent = client.get("/api/me/recent-tools", headers=bearer(ALICE)).json()
    bob_recent = client.get("/api/me/recent-tools", headers=bearer(BOB)).json()
    assert [t["id"] for t in alice_recent] == [entry["id"]]
    assert bob_recent == []

    assert db.count("user_tool_preferences") == 2
