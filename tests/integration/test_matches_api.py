"""HTTP tests for match endpoints."""

from uuid import uuid4

import pytest

from src.marketplace.models import PrincipalRole
from tests.helpers import auth_headers, create_consultant

pytestmark = pytest.mark.integration

PROJECT_PAYLOAD = {
    "title": "Carbon footprint",
    "description": "For manufacturing",
    "requirements": "Carbon",
}


@pytest.fixture
async def posted(client, db_session):
    """An SME project matched to two consultants."""
    sme_headers = auth_headers(uuid4(), PrincipalRole.SME)
    consultants = [
        await create_consultant(db_session, expertise=["carbon"], experience_years=15),
        await create_consultant(db_session, expertise=["footprint"], experience_years=5),
    ]
    project = (
        await client.post("/api/v1/projects", json=PROJECT_PAYLOAD, headers=sme_headers)
    ).json()
    matches = (
        await client.get(f"/api/v1/projects/{project['id']}/matches", headers=sme_headers)
    ).json()
    by_consultant = {m["consultant_id"]: m for m in matches}
    return {
        "sme_headers": sme_headers,
        "project": project,
        "matches": [by_consultant[str(c.id)] for c in consultants],
        "consultant_headers": [
            auth_headers(c.user_id, PrincipalRole.CONSULTANT) for c in consultants
        ],
    }


async def test_consultant_lists_own_matches(client, posted):
    response = await client.get("/api/v1/matches", headers=posted["consultant_headers"][0])

    assert response.status_code == 200
    items = response.json()["items"]
    assert len(items) == 1
    assert items[0]["id"] == posted["matches"][0]["id"]
    assert items[0]["project"]["id"] == posted["project"]["id"]


async def test_consultant_without_profile_forbidden(client):
    response = await client.get(
        "/api/v1/matches", headers=auth_headers(uuid4(), PrincipalRole.CONSULTANT)
    )

    assert response.status_code == 403


async def test_sme_cannot_list_consultant_matches(client, posted):
    response = await client.get("/api/v1/matches", headers=posted["sme_headers"])

    assert response.status_code == 403


async def test_submit_proposal(client, posted):
    match = posted["matches"][0]

    response = await client.post(
        f"/api/v1/matches/{match['id']}/proposal",
        json={"proposal": "Baseline plus reduction plan", "price": "3200.00"},
        headers=posted["consultant_headers"][0],
    )

    assert response.status_code == 200
    assert response.json()["proposal"] == "Baseline plus reduction plan"
    assert response.json()["status"] == "pending"


async def test_submit_proposal_for_someone_else(client, posted):
    match = posted["matches"][0]

    response = await client.post(
        f"/api/v1/matches/{match['id']}/proposal",
        json={"proposal": "Let me", "price": "1.00"},
        headers=posted["consultant_headers"][1],
    )

    assert response.status_code == 403


async def test_accept_rejects_siblings(client, posted):
    accepted, sibling = posted["matches"]

    response = await client.patch(
        f"/api/v1/matches/{accepted['id']}/status",
        json={"status": "accepted"},
        headers=posted["sme_headers"],
    )
    assert response.status_code == 200
    assert response.json()["status"] == "accepted"

    project = (
        await client.get(
            f"/api/v1/projects/{posted['project']['id']}", headers=posted["sme_headers"]
        )
    ).json()
    assert project["status"] == "in_progress"

    matches = (
        await client.get(
            f"/api/v1/projects/{posted['project']['id']}/matches", headers=posted["sme_headers"]
        )
    ).json()
    statuses = {m["id"]: m["status"] for m in matches}
    assert statuses[sibling["id"]] == "rejected"


async def test_complete_requires_accept(client, posted):
    match = posted["matches"][0]

    response = await client.patch(
        f"/api/v1/matches/{match['id']}/status",
        json={"status": "completed"},
        headers=posted["sme_headers"],
    )

    assert response.status_code == 409
    assert response.json()["request_id"]


async def test_full_lifecycle(client, posted):
    match = posted["matches"][0]
    url = f"/api/v1/matches/{match['id']}/status"

    await client.patch(url, json={"status": "accepted"}, headers=posted["sme_headers"])
    response = await client.patch(url, json={"status": "completed"}, headers=posted["sme_headers"])

    assert response.status_code == 200
    project = (
        await client.get(
            f"/api/v1/projects/{posted['project']['id']}", headers=posted["sme_headers"]
        )
    ).json()
    assert project["status"] == "completed"


async def test_pending_is_not_a_decision(client, posted):
    match = posted["matches"][0]

    response = await client.patch(
        f"/api/v1/matches/{match['id']}/status",
        json={"status": "pending"},
        headers=posted["sme_headers"],
    )

    assert response.status_code == 422


async def test_status_change_by_other_sme(client, posted):
    match = posted["matches"][0]

    response = await client.patch(
        f"/api/v1/matches/{match['id']}/status",
        json={"status": "rejected"},
        headers=auth_headers(uuid4(), PrincipalRole.SME),
    )

    assert response.status_code == 403
