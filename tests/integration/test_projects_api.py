"""HTTP tests for project endpoints."""

from datetime import datetime
from uuid import UUID, uuid4

import pytest

from src.marketplace.models import PrincipalRole, Project
from tests.helpers import auth_headers, create_consultant

pytestmark = pytest.mark.integration

PROJECT_PAYLOAD = {
    "title": "Carbon footprint",
    "description": "For manufacturing",
    "requirements": "Carbon",
    "budget": "5000.00",
}


@pytest.fixture
def sme_id():
    return uuid4()


@pytest.fixture
def sme_headers(sme_id):
    return auth_headers(sme_id, PrincipalRole.SME)


async def test_create_project_generates_matches(client, db_session, sme_id, sme_headers):
    expert = await create_consultant(
        db_session, expertise=["Carbon Footprint Analysis"], experience_years=12
    )

    response = await client.post("/api/v1/projects", json=PROJECT_PAYLOAD, headers=sme_headers)

    assert response.status_code == 201
    project = response.json()
    assert project["sme_id"] == str(sme_id)
    assert project["status"] == "open"

    response = await client.get(f"/api/v1/projects/{project['id']}/matches", headers=sme_headers)
    assert response.status_code == 200
    matches = response.json()
    assert len(matches) == 1
    assert matches[0]["consultant_id"] == str(expert.id)
    assert matches[0]["match_score"] == 0.76
    assert matches[0]["status"] == "pending"


async def test_create_requires_token(client):
    response = await client.post("/api/v1/projects", json=PROJECT_PAYLOAD)

    assert response.status_code == 401
    assert response.json()["request_id"]


async def test_create_rejects_consultant(client):
    headers = auth_headers(uuid4(), PrincipalRole.CONSULTANT)

    response = await client.post("/api/v1/projects", json=PROJECT_PAYLOAD, headers=headers)

    assert response.status_code == 403


async def test_create_validates_payload(client, sme_headers):
    response = await client.post(
        "/api/v1/projects", json={**PROJECT_PAYLOAD, "title": "   "}, headers=sme_headers
    )

    assert response.status_code == 422


async def test_invalid_token_rejected(client):
    response = await client.get(
        "/api/v1/projects", headers={"Authorization": "Bearer not-a-token"}
    )

    assert response.status_code == 401


async def test_list_projects_paginates(client, sme_headers):
    for _ in range(3):
        await client.post("/api/v1/projects", json=PROJECT_PAYLOAD, headers=sme_headers)

    response = await client.get("/api/v1/projects?limit=2", headers=sme_headers)

    assert response.status_code == 200
    page = response.json()
    assert len(page["items"]) == 2
    assert page["has_more"] is True
    assert page["next_cursor"]


async def test_list_projects_only_own(client, sme_headers):
    await client.post("/api/v1/projects", json=PROJECT_PAYLOAD, headers=sme_headers)

    other = auth_headers(uuid4(), PrincipalRole.SME)
    response = await client.get("/api/v1/projects", headers=other)

    assert response.json()["items"] == []


async def test_get_project_visible_to_consultants(client, sme_headers):
    created = (
        await client.post("/api/v1/projects", json=PROJECT_PAYLOAD, headers=sme_headers)
    ).json()

    response = await client.get(
        f"/api/v1/projects/{created['id']}",
        headers=auth_headers(uuid4(), PrincipalRole.CONSULTANT),
    )

    assert response.status_code == 200
    assert response.json()["title"] == "Carbon footprint"


async def test_deadline_with_offset_stored_as_utc(client, db_session, sme_headers):
    payload = {**PROJECT_PAYLOAD, "deadline": "2026-12-31T10:00:00+05:00"}

    response = await client.post("/api/v1/projects", json=payload, headers=sme_headers)

    assert response.status_code == 201
    assert response.json()["deadline"] == "2026-12-31T05:00:00"
    stored = await db_session.get(Project, UUID(response.json()["id"]))
    assert stored.deadline == datetime(2026, 12, 31, 5, 0)

    response = await client.patch(
        f"/api/v1/projects/{stored.id}",
        json={"deadline": "2027-01-15T09:00:00Z"},
        headers=sme_headers,
    )

    assert response.status_code == 200
    assert response.json()["deadline"] == "2027-01-15T09:00:00"


async def test_get_missing_project(client, sme_headers):
    response = await client.get(f"/api/v1/projects/{uuid4()}", headers=sme_headers)

    assert response.status_code == 404
    body = response.json()
    assert "not found" in body["detail"]
    assert body["request_id"]


async def test_update_project(client, sme_headers):
    created = (
        await client.post("/api/v1/projects", json=PROJECT_PAYLOAD, headers=sme_headers)
    ).json()

    response = await client.patch(
        f"/api/v1/projects/{created['id']}",
        json={"description": "Two factories"},
        headers=sme_headers,
    )

    assert response.status_code == 200
    assert response.json()["description"] == "Two factories"
    assert response.json()["title"] == "Carbon footprint"


async def test_update_by_other_sme_forbidden(client, sme_headers):
    created = (
        await client.post("/api/v1/projects", json=PROJECT_PAYLOAD, headers=sme_headers)
    ).json()

    response = await client.patch(
        f"/api/v1/projects/{created['id']}",
        json={"title": "Hijacked"},
        headers=auth_headers(uuid4(), PrincipalRole.SME),
    )

    assert response.status_code == 403


async def test_cancel_then_update_conflicts(client, sme_headers):
    created = (
        await client.post("/api/v1/projects", json=PROJECT_PAYLOAD, headers=sme_headers)
    ).json()

    response = await client.post(f"/api/v1/projects/{created['id']}/cancel", headers=sme_headers)
    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"

    response = await client.patch(
        f"/api/v1/projects/{created['id']}", json={"title": "Again"}, headers=sme_headers
    )
    assert response.status_code == 409


async def test_delete_project(client, sme_headers):
    created = (
        await client.post("/api/v1/projects", json=PROJECT_PAYLOAD, headers=sme_headers)
    ).json()

    response = await client.delete(f"/api/v1/projects/{created['id']}", headers=sme_headers)
    assert response.status_code == 204

    response = await client.get(f"/api/v1/projects/{created['id']}", headers=sme_headers)
    assert response.status_code == 404
