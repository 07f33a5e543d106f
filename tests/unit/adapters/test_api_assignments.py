"""HTTP surface: status codes and payloads of the assignment endpoints."""

import httpx
import pytest
import pytest_asyncio
from sqlalchemy import update

from routebid.adapters.persistence.database import get_session
from routebid.adapters.persistence.models import SelectionModel, SelectionPeriodModel
from routebid.main import app


@pytest_asyncio.fixture
async def client(seeded):
    async def _session():
        async with seeded() as session:
            yield session

    app.dependency_overrides[get_session] = _session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


async def _set_status(factory, status: str) -> None:
    async with factory() as session:
        await session.execute(
            update(SelectionPeriodModel).where(SelectionPeriodModel.id == 1).values(status=status)
        )
        await session.commit()


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["database"] == "connected"


@pytest.mark.asyncio
async def test_process_then_list(client):
    resp = await client.post("/api/periods/1/process")
    assert resp.status_code == 200
    body = resp.json()
    assert body["preview"] is False
    assert body["summary"]["choice_distribution"] == {
        "first": 2, "second": 0, "third": 0, "manual": 0, "float": 1,
    }

    resp = await client.get("/api/periods/1/assignments")
    assert resp.status_code == 200
    listed = resp.json()
    assert listed["status"] == "COMPLETED"
    assert [a["route_id"] for a in listed["assignments"]] == [1, None, 2]
    assert listed["assignments"][1]["reason_code"] == "ROUTES_CLAIMED"


@pytest.mark.asyncio
async def test_preview_does_not_complete_period(client):
    resp = await client.post("/api/periods/1/process", params={"preview": "true"})
    assert resp.status_code == 200
    assert resp.json()["preview"] is True

    listed = (await client.get("/api/periods/1/assignments")).json()
    assert listed["status"] == "CLOSED"
    assert listed["total"] == 0


@pytest.mark.asyncio
async def test_unknown_period_is_404(client):
    assert (await client.post("/api/periods/42/process")).status_code == 404
    assert (await client.get("/api/periods/42/assignments")).status_code == 404


@pytest.mark.parametrize("status", ["UPCOMING", "COMPLETED", "PROCESSING"])
@pytest.mark.asyncio
async def test_unprocessable_status_is_409(client, seeded, status):
    await _set_status(seeded, status)
    resp = await client.post("/api/periods/1/process")
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_duplicate_preferences_are_422(client, seeded):
    async with seeded() as session:
        await session.execute(
            update(SelectionModel).where(SelectionModel.employee_id == 3).values(second_choice_id=2)
        )
        await session.commit()

    resp = await client.post("/api/periods/1/process")
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert len(detail["details"]) == 1
    assert "employee 3" in detail["details"][0]


@pytest.mark.asyncio
async def test_manual_assignment(client):
    resp = await client.post(
        "/api/periods/1/assignments/manual",
        json={"employee_id": 2, "route_id": 2, "reason": "medical swap"},
    )
    assert resp.status_code == 201
    assert resp.json()["reason"] == "Manually assigned: medical swap"

    # Route 2 is now held by employee 2
    resp = await client.post(
        "/api/periods/1/assignments/manual", json={"employee_id": 3, "route_id": 2}
    )
    assert resp.status_code == 409

    # Route 103 needs a doubles endorsement
    resp = await client.post(
        "/api/periods/1/assignments/manual", json={"employee_id": 3, "route_id": 3}
    )
    assert resp.status_code == 409
    assert "doubles_endorsement" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_manual_assignment_to_float_pool(client):
    resp = await client.post("/api/periods/1/assignments/manual", json={"employee_id": 1})
    assert resp.status_code == 201
    body = resp.json()
    assert body["route_id"] is None
    assert body["reason_code"] == "MANUAL"


@pytest.mark.asyncio
async def test_committed_summary(client):
    await client.post("/api/periods/1/process")
    resp = await client.get("/api/periods/1/assignments/summary")
    assert resp.status_code == 200
    body = resp.json()
    assert body["period"]["status"] == "COMPLETED"
    assert body["summary"]["assigned_routes"] == 2
    assert body["summary"]["choice_distribution"]["float"] == 1
    assert body["summary"]["choice_distribution"]["manual"] == 0

    assert (await client.get("/api/periods/42/assignments/summary")).status_code == 404


@pytest.mark.asyncio
async def test_remove_assignment(client):
    created = (await client.post(
        "/api/periods/1/assignments/manual", json={"employee_id": 1, "route_id": 1}
    )).json()
    summary = (await client.get("/api/periods/1/assignments/summary")).json()["summary"]
    assert summary["choice_distribution"]["manual"] == 1

    resp = await client.delete(f"/api/assignments/{created['id']}")
    assert resp.status_code == 204
    assert (await client.get("/api/periods/1/assignments")).json()["total"] == 0

    assert (await client.delete(f"/api/assignments/{created['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_remove_assignment_refused_after_completion(client):
    await client.post("/api/periods/1/process")
    listed = (await client.get("/api/periods/1/assignments")).json()
    resp = await client.delete(f"/api/assignments/{listed['assignments'][0]['id']}")
    assert resp.status_code == 409
    assert (await client.get("/api/periods/1/assignments")).json()["total"] == 3
