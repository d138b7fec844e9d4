"""
API tests for the route planner, technician and job endpoints.
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.config.database import get_db_session
from src.domain.value_objects.technician_role import TechnicianRole
from src.infrastructure.database.repositories.job_repository import JobRepository
from src.infrastructure.database.repositories.technician_repository import (
    TechnicianRepository,
)

API = "/api/v1"


@pytest_asyncio.fixture
async def client(session_factory):
    app = create_app()

    async def override_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def seeded(session_factory, job_factory, technician_factory):
    async with session_factory() as session:
        technicians = TechnicianRepository(session)
        lead = await technicians.create(technician_factory(name="Dana Lead"))
        assistant = await technicians.create(
            technician_factory(name="Sam Helper", role=TechnicianRole.ASSISTANT_TECH)
        )

        jobs = JobRepository(session)
        ga = [
            await jobs.create(job_factory(zip_code=f"3030{i}", city="Atlanta"))
            for i in range(5)
        ]
        ga.append(await jobs.create(job_factory(zip_code="31201", city="Macon")))
        ga.append(await jobs.create(job_factory(zip_code="31202", city="Macon")))
        sc = [
            await jobs.create(job_factory(state="SC", city="Columbia", zip_code="29201"))
        ]
        await session.commit()

    return {"lead": lead, "assistant": assistant, "ga": ga, "sc": sc}


def _commit_body(preview, lead_id, assistant_id=None):
    body = {
        "lead_tech_id": str(lead_id),
        "days": [
            {
                "date": day["date"],
                "job_ids": [stop["job"]["id"] for stop in day["stops"]],
            }
            for day in preview["days"]
        ],
    }
    if assistant_id:
        body["assistant_tech_id"] = str(assistant_id)
    return body


async def _preview(client, **overrides):
    body = {"state": "GA", "start_date": "2024-06-03", "max_per_day": 3}
    body.update(overrides)
    return await client.post(f"{API}/route-planner/preview", json=body)


class TestRegions:
    async def test_regions_grouped_by_state(self, client, seeded):
        response = await client.get(f"{API}/route-planner/regions")

        assert response.status_code == 200
        data = response.json()
        assert data["total_unassigned"] == 8
        assert [(r["name"], r["count"]) for r in data["regions"]] == [("GA", 7), ("SC", 1)]

    async def test_cities_of_state(self, client, seeded):
        response = await client.get(f"{API}/route-planner/regions/ga/cities")

        assert response.status_code == 200
        data = response.json()
        assert [(r["name"], r["count"]) for r in data["regions"]] == [
            ("Atlanta", 5),
            ("Macon", 2),
        ]

    async def test_empty_pool(self, client):
        response = await client.get(f"{API}/route-planner/regions")

        assert response.json() == {"total_unassigned": 0, "regions": []}


class TestPreview:
    async def test_preview_buckets_jobs(self, client, seeded):
        response = await _preview(client)

        assert response.status_code == 200
        data = response.json()
        assert data["total_jobs"] == 7
        assert [(d["date"], d["weekday"], len(d["stops"])) for d in data["days"]] == [
            ("2024-06-03", "Monday", 3),
            ("2024-06-04", "Tuesday", 3),
            ("2024-06-05", "Wednesday", 1),
        ]
        assert [s["route_order"] for s in data["days"][0]["stops"]] == [1, 2, 3]
        assert data["days"][2]["city_summary"] == "Macon"

    async def test_preview_city_filter(self, client, seeded):
        response = await _preview(client, cities=["Macon"], start_date="2024-06-01")

        days = response.json()["days"]
        assert [(d["date"], len(d["stops"])) for d in days] == [("2024-06-01", 2)]

    async def test_preview_rejects_zero_per_day(self, client, seeded):
        response = await _preview(client, max_per_day=0)

        assert response.status_code == 400
        assert response.json()["type"] == "validation_error"

    async def test_preview_does_not_assign(self, client, seeded):
        await _preview(client)

        regions = (await client.get(f"{API}/route-planner/regions")).json()
        assert regions["total_unassigned"] == 8


class TestCommit:
    async def test_commit_then_technician_route(self, client, seeded):
        preview = (await _preview(client)).json()
        lead, assistant = seeded["lead"], seeded["assistant"]

        response = await client.post(
            f"{API}/route-planner/commit",
            json=_commit_body(preview, lead.id, assistant.id),
        )

        assert response.status_code == 200
        assert response.json() == {"assigned_count": 7}

        regions = (await client.get(f"{API}/route-planner/regions")).json()
        assert regions["total_unassigned"] == 1

        route = await client.get(
            f"{API}/technicians/{assistant.id}/route", params={"date": "2024-06-04"}
        )
        stops = route.json()["stops"]
        assert [s["route_order"] for s in stops] == [1, 2, 3]
        assert all(s["role"] == "assistant" for s in stops)
        assert all(s["partner_name"] == "Dana Lead" for s in stops)

    async def test_stale_commit_is_conflict(self, client, seeded):
        preview = (await _preview(client)).json()
        body = _commit_body(preview, seeded["lead"].id)
        first_day_only = {**body, "days": body["days"][:1]}
        await client.post(f"{API}/route-planner/commit", json=first_day_only)

        # Same lead again, different dates, but three jobs are now taken
        body["days"] = [
            {**day, "date": date}
            for day, date in zip(body["days"], ["2024-06-10", "2024-06-11", "2024-06-12"])
        ]
        response = await client.post(f"{API}/route-planner/commit", json=body)

        assert response.status_code == 409
        data = response.json()
        assert data["type"] == "assignment_conflict"
        assert data["job_ids"] == body["days"][0]["job_ids"]
        regions = (await client.get(f"{API}/route-planner/regions")).json()
        assert regions["total_unassigned"] == 5

    async def test_commit_unknown_job_is_conflict(self, client, seeded):
        missing = str(uuid4())
        response = await client.post(
            f"{API}/route-planner/commit",
            json={
                "lead_tech_id": str(seeded["lead"].id),
                "days": [{"date": "2024-06-03", "job_ids": [missing]}],
            },
        )

        assert response.status_code == 409
        assert response.json()["job_ids"] == [missing]

    async def test_commit_without_lead(self, client, seeded):
        preview = (await _preview(client)).json()
        body = _commit_body(preview, seeded["lead"].id)
        del body["lead_tech_id"]

        response = await client.post(f"{API}/route-planner/commit", json=body)

        assert response.status_code == 400

    async def test_commit_with_unknown_lead(self, client, seeded):
        preview = (await _preview(client)).json()

        response = await client.post(
            f"{API}/route-planner/commit", json=_commit_body(preview, uuid4())
        )

        assert response.status_code == 400
        regions = (await client.get(f"{API}/route-planner/regions")).json()
        assert regions["total_unassigned"] == 8

    async def test_commit_empty_plan(self, client, seeded):
        response = await client.post(
            f"{API}/route-planner/commit",
            json={"lead_tech_id": str(seeded["lead"].id), "days": []},
        )

        assert response.status_code == 200
        assert response.json() == {"assigned_count": 0}


class TestTechniciansAndJobs:
    async def test_list_technicians(self, client, seeded):
        response = await client.get(f"{API}/technicians/")

        assert [t["name"] for t in response.json()] == ["Dana Lead", "Sam Helper"]

    async def test_unknown_technician_route(self, client):
        response = await client.get(
            f"{API}/technicians/{uuid4()}/route", params={"date": "2024-06-03"}
        )

        assert response.status_code == 404

    async def test_job_status_lifecycle(self, client, seeded):
        job_id = str(seeded["sc"][0].id)

        response = await client.patch(
            f"{API}/jobs/{job_id}/status", json={"status": "in_progress"}
        )
        assert response.status_code == 422

        await client.post(
            f"{API}/route-planner/commit",
            json={
                "lead_tech_id": str(seeded["lead"].id),
                "days": [{"date": "2024-06-03", "job_ids": [job_id]}],
            },
        )
        response = await client.patch(
            f"{API}/jobs/{job_id}/status", json={"status": "completed"}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "completed"
        assert response.json()["completed_at"] is not None

    async def test_unknown_job(self, client):
        response = await client.get(f"{API}/jobs/{uuid4()}")

        assert response.status_code == 404

    async def test_patch_ticket_fields(self, client, seeded):
        job_id = str(seeded["ga"][0].id)

        response = await client.patch(
            f"{API}/jobs/{job_id}",
            json={"service_ticket_number": "T-4411", "description": "Replace filter"},
        )
        assert response.status_code == 200

        response = await client.patch(
            f"{API}/jobs/{job_id}", json={"description": "", "start_time": "08:30"}
        )
        data = response.json()
        assert data["service_ticket_number"] == "T-4411"
        assert data["description"] == "Replace filter"
        assert data["start_time"] == "08:30"

        stored = (await client.get(f"{API}/jobs/{job_id}")).json()
        assert stored["start_time"] == "08:30"

    async def test_patch_unknown_job(self, client):
        response = await client.patch(
            f"{API}/jobs/{uuid4()}", json={"description": "Replace filter"}
        )

        assert response.status_code == 404


class TestHealth:
    async def test_liveness(self, client):
        response = await client.get(f"{API}/health/live")

        assert response.status_code == 200

    @pytest.mark.parametrize("path", ["/health/metrics"])
    async def test_metrics_exposed(self, client, path):
        response = await client.get(f"{API}{path}")

        assert response.status_code == 200
        assert "route_commits_total" in response.text
