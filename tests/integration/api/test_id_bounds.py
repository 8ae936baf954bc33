"""Integration tests for ids outside the integer column range.

Such ids are rejected as validation errors before any query runs; ids in
range that name nothing are plain 404s.
"""

from datetime import UTC, datetime, timedelta

import pytest
from httpx import AsyncClient

from timescrub.core.constants import MAX_INT_ID
from timescrub.modules.customers.models import Customer
from timescrub.modules.jobs.models import Job
from timescrub.modules.locations.models import JobLocation


pytestmark = pytest.mark.integration

HUGE_ID = 2**63


def span() -> dict:
    start = datetime(2025, 2, 1, 8, tzinfo=UTC)
    return {"start": start.isoformat(), "end": (start + timedelta(hours=1)).isoformat()}


class TestPathIds:
    @pytest.mark.parametrize(
        "path",
        [
            f"/api/v1/admin/customers/{HUGE_ID}",
            f"/api/v1/admin/customers/{MAX_INT_ID + 1}",
            f"/api/v1/admin/customers/{HUGE_ID}/locations",
            "/api/v1/admin/customers/0",
            "/api/v1/admin/customers/-1",
        ],
    )
    async def test_out_of_range_is_400(self, client: AsyncClient, path: str, admin_headers):
        response = await client.get(path, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "validation_error"

    @pytest.mark.parametrize(
        "method,path",
        [
            ("PUT", f"/api/v1/admin/jobs/{HUGE_ID}"),
            ("DELETE", f"/api/v1/admin/jobs/{HUGE_ID}"),
            ("POST", f"/api/v1/admin/jobs/{HUGE_ID}/restore"),
            ("DELETE", f"/api/v1/admin/employees/{HUGE_ID}"),
            ("POST", f"/api/v1/admin/locations/{HUGE_ID}/restore"),
        ],
    )
    async def test_out_of_range_mutation_is_400(
        self, client: AsyncClient, method: str, path: str, admin_headers
    ):
        response = await client.request(method, path, json={}, headers=admin_headers)

        assert response.status_code == 400

    async def test_largest_id_is_404(self, client: AsyncClient, admin_headers):
        response = await client.get(
            f"/api/v1/admin/customers/{MAX_INT_ID}", headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["code"] == "not_found"


class TestBodyIds:
    async def test_time_entry_job_id_out_of_range(
        self, client: AsyncClient, employee_headers
    ):
        response = await client.post(
            "/api/v1/time-entries", json={"job_id": HUGE_ID, **span()}, headers=employee_headers
        )

        assert response.status_code == 400

    async def test_time_entry_duration_out_of_range(
        self, client: AsyncClient, job_a: Job, employee_headers
    ):
        response = await client.post(
            "/api/v1/time-entries",
            json={"job_id": job_a.id, "duration_ms": HUGE_ID, **span()},
            headers=employee_headers,
        )

        assert response.status_code == 400

    async def test_time_entry_missing_job_in_range_is_404(
        self, client: AsyncClient, employee_headers
    ):
        response = await client.post(
            "/api/v1/time-entries", json={"job_id": MAX_INT_ID, **span()}, headers=employee_headers
        )

        assert response.status_code == 404

    async def test_job_parent_ids_out_of_range(
        self,
        client: AsyncClient,
        customer_a: Customer,
        location_a: JobLocation,
        job_a: Job,
        admin_headers,
    ):
        created = await client.post(
            "/api/v1/admin/jobs",
            json={"name": "Overflow", "customer_id": HUGE_ID, "location_id": location_a.id},
            headers=admin_headers,
        )
        updated = await client.put(
            f"/api/v1/admin/jobs/{job_a.id}",
            json={"location_id": HUGE_ID},
            headers=admin_headers,
        )

        assert created.status_code == 400
        assert updated.status_code == 400


class TestQueryIds:
    async def test_time_entry_employee_filter_out_of_range(
        self, client: AsyncClient, admin_headers
    ):
        response = await client.get(
            "/api/v1/time-entries", params={"employee_id": HUGE_ID}, headers=admin_headers
        )

        assert response.status_code == 400

    async def test_audit_log_filters_out_of_range(self, client: AsyncClient, admin_headers):
        by_entity = await client.get(
            "/api/v1/admin/audit-log", params={"entity_id": HUGE_ID}, headers=admin_headers
        )
        by_offset = await client.get(
            "/api/v1/admin/audit-log", params={"offset": HUGE_ID}, headers=admin_headers
        )

        assert by_entity.status_code == 400
        assert by_offset.status_code == 400
