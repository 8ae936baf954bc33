"""Integration tests for the audit trail of admin mutations."""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from timescrub.core.audit.models import AuditLog
from timescrub.modules.customers.models import Customer
from timescrub.modules.employees.models import Employee
from timescrub.modules.jobs.models import Job
from tests.factories import CustomerCreateFactory, EmployeeCreateFactory


pytestmark = pytest.mark.integration

AUDIT = "/api/v1/admin/audit-log"


async def audit_count(db: AsyncSession) -> int:
    return (await db.execute(select(func.count()).select_from(AuditLog))).scalar_one()


class TestOneEventPerMutation:
    async def test_customer_lifecycle(
        self, client: AsyncClient, db: AsyncSession, admin_a: Employee, admin_headers
    ):
        payload = CustomerCreateFactory.build(name="Bayou Services")
        created = await client.post(
            "/api/v1/admin/customers", json=payload.model_dump(mode="json"), headers=admin_headers
        )
        customer_id = created.json()["id"]
        assert await audit_count(db) == 1

        await client.put(
            f"/api/v1/admin/customers/{customer_id}",
            json={"contact_name": "Mark Dupree"},
            headers=admin_headers,
        )
        assert await audit_count(db) == 2

        await client.delete(f"/api/v1/admin/customers/{customer_id}", headers=admin_headers)
        assert await audit_count(db) == 3

        await client.post(f"/api/v1/admin/customers/{customer_id}/restore", headers=admin_headers)
        assert await audit_count(db) == 4

        response = await client.get(AUDIT, headers=admin_headers)

        assert response.status_code == 200
        entries = response.json()
        assert [e["action"] for e in entries] == [
            "CUSTOMER_RESTORED",
            "CUSTOMER_DELETED",
            "CUSTOMER_UPDATED",
            "CUSTOMER_CREATED",
        ]
        assert all(e["entity_type"] == "CUSTOMER" for e in entries)
        assert all(e["entity_id"] == customer_id for e in entries)
        assert all(e["employee"] == {"id": admin_a.id, "name": "Alice Admin"} for e in entries)

    async def test_create_metadata_has_no_before(self, client: AsyncClient, admin_headers):
        payload = CustomerCreateFactory.build(name="River Tech LLC")
        await client.post(
            "/api/v1/admin/customers", json=payload.model_dump(mode="json"), headers=admin_headers
        )

        entry = (await client.get(AUDIT, headers=admin_headers)).json()[0]

        assert entry["metadata"]["before"] is None
        assert entry["metadata"]["after"]["name"] == "River Tech LLC"

    async def test_update_metadata_before_and_after(
        self, client: AsyncClient, customer_a: Customer, admin_headers
    ):
        await client.put(
            f"/api/v1/admin/customers/{customer_a.id}",
            json={"name": "Acme Builders"},
            headers=admin_headers,
        )

        entry = (await client.get(AUDIT, headers=admin_headers)).json()[0]

        assert entry["metadata"]["before"]["name"] == "Acme Construction"
        assert entry["metadata"]["after"]["name"] == "Acme Builders"

    async def test_employee_audit_never_contains_password_hash(
        self, client: AsyncClient, admin_headers
    ):
        payload = EmployeeCreateFactory.build()
        await client.post(
            "/api/v1/admin/employees", json=payload.model_dump(mode="json"), headers=admin_headers
        )

        entry = (await client.get(AUDIT, headers=admin_headers)).json()[0]

        assert entry["action"] == "EMPLOYEE_CREATED"
        assert "password_hash" not in entry["metadata"]["after"]

    async def test_repeated_archive_still_recorded(
        self, client: AsyncClient, db: AsyncSession, job_a: Job, admin_headers
    ):
        await client.delete(f"/api/v1/admin/jobs/{job_a.id}", headers=admin_headers)
        await client.delete(f"/api/v1/admin/jobs/{job_a.id}", headers=admin_headers)

        entries = (await client.get(AUDIT, headers=admin_headers)).json()

        assert [e["action"] for e in entries] == ["JOB_DELETED", "JOB_DELETED"]
        assert entries[0]["metadata"]["before"] == entries[0]["metadata"]["after"]

    async def test_failed_mutation_not_recorded(
        self, client: AsyncClient, db: AsyncSession, customer_b: Customer, admin_headers
    ):
        await client.delete(f"/api/v1/admin/customers/{customer_b.id}", headers=admin_headers)

        assert await audit_count(db) == 0

    async def test_time_entries_not_audited(
        self, client: AsyncClient, db: AsyncSession, job_a: Job, employee_headers
    ):
        await client.post(
            "/api/v1/time-entries",
            json={
                "job_id": job_a.id,
                "start": "2025-02-01T08:00:00Z",
                "end": "2025-02-01T09:00:00Z",
            },
            headers=employee_headers,
        )

        assert await audit_count(db) == 0


class TestAuditLogListing:
    async def test_scoped_to_company(
        self,
        client: AsyncClient,
        customer_a: Customer,
        customer_b: Customer,
        admin_headers,
        admin_b_headers,
    ):
        await client.delete(f"/api/v1/admin/customers/{customer_a.id}", headers=admin_headers)

        response = await client.get(AUDIT, headers=admin_b_headers)

        assert response.json() == []

    async def test_filter_and_paginate(
        self,
        client: AsyncClient,
        customer_a: Customer,
        job_a: Job,
        admin_headers,
    ):
        await client.delete(f"/api/v1/admin/customers/{customer_a.id}", headers=admin_headers)
        await client.delete(f"/api/v1/admin/jobs/{job_a.id}", headers=admin_headers)
        await client.post(f"/api/v1/admin/jobs/{job_a.id}/restore", headers=admin_headers)

        jobs_only = await client.get(AUDIT, params={"entity_type": "JOB"}, headers=admin_headers)
        first_page = await client.get(AUDIT, params={"limit": 1}, headers=admin_headers)
        second_page = await client.get(
            AUDIT, params={"limit": 1, "offset": 1}, headers=admin_headers
        )

        assert [e["action"] for e in jobs_only.json()] == ["JOB_RESTORED", "JOB_DELETED"]
        assert [e["action"] for e in first_page.json()] == ["JOB_RESTORED"]
        assert [e["action"] for e in second_page.json()] == ["JOB_DELETED"]

    async def test_unknown_entity_type_is_400(self, client: AsyncClient, admin_headers):
        response = await client.get(AUDIT, params={"entity_type": "INVOICE"}, headers=admin_headers)

        assert response.status_code == 400
