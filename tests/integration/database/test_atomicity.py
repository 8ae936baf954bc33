"""Integration tests for all-or-nothing writes.

A mutation and its audit event land together or not at all.
"""

from unittest.mock import patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from timescrub.core.audit.models import AuditLog
from timescrub.core.audit.service import AuditRecorder
from timescrub.modules.customers.models import Customer
from timescrub.modules.customers.schemas import CustomerUpdate
from timescrub.modules.customers.services import CustomerService
from timescrub.modules.employees.models import Employee
from timescrub.modules.jobs.models import Job
from timescrub.modules.jobs.services import JobService
from tests.conftest import principal_for
from tests.factories import CustomerCreateFactory


pytestmark = pytest.mark.integration


async def count(db: AsyncSession, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar_one()


class TestAuditFailureRollsBack:
    async def test_create_rolled_back(self, db: AsyncSession, admin_a: Employee):
        principal = principal_for(admin_a)
        service = CustomerService(db)

        with patch.object(AuditRecorder, "record", side_effect=RuntimeError("audit down")):
            with pytest.raises(RuntimeError):
                await service.create_customer(principal, CustomerCreateFactory.build())

        assert await count(db, Customer) == 0
        assert await count(db, AuditLog) == 0

    async def test_update_rolled_back(
        self, db: AsyncSession, admin_a: Employee, customer_a: Customer
    ):
        principal = principal_for(admin_a)
        customer_id = customer_a.id
        service = CustomerService(db)

        with patch.object(AuditRecorder, "record", side_effect=RuntimeError("audit down")):
            with pytest.raises(RuntimeError):
                await service.update_customer(
                    principal, customer_id, CustomerUpdate(name="Renamed")
                )

        name = (
            await db.execute(select(Customer.name).where(Customer.id == customer_id))
        ).scalar_one()
        assert name == "Acme Construction"

    async def test_archive_rolled_back(self, db: AsyncSession, admin_a: Employee, job_a: Job):
        principal = principal_for(admin_a)
        job_id = job_a.id
        service = JobService(db)

        with patch.object(AuditRecorder, "record", side_effect=RuntimeError("audit down")):
            with pytest.raises(RuntimeError):
                await service.archive_job(principal, job_id)

        deleted_at = (
            await db.execute(select(Job.deleted_at).where(Job.id == job_id))
        ).scalar_one()
        assert deleted_at is None
        assert await count(db, AuditLog) == 0
