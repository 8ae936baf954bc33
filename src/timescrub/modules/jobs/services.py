"""Job service for business logic."""

from typing import Annotated

import structlog
from fastapi import Depends

from timescrub.api.dependencies import DBSession
from timescrub.core.audit.actions import ChangeKind, EntityType
from timescrub.core.audit.serialization import snapshot
from timescrub.core.audit.service import AuditRecorder
from timescrub.core.auth.schemas import Principal
from timescrub.core.database.concurrency import ensure_version
from timescrub.core.database.session import transaction
from timescrub.core.errors import ValidationError
from timescrub.core.lifecycle import is_archived, resolve_include_archived
from timescrub.core.lifecycle.service import LifecycleService
from timescrub.core.permissions.guard import require_role, require_tenant_ownership
from timescrub.core.permissions.roles import Role
from timescrub.modules.customers.models import Customer
from timescrub.modules.customers.repos import CustomerRepository
from timescrub.modules.jobs.models import Job
from timescrub.modules.jobs.repos import JobRepository
from timescrub.modules.jobs.schemas import JobCreate, JobUpdate
from timescrub.modules.locations.models import JobLocation
from timescrub.modules.locations.repos import JobLocationRepository


logger = structlog.get_logger()


class JobService:
    """Service for job management.

    A job references a customer and a location. Both must belong to the
    principal's company, the location must belong to the customer, and
    neither may be archived when a job is pointed at it.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = JobRepository(db)
        self.customer_repo = CustomerRepository(db)
        self.location_repo = JobLocationRepository(db)
        self.recorder = AuditRecorder(db)
        self.lifecycle = LifecycleService(db, self.recorder)

    async def get_job(self, principal: Principal, job_id: int) -> Job:
        """Get a job of the principal's company, archived or not.

        Raises:
            NotFoundError: If missing, or if the job or either parent is foreign
        """
        job = await self.repo.get_by_id(job_id)
        return require_tenant_ownership(principal, job, "job", job_id)

    async def list_active_jobs(self, principal: Principal) -> list[Job]:
        """List the jobs employees can log time against. Never includes archived jobs."""
        return await self.repo.list_by_company(principal.company_id, include_archived=False)

    async def list_jobs(self, principal: Principal, include_archived: bool = False) -> list[Job]:
        require_role(principal, Role.ADMIN)
        return await self.repo.list_by_company(
            principal.company_id,
            include_archived=resolve_include_archived(principal, include_archived),
        )

    async def create_job(self, principal: Principal, data: JobCreate) -> Job:
        """Create a job.

        Raises:
            NotFoundError: If the customer or location is missing or foreign
            ValidationError: If the location is not the customer's, or a parent is archived
        """
        require_role(principal, Role.ADMIN)
        customer, location = await self._resolve_parents(
            principal, data.customer_id, data.location_id
        )

        async with transaction(self.db):
            job = await self.repo.create(
                Job(
                    company_id=principal.company_id,
                    customer=customer,
                    location=location,
                    name=data.name,
                    job_note=data.job_note,
                )
            )
            await self.recorder.record_change(
                principal,
                EntityType.JOB,
                ChangeKind.CREATED,
                job.id,
                before=None,
                after=snapshot(job),
            )

        logger.info("job_created", job_id=job.id, customer_id=customer.id, location_id=location.id)
        return job

    async def update_job(self, principal: Principal, job_id: int, data: JobUpdate) -> Job:
        """Update a job, re-checking its parents when either changes.

        Raises:
            NotFoundError: If the job, or a newly referenced parent, is missing or foreign
            ValidationError: If the resulting location is not the customer's
            ConflictError: If the client's version is stale
        """
        require_role(principal, Role.ADMIN)
        job = await self.get_job(principal, job_id)
        ensure_version(job, data.version, "job")

        changes = data.model_dump(exclude_unset=True, exclude={"version"})
        customer_id = changes.pop("customer_id", job.customer_id)
        location_id = changes.pop("location_id", job.location_id)
        reparent = customer_id != job.customer_id or location_id != job.location_id
        if reparent:
            customer, location = await self._resolve_parents(
                principal, customer_id, location_id, current=job
            )

        before = snapshot(job)
        async with transaction(self.db):
            for field, value in changes.items():
                setattr(job, field, value)
            if reparent:
                job.customer = customer
                job.location = location
            job = await self.repo.update(job)
            await self.recorder.record_change(
                principal,
                EntityType.JOB,
                ChangeKind.UPDATED,
                job.id,
                before=before,
                after=snapshot(job),
            )

        logger.info("job_updated", job_id=job.id, reparented=reparent)
        return job

    async def archive_job(self, principal: Principal, job_id: int) -> Job:
        require_role(principal, Role.ADMIN)
        job = await self.get_job(principal, job_id)
        job = await self.lifecycle.archive(principal, job, EntityType.JOB)
        return await self.repo.reload(job.id)

    async def restore_job(self, principal: Principal, job_id: int) -> Job:
        require_role(principal, Role.ADMIN)
        job = await self.get_job(principal, job_id)
        job = await self.lifecycle.restore(principal, job, EntityType.JOB)
        return await self.repo.reload(job.id)

    async def _resolve_parents(
        self,
        principal: Principal,
        customer_id: int,
        location_id: int,
        current: Job | None = None,
    ) -> tuple[Customer, JobLocation]:
        """Load and check the parents a job is being attached to.

        Archived parents are refused only when newly assigned; a job keeps an
        archived parent it already has.
        """
        customer = require_tenant_ownership(
            principal,
            await self.customer_repo.get_by_id(customer_id),
            "customer",
            customer_id,
        )
        location = require_tenant_ownership(
            principal,
            await self.location_repo.get_by_id(location_id),
            "location",
            location_id,
        )

        if location.customer_id != customer.id:
            raise ValidationError(
                "Location does not belong to this customer.",
                error_code="location_customer_mismatch",
                details={"customer_id": customer.id, "location_id": location.id},
            )
        if is_archived(customer) and (current is None or current.customer_id != customer.id):
            raise ValidationError(
                "Cannot assign a job to an archived customer.",
                error_code="customer_archived",
                details={"customer_id": customer.id},
            )
        if is_archived(location) and (current is None or current.location_id != location.id):
            raise ValidationError(
                "Cannot assign a job to an archived location.",
                error_code="location_archived",
                details={"location_id": location.id},
            )
        return customer, location


JobSvc = Annotated[JobService, Depends(JobService)]
