"""Job location service for business logic."""

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
from timescrub.core.lifecycle import resolve_include_archived
from timescrub.core.lifecycle.service import LifecycleService
from timescrub.core.permissions.guard import require_role, require_tenant_ownership
from timescrub.core.permissions.roles import Role
from timescrub.modules.customers.repos import CustomerRepository
from timescrub.modules.locations.models import JobLocation
from timescrub.modules.locations.repos import JobLocationRepository
from timescrub.modules.locations.schemas import JobLocationCreate, JobLocationUpdate


logger = structlog.get_logger()


class JobLocationService:
    """Service for job location management.

    Ownership of a location is checked through its customer.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = JobLocationRepository(db)
        self.customer_repo = CustomerRepository(db)
        self.recorder = AuditRecorder(db)
        self.lifecycle = LifecycleService(db, self.recorder)

    async def get_location(self, principal: Principal, location_id: int) -> JobLocation:
        """Get a location of the principal's company, archived or not.

        Raises:
            NotFoundError: If missing or under another company's customer
        """
        location = await self.repo.get_by_id(location_id)
        return require_tenant_ownership(principal, location, "location", location_id)

    async def list_locations(
        self,
        principal: Principal,
        customer_id: int,
        include_archived: bool = False,
    ) -> list[JobLocation]:
        """List a customer's locations.

        Raises:
            NotFoundError: If the customer is missing or foreign
        """
        require_role(principal, Role.ADMIN)
        customer = await self.customer_repo.get_by_id(customer_id)
        require_tenant_ownership(principal, customer, "customer", customer_id)
        return await self.repo.list_by_customer(
            customer_id,
            include_archived=resolve_include_archived(principal, include_archived),
        )

    async def create_location(
        self,
        principal: Principal,
        customer_id: int,
        data: JobLocationCreate,
    ) -> JobLocation:
        require_role(principal, Role.ADMIN)
        customer = await self.customer_repo.get_by_id(customer_id)
        customer = require_tenant_ownership(principal, customer, "customer", customer_id)

        async with transaction(self.db):
            location = await self.repo.create(
                JobLocation(customer=customer, **data.model_dump())
            )
            await self.recorder.record_change(
                principal,
                EntityType.LOCATION,
                ChangeKind.CREATED,
                location.id,
                before=None,
                after=snapshot(location),
            )

        logger.info("location_created", location_id=location.id, customer_id=customer.id)
        return location

    async def update_location(
        self,
        principal: Principal,
        location_id: int,
        data: JobLocationUpdate,
    ) -> JobLocation:
        require_role(principal, Role.ADMIN)
        location = await self.get_location(principal, location_id)
        ensure_version(location, data.version, "location")

        changes = data.model_dump(exclude_unset=True, exclude={"version"})
        before = snapshot(location)
        async with transaction(self.db):
            for field, value in changes.items():
                setattr(location, field, value)
            location = await self.repo.update(location)
            await self.recorder.record_change(
                principal,
                EntityType.LOCATION,
                ChangeKind.UPDATED,
                location.id,
                before=before,
                after=snapshot(location),
            )

        logger.info("location_updated", location_id=location.id, fields=sorted(changes))
        return location

    async def archive_location(self, principal: Principal, location_id: int) -> JobLocation:
        require_role(principal, Role.ADMIN)
        location = await self.get_location(principal, location_id)
        return await self.lifecycle.archive(principal, location, EntityType.LOCATION)

    async def restore_location(self, principal: Principal, location_id: int) -> JobLocation:
        require_role(principal, Role.ADMIN)
        location = await self.get_location(principal, location_id)
        return await self.lifecycle.restore(principal, location, EntityType.LOCATION)


JobLocationSvc = Annotated[JobLocationService, Depends(JobLocationService)]
