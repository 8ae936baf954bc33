"""Customer service for business logic."""

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
from timescrub.modules.customers.models import Customer
from timescrub.modules.customers.repos import CustomerRepository
from timescrub.modules.customers.schemas import CustomerCreate, CustomerUpdate


logger = structlog.get_logger()


class CustomerService:
    """Service for customer management operations."""

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = CustomerRepository(db)
        self.recorder = AuditRecorder(db)
        self.lifecycle = LifecycleService(db, self.recorder)

    async def get_customer(self, principal: Principal, customer_id: int) -> Customer:
        """Get a customer of the principal's company, archived or not.

        Raises:
            NotFoundError: If missing or in another company
        """
        customer = await self.repo.get_by_id(customer_id)
        return require_tenant_ownership(principal, customer, "customer", customer_id)

    async def list_customers(
        self,
        principal: Principal,
        include_archived: bool = False,
    ) -> list[Customer]:
        require_role(principal, Role.ADMIN)
        return await self.repo.list_by_company(
            principal.company_id,
            include_archived=resolve_include_archived(principal, include_archived),
        )

    async def create_customer(self, principal: Principal, data: CustomerCreate) -> Customer:
        require_role(principal, Role.ADMIN)

        async with transaction(self.db):
            customer = await self.repo.create(
                Customer(company_id=principal.company_id, **data.model_dump())
            )
            await self.recorder.record_change(
                principal,
                EntityType.CUSTOMER,
                ChangeKind.CREATED,
                customer.id,
                before=None,
                after=snapshot(customer),
            )

        logger.info("customer_created", customer_id=customer.id)
        return customer

    async def update_customer(
        self,
        principal: Principal,
        customer_id: int,
        data: CustomerUpdate,
    ) -> Customer:
        """Update a customer.

        Raises:
            NotFoundError: If missing or in another company
            ConflictError: If the client's version is stale
        """
        require_role(principal, Role.ADMIN)
        customer = await self.get_customer(principal, customer_id)
        ensure_version(customer, data.version, "customer")

        changes = data.model_dump(exclude_unset=True, exclude={"version"})
        before = snapshot(customer)
        async with transaction(self.db):
            for field, value in changes.items():
                setattr(customer, field, value)
            customer = await self.repo.update(customer)
            await self.recorder.record_change(
                principal,
                EntityType.CUSTOMER,
                ChangeKind.UPDATED,
                customer.id,
                before=before,
                after=snapshot(customer),
            )

        logger.info("customer_updated", customer_id=customer.id, fields=sorted(changes))
        return customer

    async def archive_customer(self, principal: Principal, customer_id: int) -> Customer:
        require_role(principal, Role.ADMIN)
        customer = await self.get_customer(principal, customer_id)
        return await self.lifecycle.archive(principal, customer, EntityType.CUSTOMER)

    async def restore_customer(self, principal: Principal, customer_id: int) -> Customer:
        require_role(principal, Role.ADMIN)
        customer = await self.get_customer(principal, customer_id)
        return await self.lifecycle.restore(principal, customer, EntityType.CUSTOMER)


CustomerSvc = Annotated[CustomerService, Depends(CustomerService)]
