"""Customer administration routes."""

from fastapi import Query, status

from timescrub.api.dependencies import EntityId
from timescrub.core.auth.dependencies import AdminPrincipal
from timescrub.modules.customers import router
from timescrub.modules.customers.schemas import (
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
)
from timescrub.modules.customers.services import CustomerSvc


@router.get(
    "",
    response_model=list[CustomerResponse],
    summary="List customers",
    description="List the admin's company customers, ordered by name.",
)
async def list_customers(
    principal: AdminPrincipal,
    service: CustomerSvc,
    include_archived: bool = Query(False, description="Include archived customers"),
) -> list[CustomerResponse]:
    customers = await service.list_customers(principal, include_archived)
    return [CustomerResponse.model_validate(c) for c in customers]


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create customer",
)
async def create_customer(
    data: CustomerCreate,
    principal: AdminPrincipal,
    service: CustomerSvc,
) -> CustomerResponse:
    customer = await service.create_customer(principal, data)
    return CustomerResponse.model_validate(customer)


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    summary="Get customer",
    description="Get a customer by id. Archived customers are returned too.",
)
async def get_customer(
    customer_id: EntityId,
    principal: AdminPrincipal,
    service: CustomerSvc,
) -> CustomerResponse:
    customer = await service.get_customer(principal, customer_id)
    return CustomerResponse.model_validate(customer)


@router.put(
    "/{customer_id}",
    response_model=CustomerResponse,
    summary="Update customer",
)
async def update_customer(
    customer_id: EntityId,
    data: CustomerUpdate,
    principal: AdminPrincipal,
    service: CustomerSvc,
) -> CustomerResponse:
    customer = await service.update_customer(principal, customer_id, data)
    return CustomerResponse.model_validate(customer)


@router.delete(
    "/{customer_id}",
    response_model=CustomerResponse,
    summary="Archive customer",
)
async def archive_customer(
    customer_id: EntityId,
    principal: AdminPrincipal,
    service: CustomerSvc,
) -> CustomerResponse:
    customer = await service.archive_customer(principal, customer_id)
    return CustomerResponse.model_validate(customer)


@router.post(
    "/{customer_id}/restore",
    response_model=CustomerResponse,
    summary="Restore customer",
)
async def restore_customer(
    customer_id: EntityId,
    principal: AdminPrincipal,
    service: CustomerSvc,
) -> CustomerResponse:
    customer = await service.restore_customer(principal, customer_id)
    return CustomerResponse.model_validate(customer)
