"""Job location administration routes."""

from fastapi import Query, status

from timescrub.api.dependencies import EntityId
from timescrub.core.auth.dependencies import AdminPrincipal
from timescrub.modules.locations import router
from timescrub.modules.locations.schemas import (
    JobLocationCreate,
    JobLocationResponse,
    JobLocationUpdate,
)
from timescrub.modules.locations.services import JobLocationSvc


# ============================================================
# Customer-scoped routes
# ============================================================


@router.get(
    "/customers/{customer_id}/locations",
    response_model=list[JobLocationResponse],
    summary="List customer locations",
)
async def list_locations(
    customer_id: EntityId,
    principal: AdminPrincipal,
    service: JobLocationSvc,
    include_archived: bool = Query(False, description="Include archived locations"),
) -> list[JobLocationResponse]:
    locations = await service.list_locations(principal, customer_id, include_archived)
    return [JobLocationResponse.model_validate(loc) for loc in locations]


@router.post(
    "/customers/{customer_id}/locations",
    response_model=JobLocationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create location",
)
async def create_location(
    customer_id: EntityId,
    data: JobLocationCreate,
    principal: AdminPrincipal,
    service: JobLocationSvc,
) -> JobLocationResponse:
    location = await service.create_location(principal, customer_id, data)
    return JobLocationResponse.model_validate(location)


# ============================================================
# Location routes
# ============================================================


@router.put(
    "/locations/{location_id}",
    response_model=JobLocationResponse,
    summary="Update location",
)
async def update_location(
    location_id: EntityId,
    data: JobLocationUpdate,
    principal: AdminPrincipal,
    service: JobLocationSvc,
) -> JobLocationResponse:
    location = await service.update_location(principal, location_id, data)
    return JobLocationResponse.model_validate(location)


@router.delete(
    "/locations/{location_id}",
    response_model=JobLocationResponse,
    summary="Archive location",
)
async def archive_location(
    location_id: EntityId,
    principal: AdminPrincipal,
    service: JobLocationSvc,
) -> JobLocationResponse:
    location = await service.archive_location(principal, location_id)
    return JobLocationResponse.model_validate(location)


@router.post(
    "/locations/{location_id}/restore",
    response_model=JobLocationResponse,
    summary="Restore location",
)
async def restore_location(
    location_id: EntityId,
    principal: AdminPrincipal,
    service: JobLocationSvc,
) -> JobLocationResponse:
    location = await service.restore_location(principal, location_id)
    return JobLocationResponse.model_validate(location)
