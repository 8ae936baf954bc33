"""Time entry routes."""

from datetime import datetime

from fastapi import Query, status

from timescrub.core.auth.dependencies import CurrentPrincipal
from timescrub.core.constants import MAX_INT_ID
from timescrub.modules.time_entries import router
from timescrub.modules.time_entries.schemas import TimeEntryCreate, TimeEntryResponse
from timescrub.modules.time_entries.services import TimeEntrySvc


@router.post(
    "",
    response_model=TimeEntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Log time",
    description="Log a block of time against an active job for the authenticated employee.",
)
async def log_time(
    data: TimeEntryCreate,
    principal: CurrentPrincipal,
    service: TimeEntrySvc,
) -> TimeEntryResponse:
    entry = await service.log_time(principal, data)
    return TimeEntryResponse.model_validate(entry)


@router.get(
    "",
    response_model=list[TimeEntryResponse],
    summary="List time entries",
    description=(
        "Entries ordered by start, newest first. Employees only see their own; "
        "admins may filter by employee_id."
    ),
)
async def list_time_entries(
    principal: CurrentPrincipal,
    service: TimeEntrySvc,
    start_from: datetime | None = Query(None, alias="from", description="Earliest start"),
    start_to: datetime | None = Query(None, alias="to", description="Latest start"),
    employee_id: int | None = Query(
        None, ge=1, le=MAX_INT_ID, description="Admins only: filter by employee"
    ),
) -> list[TimeEntryResponse]:
    entries = await service.list_entries(principal, start_from, start_to, employee_id)
    return [TimeEntryResponse.model_validate(e) for e in entries]
