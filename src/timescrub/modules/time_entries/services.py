"""Time entry service for business logic."""

from datetime import datetime
from typing import Annotated

import structlog
from fastapi import Depends

from timescrub.api.dependencies import DBSession
from timescrub.core.auth.schemas import Principal
from timescrub.core.errors import NotFoundError
from timescrub.core.lifecycle import is_archived
from timescrub.core.permissions.guard import (
    require_tenant_ownership,
    scope_time_entry_employee,
)
from timescrub.modules.jobs.repos import JobRepository
from timescrub.modules.time_entries.models import TimeEntry
from timescrub.modules.time_entries.repos import TimeEntryRepository
from timescrub.modules.time_entries.schemas import TimeEntryCreate, to_utc


logger = structlog.get_logger()


class TimeEntryService:
    """Service for logging and listing time.

    Entries are always logged for the principal. Listing is limited to
    the principal's own entries unless they are an admin.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = TimeEntryRepository(db)
        self.job_repo = JobRepository(db)

    async def log_time(self, principal: Principal, data: TimeEntryCreate) -> TimeEntry:
        """Log a time entry for the principal.

        Raises:
            NotFoundError: If the job is missing, archived or in another company
        """
        job = require_tenant_ownership(
            principal,
            await self.job_repo.get_by_id(data.job_id),
            "job",
            data.job_id,
        )
        if is_archived(job):
            raise NotFoundError("Job not found", resource="job", resource_id=str(job.id))

        entry = await self.repo.create(
            TimeEntry(
                company_id=principal.company_id,
                employee_id=principal.employee_id,
                job_id=job.id,
                start=data.start,
                end=data.end,
                duration_ms=data.resolved_duration_ms,
                time_note=data.time_note,
            )
        )

        logger.info(
            "time_entry_logged",
            time_entry_id=entry.id,
            job_id=job.id,
            duration_ms=entry.duration_ms,
        )
        return entry

    async def list_entries(
        self,
        principal: Principal,
        start_from: datetime | None = None,
        start_to: datetime | None = None,
        employee_id: int | None = None,
    ) -> list[TimeEntry]:
        """List time entries of the principal's company.

        Employees get only their own entries whatever ``employee_id`` says.
        """
        return await self.repo.list_for_company(
            principal.company_id,
            employee_id=scope_time_entry_employee(principal, employee_id),
            start_from=to_utc(start_from) if start_from else None,
            start_to=to_utc(start_to) if start_to else None,
        )


TimeEntrySvc = Annotated[TimeEntryService, Depends(TimeEntryService)]
