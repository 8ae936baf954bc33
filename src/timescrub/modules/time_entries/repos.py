"""Time entry repository for database operations."""

from datetime import datetime
from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from timescrub.api.dependencies import DBSession
from timescrub.modules.time_entries.models import TimeEntry


class TimeEntryRepository:
    """Repository for TimeEntry database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, entry: TimeEntry) -> TimeEntry:
        """Insert an entry and read it back with its job and employee."""
        self.session.add(entry)
        await self.session.flush()
        stmt = (
            select(TimeEntry)
            .where(TimeEntry.id == entry.id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def list_for_company(
        self,
        company_id: int,
        employee_id: int | None = None,
        start_from: datetime | None = None,
        start_to: datetime | None = None,
    ) -> list[TimeEntry]:
        """List a company's entries, newest start first.

        Args:
            company_id: The company's id
            employee_id: Only entries of this employee
            start_from: Only entries starting at or after this time
            start_to: Only entries starting at or before this time
        """
        stmt = select(TimeEntry).where(TimeEntry.company_id == company_id)
        if employee_id is not None:
            stmt = stmt.where(TimeEntry.employee_id == employee_id)
        if start_from is not None:
            stmt = stmt.where(TimeEntry.start >= start_from)
        if start_to is not None:
            stmt = stmt.where(TimeEntry.start <= start_to)
        result = await self.session.execute(
            stmt.order_by(TimeEntry.start.desc(), TimeEntry.id.desc())
        )
        return list(result.scalars().all())


TimeEntryRepo = Annotated[TimeEntryRepository, Depends(TimeEntryRepository)]
