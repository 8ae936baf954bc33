"""Job repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from timescrub.api.dependencies import DBSession
from timescrub.core.lifecycle import apply_visibility
from timescrub.modules.jobs.models import Job


class JobRepository:
    """Repository for Job database operations.

    Jobs are always loaded with their customer and location.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, job: Job) -> Job:
        self.session.add(job)
        await self.session.flush()
        return await self.reload(job.id)

    async def get_by_id(self, job_id: int) -> Job | None:
        """Get a job by ID, archived or not."""
        result = await self.session.execute(select(Job).where(Job.id == job_id))
        return result.scalar_one_or_none()

    async def reload(self, job_id: int) -> Job:
        """Re-read a job and its parents, overwriting what the session holds."""
        stmt = select(Job).where(Job.id == job_id).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def list_by_company(
        self,
        company_id: int,
        include_archived: bool = False,
    ) -> list[Job]:
        """List a company's jobs ordered by name."""
        stmt = select(Job).where(Job.company_id == company_id)
        stmt = apply_visibility(stmt, Job, include_archived)
        result = await self.session.execute(stmt.order_by(Job.name, Job.id))
        return list(result.scalars().all())

    async def update(self, job: Job) -> Job:
        await self.session.flush()
        return await self.reload(job.id)


JobRepo = Annotated[JobRepository, Depends(JobRepository)]
