"""Job location repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from timescrub.api.dependencies import DBSession
from timescrub.core.lifecycle import apply_visibility
from timescrub.modules.locations.models import JobLocation


class JobLocationRepository:
    """Repository for JobLocation database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, location: JobLocation) -> JobLocation:
        self.session.add(location)
        await self.session.flush()
        await self.session.refresh(location)
        return location

    async def get_by_id(self, location_id: int) -> JobLocation | None:
        """Get a location by ID with its customer, archived or not."""
        stmt = select(JobLocation).where(JobLocation.id == location_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_customer(
        self,
        customer_id: int,
        include_archived: bool = False,
    ) -> list[JobLocation]:
        """List a customer's locations ordered by name."""
        stmt = select(JobLocation).where(JobLocation.customer_id == customer_id)
        stmt = apply_visibility(stmt, JobLocation, include_archived)
        result = await self.session.execute(stmt.order_by(JobLocation.name, JobLocation.id))
        return list(result.scalars().all())

    async def update(self, location: JobLocation) -> JobLocation:
        await self.session.flush()
        await self.session.refresh(location)
        return location


JobLocationRepo = Annotated[JobLocationRepository, Depends(JobLocationRepository)]
