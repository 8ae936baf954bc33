"""Audit log repository for read access."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from timescrub.api.dependencies import DBSession
from timescrub.core.audit.models import AuditLog
from timescrub.core.constants import DEFAULT_PAGE_SIZE


class AuditLogRepository:
    """Read-only queries over the audit log. Entries are written by AuditRecorder."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def list_by_company(
        self,
        company_id: int,
        entity_type: str | None = None,
        entity_id: int | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[AuditLog]:
        """List a company's audit entries, newest first.

        Args:
            company_id: The company's id
            entity_type: Only entries about this kind of entity
            entity_id: Only entries about this entity id
            limit: Maximum number of entries
            offset: Number of entries to skip

        Returns:
            Entries ordered by timestamp then id, both descending
        """
        stmt = select(AuditLog).where(AuditLog.company_id == company_id)
        if entity_type is not None:
            stmt = stmt.where(AuditLog.entity_type == entity_type)
        if entity_id is not None:
            stmt = stmt.where(AuditLog.entity_id == entity_id)
        stmt = (
            stmt.order_by(AuditLog.timestamp.desc(), AuditLog.id.desc())
            .offset(offset)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


AuditLogRepo = Annotated[AuditLogRepository, Depends(AuditLogRepository)]
