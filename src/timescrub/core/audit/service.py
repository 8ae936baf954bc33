"""Audit recorder for administrative changes.

Entries are written through the caller's session so that they commit or
roll back together with the change they describe.
"""

from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from timescrub.core.audit.actions import (
    AUDIT_ACTIONS,
    ChangeKind,
    EntityType,
    action_for,
)
from timescrub.core.audit.models import AuditLog
from timescrub.core.auth.schemas import Principal


log = structlog.get_logger()


class AuditRecorder:
    """Appends audit log entries inside the current transaction."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def record(
        self,
        company_id: int,
        actor_employee_id: int,
        action: str,
        entity_type: str,
        entity_id: int,
        metadata: dict[str, Any] | None = None,
    ) -> AuditLog:
        """Create an audit log entry.

        Args:
            company_id: Company the change belongs to
            actor_employee_id: Employee who made the change
            action: Action tag, one of ``AUDIT_ACTIONS``
            entity_type: Kind of entity changed
            entity_id: Id of the entity changed
            metadata: Additional context, usually before/after snapshots

        Returns:
            The flushed audit log entry

        Raises:
            ValueError: If the action is not a known tag
        """
        if action not in AUDIT_ACTIONS:
            raise ValueError(f"Unknown audit action: {action}")

        entry = AuditLog(
            company_id=company_id,
            employee_id=actor_employee_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            metadata_=metadata,
        )

        self.session.add(entry)
        await self.session.flush()

        log.info(
            "audit_log_recorded",
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            company_id=company_id,
            employee_id=actor_employee_id,
        )

        return entry

    async def record_change(
        self,
        principal: Principal,
        entity_type: EntityType,
        change: ChangeKind,
        entity_id: int,
        before: dict[str, Any] | None,
        after: dict[str, Any] | None,
    ) -> AuditLog:
        """Record a change with the standard before/after metadata.

        ``before`` is None for creations. Archive and restore calls that
        changed nothing still pass both snapshots, which are then equal.

        Example:
            await recorder.record_change(
                principal,
                EntityType.CUSTOMER,
                ChangeKind.UPDATED,
                customer.id,
                before=before,
                after=snapshot(customer),
            )
        """
        return await self.record(
            company_id=principal.company_id,
            actor_employee_id=principal.employee_id,
            action=action_for(entity_type, change),
            entity_type=str(entity_type),
            entity_id=entity_id,
            metadata={"before": before, "after": after},
        )
