"""Archive and restore with their audit events."""

from typing import Any, TypeVar

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from timescrub.core.audit.actions import ChangeKind, EntityType
from timescrub.core.audit.serialization import snapshot
from timescrub.core.audit.service import AuditRecorder
from timescrub.core.auth.schemas import Principal
from timescrub.core.database.session import transaction
from timescrub.core.lifecycle import soft_delete
from timescrub.core.permissions.guard import require_role
from timescrub.core.permissions.roles import Role


log = structlog.get_logger()

E = TypeVar("E")


class LifecycleService:
    """Applies soft-delete transitions and records them.

    Callers load the entity and check tenant ownership first. The
    transition and its audit entry are flushed together, and a failure in
    either rolls both back.
    """

    def __init__(self, session: AsyncSession, recorder: AuditRecorder | None = None) -> None:
        self.session = session
        self.recorder = recorder or AuditRecorder(session)

    async def archive(self, principal: Principal, entity: E, entity_type: EntityType) -> E:
        """Archive an entity on behalf of an admin.

        Archiving an already archived entity changes nothing but is still
        recorded, with identical before and after snapshots.
        """
        return await self._transition(principal, entity, entity_type, ChangeKind.DELETED)

    async def restore(self, principal: Principal, entity: E, entity_type: EntityType) -> E:
        """Restore an archived entity on behalf of an admin."""
        return await self._transition(principal, entity, entity_type, ChangeKind.RESTORED)

    async def _transition(
        self,
        principal: Principal,
        entity: Any,
        entity_type: EntityType,
        change: ChangeKind,
    ) -> Any:
        require_role(principal, Role.ADMIN)
        before = snapshot(entity)

        async with transaction(self.session):
            if change == ChangeKind.DELETED:
                changed = soft_delete.archive(entity, principal.employee_id)
            else:
                changed = soft_delete.restore(entity)

            if changed:
                await self.session.flush()
                await self.session.refresh(entity)

            await self.recorder.record_change(
                principal,
                entity_type,
                change,
                entity.id,
                before=before,
                after=snapshot(entity),
            )

        log.info(
            "entity_archived" if change == ChangeKind.DELETED else "entity_restored",
            entity_type=str(entity_type),
            entity_id=entity.id,
            changed=changed,
        )
        return entity
