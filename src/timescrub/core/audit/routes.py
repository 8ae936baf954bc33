"""Audit log API routes."""

from fastapi import APIRouter, Query

from timescrub.config import settings
from timescrub.core.audit.actions import EntityType
from timescrub.core.audit.repos import AuditLogRepo
from timescrub.core.audit.schemas import AuditLogResponse
from timescrub.core.auth.dependencies import AdminPrincipal
from timescrub.core.constants import MAX_INT_ID, MAX_PAGE_SIZE


router = APIRouter(prefix="/admin/audit-log", tags=["audit"])


@router.get(
    "",
    response_model=list[AuditLogResponse],
    summary="List audit log",
    description="Audit entries of the admin's company, newest first, with the acting employee.",
)
async def list_audit_log(
    principal: AdminPrincipal,
    repo: AuditLogRepo,
    entity_type: EntityType | None = Query(None, description="Filter by entity type"),
    entity_id: int | None = Query(None, ge=1, le=MAX_INT_ID, description="Filter by entity id"),
    limit: int = Query(settings.audit_log_page_size, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0, le=MAX_INT_ID),
) -> list[AuditLogResponse]:
    entries = await repo.list_by_company(
        principal.company_id,
        entity_type=str(entity_type) if entity_type else None,
        entity_id=entity_id,
        limit=limit,
        offset=offset,
    )
    return [AuditLogResponse.model_validate(e) for e in entries]
