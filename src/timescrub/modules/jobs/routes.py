"""Job routes: the employee job list and job administration."""

from fastapi import Query, status

from timescrub.api.dependencies import EntityId
from timescrub.core.auth.dependencies import AdminPrincipal, CurrentPrincipal
from timescrub.modules.jobs import router
from timescrub.modules.jobs.schemas import JobCreate, JobResponse, JobUpdate
from timescrub.modules.jobs.services import JobSvc


@router.get(
    "/jobs",
    response_model=list[JobResponse],
    summary="List active jobs",
    description="Active jobs of the employee's company with customer and location.",
)
async def list_active_jobs(
    principal: CurrentPrincipal,
    service: JobSvc,
) -> list[JobResponse]:
    jobs = await service.list_active_jobs(principal)
    return [JobResponse.model_validate(j) for j in jobs]


# ============================================================
# Admin Routes
# ============================================================


@router.get(
    "/admin/jobs",
    response_model=list[JobResponse],
    summary="List jobs",
)
async def list_jobs(
    principal: AdminPrincipal,
    service: JobSvc,
    include_archived: bool = Query(False, description="Include archived jobs"),
) -> list[JobResponse]:
    jobs = await service.list_jobs(principal, include_archived)
    return [JobResponse.model_validate(j) for j in jobs]


@router.post(
    "/admin/jobs",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create job",
)
async def create_job(
    data: JobCreate,
    principal: AdminPrincipal,
    service: JobSvc,
) -> JobResponse:
    job = await service.create_job(principal, data)
    return JobResponse.model_validate(job)


@router.put(
    "/admin/jobs/{job_id}",
    response_model=JobResponse,
    summary="Update job",
)
async def update_job(
    job_id: EntityId,
    data: JobUpdate,
    principal: AdminPrincipal,
    service: JobSvc,
) -> JobResponse:
    job = await service.update_job(principal, job_id, data)
    return JobResponse.model_validate(job)


@router.delete(
    "/admin/jobs/{job_id}",
    response_model=JobResponse,
    summary="Archive job",
)
async def archive_job(
    job_id: EntityId,
    principal: AdminPrincipal,
    service: JobSvc,
) -> JobResponse:
    job = await service.archive_job(principal, job_id)
    return JobResponse.model_validate(job)


@router.post(
    "/admin/jobs/{job_id}/restore",
    response_model=JobResponse,
    summary="Restore job",
)
async def restore_job(
    job_id: EntityId,
    principal: AdminPrincipal,
    service: JobSvc,
) -> JobResponse:
    job = await service.restore_job(principal, job_id)
    return JobResponse.model_validate(job)
