"""Employee administration routes."""

from fastapi import Query, status

from timescrub.api.dependencies import EntityId
from timescrub.core.auth.dependencies import AdminPrincipal
from timescrub.modules.employees import router
from timescrub.modules.employees.schemas import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
)
from timescrub.modules.employees.services import EmployeeSvc


@router.get(
    "",
    response_model=list[EmployeeResponse],
    summary="List employees",
    description="List the employees of the admin's company, ordered by name.",
)
async def list_employees(
    principal: AdminPrincipal,
    service: EmployeeSvc,
    include_archived: bool = Query(False, description="Include archived employees"),
) -> list[EmployeeResponse]:
    employees = await service.list_employees(principal, include_archived)
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create employee",
    description="Create an employee in the admin's company. Emails are unique across companies.",
)
async def create_employee(
    data: EmployeeCreate,
    principal: AdminPrincipal,
    service: EmployeeSvc,
) -> EmployeeResponse:
    employee = await service.create_employee(principal, data)
    return EmployeeResponse.model_validate(employee)


@router.put(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Update employee",
)
async def update_employee(
    employee_id: EntityId,
    data: EmployeeUpdate,
    principal: AdminPrincipal,
    service: EmployeeSvc,
) -> EmployeeResponse:
    employee = await service.update_employee(principal, employee_id, data)
    return EmployeeResponse.model_validate(employee)


@router.delete(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Archive employee",
    description="Archive an employee. Archived employees cannot log in.",
)
async def archive_employee(
    employee_id: EntityId,
    principal: AdminPrincipal,
    service: EmployeeSvc,
) -> EmployeeResponse:
    employee = await service.archive_employee(principal, employee_id)
    return EmployeeResponse.model_validate(employee)


@router.post(
    "/{employee_id}/restore",
    response_model=EmployeeResponse,
    summary="Restore employee",
)
async def restore_employee(
    employee_id: EntityId,
    principal: AdminPrincipal,
    service: EmployeeSvc,
) -> EmployeeResponse:
    employee = await service.restore_employee(principal, employee_id)
    return EmployeeResponse.model_validate(employee)
