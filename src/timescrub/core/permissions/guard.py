"""Access guard predicates.

Every protected operation passes through these checks in order:
authentication, role, then tenant ownership of each entity it touches.
They are plain functions over an explicit principal and keep no state.
"""

from typing import Protocol, TypeVar, assert_never

import structlog

from timescrub.core.auth.backend import verify_token
from timescrub.core.auth.schemas import Principal
from timescrub.core.errors import ForbiddenError, NotFoundError
from timescrub.core.permissions.roles import Role


logger = structlog.get_logger()


class TenantOwned(Protocol):
    """Anything that can report which companies own it.

    Entities that reach their company through parents (locations through
    the customer, jobs through customer and location) report every company
    on the path, and all of them must match the principal.
    """

    id: int

    def owning_company_ids(self) -> tuple[int, ...]: ...


T = TypeVar("T", bound=TenantOwned)


def require_authenticated(credential: str | None) -> Principal:
    """Resolve a presented credential to a principal.

    Raises:
        UnauthenticatedError: If no credential was presented
        InvalidCredentialError: If the credential does not verify
    """
    return verify_token(credential)


def role_satisfies(held: Role, required: Role) -> bool:
    """Check whether a held role meets the required one."""
    match required:
        case Role.ADMIN:
            return held == Role.ADMIN
        case Role.EMPLOYEE:
            return True
        case _:
            assert_never(required)


def require_role(principal: Principal, required: Role) -> Principal:
    """Require the principal to hold a role.

    Raises:
        ForbiddenError: If the principal's role is insufficient
    """
    if not role_satisfies(principal.role, required):
        logger.info(
            "role_denied",
            employee_id=principal.employee_id,
            role=str(principal.role),
            required_role=str(required),
        )
        raise ForbiddenError(
            "Admin access required" if required == Role.ADMIN else "Access forbidden",
            details={"required_role": str(required)},
        )
    return principal


def require_tenant_ownership(
    principal: Principal,
    entity: T | None,
    resource: str,
    resource_id: int | None = None,
) -> T:
    """Require an entity to exist and belong to the principal's company.

    Foreign entities are reported exactly like missing ones.

    Args:
        principal: The authenticated principal
        entity: The loaded entity, or None if the lookup found nothing
        resource: Resource name used in the error
        resource_id: Id that was looked up, for the error details

    Returns:
        The entity, narrowed to non-None

    Raises:
        NotFoundError: If the entity is missing or owned by another company
    """
    if entity is not None:
        owners = entity.owning_company_ids()
        if owners and all(cid == principal.company_id for cid in owners):
            return entity
        logger.info(
            "cross_tenant_access_masked",
            resource=resource,
            resource_id=entity.id,
            company_id=principal.company_id,
        )

    if resource_id is None and entity is not None:
        resource_id = entity.id
    raise NotFoundError(
        f"{resource.replace('_', ' ').capitalize()} not found",
        resource=resource,
        resource_id=str(resource_id) if resource_id is not None else None,
    )


def scope_time_entry_employee(
    principal: Principal, requested_employee_id: int | None
) -> int | None:
    """Decide whose time entries a principal may list.

    Employees only ever see their own entries, whatever they ask for.
    Admins get the filter they asked for, or every employee of their
    company when they give none.
    """
    match principal.role:
        case Role.ADMIN:
            return requested_employee_id
        case Role.EMPLOYEE:
            return principal.employee_id
        case _:
            assert_never(principal.role)
