"""Soft-delete state machine.

Employees, customers, job locations and jobs are never removed. They move
between two states::

    ACTIVE  --archive-->  ARCHIVED
    ARCHIVED --restore--> ACTIVE

A row is ARCHIVED exactly when ``deleted_at`` is set, and ``deleted_by``
then holds the id of the employee who archived it. Repeating a transition
leaves the row untouched.
"""

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any, Protocol, TypeVar

from sqlalchemy import Select

from timescrub.core.auth.schemas import Principal


class LifecycleState(StrEnum):
    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"


class SoftDeletable(Protocol):
    deleted_at: datetime | None
    deleted_by: int | None


S = TypeVar("S", bound=Select[Any])


def state_of(entity: SoftDeletable) -> LifecycleState:
    """Return the lifecycle state of an entity."""
    if entity.deleted_at is None:
        return LifecycleState.ACTIVE
    return LifecycleState.ARCHIVED


def is_archived(entity: SoftDeletable) -> bool:
    return state_of(entity) == LifecycleState.ARCHIVED


def archive(entity: SoftDeletable, actor_id: int, now: datetime | None = None) -> bool:
    """Move an entity to ARCHIVED.

    Args:
        entity: The entity to archive
        actor_id: Id of the employee archiving it
        now: Archive time, defaults to the current UTC time

    Returns:
        True if the state changed, False if it was already archived
    """
    if is_archived(entity):
        return False
    entity.deleted_at = now or datetime.now(UTC)
    entity.deleted_by = actor_id
    return True


def restore(entity: SoftDeletable) -> bool:
    """Move an entity back to ACTIVE.

    Returns:
        True if the state changed, False if it was already active
    """
    if not is_archived(entity):
        return False
    entity.deleted_at = None
    entity.deleted_by = None
    return True


def apply_visibility(stmt: S, model: Any, include_archived: bool) -> S:
    """Hide archived rows of ``model`` unless asked to include them."""
    if include_archived:
        return stmt
    return stmt.where(model.deleted_at.is_(None))


def resolve_include_archived(principal: Principal, requested: bool) -> bool:
    """Only admins may see archived rows in listings."""
    return requested and principal.is_admin
