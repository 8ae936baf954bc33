"""Soft-delete lifecycle shared by employees, customers, locations and jobs."""

from timescrub.core.lifecycle.soft_delete import (
    LifecycleState,
    apply_visibility,
    archive,
    is_archived,
    resolve_include_archived,
    restore,
    state_of,
)


__all__ = [
    "LifecycleState",
    "apply_visibility",
    "archive",
    "is_archived",
    "resolve_include_archived",
    "restore",
    "state_of",
]
