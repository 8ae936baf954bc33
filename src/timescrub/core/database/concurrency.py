"""Optimistic concurrency helpers.

Soft-deletable models map a ``version`` column as SQLAlchemy's
``version_id_col``, so a write racing another one fails at flush with
``StaleDataError``. Clients may also send back the version they read to
have a conflict reported before anything is written.
"""

from typing import Any

from timescrub.core.errors import ConflictError


def ensure_version(entity: Any, expected: int | None, resource: str) -> None:
    """Check a client-supplied version against the stored one.

    Args:
        entity: Loaded entity with a ``version`` attribute
        expected: Version the client read, or None to skip the check
        resource: Resource name used in the error

    Raises:
        ConflictError: If the versions differ
    """
    if expected is None or entity.version == expected:
        return
    raise ConflictError(
        f"{resource.replace('_', ' ').capitalize()} was modified by another request",
        error_code="stale_version",
        details={
            "resource": resource,
            "expected_version": expected,
            "current_version": entity.version,
        },
    )
