"""JSON-safe snapshots of model rows for audit metadata."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from sqlalchemy import inspect


# Never written into an audit entry
SENSITIVE_FIELDS = frozenset({"password_hash"})


def serialize_value(value: Any) -> Any:
    """Convert a column value to a JSON-serializable form.

    Args:
        value: Value to serialize

    Returns:
        JSON-serializable value
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [serialize_value(v) for v in value]
    return value


def snapshot(
    entity: Any,
    exclude: Iterable[str] = (),
) -> dict[str, Any]:
    """Dump an entity's mapped columns to a JSON-safe dict.

    Keys are the attribute names (``metadata_`` style renames are kept as
    the Python name). Relationships are not followed. The entity must be
    fully loaded: snapshotting an expired row would trigger lazy IO.

    Args:
        entity: SQLAlchemy model instance
        exclude: Extra attribute names to leave out

    Returns:
        Mapping of attribute name to serialized value
    """
    skipped = SENSITIVE_FIELDS | set(exclude)
    mapper = inspect(type(entity))
    return {
        attr.key: serialize_value(getattr(entity, attr.key))
        for attr in mapper.column_attrs
        if attr.key not in skipped
    }
