"""Audit action vocabulary.

Actions are ``<ENTITY>_<CHANGE>`` tags, e.g. ``CUSTOMER_RESTORED``.
"""

from enum import StrEnum


class EntityType(StrEnum):
    """Kinds of entity whose changes are audited."""

    EMPLOYEE = "EMPLOYEE"
    CUSTOMER = "CUSTOMER"
    LOCATION = "LOCATION"
    JOB = "JOB"


class ChangeKind(StrEnum):
    """Kinds of state change an audit event can describe."""

    CREATED = "CREATED"
    UPDATED = "UPDATED"
    DELETED = "DELETED"
    RESTORED = "RESTORED"


def action_for(entity_type: EntityType, change: ChangeKind) -> str:
    """Build the action tag for an entity type and change kind."""
    return f"{entity_type}_{change}"


AUDIT_ACTIONS: frozenset[str] = frozenset(
    action_for(entity_type, change) for entity_type in EntityType for change in ChangeKind
)
