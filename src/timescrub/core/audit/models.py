"""Audit log database model.

Stores one immutable entry per state-changing admin operation: who did
what to which entity, and the entity before and after.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, DateTime, ForeignKey, Index, Integer, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from timescrub.core.constants import MAX_ACTION_LENGTH, MAX_ENTITY_TYPE_LENGTH
from timescrub.core.database.base import Base, CompanyMixin, IntIdMixin


if TYPE_CHECKING:
    from timescrub.modules.employees.models import Employee


def _utcnow() -> datetime:
    return datetime.now(UTC)


class AuditLog(Base, IntIdMixin, CompanyMixin):
    """Audit log entry for an administrative change.

    Rows are only ever inserted. Listing order is newest timestamp first,
    with the id breaking ties.

    Attributes:
        company_id: The company the change happened in
        employee_id: The employee who performed the change
        action: Action tag such as ``JOB_UPDATED``
        entity_type: Kind of entity affected (``EMPLOYEE``, ``CUSTOMER``, ...)
        entity_id: Id of the affected entity
        timestamp: When the change was recorded
        metadata_: ``{"before": ..., "after": ...}`` snapshots
    """

    __tablename__ = "audit_logs"
    __table_args__ = (
        Index("ix_audit_logs_entity", "entity_type", "entity_id"),
    )

    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id"),
        nullable=False,
        index=True,
    )

    action: Mapped[str] = mapped_column(
        String(MAX_ACTION_LENGTH),
        nullable=False,
    )
    entity_type: Mapped[str] = mapped_column(
        String(MAX_ENTITY_TYPE_LENGTH),
        nullable=False,
    )
    entity_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    metadata_: Mapped[dict[str, Any] | None] = mapped_column(
        "metadata",  # Column name in database
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=True,
    )

    employee: Mapped["Employee"] = relationship(lazy="selectin")

    def __repr__(self) -> str:
        return (
            f"<AuditLog(id={self.id}, action={self.action}, "
            f"entity_type={self.entity_type}, entity_id={self.entity_id})>"
        )
