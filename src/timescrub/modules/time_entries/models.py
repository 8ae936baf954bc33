"""Time entry database model."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from timescrub.core.constants import MAX_NOTE_LENGTH
from timescrub.core.database.base import Base, CompanyMixin, IntIdMixin


if TYPE_CHECKING:
    from timescrub.modules.employees.models import Employee
    from timescrub.modules.jobs.models import Job


class TimeEntry(Base, IntIdMixin, CompanyMixin):
    """A block of time an employee worked on a job.

    Entries are append-only: there is no update, archive or delete.
    """

    __tablename__ = "time_entries"
    __table_args__ = (
        Index("ix_time_entries_company_start", "company_id", "start"),
        Index("ix_time_entries_employee_start", "employee_id", "start"),
        Index("ix_time_entries_job_start", "job_id", "start"),
    )

    employee_id: Mapped[int] = mapped_column(ForeignKey("employees.id"), nullable=False)
    job_id: Mapped[int] = mapped_column(ForeignKey("jobs.id"), nullable=False)
    start: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration_ms: Mapped[int] = mapped_column(BigInteger, nullable=False)
    time_note: Mapped[str | None] = mapped_column(String(MAX_NOTE_LENGTH), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    job: Mapped["Job"] = relationship(lazy="selectin")
    employee: Mapped["Employee"] = relationship(lazy="selectin")

    def owning_company_ids(self) -> tuple[int, ...]:
        return (self.company_id,)

    def __repr__(self) -> str:
        return f"<TimeEntry(id={self.id}, employee_id={self.employee_id}, job_id={self.job_id})>"
