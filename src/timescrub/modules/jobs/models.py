"""Job database model."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from timescrub.core.constants import MAX_NAME_LENGTH, MAX_NOTE_LENGTH
from timescrub.core.database.base import (
    Base,
    CompanyMixin,
    IntIdMixin,
    SoftDeleteMixin,
    TimestampMixin,
)


if TYPE_CHECKING:
    from timescrub.modules.customers.models import Customer
    from timescrub.modules.locations.models import JobLocation


class Job(Base, IntIdMixin, TimestampMixin, CompanyMixin, SoftDeleteMixin):
    """A job done for a customer at one of that customer's locations.

    ``location.customer_id == customer_id`` holds for every row; it is
    checked on every write.
    """

    __tablename__ = "jobs"

    customer_id: Mapped[int] = mapped_column(
        ForeignKey("customers.id"),
        index=True,
        nullable=False,
    )
    location_id: Mapped[int] = mapped_column(
        ForeignKey("job_locations.id"),
        index=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    job_note: Mapped[str | None] = mapped_column(String(MAX_NOTE_LENGTH), nullable=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    customer: Mapped["Customer"] = relationship(lazy="selectin")
    location: Mapped["JobLocation"] = relationship(lazy="selectin")

    __mapper_args__ = {"version_id_col": version}

    def owning_company_ids(self) -> tuple[int, ...]:
        return (
            self.company_id,
            self.customer.company_id,
            self.location.customer.company_id,
        )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, name={self.name})>"
