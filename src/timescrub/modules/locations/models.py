"""Job location database model."""

from typing import TYPE_CHECKING

from sqlalchemy import JSON, Boolean, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from timescrub.core.constants import (
    DEFAULT_COUNTRY,
    MAX_ADDRESS_LENGTH,
    MAX_COUNTRY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_LENGTH,
)
from timescrub.core.database.base import Base, IntIdMixin, SoftDeleteMixin, TimestampMixin


if TYPE_CHECKING:
    from timescrub.modules.customers.models import Customer


class JobLocation(Base, IntIdMixin, TimestampMixin, SoftDeleteMixin):
    """A site belonging to a customer.

    Locations carry no company column; they belong to the company of
    their customer.
    """

    __tablename__ = "job_locations"

    customer_id: Mapped[int] = mapped_column(
        ForeignKey("customers.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    name: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    address_line1: Mapped[str] = mapped_column(String(MAX_ADDRESS_LENGTH), nullable=False)
    address_line2: Mapped[str | None] = mapped_column(String(MAX_ADDRESS_LENGTH), nullable=True)
    city: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    state: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(MAX_PHONE_LENGTH), nullable=False)
    country: Mapped[str] = mapped_column(
        String(MAX_COUNTRY_LENGTH), default=DEFAULT_COUNTRY, nullable=False
    )

    # Site details
    location_type: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    internal_note: Mapped[str | None] = mapped_column(Text, nullable=True)
    access_instruction: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    is_primary: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    tags: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)

    version: Mapped[int] = mapped_column(Integer, nullable=False)

    customer: Mapped["Customer"] = relationship(lazy="selectin")

    __mapper_args__ = {"version_id_col": version}

    def owning_company_ids(self) -> tuple[int, ...]:
        return (self.customer.company_id,)

    def __repr__(self) -> str:
        return f"<JobLocation(id={self.id}, customer_id={self.customer_id}, name={self.name})>"
