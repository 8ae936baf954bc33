"""Company database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from timescrub.core.constants import (
    DEFAULT_COUNTRY,
    MAX_ADDRESS_LENGTH,
    MAX_COUNTRY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_LENGTH,
)
from timescrub.core.database.base import Base, IntIdMixin, TimestampMixin


class Company(Base, IntIdMixin, TimestampMixin):
    """A tenant. Every other record belongs to exactly one company.

    Companies are created by operators (see ``scripts/seed.py``) and are
    read-only through the API.
    """

    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    address_line1: Mapped[str] = mapped_column(String(MAX_ADDRESS_LENGTH), nullable=False)
    address_line2: Mapped[str | None] = mapped_column(
        String(MAX_ADDRESS_LENGTH), nullable=True
    )
    city: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    state: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(MAX_PHONE_LENGTH), nullable=False)
    country: Mapped[str] = mapped_column(
        String(MAX_COUNTRY_LENGTH), default=DEFAULT_COUNTRY, nullable=False
    )
    phone: Mapped[str | None] = mapped_column(String(MAX_PHONE_LENGTH), nullable=True)

    def owning_company_ids(self) -> tuple[int, ...]:
        return (self.id,)

    def __repr__(self) -> str:
        return f"<Company(id={self.id}, name={self.name})>"
