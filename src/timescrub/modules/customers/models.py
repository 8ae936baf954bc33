"""Customer database model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from timescrub.core.constants import (
    DEFAULT_COUNTRY,
    MAX_ADDRESS_LENGTH,
    MAX_COUNTRY_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_LENGTH,
)
from timescrub.core.database.base import (
    Base,
    CompanyMixin,
    IntIdMixin,
    SoftDeleteMixin,
    TimestampMixin,
)


class Customer(Base, IntIdMixin, TimestampMixin, CompanyMixin, SoftDeleteMixin):
    """A client of the company.

    The business address is required. The mailing address is optional and
    only defaults its country.
    """

    __tablename__ = "customers"

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    contact_name: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    contact_email: Mapped[str | None] = mapped_column(String(MAX_EMAIL_LENGTH), nullable=True)
    contact_phone: Mapped[str | None] = mapped_column(String(MAX_PHONE_LENGTH), nullable=True)

    # Business address
    business_address_line1: Mapped[str] = mapped_column(
        String(MAX_ADDRESS_LENGTH), nullable=False
    )
    business_address_line2: Mapped[str | None] = mapped_column(
        String(MAX_ADDRESS_LENGTH), nullable=True
    )
    business_city: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    business_state: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    business_postal_code: Mapped[str] = mapped_column(String(MAX_PHONE_LENGTH), nullable=False)
    business_country: Mapped[str] = mapped_column(
        String(MAX_COUNTRY_LENGTH), default=DEFAULT_COUNTRY, nullable=False
    )

    # Mailing address
    mailing_address_line1: Mapped[str | None] = mapped_column(
        String(MAX_ADDRESS_LENGTH), nullable=True
    )
    mailing_address_line2: Mapped[str | None] = mapped_column(
        String(MAX_ADDRESS_LENGTH), nullable=True
    )
    mailing_city: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    mailing_state: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    mailing_postal_code: Mapped[str | None] = mapped_column(
        String(MAX_PHONE_LENGTH), nullable=True
    )
    mailing_country: Mapped[str | None] = mapped_column(
        String(MAX_COUNTRY_LENGTH), default=DEFAULT_COUNTRY, nullable=True
    )

    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def owning_company_ids(self) -> tuple[int, ...]:
        return (self.company_id,)

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, name={self.name})>"
