"""Employee database model."""

from typing import TYPE_CHECKING

from sqlalchemy import Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from timescrub.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH
from timescrub.core.database.base import (
    Base,
    CompanyMixin,
    IntIdMixin,
    SoftDeleteMixin,
    TimestampMixin,
)
from timescrub.core.permissions.roles import Role


if TYPE_CHECKING:
    from timescrub.modules.companies.models import Company


class Employee(Base, IntIdMixin, TimestampMixin, CompanyMixin, SoftDeleteMixin):
    """An employee who can log in and record time.

    Attributes:
        email: Login email, unique across all companies
        name: Display name
        role: EMPLOYEE or ADMIN
        password_hash: Bcrypt-hashed password
        version: Optimistic concurrency counter
    """

    __tablename__ = "employees"

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="role"),
        default=Role.EMPLOYEE,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    company: Mapped["Company"] = relationship(lazy="selectin")

    __mapper_args__ = {"version_id_col": version}

    def owning_company_ids(self) -> tuple[int, ...]:
        return (self.company_id,)

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, email={self.email}, role={self.role})>"
