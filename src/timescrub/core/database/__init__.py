"""Database layer - session management, base models, and mixins."""

from timescrub.core.database.base import (
    Base,
    CompanyMixin,
    IntIdMixin,
    SoftDeleteMixin,
    TimestampMixin,
)
from timescrub.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
    transaction,
)


__all__ = [
    "Base",
    "CompanyMixin",
    "IntIdMixin",
    "SoftDeleteMixin",
    "TimestampMixin",
    "async_engine",
    "async_session_factory",
    "get_db",
    "transaction",
]
