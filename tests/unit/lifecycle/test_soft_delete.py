"""Unit tests for the soft-delete state machine."""

from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy import select

from timescrub.core.auth.schemas import Principal
from timescrub.core.lifecycle import (
    LifecycleState,
    apply_visibility,
    archive,
    is_archived,
    resolve_include_archived,
    restore,
    state_of,
)
from timescrub.core.permissions.roles import Role
from timescrub.modules.customers.models import Customer


@dataclass
class Row:
    deleted_at: datetime | None = None
    deleted_by: int | None = None


class TestTransitions:
    def test_new_row_is_active(self):
        assert state_of(Row()) == LifecycleState.ACTIVE
        assert is_archived(Row()) is False

    def test_archive_sets_actor_and_time(self):
        row = Row()
        now = datetime(2025, 2, 1, 8, tzinfo=UTC)

        assert archive(row, actor_id=7, now=now) is True
        assert row.deleted_at == now
        assert row.deleted_by == 7
        assert state_of(row) == LifecycleState.ARCHIVED

    def test_archive_defaults_to_current_time(self):
        row = Row()
        before = datetime.now(UTC)

        archive(row, actor_id=1)

        assert row.deleted_at is not None
        assert row.deleted_at >= before

    def test_archive_is_idempotent(self):
        first = datetime(2025, 2, 1, tzinfo=UTC)
        row = Row()
        archive(row, actor_id=1, now=first)

        assert archive(row, actor_id=2, now=datetime(2025, 3, 1, tzinfo=UTC)) is False
        assert row.deleted_at == first
        assert row.deleted_by == 1

    def test_restore_clears_both_fields(self):
        row = Row(deleted_at=datetime(2025, 2, 1, tzinfo=UTC), deleted_by=1)

        assert restore(row) is True
        assert row.deleted_at is None
        assert row.deleted_by is None
        assert state_of(row) == LifecycleState.ACTIVE

    def test_restore_active_is_noop(self):
        row = Row()

        assert restore(row) is False
        assert row.deleted_at is None


class TestVisibility:
    def test_excludes_archived_by_default(self):
        stmt = apply_visibility(select(Customer), Customer, include_archived=False)

        assert "deleted_at IS NULL" in str(stmt)

    def test_include_archived_leaves_statement(self):
        stmt = select(Customer)

        assert apply_visibility(stmt, Customer, include_archived=True) is stmt

    def test_only_admins_may_include_archived(self):
        admin = Principal(employee_id=1, company_id=1, role=Role.ADMIN)
        employee = Principal(employee_id=2, company_id=1, role=Role.EMPLOYEE)

        assert resolve_include_archived(admin, True) is True
        assert resolve_include_archived(admin, False) is False
        assert resolve_include_archived(employee, True) is False
