"""Unit tests for audit snapshots."""

from datetime import UTC, datetime

from timescrub.core.audit.serialization import serialize_value, snapshot
from timescrub.core.permissions.roles import Role
from timescrub.modules.employees.models import Employee


class TestSerializeValue:
    def test_primitives_pass_through(self):
        assert serialize_value(None) is None
        assert serialize_value(3) == 3
        assert serialize_value("x") == "x"

    def test_enum_and_datetime(self):
        assert serialize_value(Role.ADMIN) == "ADMIN"
        assert serialize_value(datetime(2025, 2, 1, tzinfo=UTC)) == "2025-02-01T00:00:00+00:00"

    def test_nested(self):
        value = {"tags": ("a", "b"), "when": datetime(2025, 2, 1, tzinfo=UTC)}

        assert serialize_value(value) == {
            "tags": ["a", "b"],
            "when": "2025-02-01T00:00:00+00:00",
        }


class TestSnapshot:
    def test_snapshot_omits_password_hash(self):
        employee = Employee(
            id=1,
            company_id=2,
            email="a@example.com",
            name="A",
            role=Role.ADMIN,
            password_hash="$2b$12$secret",
        )

        data = snapshot(employee)

        assert "password_hash" not in data
        assert data["email"] == "a@example.com"
        assert data["role"] == "ADMIN"
        assert data["deleted_at"] is None

    def test_snapshot_extra_exclusions(self):
        employee = Employee(id=1, company_id=2, email="a@example.com", name="A")

        assert "email" not in snapshot(employee, exclude=("email",))
