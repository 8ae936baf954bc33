"""Unit tests for auth dependencies."""

from unittest.mock import MagicMock

import pytest

from timescrub.core.auth.backend import issue_token
from timescrub.core.auth.dependencies import get_principal, require_admin
from timescrub.core.auth.schemas import Principal
from timescrub.core.errors import ForbiddenError, InvalidCredentialError, UnauthenticatedError
from timescrub.core.permissions.roles import Role


def _credentials(token: str) -> MagicMock:
    credentials = MagicMock()
    credentials.credentials = token
    return credentials


class TestGetPrincipal:
    """Tests for get_principal dependency."""

    async def test_no_credentials(self):
        with pytest.raises(UnauthenticatedError):
            await get_principal(None)

    async def test_invalid_token(self):
        with pytest.raises(InvalidCredentialError):
            await get_principal(_credentials("invalid-token"))

    async def test_valid_token(self):
        principal = await get_principal(_credentials(issue_token(3, 1, Role.EMPLOYEE)))

        assert principal.employee_id == 3
        assert principal.company_id == 1
        assert principal.role == Role.EMPLOYEE


class TestRequireAdmin:
    """Tests for require_admin dependency."""

    async def test_admin_passes(self):
        principal = Principal(employee_id=1, company_id=1, role=Role.ADMIN)

        assert await require_admin(principal) is principal

    async def test_employee_forbidden(self):
        principal = Principal(employee_id=2, company_id=1, role=Role.EMPLOYEE)

        with pytest.raises(ForbiddenError) as exc_info:
            await require_admin(principal)

        assert exc_info.value.status_code == 403
        assert exc_info.value.message == "Admin access required"
