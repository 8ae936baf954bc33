"""Integration tests for login and the current employee."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from timescrub.core.auth.backend import decode_token
from timescrub.core.lifecycle import archive
from timescrub.modules.employees.models import Employee
from tests.conftest import TEST_PASSWORD


pytestmark = pytest.mark.integration


class TestLogin:
    async def test_login_success(self, client: AsyncClient, admin_a: Employee):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": admin_a.email, "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["expires_in"] == 24 * 60 * 60
        assert body["employee"] == {
            "id": admin_a.id,
            "name": "Alice Admin",
            "email": admin_a.email,
            "role": "ADMIN",
            "company_id": admin_a.company_id,
        }

        principal = decode_token(body["access_token"])
        assert principal is not None
        assert principal.employee_id == admin_a.id
        assert principal.company_id == admin_a.company_id

    async def test_login_email_is_case_insensitive(self, client: AsyncClient, admin_a: Employee):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "ADMIN-A@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == 200

    async def test_wrong_password(self, client: AsyncClient, admin_a: Employee):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": admin_a.email, "password": "WRONGpass1"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "invalid_credentials"

    async def test_unknown_email_same_error(self, client: AsyncClient, admin_a: Employee):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "invalid_credentials"

    async def test_archived_employee_cannot_login(
        self,
        client: AsyncClient,
        db: AsyncSession,
        admin_a: Employee,
        employee_a: Employee,
    ):
        archive(employee_a, admin_a.id)
        await db.commit()

        response = await client.post(
            "/api/v1/auth/login",
            json={"email": employee_a.email, "password": TEST_PASSWORD},
        )

        assert response.status_code == 401

    async def test_malformed_body_is_400(self, client: AsyncClient):
        response = await client.post("/api/v1/auth/login", json={"email": "not-an-email"})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "validation_error"
        assert {e["field"] for e in body["errors"]} >= {"email", "password"}


class TestMe:
    async def test_me(self, client: AsyncClient, employee_a: Employee, employee_headers):
        response = await client.get("/api/v1/me", headers=employee_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == employee_a.id
        assert body["role"] == "EMPLOYEE"
        assert body["company"] == {"id": employee_a.company_id, "name": "TS Cleaning Services"}
        assert "password_hash" not in body

    async def test_me_without_token(self, client: AsyncClient):
        response = await client.get("/api/v1/me")

        assert response.status_code == 401
        assert response.json()["code"] == "missing_token"

    async def test_me_with_bad_token(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/me", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "invalid_token"

    async def test_request_id_echoed(self, client: AsyncClient, employee_headers):
        response = await client.get(
            "/api/v1/me",
            headers={**employee_headers, "X-Request-ID": "req-42"},
        )

        assert response.headers["X-Request-ID"] == "req-42"


class TestCompany:
    async def test_own_company(self, client: AsyncClient, employee_a: Employee, employee_headers):
        response = await client.get("/api/v1/companies/me", headers=employee_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == employee_a.company_id
        assert body["name"] == "TS Cleaning Services"
        assert body["country"] == "US"
