"""Integration tests for customer and location administration."""

import pytest
from httpx import AsyncClient

from timescrub.modules.customers.models import Customer
from timescrub.modules.locations.models import JobLocation
from tests.factories import CustomerCreateFactory, JobLocationCreateFactory


pytestmark = pytest.mark.integration

BASE = "/api/v1/admin/customers"


class TestCustomers:
    async def test_create_defaults_country(self, client: AsyncClient, company_a, admin_headers):
        payload = {
            "name": "River Tech LLC",
            "business_address_line1": "900 River Rd",
            "business_city": "Baton Rouge",
            "business_state": "LA",
            "business_postal_code": "70802",
        }

        response = await client.post(BASE, json=payload, headers=admin_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["company_id"] == company_a.id
        assert body["business_country"] == "US"
        assert body["mailing_country"] == "US"
        assert body["mailing_address_line1"] is None
        assert body["version"] == 1

    async def test_missing_business_address_is_400(self, client: AsyncClient, admin_headers):
        response = await client.post(BASE, json={"name": "No Address"}, headers=admin_headers)

        assert response.status_code == 400

    async def test_list_ordered_by_name(self, client: AsyncClient, admin_headers):
        for name in ["Zephyr Co", "Bayou Services", "Magnolia Inc"]:
            payload = CustomerCreateFactory.build(name=name)
            await client.post(BASE, json=payload.model_dump(mode="json"), headers=admin_headers)

        response = await client.get(BASE, headers=admin_headers)

        assert [c["name"] for c in response.json()] == [
            "Bayou Services",
            "Magnolia Inc",
            "Zephyr Co",
        ]

    async def test_get_and_update(self, client: AsyncClient, customer_a: Customer, admin_headers):
        response = await client.put(
            f"{BASE}/{customer_a.id}",
            json={"contact_name": "John Contractor", "mailing_city": "Metairie", "version": 1},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["contact_name"] == "John Contractor"
        assert response.json()["version"] == 2

        fetched = await client.get(f"{BASE}/{customer_a.id}", headers=admin_headers)
        assert fetched.json()["mailing_city"] == "Metairie"

    async def test_clearing_required_field_is_400(
        self, client: AsyncClient, customer_a: Customer, admin_headers
    ):
        response = await client.put(
            f"{BASE}/{customer_a.id}",
            json={"business_city": None},
            headers=admin_headers,
        )

        assert response.status_code == 400

    async def test_archive_hides_from_list_but_get_still_works(
        self, client: AsyncClient, customer_a: Customer, admin_headers
    ):
        archived = await client.delete(f"{BASE}/{customer_a.id}", headers=admin_headers)
        assert archived.status_code == 200
        assert archived.json()["deleted_at"] is not None

        listed = await client.get(BASE, headers=admin_headers)
        assert listed.json() == []

        fetched = await client.get(f"{BASE}/{customer_a.id}", headers=admin_headers)
        assert fetched.status_code == 200

        restored = await client.post(f"{BASE}/{customer_a.id}/restore", headers=admin_headers)
        assert restored.json()["deleted_at"] is None
        listed = await client.get(BASE, headers=admin_headers)
        assert [c["id"] for c in listed.json()] == [customer_a.id]

    async def test_employee_forbidden(self, client: AsyncClient, employee_headers):
        response = await client.get(BASE, headers=employee_headers)

        assert response.status_code == 403


class TestLocations:
    async def test_create_and_list(self, client: AsyncClient, customer_a: Customer, admin_headers):
        payload = JobLocationCreateFactory.build(
            name="Construction Site B",
            latitude=29.95,
            longitude=-90.07,
            tags=["outdoor", "hardhat"],
        )

        created = await client.post(
            f"{BASE}/{customer_a.id}/locations",
            json=payload.model_dump(mode="json"),
            headers=admin_headers,
        )

        assert created.status_code == 201
        body = created.json()
        assert body["customer_id"] == customer_a.id
        assert body["tags"] == ["outdoor", "hardhat"]
        assert body["latitude"] == 29.95

        listed = await client.get(f"{BASE}/{customer_a.id}/locations", headers=admin_headers)
        assert [loc["id"] for loc in listed.json()] == [body["id"]]

    async def test_create_under_foreign_customer_is_404(
        self, client: AsyncClient, customer_b: Customer, admin_headers
    ):
        payload = JobLocationCreateFactory.build()

        response = await client.post(
            f"{BASE}/{customer_b.id}/locations",
            json=payload.model_dump(mode="json"),
            headers=admin_headers,
        )

        assert response.status_code == 404

    async def test_update_archive_restore(
        self, client: AsyncClient, location_a: JobLocation, admin_headers
    ):
        updated = await client.put(
            f"/api/v1/admin/locations/{location_a.id}",
            json={"access_instruction": "Gate code 1234", "is_primary": True},
            headers=admin_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["access_instruction"] == "Gate code 1234"
        assert updated.json()["is_primary"] is True

        archived = await client.delete(
            f"/api/v1/admin/locations/{location_a.id}", headers=admin_headers
        )
        assert archived.json()["deleted_at"] is not None

        listed = await client.get(
            f"{BASE}/{location_a.customer_id}/locations", headers=admin_headers
        )
        assert listed.json() == []

        restored = await client.post(
            f"/api/v1/admin/locations/{location_a.id}/restore", headers=admin_headers
        )
        assert restored.json()["deleted_at"] is None

    async def test_foreign_location_is_404(
        self, client: AsyncClient, location_b: JobLocation, admin_headers
    ):
        response = await client.put(
            f"/api/v1/admin/locations/{location_b.id}",
            json={"name": "Mine now"},
            headers=admin_headers,
        )

        assert response.status_code == 404
