#!/usr/bin/env python
"""
Generate demo/seed data for development.

Companies can only be created here; the API exposes them read-only.
"""

import argparse
import asyncio
import sys
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from timescrub.core.auth.backend import hash_password
from timescrub.core.database import async_session_factory
from timescrub.core.permissions.roles import Role
from timescrub.modules.companies.models import Company
from timescrub.modules.customers.models import Customer
from timescrub.modules.employees.models import Employee
from timescrub.modules.jobs.models import Job
from timescrub.modules.locations.models import JobLocation
from timescrub.modules.time_entries.models import TimeEntry


DEV_PASSWORD = "TESTpass321"
ADMIN_EMAIL = "admin@timescrub.com"
EMPLOYEE_EMAIL = "employee@timescrub.com"

HOUR_MS = 60 * 60 * 1000


async def create_company(session: AsyncSession) -> tuple[Company, Employee, Employee]:
    """Create the dev company with one admin and one employee."""
    company = Company(
        name="TS Cleaning Services",
        address_line1="123 Corporate Blvd",
        city="Baton Rouge",
        state="LA",
        postal_code="70801",
        country="US",
        phone="(555) 555-5555",
    )
    session.add(company)
    await session.flush()

    admin = Employee(
        company_id=company.id,
        email=ADMIN_EMAIL,
        name="Josef Admin",
        role=Role.ADMIN,
        password_hash=hash_password(DEV_PASSWORD),
    )
    employee = Employee(
        company_id=company.id,
        email=EMPLOYEE_EMAIL,
        name="Joe User",
        role=Role.EMPLOYEE,
        password_hash=hash_password(DEV_PASSWORD),
    )
    session.add_all([admin, employee])
    await session.flush()
    return company, admin, employee


async def seed_default() -> None:
    """Create default seed data."""
    async with async_session_factory() as session:
        result = await session.execute(select(Employee).where(Employee.email == ADMIN_EMAIL))
        existing = result.scalar_one_or_none()

        if existing:
            print(f"Seed admin already exists: {existing.email}")
            return

        company, admin, employee = await create_company(session)
        await session.commit()
        print(f"Created company: {company.name} ({company.id})")
        print(f"Created admin: {admin.email} / {DEV_PASSWORD}")
        print(f"Created employee: {employee.email} / {DEV_PASSWORD}")


async def seed_demo() -> None:
    """Create the default data plus customers, locations, jobs and time."""
    async with async_session_factory() as session:
        result = await session.execute(select(Employee).where(Employee.email == ADMIN_EMAIL))
        if result.scalar_one_or_none():
            print("Demo data already exists")
            return

        company, _, employee = await create_company(session)

        acme = Customer(
            company_id=company.id,
            name="Acme Construction",
            contact_name="John Contractor",
            contact_email="john@acme.com",
            contact_phone="555-123-4567",
            business_address_line1="500 Main St",
            business_city="New Orleans",
            business_state="LA",
            business_postal_code="70112",
            business_country="US",
            mailing_address_line1="PO Box 100",
            mailing_city="New Orleans",
            mailing_state="LA",
            mailing_postal_code="70113",
            mailing_country="US",
        )
        river_tech = Customer(
            company_id=company.id,
            name="River Tech LLC",
            contact_name="Sarah Rivers",
            contact_email="sarah@rivertech.com",
            contact_phone="555-987-6543",
            business_address_line1="900 River Rd",
            business_city="Baton Rouge",
            business_state="LA",
            business_postal_code="70802",
            business_country="US",
        )
        bayou = Customer(
            company_id=company.id,
            name="Bayou Services",
            contact_name="Mark Dupree",
            contact_email="mark@bayou.com",
            business_address_line1="44 Bayou Dr",
            business_city="Lafayette",
            business_state="LA",
            business_postal_code="70501",
            business_country="US",
        )
        session.add_all([acme, river_tech, bayou])
        await session.flush()

        warehouse = JobLocation(
            customer_id=acme.id,
            name="Warehouse #1",
            address_line1="123 Warehouse Rd",
            city="New Orleans",
            state="LA",
            postal_code="70115",
            country="US",
            is_primary=True,
        )
        site_b = JobLocation(
            customer_id=acme.id,
            name="Construction Site B",
            address_line1="800 Worksite Ave",
            city="Kenner",
            state="LA",
            postal_code="70062",
            country="US",
        )
        hq = JobLocation(
            customer_id=river_tech.id,
            name="Corporate HQ",
            address_line1="900 River Rd",
            city="Baton Rouge",
            state="LA",
            postal_code="70802",
            country="US",
            is_primary=True,
        )
        session.add_all([warehouse, site_b, hq])
        await session.flush()

        jobs = [
            Job(
                company_id=company.id,
                customer_id=acme.id,
                location_id=warehouse.id,
                name="Inventory Cleanup",
                job_note="Sort and label incoming materials.",
            ),
            Job(
                company_id=company.id,
                customer_id=acme.id,
                location_id=site_b.id,
                name="Concrete Pouring",
                job_note="Assist with rebar layout and prep.",
            ),
            Job(
                company_id=company.id,
                customer_id=river_tech.id,
                location_id=hq.id,
                name="Server Rack Wiring",
                job_note="Pull and label CAT6 runs.",
            ),
        ]
        session.add_all(jobs)
        await session.flush()

        entries = [
            (jobs[0], datetime(2025, 2, 1, 8, tzinfo=UTC), 4 * HOUR_MS,
             "Cleared shelves and sorted inventory."),
            (jobs[1], datetime(2025, 2, 2, 9, tzinfo=UTC), int(2.5 * HOUR_MS),
             "Helped pour concrete foundation."),
            (jobs[2], datetime(2025, 2, 3, 13, tzinfo=UTC), 3 * HOUR_MS,
             "Ran cable and mounted patch panel."),
        ]
        for job, start, duration_ms, note in entries:
            session.add(
                TimeEntry(
                    company_id=company.id,
                    employee_id=employee.id,
                    job_id=job.id,
                    start=start,
                    end=datetime.fromtimestamp(start.timestamp() + duration_ms / 1000, UTC),
                    duration_ms=duration_ms,
                    time_note=note,
                )
            )

        await session.commit()
        print(f"Created demo company: {company.name}")
        print(f"Created {len(jobs)} jobs and {len(entries)} time entries")


async def main(scenario: str) -> None:
    """Run the seeding based on scenario."""
    if scenario == "default":
        await seed_default()
    elif scenario == "demo":
        await seed_demo()
    else:
        print(f"Unknown scenario: {scenario}")
        print("Available scenarios: default, demo")
        sys.exit(1)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed database with demo data")
    parser.add_argument(
        "--scenario",
        "-s",
        default="default",
        help="Seed scenario to run (default, demo)",
    )
    args = parser.parse_args()

    asyncio.run(main(args.scenario))
