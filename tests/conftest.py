"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from timescrub.core.audit.models import AuditLog  # noqa: F401
from timescrub.core.auth.backend import hash_password, issue_token
from timescrub.core.auth.schemas import Principal
from timescrub.core.database import Base, get_db
from timescrub.core.permissions.roles import Role
from timescrub.main import create_app

# Import all models to ensure they're registered with Base.metadata
from timescrub.modules.companies.models import Company
from timescrub.modules.customers.models import Customer
from timescrub.modules.employees.models import Employee
from timescrub.modules.jobs.models import Job
from timescrub.modules.locations.models import JobLocation
from timescrub.modules.time_entries.models import TimeEntry  # noqa: F401


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_PASSWORD = "TESTpass321"

# Computed once; bcrypt is deliberately slow
TEST_PASSWORD_HASH = hash_password(TEST_PASSWORD)


@pytest.fixture
async def engine():
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db(engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide the database session shared by fixtures and requests.

    Fixture rows are committed, so a rolled back request never takes
    them with it.
    """
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
async def app(db: AsyncSession):
    """Create test application instance."""
    application = create_app()

    # Same unit of work as the real dependency: commit after the handler
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db
        await db.commit()

    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Row builders
# ============================================================


async def add_company(db: AsyncSession, name: str) -> Company:
    company = Company(
        name=name,
        address_line1="123 Corporate Blvd",
        city="Baton Rouge",
        state="LA",
        postal_code="70801",
        country="US",
    )
    db.add(company)
    await db.commit()
    await db.refresh(company)
    return company


async def add_employee(
    db: AsyncSession,
    company: Company,
    email: str,
    role: Role = Role.EMPLOYEE,
    name: str | None = None,
) -> Employee:
    employee = Employee(
        company_id=company.id,
        email=email,
        name=name or email.split("@")[0].title(),
        role=role,
        password_hash=TEST_PASSWORD_HASH,
    )
    db.add(employee)
    await db.commit()
    await db.refresh(employee)
    return employee


async def add_customer(db: AsyncSession, company: Company, name: str) -> Customer:
    customer = Customer(
        company_id=company.id,
        name=name,
        business_address_line1="500 Main St",
        business_city="New Orleans",
        business_state="LA",
        business_postal_code="70112",
        business_country="US",
    )
    db.add(customer)
    await db.commit()
    await db.refresh(customer)
    return customer


async def add_location(db: AsyncSession, customer: Customer, name: str) -> JobLocation:
    location = JobLocation(
        customer=customer,
        name=name,
        address_line1="123 Warehouse Rd",
        city="New Orleans",
        state="LA",
        postal_code="70115",
        country="US",
    )
    db.add(location)
    await db.commit()
    await db.refresh(location)
    return location


async def add_job(
    db: AsyncSession,
    customer: Customer,
    location: JobLocation,
    name: str,
) -> Job:
    job = Job(
        company_id=customer.company_id,
        customer=customer,
        location=location,
        name=name,
    )
    db.add(job)
    await db.commit()
    await db.refresh(job)
    return job


def principal_for(employee: Employee) -> Principal:
    return Principal(
        employee_id=employee.id,
        company_id=employee.company_id,
        role=employee.role,
    )


def auth_headers(employee: Employee) -> dict[str, Any]:
    token = issue_token(employee.id, employee.company_id, employee.role)
    return {"Authorization": f"Bearer {token}"}


# ============================================================
# Tenant A
# ============================================================


@pytest.fixture
async def company_a(db: AsyncSession) -> Company:
    return await add_company(db, "TS Cleaning Services")


@pytest.fixture
async def admin_a(db: AsyncSession, company_a: Company) -> Employee:
    return await add_employee(db, company_a, "admin-a@example.com", Role.ADMIN, "Alice Admin")


@pytest.fixture
async def employee_a(db: AsyncSession, company_a: Company) -> Employee:
    return await add_employee(db, company_a, "worker-a@example.com", Role.EMPLOYEE, "Walt Worker")


@pytest.fixture
def admin_headers(admin_a: Employee) -> dict[str, Any]:
    return auth_headers(admin_a)


@pytest.fixture
def employee_headers(employee_a: Employee) -> dict[str, Any]:
    return auth_headers(employee_a)


@pytest.fixture
async def customer_a(db: AsyncSession, company_a: Company) -> Customer:
    return await add_customer(db, company_a, "Acme Construction")


@pytest.fixture
async def location_a(db: AsyncSession, customer_a: Customer) -> JobLocation:
    return await add_location(db, customer_a, "Warehouse #1")


@pytest.fixture
async def job_a(db: AsyncSession, customer_a: Customer, location_a: JobLocation) -> Job:
    return await add_job(db, customer_a, location_a, "Inventory Cleanup")


# ============================================================
# Tenant B
# ============================================================


@pytest.fixture
async def company_b(db: AsyncSession) -> Company:
    return await add_company(db, "Globex Janitorial")


@pytest.fixture
async def admin_b(db: AsyncSession, company_b: Company) -> Employee:
    return await add_employee(db, company_b, "admin-b@example.com", Role.ADMIN, "Bob Admin")


@pytest.fixture
def admin_b_headers(admin_b: Employee) -> dict[str, Any]:
    return auth_headers(admin_b)


@pytest.fixture
async def customer_b(db: AsyncSession, company_b: Company) -> Customer:
    return await add_customer(db, company_b, "Initech")


@pytest.fixture
async def location_b(db: AsyncSession, customer_b: Customer) -> JobLocation:
    return await add_location(db, customer_b, "Initech HQ")


@pytest.fixture
async def job_b(db: AsyncSession, customer_b: Customer, location_b: JobLocation) -> Job:
    return await add_job(db, customer_b, location_b, "Server Rack Wiring")
