"""Test factories for request payloads."""

from tests.factories.customer import CustomerCreateFactory, JobLocationCreateFactory
from tests.factories.employee import EmployeeCreateFactory


__all__ = [
    "CustomerCreateFactory",
    "EmployeeCreateFactory",
    "JobLocationCreateFactory",
]
