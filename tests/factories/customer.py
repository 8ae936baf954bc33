"""Customer and location payload factories for tests."""

from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory

from timescrub.modules.customers.schemas import CustomerCreate
from timescrub.modules.locations.schemas import JobLocationCreate


class CustomerCreateFactory(ModelFactory):
    """Factory for creating CustomerCreate schemas."""

    __model__ = CustomerCreate

    @classmethod
    def name(cls) -> str:
        return f"Customer {uuid4().hex[:6]}"

    @classmethod
    def contact_email(cls) -> str:
        return f"contact-{uuid4().hex[:6]}@example.com"

    @classmethod
    def business_country(cls) -> str:
        return "US"

    @classmethod
    def mailing_country(cls) -> str:
        return "US"


class JobLocationCreateFactory(ModelFactory):
    """Factory for creating JobLocationCreate schemas."""

    __model__ = JobLocationCreate

    @classmethod
    def name(cls) -> str:
        return f"Site {uuid4().hex[:6]}"

    @classmethod
    def country(cls) -> str:
        return "US"

    @classmethod
    def is_primary(cls) -> bool:
        return False
