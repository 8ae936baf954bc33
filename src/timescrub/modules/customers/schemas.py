"""Pydantic schemas for customer operations."""

from datetime import datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from timescrub.core.constants import (
    DEFAULT_COUNTRY,
    MAX_ADDRESS_LENGTH,
    MAX_COUNTRY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_LENGTH,
)


class CustomerCreate(BaseModel):
    """Schema for creating a customer."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    contact_name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    contact_email: EmailStr | None = None
    contact_phone: str | None = Field(None, max_length=MAX_PHONE_LENGTH)

    business_address_line1: str = Field(..., min_length=1, max_length=MAX_ADDRESS_LENGTH)
    business_address_line2: str | None = Field(None, max_length=MAX_ADDRESS_LENGTH)
    business_city: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    business_state: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    business_postal_code: str = Field(..., min_length=1, max_length=MAX_PHONE_LENGTH)
    business_country: str = Field(
        DEFAULT_COUNTRY, min_length=2, max_length=MAX_COUNTRY_LENGTH
    )

    mailing_address_line1: str | None = Field(None, max_length=MAX_ADDRESS_LENGTH)
    mailing_address_line2: str | None = Field(None, max_length=MAX_ADDRESS_LENGTH)
    mailing_city: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    mailing_state: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    mailing_postal_code: str | None = Field(None, max_length=MAX_PHONE_LENGTH)
    mailing_country: str | None = Field(
        DEFAULT_COUNTRY, min_length=2, max_length=MAX_COUNTRY_LENGTH
    )


# Columns that may be changed but never cleared
_REQUIRED_ON_UPDATE = (
    "name",
    "business_address_line1",
    "business_city",
    "business_state",
    "business_postal_code",
    "business_country",
)


class CustomerUpdate(BaseModel):
    """Schema for updating a customer. Omitted fields are left unchanged."""

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    contact_name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    contact_email: EmailStr | None = None
    contact_phone: str | None = Field(None, max_length=MAX_PHONE_LENGTH)

    business_address_line1: str | None = Field(None, min_length=1, max_length=MAX_ADDRESS_LENGTH)
    business_address_line2: str | None = Field(None, max_length=MAX_ADDRESS_LENGTH)
    business_city: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    business_state: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    business_postal_code: str | None = Field(None, min_length=1, max_length=MAX_PHONE_LENGTH)
    business_country: str | None = Field(None, min_length=2, max_length=MAX_COUNTRY_LENGTH)

    mailing_address_line1: str | None = Field(None, max_length=MAX_ADDRESS_LENGTH)
    mailing_address_line2: str | None = Field(None, max_length=MAX_ADDRESS_LENGTH)
    mailing_city: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    mailing_state: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    mailing_postal_code: str | None = Field(None, max_length=MAX_PHONE_LENGTH)
    mailing_country: str | None = Field(None, min_length=2, max_length=MAX_COUNTRY_LENGTH)

    version: int | None = Field(None, description="Version the client last read")

    @model_validator(mode="after")
    def required_fields_not_cleared(self) -> Self:
        cleared = [
            name
            for name in _REQUIRED_ON_UPDATE
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if cleared:
            raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
        return self


class CustomerResponse(BaseModel):
    """Schema for customer response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    name: str
    contact_name: str | None
    contact_email: str | None
    contact_phone: str | None
    business_address_line1: str
    business_address_line2: str | None
    business_city: str
    business_state: str
    business_postal_code: str
    business_country: str
    mailing_address_line1: str | None
    mailing_address_line2: str | None
    mailing_city: str | None
    mailing_state: str | None
    mailing_postal_code: str | None
    mailing_country: str | None
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None
    deleted_by: int | None
    version: int


class CustomerSummary(BaseModel):
    """Customer reference embedded in job responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    deleted_at: datetime | None = None
