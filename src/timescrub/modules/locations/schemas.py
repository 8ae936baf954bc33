"""Pydantic schemas for job location operations."""

from datetime import datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from timescrub.core.constants import (
    DEFAULT_COUNTRY,
    MAX_ADDRESS_LENGTH,
    MAX_COUNTRY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_LENGTH,
)


class JobLocationCreate(BaseModel):
    """Schema for creating a job location under a customer."""

    name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    address_line1: str = Field(..., min_length=1, max_length=MAX_ADDRESS_LENGTH)
    address_line2: str | None = Field(None, max_length=MAX_ADDRESS_LENGTH)
    city: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    state: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    postal_code: str = Field(..., min_length=1, max_length=MAX_PHONE_LENGTH)
    country: str = Field(DEFAULT_COUNTRY, min_length=2, max_length=MAX_COUNTRY_LENGTH)

    location_type: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    internal_note: str | None = None
    access_instruction: str | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    is_primary: bool = False
    tags: list[str] | None = None


_REQUIRED_ON_UPDATE = ("address_line1", "city", "state", "postal_code", "country", "is_primary")


class JobLocationUpdate(BaseModel):
    """Schema for updating a job location. Omitted fields are left unchanged."""

    name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    address_line1: str | None = Field(None, min_length=1, max_length=MAX_ADDRESS_LENGTH)
    address_line2: str | None = Field(None, max_length=MAX_ADDRESS_LENGTH)
    city: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    state: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    postal_code: str | None = Field(None, min_length=1, max_length=MAX_PHONE_LENGTH)
    country: str | None = Field(None, min_length=2, max_length=MAX_COUNTRY_LENGTH)

    location_type: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    internal_note: str | None = None
    access_instruction: str | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    is_primary: bool | None = None
    tags: list[str] | None = None

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


class JobLocationSummary(BaseModel):
    """Location reference embedded in job responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None
    address_line1: str
    address_line2: str | None
    city: str
    state: str
    postal_code: str
    country: str
    deleted_at: datetime | None = None


class JobLocationResponse(BaseModel):
    """Schema for job location response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_id: int
    name: str | None
    address_line1: str
    address_line2: str | None
    city: str
    state: str
    postal_code: str
    country: str
    location_type: str | None
    internal_note: str | None
    access_instruction: str | None
    latitude: float | None
    longitude: float | None
    is_primary: bool
    tags: list[str] | None
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None
    deleted_by: int | None
    version: int
