"""Pydantic schemas for company operations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CompanySummary(BaseModel):
    """Company reference embedded in other responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class CompanyResponse(BaseModel):
    """Schema for company response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address_line1: str
    address_line2: str | None
    city: str
    state: str
    postal_code: str
    country: str
    phone: str | None
    created_at: datetime
    updated_at: datetime
