"""Pydantic schemas for job operations."""

from datetime import datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from timescrub.core.constants import MAX_INT_ID, MAX_NAME_LENGTH, MAX_NOTE_LENGTH
from timescrub.modules.customers.schemas import CustomerSummary
from timescrub.modules.locations.schemas import JobLocationSummary


class JobCreate(BaseModel):
    """Schema for creating a job."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    customer_id: int = Field(..., ge=1, le=MAX_INT_ID)
    location_id: int = Field(..., ge=1, le=MAX_INT_ID)
    job_note: str | None = Field(None, max_length=MAX_NOTE_LENGTH)


class JobUpdate(BaseModel):
    """Schema for updating a job. Omitted fields are left unchanged."""

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    customer_id: int | None = Field(None, ge=1, le=MAX_INT_ID)
    location_id: int | None = Field(None, ge=1, le=MAX_INT_ID)
    job_note: str | None = Field(None, max_length=MAX_NOTE_LENGTH)
    version: int | None = Field(None, description="Version the client last read")

    @model_validator(mode="after")
    def required_fields_not_cleared(self) -> Self:
        cleared = [
            name
            for name in ("name", "customer_id", "location_id")
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if cleared:
            raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
        return self


class JobResponse(BaseModel):
    """Schema for job response, with its customer and location."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    customer_id: int
    location_id: int
    name: str
    job_note: str | None
    customer: CustomerSummary
    location: JobLocationSummary
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None
    deleted_by: int | None
    version: int


class JobSummary(BaseModel):
    """Job reference embedded in time entry responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
