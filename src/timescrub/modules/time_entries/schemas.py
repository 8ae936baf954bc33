"""Pydantic schemas for time entry operations."""

from datetime import UTC, datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from timescrub.core.constants import MAX_BIGINT, MAX_INT_ID, MAX_NOTE_LENGTH
from timescrub.modules.customers.schemas import CustomerSummary
from timescrub.modules.employees.schemas import EmployeeSummary
from timescrub.modules.locations.schemas import JobLocationSummary


def to_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC. Naive values are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class TimeEntryCreate(BaseModel):
    """Schema for logging a block of time.

    ``duration_ms`` defaults to the span between start and end.
    """

    job_id: int = Field(..., ge=1, le=MAX_INT_ID)
    start: datetime
    end: datetime
    duration_ms: int | None = Field(None, ge=0, le=MAX_BIGINT)
    time_note: str | None = Field(None, max_length=MAX_NOTE_LENGTH)

    @field_validator("start", "end")
    @classmethod
    def normalize_timezone(cls, v: datetime) -> datetime:
        return to_utc(v)

    @model_validator(mode="after")
    def end_not_before_start(self) -> Self:
        if self.end < self.start:
            raise ValueError("end must not be before start")
        return self

    @property
    def resolved_duration_ms(self) -> int:
        if self.duration_ms is not None:
            return self.duration_ms
        return int((self.end - self.start).total_seconds() * 1000)


class TimeEntryJob(BaseModel):
    """The job of a time entry with its customer and location."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    customer: CustomerSummary
    location: JobLocationSummary


class TimeEntryResponse(BaseModel):
    """Schema for time entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    employee_id: int
    job_id: int
    start: datetime
    end: datetime
    duration_ms: int
    time_note: str | None
    created_at: datetime
    job: TimeEntryJob
    employee: EmployeeSummary
