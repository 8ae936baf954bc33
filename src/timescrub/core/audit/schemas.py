"""Pydantic schemas for the audit log read surface."""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class AuditActor(BaseModel):
    """The employee who made a change."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class AuditLogResponse(BaseModel):
    """Schema for an audit log entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    employee_id: int
    action: str
    entity_type: str
    entity_id: int
    timestamp: datetime
    metadata: dict[str, Any] | None = Field(
        None,
        validation_alias=AliasChoices("metadata_", "metadata"),
    )
    employee: AuditActor
