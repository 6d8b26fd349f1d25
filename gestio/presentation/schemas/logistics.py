"""Logistics process Pydantic schemas."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from gestio.domain.entities import ProcessStatus


class LogisticsCreateSchema(BaseModel):
    """Schema for POST /v1/logistics request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "Container 7 to Rosario",
                    "status": "pending",
                    "assigned_to": "Ana",
                    "details": {"carrier": "ACME", "tracking": "ZX-11"},
                }
            ]
        }
    )

    name: str = Field(..., examples=["Container 7 to Rosario"])
    status: ProcessStatus = ProcessStatus.PENDING
    assigned_to: Optional[str] = None
    details: Optional[Dict[str, str]] = Field(
        None,
        description="Ordered free-form fields; keys must be non-empty",
    )


class LogisticsUpdateSchema(BaseModel):
    """Schema for PATCH /v1/logistics/{id}; moving a card sends only `status`."""

    name: Optional[str] = None
    status: Optional[ProcessStatus] = None
    assigned_to: Optional[str] = None
    details: Optional[Dict[str, str]] = None


class LogisticsResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    status: ProcessStatus
    assigned_to: Optional[str] = None
    created_by: Optional[str] = None
    details: Dict[str, str] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


class LogisticsListResponseSchema(BaseModel):
    processes: List[LogisticsResponseSchema]
    active: int = Field(..., description="Pending plus in-progress processes")
    pending: int


class LogisticsBoardResponseSchema(BaseModel):
    """Processes grouped into kanban columns, one per status."""

    columns: Dict[ProcessStatus, List[LogisticsResponseSchema]]
    counts: Dict[ProcessStatus, int]
