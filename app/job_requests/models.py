"""Job request models."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


JobRequestStatus = Literal["pending", "active", "rejected", "completed"]

VALID_STATUSES = ("pending", "active", "rejected", "completed")


class JobRequestCreate(BaseModel):
    """Company form submission. Required fields are checked by the repository."""

    # Unknown keys are kept so a rejected submission is echoed back in full.
    model_config = ConfigDict(extra="allow")

    company_id: Optional[str] = None
    title: Optional[str] = None
    date: Optional[str] = Field(default=None, description="YYYY-MM-DD, defaults to today")
    shift: Optional[str] = None
    description: Optional[str] = None
    salary: Optional[Union[int, float]] = None
    location: Optional[str] = None


class JobRequestStatusUpdate(BaseModel):
    status: Optional[str] = Field(default=None, description="pending | active | rejected | completed")


class JobRequest(BaseModel):
    """Record as written by the create endpoint."""

    model_config = ConfigDict(extra="allow")

    id: str
    company_id: str
    title: str
    date: str
    shift: str
    description: str = ""
    salary: Union[int, float] = 0
    location: str = ""
    status: JobRequestStatus
    created_at: str
    updated_at: str


class JobRequestCreateResponse(BaseModel):
    success: bool = True
    id: str
    job: JobRequest
    message: str


# Stored records are opaque to the store and may predate the current shape,
# so read/update responses pass them through unvalidated.
class JobRequestListResponse(BaseModel):
    success: bool = True
    jobs: List[Dict[str, Any]]
    count: int


class JobRequestStatusResponse(BaseModel):
    success: bool = True
    job: Dict[str, Any]
    message: str
