"""
SimpleForm Backend: Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract.
How:   FastAPI uses these models to parse request bodies, serialize responses
       and generate the OpenAPI document.

Request bodies only check JSON types here. Required-field and rating-range
rules live in `simpleform.services.validation`, so the same rules apply
whatever storage engine sits behind the API.

Wire format of a record:
    {
        "id": "5b0c3f8e-8a57-4d5e-9a0e-3a3f6c1b9d21",
        "name": "Ann",
        "email": "a@x.com",
        "feedback": "Great",
        "rating": 5,
        "createdAt": "2026-10-19T12:00:00.123456Z"
    }
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ResponseIn(BaseModel):
    """
    Body of POST /responses and PUT /responses/{id}.

    All fields are optional at the type level so that a missing field is
    reported by `validate_submission()` with the same 400 error as an empty one.
    """
    name: Optional[str] = Field(default=None, examples=["Ann"], description="Submitter name")
    email: Optional[str] = Field(default=None, examples=["a@x.com"], description="Submitter email")
    feedback: Optional[str] = Field(default=None, examples=["Great"], description="Feedback text")
    rating: Optional[int] = Field(default=None, examples=[5], description="Rating from 1 to 5")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ResponseOut(BaseModel):
    """Full representation of a stored form submission."""
    id: uuid.UUID = Field(description="Unique record identifier")
    name: str
    email: str
    feedback: str
    rating: Optional[int] = Field(default=None, description="Rating 1-5, null when not given")
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
        description="When the record was created (UTC ISO 8601)",
    )

    model_config = {"from_attributes": True}

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Some drivers (SQLite) hand back naive datetimes; stored values are UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class ResponseEnvelope(BaseModel):
    """Success body for single-record routes."""
    message: str = Field(description="Human-readable outcome")
    data: ResponseOut


class ResponseListEnvelope(BaseModel):
    """Success body for GET /responses."""
    message: str = Field(description="Human-readable outcome")
    data: List[ResponseOut]


class IndexResponse(BaseModel):
    """Body of GET /: API name and a map of route → description."""
    message: str
    endpoints: Dict[str, str]


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body shared by every route.

    Fields:
        error: Human-readable description of what went wrong
        details: Optional extra context (e.g. which fields failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
