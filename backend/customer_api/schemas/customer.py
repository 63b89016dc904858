"""
Customer API — Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the API contract for the customer resource.
Why:   Explicit decode/validate/encode at each handler boundary, plus
       automatic OpenAPI documentation.
How:   FastAPI validates request bodies against the *In models and
       serializes ORM objects through CustomerResponse (from_attributes).

Design Decision:
    Schemas are separate from SQLAlchemy models so the API contract controls
    exactly which fields are accepted and exposed.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class CustomerIn(BaseModel):
    """
    What:  Customer record sent by the client on create (POST) and replace (PUT).
    Why optional id:
        - POST: the service generates a UUID string when id is omitted
        - PUT: the path id is authoritative; a body id must match it
    Every other field is optional too. On PUT an omitted field is stored as
    null, because update replaces the whole record.
    """
    id: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=64,
        description="Customer identifier (generated on create when omitted)",
    )
    name: Optional[str] = Field(default=None, max_length=200, description="Customer name")
    email: Optional[str] = Field(default=None, max_length=320, description="Contact e-mail")
    phone: Optional[str] = Field(default=None, max_length=50, description="Contact phone")

    model_config = {
        "json_schema_extra": {
            "examples": [{"id": "c1", "name": "Acme", "email": "ops@acme.test"}]
        }
    }


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class CustomerResponse(BaseModel):
    """Stored customer record as returned by list, get and create."""
    id: str = Field(description="Customer identifier")
    name: Optional[str] = Field(default=None, description="Customer name")
    email: Optional[str] = Field(default=None, description="Contact e-mail")
    phone: Optional[str] = Field(default=None, description="Contact phone")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for application errors.

    Example:
        {
            "error": "forbidden",
            "message": "Access denied: policy 'Admin' is not satisfied",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
