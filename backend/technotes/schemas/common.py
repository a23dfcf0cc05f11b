"""
TechNotes Backend: Shared Response Schemas
==========================================

What:  Response shapes shared by every router: the success message body,
       the error body produced by the global exception handlers, and the
       health report.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """
    Body returned by every create, update and delete operation.

    Example:
        {"message": "New user alice created"}
    """
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "conflict")
        message: Human-readable description for display to users
        details: Optional extra context (e.g., which fields failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "conflict",
            "message": "Duplicate username",
            "details": {"field": "username"},
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
