"""
Irenet Backend — Shared Response Schemas
========================================

Every resource endpoint answers with `{"success": bool, ...}`; errors carry
an `error` string. The root and health endpoints have their own shapes.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    What:  Error body for every resource endpoint.

    Example:
        {"success": false, "error": "Missing required fields", "request_id": "1f0c2a9e"}
    """
    success: bool = Field(default=False)
    error: str = Field(description="Error message; raw driver text for storage errors")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class MessageResponse(BaseModel):
    """Returned by the status-update endpoints."""
    success: bool = Field(default=True)
    message: str


class StatusUpdate(BaseModel):
    """PATCH body for donations and requests. Any non-empty string is accepted."""
    status: Optional[str] = None


class WelcomeResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    """
    What:  Body of GET /api/health.

    Healthy:   {"status": "OK", "message": "...", "database": "connected"}
    Unhealthy: {"status": "ERROR", "message": "...", "error": "<driver message>"}
    """
    status: str = Field(description="OK or ERROR")
    message: str
    database: Optional[str] = Field(default=None, description="connected when healthy")
    error: Optional[str] = Field(default=None, description="Failure detail when unhealthy")
