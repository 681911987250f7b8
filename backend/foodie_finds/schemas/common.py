"""
Foodie Finds API: Shared Response Models
==========================================

What:  Error and health bodies used across all routers.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    What:  Body of every non-2xx response.

    Example:
        {"message": "No Restaurant found with cuisine: French"}
    """
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
