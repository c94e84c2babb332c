"""
Data Transfer Objects for the request log service API.

Contains Pydantic models for responses.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Service health status."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"status": "healthy", "service": "request-log-service"}
        }
    )

    status: str = Field("healthy", description="Health status")
    service: str = Field(..., description="Service name")
