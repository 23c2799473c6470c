"""
Common Pydantic schemas used across the API.

This module contains shared schemas for errors and health checks.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field
from datetime import datetime


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Error message")
    detail: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")
    path: Optional[str] = Field(None, description="Request path that caused the error")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Import failed; all changes were rolled back.",
                "detail": {"cause": "null value in column \"ci\" violates not-null constraint", "row": 7},
                "timestamp": "2025-10-15T12:00:00Z",
                "path": "/import"
            }
        }


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Health check timestamp")
    version: str = Field(..., description="API version")
    database: str = Field(..., description="Database connection status")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "timestamp": "2025-10-15T12:00:00Z",
                "version": "1.0.0",
                "database": "connected"
            }
        }
