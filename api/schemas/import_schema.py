"""
Import-related Pydantic schemas.

This module contains schemas for spreadsheet import responses.
"""

from pydantic import BaseModel, Field


class ImportResultResponse(BaseModel):
    """Response when a spreadsheet was imported."""

    message: str = Field(..., description="Human-readable result")
    count: int = Field(..., ge=0, description="Number of records inserted")

    class Config:
        json_schema_extra = {
            "example": {
                "message": "Imported 152 personnel records.",
                "count": 152
            }
        }
