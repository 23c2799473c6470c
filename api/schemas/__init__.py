"""
Pydantic schemas for request/response validation.

This package contains all Pydantic models used for API response
serialization.
"""

from api.schemas.common import ErrorResponse, HealthCheckResponse
from api.schemas.import_schema import ImportResultResponse
from api.schemas.personnel_schema import PersonnelResponse

__all__ = [
    # Common
    'ErrorResponse',
    'HealthCheckResponse',

    # Import
    'ImportResultResponse',

    # Personnel
    'PersonnelResponse',
]
