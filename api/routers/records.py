"""
Records router - Read access to the personnel roster.

This module provides the full listing plus identity and name/unit searches.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query

from api.dependencies import get_query_service
from api.schemas.common import ErrorResponse
from api.schemas.personnel_schema import PersonnelResponse
from services.roster_query_service import RosterQueryService

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix='/records', tags=['records'])


@router.get('', response_model=List[PersonnelResponse])
def list_records(
    query_service: RosterQueryService = Depends(get_query_service)
):
    """
    List every personnel record.

    Ordered by paternal surname, maternal surname, then given names.

    **Example:**
    ```bash
    curl http://localhost:8000/records
    ```
    """
    records = query_service.list_records()
    return [PersonnelResponse.model_validate(record) for record in records]


@router.get(
    '/by-identity',
    response_model=List[PersonnelResponse],
    responses={
        400: {'model': ErrorResponse, 'description': 'Missing "id"'},
        404: {'model': ErrorResponse, 'description': 'No matching record'},
    }
)
def find_by_identity(
    identity_number: Optional[str] = Query(None, alias='id', description="National identity number"),
    complement: Optional[str] = Query(
        None, description="Identity complement; 'null' matches records without one"
    ),
    query_service: RosterQueryService = Depends(get_query_service)
):
    """
    Find records by identity number and optional complement.

    **Complement handling:**
    - omitted: every record with that identity number
    - `null` (any case): only records without a complement
    - any other value: exact, case-sensitive match

    An identity number may belong to several complements, so the result is
    always an array.

    **Examples:**
    ```bash
    curl "http://localhost:8000/records/by-identity?id=4567890"
    curl "http://localhost:8000/records/by-identity?id=4567890&complement=LP"
    curl "http://localhost:8000/records/by-identity?id=4567890&complement=null"
    ```
    """
    records = query_service.find_by_identity(identity_number, complement)

    if not records:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No personnel record matches that identity number/complement."
        )

    return [PersonnelResponse.model_validate(record) for record in records]


@router.get(
    '/by-name',
    response_model=List[PersonnelResponse],
    responses={400: {'model': ErrorResponse, 'description': 'No search criteria'}}
)
def search_by_name(
    paternal: Optional[str] = Query(None, description="Fragment of the paternal surname"),
    given: Optional[str] = Query(None, description="Fragment of the given names"),
    unit: Optional[str] = Query(None, description="Fragment of the organizational unit"),
    query_service: RosterQueryService = Depends(get_query_service)
):
    """
    Search by paternal surname, given names and/or unit.

    Each supplied fragment is a case-insensitive partial match; supplied
    fragments are combined with AND. At least one is required.

    **Example:**
    ```bash
    curl "http://localhost:8000/records/by-name?paternal=mamani&unit=central"
    ```
    """
    records = query_service.search_by_name(paterno=paternal, nombres=given, unidad=unit)
    return [PersonnelResponse.model_validate(record) for record in records]
