"""
Import router - Handle personnel spreadsheet uploads.

The upload is written to a temporary file and imported synchronously in a
single transaction. The import service deletes the temporary file once the
transaction resolves.
"""

import os
import logging
import tempfile
import shutil
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, UploadFile, File, Depends, status
from fastapi.concurrency import run_in_threadpool

from api.config import settings
from api.dependencies import get_import_service, verify_file_extension, verify_file_size
from api.schemas.common import ErrorResponse
from api.schemas.import_schema import ImportResultResponse
from services.errors import NoFileError
from services.roster_import_service import RosterImportService

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix='/import', tags=['import'])


def save_upload(file: UploadFile) -> str:
    """
    Write an uploaded file to the temporary upload directory.

    Returns:
        Path of the temporary file

    Raises:
        HTTPException: If the stored file exceeds the size limit
    """
    fd, temp_path = tempfile.mkstemp(
        suffix=Path(file.filename).suffix,
        dir=settings.TEMP_UPLOAD_DIR
    )

    try:
        with os.fdopen(fd, 'wb') as tmp:
            shutil.copyfileobj(file.file, tmp)

        file_size = os.path.getsize(temp_path)
        verify_file_size(file_size)
    except Exception:
        os.unlink(temp_path)
        raise

    logger.info(f"File saved to {temp_path} ({file_size / 1024:.1f} KB)")
    return temp_path


@router.post(
    '',
    response_model=ImportResultResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {'model': ErrorResponse, 'description': 'No file, empty sheet or unreadable workbook'},
        500: {'model': ErrorResponse, 'description': 'Import rolled back'},
    }
)
async def import_roster(
    file: Optional[UploadFile] = File(None, description="Excel file with personnel rows (.xlsx or .xlsm)"),
    import_service: RosterImportService = Depends(get_import_service)
):
    """
    Import personnel records from an Excel file.

    Only the first sheet is read. Its header row must use the roster column
    names: `ci`, `comp`, `paterno`, `materno`, `nombres`, `escalafon`,
    `grado`, `proceso`, `cargo`, `unidad`, `destino`, `celular`.

    All rows are inserted in one transaction: either every row is stored or,
    if any row fails, none is.

    **Returns:**
    - 201 with the number of imported records
    - 400 if no file was sent or the sheet has no data rows
    - 500 with the underlying cause if the import was rolled back

    **Example:**
    ```bash
    curl -F "file=@personal.xlsx" http://localhost:8000/import
    ```
    """
    if file is None or not file.filename:
        raise NoFileError()

    logger.info(f"Import request: {file.filename}")

    verify_file_extension(file.filename)
    temp_path = save_upload(file)

    count = await run_in_threadpool(import_service.import_file, temp_path)

    logger.info(f"Imported {count} records from {file.filename}")

    return ImportResultResponse(
        message=f"Imported {count} personnel records.",
        count=count
    )
