"""
Workbook Reader - Parse the first sheet of an uploaded workbook.

Parsing is pure: it opens the file, reads header-keyed rows and closes the
workbook, without touching the database.
"""

import logging
import zipfile
from typing import Any, Dict, List

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from services.errors import InvalidWorkbookError

logger = logging.getLogger(__name__)


def _header_name(value: Any) -> str:
    if value is None:
        return ''
    return str(value)


def read_first_sheet_rows(file_path: str) -> List[Dict[str, Any]]:
    """
    Read the first worksheet into a list of header-keyed rows.

    The first row is the header row. Empty cells and columns without a
    header are left out of each row, entirely blank rows are skipped, and
    when a header repeats the first column wins. Other sheets are ignored.

    Args:
        file_path: Path to an .xlsx/.xlsm file

    Returns:
        List of {header: value} dictionaries in sheet order

    Raises:
        InvalidWorkbookError: If the file cannot be opened as a workbook
    """
    try:
        workbook = openpyxl.load_workbook(file_path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError) as e:
        raise InvalidWorkbookError(
            "The uploaded file is not a readable Excel workbook.",
            {'cause': str(e)}
        ) from e

    try:
        if not workbook.worksheets:
            return []

        worksheet = workbook.worksheets[0]
        logger.info(f"Reading sheet '{worksheet.title}' from {file_path}")

        row_iter = worksheet.iter_rows(values_only=True)
        header_row = next(row_iter, None)
        if header_row is None:
            return []

        headers = []
        for value in header_row:
            name = _header_name(value)
            headers.append('' if name in headers else name)

        rows = []
        for values in row_iter:
            row = {}
            for header, value in zip(headers, values):
                if not header or value is None:
                    continue
                row[header] = value
            if row:
                rows.append(row)

        logger.info(f"Parsed {len(rows)} data rows from sheet '{worksheet.title}'")
        return rows
    finally:
        workbook.close()
