"""
Roster Import Service - Framework-agnostic bulk import.

Parses an uploaded workbook and commits its rows to the roster as one
all-or-nothing transaction. The service owns the uploaded temporary file
and removes it on every exit path.
"""

import os
import logging
from typing import Any, Callable, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.models.schema import Personnel
from services.errors import EmptyInputError, ImportFailedError, driver_message
from services.record_mapping import record_from_row
from services.workbook_reader import read_first_sheet_rows

logger = logging.getLogger(__name__)

# Spreadsheet row number of the first data row (row 1 holds the headers)
FIRST_DATA_ROW = 2


class RosterImportService:
    """
    Bulk importer for personnel spreadsheets.

    Each import opens a dedicated session from the factory, so the batch
    never shares a transaction with the caller.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        """
        Initialize roster import service.

        Args:
            session_factory: Callable returning a new SQLAlchemy session
                             (typically a sessionmaker)
        """
        self.session_factory = session_factory

    def import_file(self, file_path: str) -> int:
        """
        Import every row of the first sheet, then delete the file.

        Args:
            file_path: Path to the uploaded temporary workbook

        Returns:
            Number of records inserted

        Raises:
            InvalidWorkbookError: If the file is not a readable workbook
            EmptyInputError: If the sheet has no data rows
            ImportFailedError: If any insert failed (nothing is persisted)
        """
        logger.info(f"Starting roster import of {file_path}")

        try:
            rows = read_first_sheet_rows(file_path)
            if not rows:
                raise EmptyInputError()
            return self.insert_batch(rows)
        finally:
            self._remove_file(file_path)

    def insert_batch(self, rows: List[Dict[str, Any]]) -> int:
        """
        Insert rows in file order inside a single transaction.

        Rows are flushed one at a time so a failure points at the first
        offending spreadsheet row.
        """
        session = self.session_factory()
        row_number = None
        try:
            for offset, row in enumerate(rows):
                row_number = FIRST_DATA_ROW + offset
                session.add(Personnel(**record_from_row(row)))
                session.flush()

            row_number = None
            session.commit()
            logger.info(f"Committed {len(rows)} personnel records")
            return len(rows)

        except SQLAlchemyError as e:
            logger.error(f"Import failed at row {row_number}, rolling back: {driver_message(e)}")
            session.rollback()
            raise ImportFailedError(e, row=row_number) from e

        finally:
            session.close()

    @staticmethod
    def _remove_file(file_path: str):
        """Delete the uploaded temporary file."""
        try:
            os.unlink(file_path)
            logger.debug(f"Removed temporary file {file_path}")
        except FileNotFoundError:
            logger.warning(f"Temporary file already gone: {file_path}")
        except OSError as e:
            logger.error(f"Could not remove temporary file {file_path}: {e}")
