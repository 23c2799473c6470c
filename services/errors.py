"""
Roster service exceptions.

Services raise these; the API layer maps them to HTTP responses.
"""

from typing import Any, Dict, Optional


def driver_message(cause: Exception) -> str:
    """Driver-level error text, without the statement and bound parameters."""
    return str(getattr(cause, 'orig', None) or cause).strip()


class RosterError(Exception):
    """Base class for roster service errors."""

    def __init__(self, message: str, detail: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class NoFileError(RosterError):
    """No file was attached to the import request."""

    def __init__(self, message: str = "No file was uploaded."):
        super().__init__(message)


class EmptyInputError(RosterError):
    """The uploaded sheet has no data rows."""

    def __init__(self, message: str = "The spreadsheet has no data rows."):
        super().__init__(message)


class InvalidWorkbookError(RosterError):
    """The uploaded file could not be opened as a workbook."""


class MissingCriteriaError(RosterError):
    """A search was requested without the criteria it needs."""


class ImportFailedError(RosterError):
    """
    An insert failed and the whole batch was rolled back.

    Attributes:
        cause: The underlying storage exception
        row: Spreadsheet row number that failed (header is row 1), if known
    """

    def __init__(self, cause: Exception, row: Optional[int] = None):
        detail = {'cause': driver_message(cause)}
        if row is not None:
            detail['row'] = row
        super().__init__("Import failed; all changes were rolled back.", detail)
        self.cause = cause
        self.row = row


class StorageError(RosterError):
    """A read query failed at the storage layer."""

    def __init__(self, cause: Exception):
        super().__init__("Server error", {'cause': driver_message(cause)})
        self.cause = cause
