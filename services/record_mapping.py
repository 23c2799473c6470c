"""
Row-to-record mapping for roster imports.

A spreadsheet row arrives as a mapping of header -> cell value. Each of the
contract columns is read by name; unknown headers are ignored and missing
ones become NULL. Required fields are not checked here; the database
constraints reject incomplete rows inside the import transaction.
"""

from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

from backend.models.schema import ROSTER_COLUMNS


def cell_text(value: Any) -> Optional[str]:
    """
    Normalize a cell value to the text stored in the roster.

    Integral floats drop their fractional part so that a numeric identity
    number such as 123456.0 is stored as '123456'. Blank text becomes None.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    text = str(value).strip()
    return text or None


def record_from_row(row: Mapping[str, Any]) -> Dict[str, Optional[str]]:
    """Map a header-keyed row to the contract columns, in fixed order."""
    return {column: cell_text(row.get(column)) for column in ROSTER_COLUMNS}
