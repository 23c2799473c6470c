"""
Filter Builder - Parameterized read queries over the roster.

Search criteria are accumulated as (clause, bound parameter) pairs. Every
value travels as a bind parameter named p1, p2, ... in the order it was
added, so the placeholders stay correctly numbered whichever subset of
criteria is present. Values are never rendered into the SQL text.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import Select, bindparam, select
from sqlalchemy.sql.elements import ColumnElement

from backend.models.schema import Personnel
from services.errors import MissingCriteriaError

# Shared ordering for every read shape
ROSTER_ORDER = (Personnel.paterno, Personnel.materno, Personnel.nombres)

NULL_COMPLEMENT = 'null'
LIKE_ESCAPE = '\\'


def escape_like(fragment: str) -> str:
    """Escape LIKE wildcards so the fragment matches literally."""
    return (
        fragment.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace('%', LIKE_ESCAPE + '%')
        .replace('_', LIKE_ESCAPE + '_')
    )


class RosterFilter:
    """Accumulator of WHERE clauses and their positional parameters."""

    def __init__(self):
        self.clauses: List[ColumnElement] = []
        self.params: Dict[str, Any] = {}

    def _bind(self, value: Any):
        name = f"p{len(self.params) + 1}"
        self.params[name] = value
        return bindparam(name, value)

    def equals(self, column, value: Any) -> 'RosterFilter':
        """Exact, case-sensitive equality."""
        self.clauses.append(column == self._bind(value))
        return self

    def is_null(self, column) -> 'RosterFilter':
        """Column IS NULL; takes no parameter."""
        self.clauses.append(column.is_(None))
        return self

    def contains(self, column, fragment: str) -> 'RosterFilter':
        """Case-insensitive substring match (ILIKE '%fragment%')."""
        pattern = f"%{escape_like(fragment)}%"
        self.clauses.append(column.ilike(self._bind(pattern), escape=LIKE_ESCAPE))
        return self

    def select(self) -> Select:
        """Build the ordered SELECT with all clauses joined by AND."""
        statement = select(Personnel)
        if self.clauses:
            statement = statement.where(*self.clauses)
        return statement.order_by(*ROSTER_ORDER)


def identity_filter(identity_number: Optional[str], complement: Optional[str] = None) -> RosterFilter:
    """
    Build the identity lookup filter.

    Args:
        identity_number: National identity number (required)
        complement: Optional complement; the literal 'null' (any case)
            selects records without a complement

    Raises:
        MissingCriteriaError: If no identity number is given
    """
    if not identity_number:
        raise MissingCriteriaError('The "id" parameter is required.')

    roster_filter = RosterFilter().equals(Personnel.ci, identity_number)

    if complement:
        if complement.lower() == NULL_COMPLEMENT:
            roster_filter.is_null(Personnel.comp)
        else:
            roster_filter.equals(Personnel.comp, complement)

    return roster_filter


def name_filter(
    paterno: Optional[str] = None,
    nombres: Optional[str] = None,
    unidad: Optional[str] = None
) -> RosterFilter:
    """
    Build the name/unit search filter.

    Supplied fragments are matched as case-insensitive substrings, in the
    fixed order paterno, nombres, unidad. Empty fragments are left out.

    Raises:
        MissingCriteriaError: If no fragment is given
    """
    if not (paterno or nombres or unidad):
        raise MissingCriteriaError(
            'Provide at least one of "paternal", "given" or "unit" to search.'
        )

    roster_filter = RosterFilter()
    if paterno:
        roster_filter.contains(Personnel.paterno, paterno)
    if nombres:
        roster_filter.contains(Personnel.nombres, nombres)
    if unidad:
        roster_filter.contains(Personnel.unidad, unidad)
    return roster_filter
