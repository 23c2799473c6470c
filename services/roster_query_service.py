"""
Roster Query Service - Read operations over the roster.

Runs the filters built by services.filter_builder. Reads need no explicit
transaction; storage failures surface as StorageError without retry.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.models.schema import Personnel
from services.errors import StorageError, driver_message
from services.filter_builder import RosterFilter, identity_filter, name_filter

logger = logging.getLogger(__name__)


class RosterQueryService:
    """Read-only access to personnel records."""

    def __init__(self, db_session: Session):
        self.session = db_session

    def _run(self, roster_filter: RosterFilter) -> List[Personnel]:
        try:
            return list(self.session.scalars(roster_filter.select()))
        except SQLAlchemyError as e:
            logger.error(f"Roster query failed: {driver_message(e)}")
            raise StorageError(e) from e

    def list_records(self) -> List[Personnel]:
        """All records, ordered by paterno, materno, nombres."""
        return self._run(RosterFilter())

    def find_by_identity(self, identity_number: Optional[str],
                         complement: Optional[str] = None) -> List[Personnel]:
        """
        Records matching an identity number and optional complement.

        An identity number may map to several complements, so every match
        is returned. An empty list means nothing matched.
        """
        roster_filter = identity_filter(identity_number, complement)
        records = self._run(roster_filter)
        logger.debug(f"Identity lookup ci={identity_number} comp={complement}: {len(records)} matches")
        return records

    def search_by_name(self, paterno: Optional[str] = None,
                       nombres: Optional[str] = None,
                       unidad: Optional[str] = None) -> List[Personnel]:
        """Records whose paterno/nombres/unidad contain the given fragments."""
        return self._run(name_filter(paterno, nombres, unidad))
