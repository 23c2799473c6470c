"""Models package for the personnel roster."""
from backend.models.schema import Base, Personnel, ROSTER_COLUMNS

__all__ = ['Base', 'Personnel', 'ROSTER_COLUMNS']
