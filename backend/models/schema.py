"""
SQLAlchemy models for the personnel roster.

This module defines the database schema using SQLAlchemy ORM. The twelve
contract columns are named exactly like the spreadsheet headers expected
by the importer.
"""

from sqlalchemy import (
    Column, Integer, String, TIMESTAMP, Index, UniqueConstraint, text
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Contract columns, in insertion order. Spreadsheet headers must match
# these names exactly (lowercase).
ROSTER_COLUMNS = (
    'ci',
    'comp',
    'paterno',
    'materno',
    'nombres',
    'escalafon',
    'grado',
    'proceso',
    'cargo',
    'unidad',
    'destino',
    'celular',
)


class Personnel(Base):
    """A single personnel record on the roster."""

    __tablename__ = 'personal'
    __table_args__ = (
        UniqueConstraint('ci', 'comp', name='uq_personal_ci_comp', postgresql_nulls_not_distinct=True),
        Index('idx_personal_ci', 'ci'),
        Index('idx_personal_names', 'paterno', 'materno', 'nombres'),
        Index('idx_personal_unidad', 'unidad'),
        {'comment': 'Personnel roster imported from spreadsheets'}
    )

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        nullable=False
    )
    ci = Column(
        String(20),
        nullable=False,
        comment='National identity number'
    )
    comp = Column(
        String(10),
        nullable=True,
        comment='Identity complement (jurisdiction code), NULL when absent'
    )
    paterno = Column(
        String(100),
        nullable=False,
        comment='Paternal surname'
    )
    materno = Column(
        String(100),
        nullable=True,
        comment='Maternal surname'
    )
    nombres = Column(
        String(150),
        nullable=False,
        comment='Given names'
    )
    escalafon = Column(
        String(50),
        nullable=True,
        comment='Seniority rank'
    )
    grado = Column(
        String(100),
        nullable=True,
        comment='Grade'
    )
    proceso = Column(
        String(100),
        nullable=True,
        comment='Process or category'
    )
    cargo = Column(
        String(150),
        nullable=True,
        comment='Position or role'
    )
    unidad = Column(
        String(150),
        nullable=True,
        comment='Organizational unit'
    )
    destino = Column(
        String(150),
        nullable=True,
        comment='Destination or location'
    )
    celular = Column(
        String(30),
        nullable=True,
        comment='Contact number'
    )
    imported_at = Column(
        TIMESTAMP,
        server_default=text('CURRENT_TIMESTAMP'),
        nullable=False,
        comment='Insertion timestamp'
    )

    def __repr__(self):
        comp = self.comp if self.comp is not None else 'NULL'
        return f"<Personnel(id={self.id}, ci='{self.ci}', comp={comp}, paterno='{self.paterno}')>"
