"""
Pytest configuration and fixtures for roster tests.
"""

import os
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv
import openpyxl

from backend.models.schema import Base, Personnel, ROSTER_COLUMNS

# Load environment
load_dotenv()

# Test database URL; a per-test SQLite file is used when unset
TEST_DATABASE_URL = os.getenv('TEST_DATABASE_URL')


@pytest.fixture
def database_url(tmp_path):
    """URL of the database used by a single test."""
    return TEST_DATABASE_URL or f"sqlite:///{tmp_path / 'roster_test.db'}"


@pytest.fixture
def engine(database_url):
    """Create test database engine with fresh tables."""
    connect_args = {'check_same_thread': False} if database_url.startswith('sqlite') else {}
    eng = create_engine(database_url, connect_args=connect_args)
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session(session_factory):
    """Create a new database session for a test."""
    sess = session_factory()
    yield sess
    sess.close()


@pytest.fixture
def count_records(session_factory):
    """Return the number of stored records, read in a fresh session."""
    def _count():
        with session_factory() as sess:
            return sess.query(Personnel).count()
    return _count


def make_person(**overrides):
    """Build a complete personnel row keyed by column name."""
    row = {
        'ci': '1000001',
        'comp': 'LP',
        'paterno': 'Mamani',
        'materno': 'Quispe',
        'nombres': 'Juan Carlos',
        'escalafon': '1024',
        'grado': 'Sargento',
        'proceso': 'Operativo',
        'cargo': 'Jefe de Sección',
        'unidad': 'Unidad Central',
        'destino': 'La Paz',
        'celular': '71234567',
    }
    row.update(overrides)
    return row


@pytest.fixture
def add_people(session_factory):
    """Insert personnel rows directly and commit them."""
    def _add(*rows):
        with session_factory() as sess:
            sess.add_all([Personnel(**row) for row in rows])
            sess.commit()
    return _add


@pytest.fixture
def make_workbook(tmp_path):
    """
    Write an .xlsx file and return its path.

    Args (of the returned callable):
        rows: List of value lists written below the header row
        headers: Header row (defaults to the roster columns)
        name: File name inside tmp_path
        extra_sheets: Mapping of sheet title -> list of rows added after
            the first sheet
    """
    def _make(rows, headers=ROSTER_COLUMNS, name='personal.xlsx', extra_sheets=None):
        workbook = openpyxl.Workbook()
        worksheet = workbook.active
        worksheet.title = 'Personal'
        if headers is not None:
            worksheet.append(list(headers))
        for row in rows:
            worksheet.append(list(row))

        for title, sheet_rows in (extra_sheets or {}).items():
            extra = workbook.create_sheet(title)
            for row in sheet_rows:
                extra.append(list(row))

        path = tmp_path / name
        workbook.save(path)
        return str(path)
    return _make


def person_values(**overrides):
    """Row values in roster column order, for make_workbook."""
    row = make_person(**overrides)
    return [row[column] for column in ROSTER_COLUMNS]
