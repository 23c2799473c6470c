"""
Tests for the roster CLI.
"""

import os
from unittest import mock

import pytest
from click.testing import CliRunner

from scripts.roster_cli import cli
from conftest import person_values


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def direct(runner, database_url, engine):
    """Invoke the CLI in direct mode against the test database."""
    def _invoke(*args):
        return runner.invoke(cli, ['--database-url', database_url, *args], env={'API_URL': ''})
    return _invoke


class TestDirectMode:
    """Test commands that use the services directly."""

    def test_init_db(self, direct):
        result = direct('init-db')

        assert result.exit_code == 0
        assert 'Roster tables ready' in result.output

    def test_import_keeps_source_file(self, direct, make_workbook, count_records):
        path = make_workbook([person_values(ci='111'), person_values(ci='222')])

        result = direct('import', path)

        assert result.exit_code == 0, result.output
        assert 'Imported 2 personnel records' in result.output
        assert os.path.exists(path)
        assert count_records() == 2

    def test_import_empty_sheet_fails(self, direct, make_workbook, count_records):
        path = make_workbook([])

        result = direct('import', path)

        assert result.exit_code == 1
        assert 'no data rows' in result.output
        assert count_records() == 0

    def test_import_failure_reports_row(self, direct, make_workbook, count_records):
        path = make_workbook([person_values(ci='111'), person_values(ci=None)])

        result = direct('import', path)

        assert result.exit_code == 1
        assert 'rolled back' in result.output
        assert 'row: 3' in result.output
        assert count_records() == 0

    def test_list_and_search(self, direct, make_workbook):
        direct('import', make_workbook([
            person_values(ci='111', paterno='Mamani', nombres='Juan'),
            person_values(ci='222', paterno='Condori', nombres='Ana'),
        ]))

        listing = direct('list')
        assert listing.exit_code == 0
        assert listing.output.index('Condori') < listing.output.index('Mamani')
        assert '2 record(s)' in listing.output

        found = direct('find-identity', '111')
        assert 'Mamani' in found.output
        assert 'Condori' not in found.output

        searched = direct('search-name', '--paternal', 'cond')
        assert 'Condori' in searched.output
        assert '1 record(s)' in searched.output

    def test_find_identity_without_match(self, direct):
        result = direct('find-identity', '000', '--complement', 'null')

        assert result.exit_code == 0
        assert 'No records found.' in result.output

    def test_search_name_requires_criteria(self, direct):
        result = direct('search-name')

        assert result.exit_code == 1
        assert 'at least one' in result.output


class TestApiMode:
    """Test commands that call the HTTP API."""

    def test_find_identity_via_api(self, runner):
        response = mock.Mock(status_code=200)
        response.json.return_value = [{
            'ci': '123', 'comp': 'LP', 'paterno': 'Mamani', 'materno': 'Quispe',
            'nombres': 'Juan', 'unidad': 'Unidad Central'
        }]

        with mock.patch('scripts.roster_cli.requests.get', return_value=response) as get:
            result = runner.invoke(cli, ['--api-url', 'http://roster:8000/',
                                         'find-identity', '123', '-c', 'LP'])

        assert result.exit_code == 0
        assert 'Mamani Quispe Juan' in result.output
        get.assert_called_once_with(
            'http://roster:8000/records/by-identity',
            params={'id': '123', 'complement': 'LP'},
            timeout=30
        )

    def test_not_found_via_api(self, runner):
        response = mock.Mock(status_code=404)

        with mock.patch('scripts.roster_cli.requests.get', return_value=response):
            result = runner.invoke(cli, ['--api-url', 'http://roster:8000', 'find-identity', '999'])

        assert result.exit_code == 0
        assert 'No records found.' in result.output

    def test_import_error_via_api(self, runner, make_workbook):
        response = mock.Mock(status_code=400)
        response.json.return_value = {'error': 'The spreadsheet has no data rows.', 'detail': None}

        with mock.patch('scripts.roster_cli.requests.post', return_value=response):
            result = runner.invoke(cli, ['--api-url', 'http://roster:8000',
                                         'import', make_workbook([])])

        assert result.exit_code == 1
        assert 'no data rows' in result.output

    def test_init_db_rejected_in_api_mode(self, runner):
        result = runner.invoke(cli, ['--api-url', 'http://roster:8000', 'init-db'])

        assert result.exit_code == 1
