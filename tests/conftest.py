"""
Pytest configuration and fixtures.
"""
import sys
import os
import re

import gspread
import pytest

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))

from config import Config


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    GOOGLE_SPREADSHEET_ID = 'test-spreadsheet'
    GOOGLE_SERVICE_ACCOUNT_KEY = None
    STORAGE_UPLOAD_URL = 'https://storage.example.com/upload'
    NOTIFY_RECIPIENTS = []
    NOTIFY_ASYNC = False
    CACHE_TYPE = 'SimpleCache'
    STRICT_NUMERIC_CELLS = False


HEADERS = {
    'Members': ['University ID', 'Name', 'Email', 'Phone', 'Committee', 'Total Hours', 'Achievements'],
    'Requests': ['University ID', 'Description', 'Hours', 'Image', 'Date', 'Approved', 'Approved By', 'Request ID'],
    'AchievementTypes': ['Name', 'Hours', 'Created At', 'Type ID'],
}

_CELL_RE = re.compile(r'^\$?([A-Z]+)\$?(\d*)$')


def _col_number(letters):
    n = 0
    for ch in letters:
        n = n * 26 + (ord(ch) - 64)
    return n


def _render(value):
    """Formatted value of a RAW-written cell: booleans as TRUE/FALSE, whole numbers without .0."""
    if isinstance(value, bool):
        return 'TRUE' if value else 'FALSE'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_range(range_spec):
    """'Requests!C5:G5' -> ('Requests', start_row, start_col, end_row, end_col); rows/cols 1-based, None = open."""
    sheet, _, cells = range_spec.partition('!')
    start, _, end = cells.partition(':')
    m1 = _CELL_RE.match(start)
    m2 = _CELL_RE.match(end) if end else m1
    start_col, start_row = _col_number(m1.group(1)), int(m1.group(2)) if m1.group(2) else None
    end_col, end_row = _col_number(m2.group(1)), int(m2.group(2)) if m2.group(2) else None
    return sheet, start_row, start_col, end_row, end_col


class FakeSpreadsheet:
    """
    In-memory stand-in for ``gspread.Spreadsheet``.

    Implements the calls the gateway makes, with the behaviour that matters:
    appends go after the last row, deletes shift later rows up, reads drop
    trailing empty cells and rows like the real API.
    """

    def __init__(self, sheets=None):
        self.sheets = {}
        self.sheet_ids = {}
        for idx, (title, rows) in enumerate((sheets or {}).items()):
            self.sheets[title] = [list(r) for r in rows]
            self.sheet_ids[title] = idx
        self.calls = []
        self.fail_on = set()

    def _check(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.fail_on or '*' in self.fail_on:
            raise gspread.exceptions.GSpreadException(f"{name} failed")

    def rows(self, title):
        """Data rows below the header, as stored."""
        return self.sheets[title][1:]

    def values_get(self, range_spec, params=None):
        self._check('values_get', range_spec)
        sheet, start_row, start_col, end_row, end_col = _parse_range(range_spec)
        rows = self.sheets[sheet]
        start_row = start_row or 1
        end_row = end_row or len(rows)
        values = []
        for row in rows[start_row - 1:end_row]:
            cells = row[start_col - 1:end_col]
            while cells and cells[-1] == '':
                cells.pop()
            values.append(cells)
        while values and not values[-1]:
            values.pop()
        result = {'range': range_spec, 'majorDimension': 'ROWS'}
        if values:
            result['values'] = values
        return result

    def values_append(self, range_spec, params=None, body=None):
        self._check('values_append', range_spec, body, params)
        sheet = range_spec.partition('!')[0]
        row = [_render(v) for v in body['values'][0]]
        self.sheets[sheet].append(row)
        n = len(self.sheets[sheet])
        return {'updates': {'updatedRange': f"{sheet}!A{n}:{chr(64 + len(row))}{n}", 'updatedRows': 1}}

    def values_update(self, range_spec, params=None, body=None):
        self._check('values_update', range_spec, body, params)
        sheet, start_row, start_col, _, _ = _parse_range(range_spec)
        rows = self.sheets[sheet]
        for r_offset, values in enumerate(body['values']):
            r = start_row - 1 + r_offset
            while len(rows) <= r:
                rows.append([])
            row = rows[r]
            for c_offset, value in enumerate(values):
                c = start_col - 1 + c_offset
                while len(row) <= c:
                    row.append('')
                row[c] = _render(value)
        return {'updatedRange': range_spec}

    def batch_update(self, body):
        self._check('batch_update', body)
        for req in body['requests']:
            rng = req['deleteDimension']['range']
            title = next(t for t, sid in self.sheet_ids.items() if sid == rng['sheetId'])
            del self.sheets[title][rng['startIndex']:rng['endIndex']]
        return {'replies': [{}]}

    def fetch_sheet_metadata(self, params=None):
        self._check('fetch_sheet_metadata')
        return {'sheets': [
            {'properties': {'title': title, 'sheetId': sid}} for title, sid in self.sheet_ids.items()
        ]}


class RecordingUploader:
    def __init__(self):
        self.calls = []
        self.error = None

    def __call__(self, data, mime_type, suggested_name):
        self.calls.append((data, mime_type, suggested_name))
        if self.error:
            raise self.error
        return f"https://storage.example.com/volunteer-proofs/{len(self.calls)}-{suggested_name}"


class RecordingNotifier:
    def __init__(self):
        self.calls = []
        self.error = None

    def __call__(self, title, body):
        self.calls.append((title, body))
        if self.error:
            raise self.error


@pytest.fixture
def spreadsheet():
    return FakeSpreadsheet({
        'AchievementTypes': [HEADERS['AchievementTypes']],
        'Members': [HEADERS['Members']],
        'Requests': [HEADERS['Requests']],
    })


@pytest.fixture
def uploader():
    return RecordingUploader()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def app(spreadsheet, uploader, notifier):
    """Create application for testing, backed by the in-memory spreadsheet."""
    from app import create_app
    from app.services.container import init_services

    app = create_app(TestConfig)
    init_services(app, spreadsheet=spreadsheet, upload=uploader, notify=notifier)
    return app


@pytest.fixture
def app_context(app):
    with app.app_context():
        yield app


@pytest.fixture
def services(app_context):
    from app.services.container import get_services
    return get_services()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


class AuthActions:
    """Plays the identity provider: writes the identity payload into the session."""

    def __init__(self, client):
        self._client = client

    def login(self, role='admin', name='Admin User', email='admin@example.com', user_id='u-1'):
        with self._client.session_transaction() as sess:
            sess['identity'] = {'userId': user_id, 'role': role, 'name': name, 'email': email}

    def login_member(self):
        self.login(role='user', name='Member User', email='member@example.com', user_id='u-2')

    def logout(self):
        with self._client.session_transaction() as sess:
            sess.pop('identity', None)


@pytest.fixture
def auth(client):
    return AuthActions(client)


def request_row(university_id='445101413', description='Attended orientation day', hours='',
                image='https://storage.example.com/p.jpg', date='2026-10-01T09:00:00Z',
                approved='FALSE', approved_by='', request_id=''):
    return [university_id, description, hours, image, date, approved, approved_by, request_id]
