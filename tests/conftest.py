"""Shared pytest fixtures for entrybook tests."""

import tempfile
import os
import pytest

from entrybook.database.factories import create_sqlite_database
from entrybook.domain.csv_import import EntryImportService
from entrybook.domain.entities import Entry
from entrybook.domain.entry import EntryService


@pytest.fixture
def db_path():
    """Create a temporary database file path."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    yield path

    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture
def temp_db(db_path):
    """Create a temporary database acting as 'alice'.

    Alice is the first identity on the store, so she is its admin.
    """
    db = create_sqlite_database(database_path=db_path, principal="alice")
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()
    db.get_caller_role()

    yield db

    db.disconnect()


@pytest.fixture
def user_db(temp_db, db_path):
    """Open the same database as 'bob', a regular user."""
    db = create_sqlite_database(database_path=db_path, principal="bob")
    db.connect()

    yield db

    db.disconnect()


@pytest.fixture
def anonymous_db(temp_db, db_path):
    """Open the same database without an identity."""
    db = create_sqlite_database(database_path=db_path, principal="")
    db.connect()

    yield db

    db.disconnect()


@pytest.fixture
def entry_service(temp_db):
    """Create an EntryService acting as the admin."""
    return EntryService(temp_db)


@pytest.fixture
def import_service(entry_service):
    """Create an EntryImportService on top of the admin's EntryService."""
    return EntryImportService(entry_service)


@pytest.fixture
def make_entry():
    """Build Entry entities with sensible defaults."""

    def _make_entry(**overrides):
        values = {
            "id": "1700000000000-abcdefghi",
            "manual_date": "2024-01-15",
            "customer_name": "Jane",
            "mobile_number": "9876543210",
            "amount_rs": 500,
            "created_at": 1_700_000_000_000_000_000,
            "owner": "alice",
        }
        values.update(overrides)
        return Entry(**values)

    return _make_entry


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
