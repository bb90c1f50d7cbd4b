"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from entrybook.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(
    database_path: Optional[str] = None, principal: Optional[str] = None
) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks ENTRYBOOK_DB_PATH
            environment variable, then defaults to ~/.entrybook/entrybook.db
        principal: Caller identity. If None, checks ENTRYBOOK_USER environment
            variable; an empty identity is anonymous

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("ENTRYBOOK_DB_PATH")

    if database_path is None:
        # Default to ~/.entrybook/entrybook.db
        home = Path.home()
        db_dir = home / ".entrybook"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "entrybook.db")

    if principal is None:
        principal = os.environ.get("ENTRYBOOK_USER", "")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url, principal=principal)
