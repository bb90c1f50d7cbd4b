"""Database layer for entrybook application."""

from entrybook.database.base import Database, UnauthorizedAccessError
from entrybook.database.factories import create_sqlite_database

__all__ = ["Database", "UnauthorizedAccessError", "create_sqlite_database"]
