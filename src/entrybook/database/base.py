"""Abstract entry store interface."""

from abc import ABC, abstractmethod
from typing import Optional

# domain/__init__.py loads its services lazily, so importing entities here is safe
from entrybook.domain.entities import (
    CreateEntryError,
    DeleteEntryError,
    Entry,
    EntryInput,
    UpdateEntryError,
    UserRole,
)


class UnauthorizedAccessError(PermissionError):
    """Raised by a store when the caller may not use it at all.

    The message always contains "Unauthorized" so clients can tell it apart
    from domain errors by its text alone.
    """


class Database(ABC):
    """Abstract entry store for entrybook.

    Domain failures are returned as error values, not raised. Only a caller
    who is not signed in (or has been demoted to guest) gets an
    UnauthorizedAccessError.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Entry operations
    @abstractmethod
    def create_entry(self, entry_input: EntryInput) -> Optional[CreateEntryError]:
        """Create an entry owned by the caller. Returns an error or None."""
        pass

    @abstractmethod
    def update_entry(
        self, entry_id: str, entry_input: EntryInput
    ) -> Optional[UpdateEntryError]:
        """Update an entry's mutable fields. Returns an error or None."""
        pass

    @abstractmethod
    def delete_entry(self, entry_id: str) -> Optional[DeleteEntryError]:
        """Delete an entry permanently. Returns an error or None."""
        pass

    @abstractmethod
    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get entry by ID, if visible to the caller."""
        pass

    @abstractmethod
    def list_entries_newest_first(self) -> list[Entry]:
        """List entries visible to the caller, newest created first."""
        pass

    # Role operations
    @abstractmethod
    def get_caller_role(self) -> UserRole:
        """Get the caller's role."""
        pass

    @abstractmethod
    def assign_role(self, principal: str, role: UserRole) -> None:
        """Assign a role to a principal. Only admins may do this."""
        pass

    def is_caller_admin(self) -> bool:
        """Check whether the caller is an admin."""
        return self.get_caller_role() == UserRole.ADMIN
