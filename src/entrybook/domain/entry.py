"""Entry domain service."""

import logging
import math
import random
import string
import time
from typing import Optional

from entrybook.database.base import Database
from entrybook.domain.entities import (
    EmptyField,
    Entry,
    EntryInput,
    EntryNotFound,
    InvalidAmount,
    Unauthorized,
    UserRole,
)
from entrybook.domain.errors import (
    AuthorizationError,
    NotFoundError,
    StoreError,
    ValidationError,
    create_entry_auth_message,
    delete_entry_auth_message,
    entry_not_found,
    is_authorization_error,
    update_entry_auth_message,
    view_entries_auth_message,
)
from entrybook.domain.validation import parse_leading_number

logger = logging.getLogger(__name__)

LIST_MAX_ATTEMPTS = 3

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_entry_id() -> str:
    """Generate an entry ID from the current time and a random suffix."""
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{millis}-{suffix}"


def amount_to_rupees(amount_rs: str) -> int:
    """Convert an amount string to whole rupees, dropping any fraction.

    Raises:
        ValidationError: If the amount is not a finite number
    """
    number = parse_leading_number(amount_rs or "")
    if number is None or not math.isfinite(number):
        raise ValidationError("Amount must be a valid number")
    return math.floor(number)


def _raise_for_store_error(error, fallback: str) -> None:
    """Raise the domain exception matching a store error value.

    Every store error kind must be listed here; an unknown kind is a
    programming error and raises TypeError.
    """
    if error is None:
        return
    if isinstance(error, (EmptyField, InvalidAmount)):
        raise ValidationError(error.message or fallback)
    if isinstance(error, EntryNotFound):
        raise NotFoundError(error.message or fallback)
    if isinstance(error, Unauthorized):
        raise AuthorizationError(error.message or fallback)
    raise TypeError(f"Unhandled entry store error: {error!r}")


class EntryService:
    """Service for managing entries through the entry store."""

    def __init__(self, db: Database):
        """Initialize entry service.

        Args:
            db: Entry store instance
        """
        self.db = db

    def is_signed_in(self) -> bool:
        """Check whether the caller may use the store."""
        return self.db.get_caller_role() != UserRole.GUEST

    def require_signed_in(self, message: Optional[str] = None) -> None:
        """Raise AuthorizationError with a sign-in prompt for guests."""
        if not self.is_signed_in():
            raise AuthorizationError(message or create_entry_auth_message())

    def create_entry(
        self,
        manual_date: str,
        customer_name: str,
        mobile_number: str,
        amount_rs: str,
    ) -> str:
        """Create an entry.

        Args:
            manual_date: Date in YYYY-MM-DD form
            customer_name: Customer name
            mobile_number: Mobile number digits
            amount_rs: Amount in rupees; any fraction is dropped

        Returns:
            Generated entry ID

        Raises:
            ValidationError: If the store rejects a field
            AuthorizationError: If the caller is not signed in
        """
        entry_input = EntryInput(
            id=generate_entry_id(),
            manual_date=manual_date,
            customer_name=customer_name,
            mobile_number=mobile_number,
            amount_rs=amount_to_rupees(amount_rs),
        )

        try:
            error = self.db.create_entry(entry_input)
        except Exception as e:
            if is_authorization_error(e):
                raise AuthorizationError(create_entry_auth_message()) from e
            raise

        _raise_for_store_error(error, "Failed to save entry. Please try again.")
        logger.debug("Created entry %s", entry_input.id)
        return entry_input.id

    def update_entry(
        self,
        entry_id: str,
        manual_date: str,
        customer_name: str,
        mobile_number: str,
        amount_rs: str,
    ) -> None:
        """Update an entry's fields.

        Raises:
            ValidationError: If the store rejects a field
            NotFoundError: If the entry doesn't exist
            AuthorizationError: If the caller may not update the entry
        """
        entry_input = EntryInput(
            id=entry_id,
            manual_date=manual_date,
            customer_name=customer_name,
            mobile_number=mobile_number,
            amount_rs=amount_to_rupees(amount_rs),
        )

        try:
            error = self.db.update_entry(entry_id, entry_input)
        except Exception as e:
            if is_authorization_error(e):
                raise AuthorizationError(update_entry_auth_message()) from e
            raise

        _raise_for_store_error(error, "Failed to update entry. Please try again.")
        logger.debug("Updated entry %s", entry_id)

    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry permanently.

        Raises:
            NotFoundError: If the entry doesn't exist
            AuthorizationError: If the caller may not delete the entry
        """
        try:
            error = self.db.delete_entry(entry_id)
        except Exception as e:
            if is_authorization_error(e):
                raise AuthorizationError(delete_entry_auth_message()) from e
            raise

        _raise_for_store_error(error, "Failed to delete entry. Please try again.")
        logger.debug("Deleted entry %s", entry_id)

    def get_entry(self, entry_id: str) -> Entry:
        """Get an entry by ID.

        Raises:
            NotFoundError: If the entry doesn't exist or isn't visible
        """
        try:
            entry = self.db.get_entry(entry_id)
        except Exception as e:
            if is_authorization_error(e):
                raise AuthorizationError(view_entries_auth_message()) from e
            raise

        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))
        return entry

    def list_entries(self) -> list[Entry]:
        """List entries newest first.

        Failed fetches are retried up to LIST_MAX_ATTEMPTS attempts in total.
        Authorization failures are never retried.

        Raises:
            AuthorizationError: If the caller is not signed in
            StoreError: If every attempt failed
        """
        last_error: Optional[Exception] = None
        for attempt in range(1, LIST_MAX_ATTEMPTS + 1):
            try:
                return self.db.list_entries_newest_first()
            except Exception as e:
                if is_authorization_error(e):
                    raise AuthorizationError(view_entries_auth_message()) from e
                logger.warning(
                    "Listing entries failed (attempt %d of %d): %s",
                    attempt,
                    LIST_MAX_ATTEMPTS,
                    e,
                )
                last_error = e

        raise StoreError(f"Failed to load entries: {last_error}") from last_error
