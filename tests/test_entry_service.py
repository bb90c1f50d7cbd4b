"""Tests for the entry service."""

import re

import pytest

from entrybook.database.base import UnauthorizedAccessError
from entrybook.domain.entities import EmptyField, EntryNotFound, InvalidAmount, Unauthorized
from entrybook.domain.entry import (
    LIST_MAX_ATTEMPTS,
    EntryService,
    amount_to_rupees,
    generate_entry_id,
)
from entrybook.domain.errors import (
    AuthorizationError,
    NotFoundError,
    StoreError,
    ValidationError,
    is_authorization_error,
)


class FakeStore:
    """In-memory stand-in for the entry store with scripted failures."""

    def __init__(self, list_failures=(), create_result=None, update_result=None, delete_result=None):
        self.list_failures = list(list_failures)
        self.list_calls = 0
        self.create_result = create_result
        self.update_result = update_result
        self.delete_result = delete_result
        self.created = []

    def list_entries_newest_first(self):
        self.list_calls += 1
        if self.list_failures:
            raise self.list_failures.pop(0)
        return []

    def create_entry(self, entry_input):
        if isinstance(self.create_result, Exception):
            raise self.create_result
        self.created.append(entry_input)
        return self.create_result

    def update_entry(self, entry_id, entry_input):
        return self.update_result

    def delete_entry(self, entry_id):
        if isinstance(self.delete_result, Exception):
            raise self.delete_result
        return self.delete_result


def test_generate_entry_id_shape():
    """Test IDs are millisecond timestamp plus a random suffix."""
    entry_id = generate_entry_id()
    assert re.fullmatch(r"\d{13}-[0-9a-z]{9}", entry_id)
    assert generate_entry_id() != entry_id


def test_amount_to_rupees_drops_fraction():
    """Test amounts are floored to whole rupees."""
    assert amount_to_rupees("500.99") == 500
    assert amount_to_rupees("12abc") == 12
    with pytest.raises(ValidationError):
        amount_to_rupees("abc")


def test_is_authorization_error():
    """Test authorization failures are detected by their text."""
    assert is_authorization_error(UnauthorizedAccessError("Unauthorized: Only users can x"))
    assert is_authorization_error("call failed: UNAUTHORIZED")
    assert not is_authorization_error(RuntimeError("disk full"))
    assert not is_authorization_error(None)


class TestCreate:
    """Tests for create_entry."""

    def test_create_and_list(self, entry_service):
        entry_id = entry_service.create_entry("2024-01-15", "Jane", "9876543210", "500")

        entries = entry_service.list_entries()
        assert [e.id for e in entries] == [entry_id]

    def test_store_error_message_surfaced(self):
        store = FakeStore(create_result=EmptyField(field="customer_name", message="Customer name cannot be empty"))
        with pytest.raises(ValidationError, match="Customer name cannot be empty"):
            EntryService(store).create_entry("2024-01-15", "", "9876543210", "5")

    def test_store_error_without_message_uses_fallback(self):
        store = FakeStore(create_result=InvalidAmount(message=""))
        with pytest.raises(ValidationError, match="Failed to save entry"):
            EntryService(store).create_entry("2024-01-15", "Jane", "9876543210", "5")

    def test_authorization_failure_becomes_sign_in_prompt(self, anonymous_db):
        with pytest.raises(AuthorizationError, match="Please sign in to save entries."):
            EntryService(anonymous_db).create_entry("2024-01-15", "Jane", "9876543210", "5")

    def test_unknown_store_error_kind_is_a_type_error(self):
        store = FakeStore(create_result=object())
        with pytest.raises(TypeError):
            EntryService(store).create_entry("2024-01-15", "Jane", "9876543210", "5")


class TestUpdateDelete:
    """Tests for update_entry and delete_entry."""

    def test_update(self, entry_service):
        entry_id = entry_service.create_entry("2024-01-15", "Jane", "9876543210", "500")
        entry_service.update_entry(entry_id, "2024-01-16", "Janet", "9876543210", "600.5")

        entry = entry_service.get_entry(entry_id)
        assert (entry.manual_date, entry.customer_name, entry.amount_rs) == ("2024-01-16", "Janet", 600)

    def test_update_not_found(self, entry_service):
        with pytest.raises(NotFoundError, match="Entry not found"):
            entry_service.update_entry("missing", "2024-01-16", "Janet", "9876543210", "1")

    def test_update_other_owner_uses_store_message(self, entry_service, user_db):
        entry_id = entry_service.create_entry("2024-01-15", "Jane", "9876543210", "500")
        with pytest.raises(AuthorizationError, match="Only the owner or an admin"):
            EntryService(user_db).update_entry(entry_id, "2024-01-16", "X", "9876543210", "1")

    def test_update_anonymous(self, anonymous_db):
        with pytest.raises(AuthorizationError, match="Please sign in to update entries."):
            EntryService(anonymous_db).update_entry("x", "2024-01-16", "X", "9876543210", "1")

    def test_delete(self, entry_service):
        entry_id = entry_service.create_entry("2024-01-15", "Jane", "9876543210", "500")
        entry_service.delete_entry(entry_id)
        assert entry_service.list_entries() == []

    def test_delete_errors(self):
        with pytest.raises(NotFoundError):
            EntryService(FakeStore(delete_result=EntryNotFound(message="Entry not found"))).delete_entry("x")
        with pytest.raises(AuthorizationError, match="Only the owner"):
            EntryService(FakeStore(delete_result=Unauthorized(message="Only the owner or an admin can delete this entry"))).delete_entry("x")
        with pytest.raises(AuthorizationError, match="Please sign in to delete entries."):
            EntryService(FakeStore(delete_result=UnauthorizedAccessError("Unauthorized: Only users can delete entries"))).delete_entry("x")

    def test_get_missing_entry(self, entry_service):
        with pytest.raises(NotFoundError, match="Entry missing not found"):
            entry_service.get_entry("missing")


class TestListRetry:
    """Tests for list_entries retries."""

    def test_transient_failures_are_retried(self):
        store = FakeStore(list_failures=[RuntimeError("timeout"), RuntimeError("timeout")])
        assert EntryService(store).list_entries() == []
        assert store.list_calls == 3

    def test_gives_up_after_max_attempts(self):
        store = FakeStore(list_failures=[RuntimeError("timeout")] * 5)
        with pytest.raises(StoreError, match="timeout"):
            EntryService(store).list_entries()
        assert store.list_calls == LIST_MAX_ATTEMPTS

    def test_authorization_failure_not_retried(self):
        store = FakeStore(list_failures=[UnauthorizedAccessError("Unauthorized: Only users can view entries")])
        with pytest.raises(AuthorizationError, match="Please sign in to view entries."):
            EntryService(store).list_entries()
        assert store.list_calls == 1
