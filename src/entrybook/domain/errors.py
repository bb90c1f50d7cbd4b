"""Entry book exceptions and the user-facing messages they carry."""


class DomainError(ValueError):
    """Base class for errors the CLI reports as a one-line message.

    The message is shown to the user as is, so subclasses carry final
    wording rather than diagnostic detail.
    """


class ValidationError(DomainError):
    """An entry field was rejected by the form rules or the store."""


class NotFoundError(DomainError):
    """Requested entry does not exist."""


class StoreError(DomainError):
    """Domain error reported by the entry store, carrying its own message."""


class AuthorizationError(DomainError):
    """Caller is not signed in or may not touch the entry."""


class ImportFileError(DomainError):
    """Import file is structurally unusable; nothing was imported."""


class ExportError(DomainError):
    """Export could not be produced."""


class NothingToExportError(ExportError):
    """Export was requested for an empty entry list."""


class ExportSurfaceError(ExportError):
    """The printable document could not be presented to the user."""


NO_ENTRIES_TO_EXPORT = "No entries to export"
POPUP_BLOCKED = "Please allow pop-ups to export PDF"
INVALID_IMPORT_FILE_TYPE = "Please select a valid XLSX or CSV file"


def entry_not_found(entry_id: str) -> str:
    """Return message for missing entry."""
    return f"Entry {entry_id} not found"


def auth_prompt_message() -> str:
    """Return the generic sign-in prompt."""
    return "Please sign in to access this feature."


def create_entry_auth_message() -> str:
    """Return sign-in prompt for saving entries."""
    return "Please sign in to save entries."


def view_entries_auth_message() -> str:
    """Return sign-in prompt for viewing entries."""
    return "Please sign in to view entries."


def update_entry_auth_message() -> str:
    """Return sign-in prompt for updating entries."""
    return "Please sign in to update entries."


def delete_entry_auth_message() -> str:
    """Return sign-in prompt for deleting entries."""
    return "Please sign in to delete entries."


def is_authorization_error(error: object) -> bool:
    """Return True if an error's text marks it as an authorization failure."""
    if not error:
        return False
    return "unauthorized" in str(error).lower()
