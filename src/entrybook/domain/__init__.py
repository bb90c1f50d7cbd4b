"""Domain layer for entrybook application."""

__all__ = [
    "EntryService",
    "EntryImportService",
    "parse_import_text",
]


# Services are loaded on first use; database.base imports domain.entities
# while it is still initializing, so this package must not import it back.
def __getattr__(name):
    if name == "EntryService":
        from entrybook.domain.entry import EntryService
        return EntryService
    if name in ("EntryImportService", "parse_import_text"):
        import entrybook.domain.csv_import as csv_import
        return getattr(csv_import, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
