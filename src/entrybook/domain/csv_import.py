"""Entry import from CSV (and CSV saved as ".xlsx") files."""

import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Iterable

from entrybook.domain.entities import (
    ImportField,
    ImportResult,
    ImportSummary,
    ParsedRow,
    RowError,
)
from entrybook.domain.entry import EntryService
from entrybook.domain.errors import (
    DomainError,
    ImportFileError,
    INVALID_IMPORT_FILE_TYPE,
    create_entry_auth_message,
)
from entrybook.domain.row_codec import parse_csv_line
from entrybook.domain.validation import validate_row

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".csv", ".xlsx")

# Normalized (lower-cased, trimmed) header text -> target field
HEADER_SYNONYMS = MappingProxyType(
    {
        "manual date": ImportField.MANUAL_DATE,
        "manualdate": ImportField.MANUAL_DATE,
        "date": ImportField.MANUAL_DATE,
        "customer name": ImportField.CUSTOMER_NAME,
        "customername": ImportField.CUSTOMER_NAME,
        "name": ImportField.CUSTOMER_NAME,
        "mobile number": ImportField.MOBILE_NUMBER,
        "mobilenumber": ImportField.MOBILE_NUMBER,
        "mobile": ImportField.MOBILE_NUMBER,
        "phone": ImportField.MOBILE_NUMBER,
        "amount (rs.)": ImportField.AMOUNT_RS,
        "amount": ImportField.AMOUNT_RS,
        "amountrs": ImportField.AMOUNT_RS,
        "amount rs": ImportField.AMOUNT_RS,
    }
)

_LINE_BREAK = re.compile(r"\r?\n")


def map_header(header: str) -> ImportField:
    """Map a header cell to its target field, case-insensitively."""
    return HEADER_SYNONYMS.get(header.strip().lower(), ImportField.UNRECOGNIZED)


def _parse_data_line(line: str, field_mapping: list[ImportField]):
    """Build a candidate row from one data line.

    Returns None when no value lands in a recognized column.
    """
    values = parse_csv_line(line)
    row_values: dict[str, str] = {}
    for target, value in zip(field_mapping, values):
        if target is not ImportField.UNRECOGNIZED:
            row_values[target.value] = value.strip()

    if not row_values:
        return None
    return ParsedRow(**row_values)


def parse_import_text(text: str) -> ImportResult:
    """Parse import file text into valid rows and per-row errors.

    The first non-blank line is the header. Row numbers in errors are
    1-based with the header counted as row 1.

    Args:
        text: Full file contents

    Returns:
        ImportResult with valid rows and errors, each in file order

    Raises:
        ImportFileError: If the file is empty, has no recognized columns,
            or has no data rows at all
    """
    if not text:
        raise ImportFileError("File is empty")

    lines = [line for line in _LINE_BREAK.split(text) if line.strip()]
    if not lines:
        raise ImportFileError("File is empty")

    field_mapping = [map_header(header) for header in parse_csv_line(lines[0])]
    if all(target is ImportField.UNRECOGNIZED for target in field_mapping):
        raise ImportFileError("No recognized columns found in the file")

    result = ImportResult()
    for row_number, line in enumerate(lines[1:], start=2):  # Start at 2 (header is row 1)
        try:
            row = _parse_data_line(line.strip(), field_mapping)
            if row is None:
                continue

            error = validate_row(row, row_number)
            if error is not None:
                result.errors.append(RowError(row=row_number, message=error))
            else:
                result.valid_rows.append(row)
        except Exception as e:
            result.errors.append(
                RowError(
                    row=row_number,
                    message=f"Row {row_number}: Failed to parse row - {e}",
                )
            )

    if not result.valid_rows and not result.errors:
        raise ImportFileError("No data rows found in the file")

    return result


def read_import_file(file_path: str) -> str:
    """Read an import file as text.

    Both .csv and .xlsx names are accepted and read as UTF-8 delimited
    text; a leading byte-order mark is dropped.

    Raises:
        ImportFileError: If the extension is not supported
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(file_path)
    if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise ImportFileError(INVALID_IMPORT_FILE_TYPE)
    if not path.exists():
        raise FileNotFoundError(f"Import file not found: {file_path}")

    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        return f.read()


class EntryImportService:
    """Service for importing entries from files."""

    def __init__(self, entry_service: EntryService):
        """Initialize import service.

        Args:
            entry_service: Service used to create each imported entry
        """
        self.entry_service = entry_service

    def import_rows(self, rows: Iterable[ParsedRow]) -> ImportSummary:
        """Create entries for validated rows, one at a time.

        This is best-effort, not a transaction: a failed row is logged and
        counted, later rows are still attempted, and earlier successes stay.
        The entry list is fetched once after the last row.
        """
        summary = ImportSummary()
        for row in rows:
            try:
                self.entry_service.create_entry(
                    manual_date=row.manual_date,
                    customer_name=row.customer_name,
                    mobile_number=row.mobile_number,
                    amount_rs=row.amount_rs,
                )
                summary.succeeded += 1
            except Exception as e:
                logger.debug("Failed to import row %r: %s", row, e)
                summary.failed += 1

        try:
            summary.entries = self.entry_service.list_entries()
        except DomainError as e:
            logger.warning("Could not refresh entries after import: %s", e)

        return summary

    def import_file(self, file_path: str) -> ImportSummary:
        """Parse an import file and create an entry for each valid row.

        Returns:
            ImportSummary whose errors hold the per-row validation failures

        Raises:
            AuthorizationError: If the caller is not signed in
            ImportFileError: If the file is structurally unusable
            FileNotFoundError: If the file doesn't exist
        """
        self.entry_service.require_signed_in(create_entry_auth_message())

        result = parse_import_text(read_import_file(file_path))
        if result.errors:
            logger.info("Import validation errors: %s", [e.message for e in result.errors])

        if not result.valid_rows:
            return ImportSummary(errors=list(result.errors))

        summary = self.import_rows(result.valid_rows)
        summary.errors = list(result.errors)
        logger.info(
            "Imported %d entries from %s (%d failed, %d invalid rows)",
            summary.succeeded,
            file_path,
            summary.failed,
            len(result.errors),
        )
        return summary
