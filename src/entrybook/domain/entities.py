"""Domain model entities for entrybook.

These are pure data classes representing business concepts, independent of
the database schema. Import and export helpers work on these types only, so
the storage layer can change without touching the file formats.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class Entry:
    """Customer entry domain entity."""

    id: str
    manual_date: str
    customer_name: str
    mobile_number: str
    amount_rs: int
    created_at: int
    owner: Optional[str] = None


@dataclass(frozen=True)
class EntryInput:
    """Fields a client sends when creating or updating an entry."""

    id: str
    manual_date: str
    customer_name: str
    mobile_number: str
    amount_rs: int


class UserRole(str, Enum):
    """Caller role in the entry store."""

    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


class ImportField(str, Enum):
    """Target fields an import column can map to."""

    MANUAL_DATE = "manual_date"
    CUSTOMER_NAME = "customer_name"
    MOBILE_NUMBER = "mobile_number"
    AMOUNT_RS = "amount_rs"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ParsedRow:
    """Candidate entry extracted from one import line, not yet validated."""

    manual_date: str = ""
    customer_name: str = ""
    mobile_number: str = ""
    amount_rs: str = ""


@dataclass(frozen=True)
class RowError:
    """Validation or parse failure for a single import line."""

    row: int
    message: str


@dataclass
class ImportResult:
    """Outcome of parsing an import file."""

    valid_rows: list[ParsedRow] = field(default_factory=list)
    errors: list[RowError] = field(default_factory=list)


@dataclass
class ImportSummary:
    """Counts accumulated while creating imported rows one at a time."""

    succeeded: int = 0
    failed: int = 0
    errors: list[RowError] = field(default_factory=list)
    # Entry list fetched once after the import finished
    entries: list[Entry] = field(default_factory=list)


# manual_date, days, customer_name, mobile_number, amount_rs, created_at
ExportRow = tuple[str, Union[int, str], str, str, int, str]


@dataclass(frozen=True)
class MonthlyData:
    """Amount total and entry count for one calendar month."""

    month: str
    month_index: int
    total_amount: int
    count: int


@dataclass(frozen=True)
class YearlyData:
    """Amount total and entry count for one year."""

    year: int
    total_amount: int
    count: int


# Errors returned (not raised) by the entry store.


@dataclass(frozen=True)
class EmptyField:
    field: str
    message: str


@dataclass(frozen=True)
class InvalidAmount:
    message: str


@dataclass(frozen=True)
class EntryNotFound:
    message: str


@dataclass(frozen=True)
class Unauthorized:
    message: str


CreateEntryError = Union[EmptyField, InvalidAmount]
UpdateEntryError = Union[EmptyField, InvalidAmount, EntryNotFound, Unauthorized]
DeleteEntryError = Union[EntryNotFound, Unauthorized]
