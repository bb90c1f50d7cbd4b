"""Conversion between entries, export rows and delimited text."""

from datetime import date
from typing import Optional, Union

from entrybook.domain.entities import Entry, ExportRow
from entrybook.utils.date_parser import days_since, format_timestamp

# Shared by every exporter; spreadsheet users rely on this order and wording.
EXPORT_COLUMNS = (
    "Manual Date",
    "DAYS",
    "Customer Name",
    "Mobile Number",
    "Amount (Rs.)",
    "Created At",
)


def build_columns() -> list[str]:
    """Return the ordered export header."""
    return list(EXPORT_COLUMNS)


def to_export_row(entry: Entry, today: Optional[date] = None) -> ExportRow:
    """Build the export row for an entry.

    The DAYS cell is an empty string when the entry's date cannot be parsed.
    """
    days = days_since(entry.manual_date, today=today)
    return (
        entry.manual_date,
        days if days is not None else "",
        entry.customer_name,
        entry.mobile_number,
        int(entry.amount_rs),
        format_timestamp(entry.created_at),
    )


def escape_csv_field(value: Union[str, int]) -> str:
    """Quote a field if it contains a comma, quote or newline."""
    text = str(value)
    if "," in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def join_csv_row(values) -> str:
    """Escape and comma-join one record."""
    return ",".join(escape_csv_field(value) for value in values)


def parse_csv_line(line: str) -> list[str]:
    """Split one delimited record into trimmed fields.

    A double quote toggles quoted mode, a doubled quote inside quoted text
    is a literal quote, and only commas outside quotes end a field.
    """
    fields = []
    current = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields
