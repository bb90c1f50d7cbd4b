"""Entry exporters: CSV, spreadsheet-friendly CSV, text table and printable HTML.

Each exporter is a pure render step followed by a file write. The render
functions take the full entry list; the export functions also refuse an
empty list before touching the filesystem.
"""

import html
import logging
import webbrowser
from datetime import date
from pathlib import Path
from typing import Callable, Optional, Sequence

from entrybook.domain.entities import Entry
from entrybook.domain.errors import (
    ExportError,
    ExportSurfaceError,
    NothingToExportError,
    NO_ENTRIES_TO_EXPORT,
    POPUP_BLOCKED,
)
from entrybook.domain.row_codec import EXPORT_COLUMNS, join_csv_row, to_export_row

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"
DOCUMENT_TITLE = "Data Entries"

DEFAULT_FILENAMES = {
    "csv": "entries.csv",
    "xlsx": "entries.xlsx",
    "txt": "entries.txt",
    "pdf": "entries.pdf",
}

_PRINT_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>
      body {{ font-family: Arial, sans-serif; margin: 20px; }}
      h1 {{ color: #10b981; margin-bottom: 20px; }}
      table {{ width: 100%; border-collapse: collapse; margin-top: 20px; }}
      th, td {{ border: 1px solid #ddd; padding: 8px; text-align: left; }}
      th {{ background-color: #10b981; color: white; font-weight: bold; }}
      tr:nth-child(even) {{ background-color: #f5f5f5; }}
      button {{ padding: 10px 20px; background: #10b981; color: white; border: none;
               border-radius: 4px; cursor: pointer; margin-bottom: 10px; }}
      @media print {{
        body {{ margin: 0; }}
        button {{ display: none; }}
      }}
    </style>
  </head>
  <body>
    <h1>{title}</h1>
    <button onclick="window.print()">Print / Save as PDF</button>
    <table>
      <thead>
        <tr>{header_cells}</tr>
      </thead>
      <tbody>
{body_rows}
      </tbody>
    </table>
  </body>
</html>
"""


def _require_entries(entries: Sequence[Entry]) -> None:
    if not entries:
        raise NothingToExportError(NO_ENTRIES_TO_EXPORT)


def _write_text(path: Path, content: str, failure_message: str) -> Path:
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        logger.error("Export to %s failed: %s", path, e)
        raise ExportError(failure_message) from e
    return path


def render_csv(entries: Sequence[Entry], today: Optional[date] = None) -> str:
    """Render header and entry rows as comma-separated text."""
    rows = [join_csv_row(EXPORT_COLUMNS)]
    rows.extend(join_csv_row(to_export_row(entry, today=today)) for entry in entries)
    return "\n".join(rows)


def render_text(entries: Sequence[Entry], today: Optional[date] = None) -> str:
    """Render entries as a fixed-width text table."""
    rows = [[str(cell) for cell in to_export_row(entry, today=today)] for entry in entries]
    widths = [
        max([len(header)] + [len(row[i]) for row in rows])
        for i, header in enumerate(EXPORT_COLUMNS)
    ]

    header_row = " | ".join(header.ljust(widths[i]) for i, header in enumerate(EXPORT_COLUMNS))
    separator = "-+-".join("-" * width for width in widths)
    data_rows = [
        " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)) for row in rows
    ]

    return "\n".join(
        [DOCUMENT_TITLE, "=" * len(header_row), "", header_row, separator, *data_rows]
    )


def render_print_html(entries: Sequence[Entry], today: Optional[date] = None) -> str:
    """Render entries as a printable HTML document."""
    header_cells = "".join(f"<th>{html.escape(column)}</th>" for column in EXPORT_COLUMNS)
    body_rows = "\n".join(
        "        <tr>"
        + "".join(f"<td>{html.escape(str(cell))}</td>" for cell in to_export_row(entry, today=today))
        + "</tr>"
        for entry in entries
    )
    return _PRINT_TEMPLATE.format(
        title=DOCUMENT_TITLE, header_cells=header_cells, body_rows=body_rows
    )


def export_csv(
    entries: Sequence[Entry], filename: str = DEFAULT_FILENAMES["csv"]
) -> Path:
    """Write entries to a CSV file.

    Returns:
        Path of the written file

    Raises:
        NothingToExportError: If there are no entries
        ExportError: If the file could not be written
    """
    _require_entries(entries)
    return _write_text(
        Path(filename), render_csv(entries), "Failed to export CSV file. Please try again."
    )


def export_xlsx(
    entries: Sequence[Entry], filename: str = DEFAULT_FILENAMES["xlsx"]
) -> Path:
    """Write entries as spreadsheet-friendly CSV.

    The content is the CSV export with a leading byte-order mark so
    spreadsheet software detects UTF-8. An .xlsx name is written with a
    .csv extension since no spreadsheet container is produced.
    """
    _require_entries(entries)
    path = Path(filename)
    if path.suffix.lower() == ".xlsx":
        path = path.with_suffix(".csv")
    return _write_text(
        path,
        BYTE_ORDER_MARK + render_csv(entries),
        "Failed to export file. Please try again.",
    )


def export_text(
    entries: Sequence[Entry], filename: str = DEFAULT_FILENAMES["txt"]
) -> Path:
    """Write entries to a fixed-width text file."""
    _require_entries(entries)
    return _write_text(
        Path(filename), render_text(entries), "Failed to export text file. Please try again."
    )


def export_pdf(
    entries: Sequence[Entry],
    filename: str = DEFAULT_FILENAMES["pdf"],
    opener: Optional[Callable[[str], bool]] = webbrowser.open,
) -> Path:
    """Write a printable HTML document and open it for printing to PDF.

    The document is written next to the requested name with an .html
    extension, then handed to the opener (the web browser by default).
    Pass opener=None to only write the file.

    Raises:
        NothingToExportError: If there are no entries
        ExportSurfaceError: If the opener could not present the document
        ExportError: If the file could not be written
    """
    _require_entries(entries)
    path = _write_text(
        Path(filename).with_suffix(".html"),
        render_print_html(entries),
        "Failed to export PDF. Please try again.",
    )

    if opener is not None and not opener(path.resolve().as_uri()):
        raise ExportSurfaceError(POPUP_BLOCKED)
    return path


EXPORTERS = {
    "csv": export_csv,
    "xlsx": export_xlsx,
    "txt": export_text,
    "pdf": export_pdf,
}
