"""Entry export command."""

import webbrowser

import click
from entrybook.cli.error_handling import handle_domain_error
from entrybook.domain.entry import EntryService
from entrybook.domain.errors import DomainError, NO_ENTRIES_TO_EXPORT
from entrybook.domain.export import DEFAULT_FILENAMES, EXPORTERS, export_pdf

_SUCCESS_MESSAGES = {
    "csv": "CSV file written successfully!",
    "xlsx": "CSV file written successfully! (Excel compatible)",
    "txt": "Text file written successfully!",
    "pdf": "Print page opened! Use Print > Save as PDF",
}


@click.command("export")
@click.argument("export_format", type=click.Choice(sorted(EXPORTERS)))
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file name")
@click.option(
    "--no-open",
    is_flag=True,
    help="For pdf: only write the printable page, do not open it",
)
@click.pass_context
def export_entries(ctx, export_format: str, output: str | None, no_open: bool):
    """Export all entries.

    EXPORT_FORMAT is one of csv, xlsx (CSV with a byte-order mark, written
    with a .csv extension), txt (fixed-width table) or pdf (printable page
    opened in the browser).

    Examples:
        entrybook export csv
        entrybook export pdf --output report.pdf --no-open
    """
    db = ctx.obj["db"]
    service = EntryService(db)
    filename = output or DEFAULT_FILENAMES[export_format]

    try:
        entries = service.list_entries()
        if not entries:
            handle_domain_error(ctx, NO_ENTRIES_TO_EXPORT)

        if export_format == "pdf":
            opener = None if no_open else webbrowser.open
            path = export_pdf(entries, filename, opener=opener)
        else:
            path = EXPORTERS[export_format](entries, filename)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if export_format == "pdf" and no_open:
        click.echo(f"Printable page written to {path}")
    else:
        click.echo(_SUCCESS_MESSAGES[export_format])
        click.echo(f"  File: {path}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_entries)
