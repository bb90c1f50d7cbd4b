"""Entry import command."""

import click
from entrybook.cli.error_handling import handle_domain_error
from entrybook.domain.csv_import import EntryImportService
from entrybook.domain.entry import EntryService
from entrybook.domain.errors import DomainError


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


@click.command("import")
@click.argument("import_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_entries(ctx, import_file: str):
    """Import entries from a CSV or XLSX (CSV text) file.

    Recognized columns include Date, Name, Mobile and Amount (and their
    longer forms such as "Manual Date" or "Amount (Rs.)"). Rows are created
    one at a time; a failed row does not stop the rest.
    """
    db = ctx.obj["db"]
    service = EntryImportService(EntryService(db))

    try:
        summary = service.import_file(import_file)
    except (DomainError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)

    row_errors = [error.message for error in summary.errors]
    if summary.succeeded == 0 and summary.failed == 0:
        handle_domain_error(
            ctx,
            "No valid rows found in the file. Please check the file format and data.",
            details=row_errors,
        )

    for message in row_errors:
        click.echo(f"  {message}", err=True)

    click.echo("\nImport complete:")
    if summary.failed == 0:
        click.echo(f"  Successfully imported {_plural(summary.succeeded, 'entry', 'entries')}!")
    elif summary.succeeded > 0:
        click.echo(
            f"  Imported {_plural(summary.succeeded, 'entry', 'entries')}. "
            f"{_plural(summary.failed, 'row', 'rows')} failed."
        )
    else:
        handle_domain_error(
            ctx,
            "Failed to import entries."
            + (" Please check the file format." if summary.errors else ""),
        )

    if summary.errors:
        click.echo(f"  Skipped invalid rows: {len(summary.errors)}")
    click.echo(f"  Total entries: {len(summary.entries)}")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_entries)
