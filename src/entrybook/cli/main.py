"""Main CLI entry point."""

import logging

import click
from entrybook.database.factories import create_sqlite_database

# Import and register all commands at module level
from entrybook.cli.commands import (
    entry,
    import_cmd,
    export_cmd,
    summary,
    role,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides ENTRYBOOK_DB_PATH environment variable)",
    envvar="ENTRYBOOK_DB_PATH",
)
@click.option(
    "--user",
    help="Identity to act as (overrides ENTRYBOOK_USER environment variable)",
    envvar="ENTRYBOOK_USER",
    default="",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, user: str, debug: bool):
    """Entrybook - Customer entry book.

    Record customer entries (date, name, mobile number, amount) and import
    or export them as CSV, spreadsheet-friendly CSV, text or printable PDF.
    """
    ctx.ensure_object(dict)

    if debug:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("entrybook").setLevel(logging.DEBUG)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path, principal=user)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
entry.register_commands(cli)
import_cmd.register_commands(cli)
export_cmd.register_commands(cli)
summary.register_commands(cli)
role.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
