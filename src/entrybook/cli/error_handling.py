"""CLI error reporting."""

from typing import Iterable

import click


def handle_domain_error(
    ctx: click.Context, error: Exception | str, details: Iterable[str] = ()
) -> None:
    """Print an error to stderr and exit with status 1.

    Args:
        ctx: Current click context
        error: Exception or message shown after "Error: "
        details: Lines printed indented above the error, such as the
            individual field or row problems behind it
    """
    for line in details:
        click.echo(f"  {line}", err=True)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
