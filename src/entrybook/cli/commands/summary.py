"""Summary commands."""

import click
from entrybook.cli.error_handling import handle_domain_error
from entrybook.domain.analytics import (
    aggregate_by_month,
    aggregate_by_year,
    default_year,
    get_available_years,
)
from entrybook.domain.entry import EntryService
from entrybook.domain.errors import DomainError


@click.command("summary")
@click.option("--year", type=int, help="Year for the monthly breakdown (defaults to the newest year with entries)")
@click.option("--by-year", is_flag=True, help="Show totals per year instead of per month")
@click.pass_context
def summary(ctx, year: int | None, by_year: bool):
    """Show amount totals and entry counts per month or per year.

    Examples:
        entrybook summary
        entrybook summary --year 2024
        entrybook summary --by-year
    """
    db = ctx.obj["db"]
    service = EntryService(db)

    try:
        entries = service.list_entries()
    except DomainError as e:
        handle_domain_error(ctx, e)

    if by_year:
        yearly = aggregate_by_year(entries)
        if not yearly:
            click.echo("No entries found.")
            return

        click.echo("\nYearly summary:")
        click.echo("-" * 40)
        click.echo(f"{'Year':<8} {'Entries':>8} {'Amount (Rs.)':>20}")
        click.echo("-" * 40)
        for bucket in yearly:
            click.echo(f"{bucket.year:<8} {bucket.count:>8} {bucket.total_amount:>20,}")
        return

    if year is None:
        year = default_year(entries)

    available = get_available_years(entries)
    if available:
        click.echo(f"Available years: {', '.join(str(y) for y in available)}")

    monthly = aggregate_by_month(entries, year)
    click.echo(f"\nMonthly summary for {year}:")
    click.echo("-" * 40)
    click.echo(f"{'Month':<8} {'Entries':>8} {'Amount (Rs.)':>20}")
    click.echo("-" * 40)
    for bucket in monthly:
        click.echo(f"{bucket.month:<8} {bucket.count:>8} {bucket.total_amount:>20,}")
    click.echo("-" * 40)
    click.echo(
        f"{'Total':<8} {sum(b.count for b in monthly):>8} "
        f"{sum(b.total_amount for b in monthly):>20,}"
    )


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
