"""Entry management commands."""

import click
from entrybook.cli.error_handling import handle_domain_error
from entrybook.domain.entry import EntryService
from entrybook.domain.errors import DomainError, create_entry_auth_message
from entrybook.domain.row_codec import to_export_row
from entrybook.domain.validation import validate_entry_form


def _report_form_errors(ctx, errors: dict[str, str]) -> None:
    handle_domain_error(ctx, "Please fix the errors in the form", details=errors.values())


@click.command("add")
@click.option("--date", "manual_date", required=True, help="Manual date (YYYY-MM-DD)")
@click.option("--name", "customer_name", required=True, help="Customer name")
@click.option("--mobile", "mobile_number", required=True, help="Mobile number (10-15 digits)")
@click.option("--amount", "amount_rs", required=True, help="Amount in rupees")
@click.pass_context
def add_entry(ctx, manual_date: str, customer_name: str, mobile_number: str, amount_rs: str):
    """Add an entry.

    Examples:
        entrybook add --date 2024-01-15 --name "Jane" --mobile 9876543210 --amount 500
    """
    db = ctx.obj["db"]
    service = EntryService(db)

    # Sign-in is checked before the form is validated
    if not service.is_signed_in():
        handle_domain_error(ctx, create_entry_auth_message())

    errors = validate_entry_form(manual_date, customer_name, mobile_number, amount_rs)
    if errors:
        _report_form_errors(ctx, errors)

    try:
        entry_id = service.create_entry(
            manual_date=manual_date,
            customer_name=customer_name,
            mobile_number=mobile_number,
            amount_rs=amount_rs,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("Entry saved successfully!")
    click.echo(f"  ID: {entry_id}")


@click.group("entry")
def entry_group():
    """Manage entries."""
    pass


@entry_group.command("update")
@click.argument("entry_id")
@click.option("--date", "manual_date", help="Manual date (YYYY-MM-DD)")
@click.option("--name", "customer_name", help="Customer name")
@click.option("--mobile", "mobile_number", help="Mobile number (10-15 digits)")
@click.option("--amount", "amount_rs", help="Amount in rupees")
@click.pass_context
def update_entry(
    ctx,
    entry_id: str,
    manual_date: str | None,
    customer_name: str | None,
    mobile_number: str | None,
    amount_rs: str | None,
) -> None:
    """Update an entry.

    Fields that are not given keep their current value.

    Examples:
        entrybook entry update 1700000000000-abc123xyz --amount 750
    """
    db = ctx.obj["db"]
    service = EntryService(db)

    try:
        current = service.get_entry(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    values = {
        "manual_date": manual_date if manual_date is not None else current.manual_date,
        "customer_name": customer_name if customer_name is not None else current.customer_name,
        "mobile_number": mobile_number if mobile_number is not None else current.mobile_number,
        "amount_rs": amount_rs if amount_rs is not None else str(current.amount_rs),
    }
    errors = validate_entry_form(**values)
    if errors:
        _report_form_errors(ctx, errors)

    try:
        service.update_entry(entry_id, **values)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated entry {entry_id}")


@entry_group.command("delete")
@click.argument("entry_id")
@click.confirmation_option(prompt="Delete this entry permanently?")
@click.pass_context
def delete_entry(ctx, entry_id: str) -> None:
    """Delete an entry permanently."""
    db = ctx.obj["db"]
    service = EntryService(db)

    try:
        service.delete_entry(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted entry {entry_id}")


@entry_group.command("list")
@click.pass_context
def list_entries(ctx) -> None:
    """List entries, newest first."""
    db = ctx.obj["db"]
    service = EntryService(db)

    try:
        entries = service.list_entries()
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not entries:
        click.echo("No entries found.")
        return

    click.echo(f"\nFound {len(entries)} entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 120)
    click.echo(
        f"{'ID':<24} {'Date':<12} {'Days':>6} {'Customer':<24} {'Mobile':<16} {'Amount':>10}  {'Created At':<24}"
    )
    click.echo("-" * 120)

    for entry in entries:
        manual_date, days, customer_name, mobile_number, amount_rs, created_at = to_export_row(entry)
        click.echo(
            f"{entry.id:<24} {manual_date:<12} {str(days):>6} {customer_name[:24]:<24} "
            f"{mobile_number:<16} {f'Rs. {amount_rs:,}':>10}  {created_at:<24}"
        )


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(add_entry)
    cli.add_command(entry_group)
