"""Caller role commands."""

import click
from entrybook.cli.error_handling import handle_domain_error
from entrybook.database.base import UnauthorizedAccessError
from entrybook.domain.entities import UserRole


@click.group("role")
def role_group():
    """Manage caller roles."""
    pass


@role_group.command("whoami")
@click.pass_context
def whoami(ctx):
    """Show the current identity and its role."""
    db = ctx.obj["db"]
    principal = db.principal or "(anonymous)"
    click.echo(f"Identity: {principal}")
    click.echo(f"Role: {db.get_caller_role().value}")


@role_group.command("assign")
@click.argument("principal")
@click.argument("role", type=click.Choice([r.value for r in UserRole]))
@click.pass_context
def assign_role(ctx, principal: str, role: str):
    """Assign ROLE to PRINCIPAL. Only admins may assign roles."""
    db = ctx.obj["db"]

    try:
        db.assign_role(principal, UserRole(role))
    except (UnauthorizedAccessError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Assigned role '{role}' to {principal}")


def register_commands(cli):
    """Register role commands with main CLI."""
    cli.add_command(role_group)
