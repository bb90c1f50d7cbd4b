"""Tests for CLI error reporting."""

import click
from click.testing import CliRunner

from entrybook.cli.error_handling import handle_domain_error
from entrybook.domain.errors import ValidationError


def _failing_command(error, details=()):
    @click.command()
    @click.pass_context
    def command(ctx):
        handle_domain_error(ctx, error, details=details)
        click.echo("unreachable")

    return command


def test_reports_exception_and_exits():
    """Test an exception is printed after Error: with exit status 1."""
    result = CliRunner().invoke(_failing_command(ValidationError("Amount is too large")))

    assert result.exit_code == 1
    assert "Error: Amount is too large" in result.output
    assert "unreachable" not in result.output


def test_reports_details_before_message():
    """Test detail lines are indented and printed above the error."""
    command = _failing_command(
        "Please fix the errors in the form",
        details=["Mobile number must be 10-15 digits", "Amount is required"],
    )

    result = CliRunner().invoke(command)

    assert result.exit_code == 1
    lines = result.output.splitlines()
    assert lines == [
        "  Mobile number must be 10-15 digits",
        "  Amount is required",
        "Error: Please fix the errors in the form",
    ]
