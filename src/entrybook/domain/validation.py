"""Field validation rules for entries.

Every rule returns a ValidationResult instead of raising, so callers can
collect messages per field or per import row. Emptiness is always checked
before format and range, and only the first failing check is reported.
"""

import re
from dataclasses import dataclass
from typing import Optional

from entrybook.domain.entities import ParsedRow

MOBILE_MIN_DIGITS = 10
MOBILE_MAX_DIGITS = 15

_DIGITS_ONLY = re.compile(r"[0-9]+")
# Leading real number, the way a lenient float parser reads "12.5abc".
_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY = re.compile(r"^\s*[+-]?Infinity")


@dataclass(frozen=True)
class ValidationResult:
    """Pass/fail outcome of a single rule."""

    is_valid: bool
    error: Optional[str] = None


_VALID = ValidationResult(is_valid=True)


def _is_blank(value: Optional[str]) -> bool:
    return not value or value.strip() == ""


def parse_leading_number(value: str) -> Optional[float]:
    """Read the leading real number of a string, ignoring trailing text.

    Returns None when the string does not start with a number.
    """
    if _INFINITY.match(value):
        return float("-inf") if value.strip().startswith("-") else float("inf")
    match = _LEADING_NUMBER.match(value)
    if match is None:
        return None
    return float(match.group(0))


def validate_required(value: str, label: str) -> ValidationResult:
    """Fail when the value is empty or whitespace."""
    if _is_blank(value):
        return ValidationResult(is_valid=False, error=f"{label} is required")
    return _VALID


def validate_mobile_number(value: str) -> ValidationResult:
    """Check a mobile number is 10 to 15 ASCII digits."""
    if _is_blank(value):
        return ValidationResult(is_valid=False, error="Mobile Number is required")

    if not _DIGITS_ONLY.fullmatch(value):
        return ValidationResult(
            is_valid=False, error="Mobile Number must contain only digits"
        )

    if len(value) < MOBILE_MIN_DIGITS or len(value) > MOBILE_MAX_DIGITS:
        return ValidationResult(
            is_valid=False,
            error=f"Mobile Number must be between {MOBILE_MIN_DIGITS} and {MOBILE_MAX_DIGITS} digits",
        )

    return _VALID


def validate_amount(value: str) -> ValidationResult:
    """Check an amount is a number greater than zero."""
    if _is_blank(value):
        return ValidationResult(is_valid=False, error="Amount is required")

    number = parse_leading_number(value)
    if number is None:
        return ValidationResult(is_valid=False, error="Amount must be a valid number")

    if number <= 0:
        return ValidationResult(is_valid=False, error="Amount must be greater than 0")

    return _VALID


def validate_row(row: ParsedRow, row_number: int) -> Optional[str]:
    """Validate an import row.

    Checks run in order: date required, name required, mobile number,
    amount. The first failure is returned as "Row <n>: <message>".

    Args:
        row: Candidate row from an import file
        row_number: 1-based line number, header counted as row 1

    Returns:
        Error message, or None if the row is valid
    """
    checks = (
        validate_required(row.manual_date, "Manual Date"),
        validate_required(row.customer_name, "Customer Name"),
        validate_mobile_number(row.mobile_number),
        validate_amount(row.amount_rs),
    )
    for result in checks:
        if not result.is_valid:
            return f"Row {row_number}: {result.error}"
    return None


def validate_entry_form(
    manual_date: str, customer_name: str, mobile_number: str, amount_rs: str
) -> dict[str, str]:
    """Validate all fields of a manually entered entry.

    Returns:
        Mapping of field name to error message; empty when every field passes
    """
    results = {
        "manual_date": validate_required(manual_date, "Manual Date"),
        "customer_name": validate_required(customer_name, "Customer Name"),
        "mobile_number": validate_mobile_number(mobile_number),
        "amount_rs": validate_amount(amount_rs),
    }
    return {name: result.error for name, result in results.items() if not result.is_valid}
