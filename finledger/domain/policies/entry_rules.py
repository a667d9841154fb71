"""Field rules applied when ledger records are constructed.

Each helper validates one raw value and returns it in normalized form, or
raises ``LedgerValidationError`` naming the offending field.
"""

from datetime import date, datetime
from decimal import Decimal

from finledger.domain.constants import Category
from finledger.domain.errors import LedgerValidationError
from finledger.utils.decimal_utils import coerce_decimal


def require_identifier(field: str, value) -> str:
    """Return a non-empty identifier string."""
    if not isinstance(value, str) or not value.strip():
        raise LedgerValidationError(field, value, "must be a non-empty string")
    return value


def require_amount(field: str, value) -> Decimal:
    """Return a finite, non-negative Decimal amount.

    Args:
        field: Field name used in error messages.
        value: Raw amount (Decimal, int, float or numeric string).

    Returns:
        Decimal: Normalized amount.
    """
    try:
        amount = coerce_decimal(value)
    except ValueError as exc:
        raise LedgerValidationError(field, value, "must be numeric") from exc
    if not amount.is_finite():
        raise LedgerValidationError(field, value, "must be finite")
    if amount < 0:
        raise LedgerValidationError(field, value, "must not be negative")
    return amount


def require_category(value) -> Category:
    """Return the Category matching a raw value."""
    try:
        return Category(value)
    except ValueError as exc:
        raise LedgerValidationError(
            "category",
            value,
            "unknown category",
        ) from exc


def require_date(field: str, value) -> date:
    """Return a calendar date from a date or ``YYYY-MM-DD`` string.

    Args:
        field: Field name used in error messages.
        value: Raw date value.

    Returns:
        date: Parsed calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) != 10:
                raise ValueError(text)
            return date.fromisoformat(text)
        except ValueError as exc:
            raise LedgerValidationError(
                field,
                value,
                "expected format YYYY-MM-DD",
            ) from exc
    raise LedgerValidationError(field, value, "must be a date")


def require_due_day(value) -> int:
    """Return a day-of-month between 1 and 31."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise LedgerValidationError("due_day", value, "must be an integer")
    if not 1 <= value <= 31:
        raise LedgerValidationError("due_day", value, "must be within 1..31")
    return value


__all__ = [
    "require_identifier",
    "require_amount",
    "require_category",
    "require_date",
    "require_due_day",
]
