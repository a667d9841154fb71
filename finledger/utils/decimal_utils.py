"""Helpers for Decimal normalization."""

from decimal import ROUND_FLOOR, Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a document, form, or adapter.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value cannot be read as a number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric value: {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a numeric value: {value!r}") from exc


def round_half_up(value: Decimal) -> Decimal:
    """Round to the nearest integer, halves going toward positive infinity.

    Args:
        value: Amount to round.

    Returns:
        Decimal: Integral Decimal, e.g. 2.5 -> 3 and -2.5 -> -2.
    """
    return (value + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR)


__all__ = ["coerce_decimal", "round_half_up"]
