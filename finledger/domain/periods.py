"""Calendar month helpers built around ``YYYY-MM`` period keys."""

from datetime import date


def period_key(value: date) -> str:
    """Return the ``YYYY-MM`` period key for a date.

    Args:
        value: Calendar date.

    Returns:
        str: Zero-padded year-month key.
    """
    return f"{value.year:04d}-{value.month:02d}"


def parse_period_key(key: str) -> tuple[int, int]:
    """Split a period key into year and month.

    Args:
        key: Period key in ``YYYY-MM`` format.

    Returns:
        tuple[int, int]: Year and month numbers.

    Raises:
        ValueError: If the key is malformed or the month is out of range.
    """
    parts = key.split("-")
    if len(parts) != 2 or len(parts[0]) != 4 or len(parts[1]) != 2:
        raise ValueError(f"Invalid period key '{key}'. Expected YYYY-MM.")
    year, month = int(parts[0]), int(parts[1])
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month in period key '{key}'.")
    return year, month


def period_start(key: str) -> date:
    """Return the first day of a period."""
    year, month = parse_period_key(key)
    return date(year, month, 1)


def shift_period(value: date, months: int) -> str:
    """Return the period key ``months`` calendar months away from a date.

    Only the year and month of ``value`` are used, so the 31st of a month
    never spills into the month after the target.

    Args:
        value: Reference date.
        months: Offset in months; negative values go back in time.

    Returns:
        str: Shifted period key.
    """
    index = value.year * 12 + (value.month - 1) + months
    year, month_index = divmod(index, 12)
    return f"{year:04d}-{month_index + 1:02d}"


def recent_periods(value: date, count: int) -> list[str]:
    """Return ``count`` period keys ending at the month of ``value``.

    Args:
        value: Reference date for the most recent period.
        count: Number of periods to return.

    Returns:
        list[str]: Period keys, oldest first.
    """
    return [shift_period(value, -offset) for offset in range(count - 1, -1, -1)]


__all__ = [
    "period_key",
    "parse_period_key",
    "period_start",
    "shift_period",
    "recent_periods",
]
