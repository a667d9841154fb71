"""Compound-growth projection driven by forecast parameters."""

from decimal import Decimal

from finledger.domain.models import ForecastConfig, YearSnapshot
from finledger.utils.decimal_utils import coerce_decimal, round_half_up

_MONTHS_PER_YEAR = 12


def project_growth(config: ForecastConfig) -> list[YearSnapshot]:
    """Simulate monthly contributions growing at a fixed annual rate.

    Each month the contribution is added and the balance then grows by
    one twelfth of the annual rate. A snapshot is taken at the start of
    every year, before that month's contribution and growth, so year 0 is
    exactly the initial amount.

    Inputs are not range-checked; see ``validate_forecast_config``.

    Args:
        config: Projection parameters.

    Returns:
        list[YearSnapshot]: ``config.years + 1`` snapshots, amounts rounded
        to whole units with halves rounded up.
    """
    initial = coerce_decimal(config.initial)
    contribution = coerce_decimal(config.monthly_contribution)
    monthly_rate = coerce_decimal(config.annual_rate_percent) / 100 / 12
    growth = 1 + monthly_rate

    current = initial
    invested = initial
    snapshots: list[YearSnapshot] = []
    for month in range(int(config.years) * _MONTHS_PER_YEAR + 1):
        if month % _MONTHS_PER_YEAR == 0:
            snapshots.append(
                YearSnapshot(
                    year_index=month // _MONTHS_PER_YEAR,
                    total_value=round_half_up(current),
                    total_invested=round_half_up(invested),
                    interest_earned=round_half_up(current - invested),
                )
            )
        current = (current + contribution) * growth
        invested = invested + contribution
    return snapshots


def project_value(config: ForecastConfig, months: int) -> Decimal:
    """Return the unrounded balance after ``months`` months of growth."""
    current = coerce_decimal(config.initial)
    contribution = coerce_decimal(config.monthly_contribution)
    growth = 1 + coerce_decimal(config.annual_rate_percent) / 100 / 12
    for _ in range(months):
        current = (current + contribution) * growth
    return current


__all__ = ["project_growth", "project_value"]
