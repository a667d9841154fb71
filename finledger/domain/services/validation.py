"""Domain validation helpers."""

from finledger.domain.errors import ForecastValidationError
from finledger.domain.models import ForecastConfig
from finledger.utils.decimal_utils import coerce_decimal


def validate_forecast_config(config: ForecastConfig) -> ForecastConfig:
    """Reject projection parameters the simulator would accept blindly.

    Args:
        config: Parameters supplied by the user.

    Returns:
        ForecastConfig: The same parameters with Decimal amounts.

    Raises:
        ForecastValidationError: If an amount or rate is negative or
            non-numeric, or ``years`` is not a non-negative integer.
    """
    amounts = {}
    for name in ("initial", "monthly_contribution", "annual_rate_percent"):
        raw = getattr(config, name)
        try:
            value = coerce_decimal(raw)
        except ValueError as exc:
            raise ForecastValidationError(name, raw, "must be numeric") from exc
        if not value.is_finite() or value < 0:
            raise ForecastValidationError(
                name,
                raw,
                "must be a non-negative number",
            )
        amounts[name] = value
    years = config.years
    if isinstance(years, bool) or not isinstance(years, int) or years < 0:
        raise ForecastValidationError(
            "years",
            years,
            "must be a non-negative integer",
        )
    return ForecastConfig(years=years, **amounts)


__all__ = ["validate_forecast_config"]
