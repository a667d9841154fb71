"""Domain package for business rules and core models."""

from .constants import Bucket, Category
from .errors import ForecastValidationError, LedgerValidationError
from .models import (
    ForecastConfig,
    LedgerEntry,
    LedgerSnapshot,
    Milestone,
    Obligation,
)
from .periods import period_key, shift_period
from .services import (
    RolloverPolicy,
    compute_category_breakdown,
    compute_debt_ratio,
    compute_net_worth,
    compute_period_cashflow,
    project_growth,
    rollover,
)

__all__ = [
    "Bucket",
    "Category",
    "ForecastValidationError",
    "LedgerValidationError",
    "ForecastConfig",
    "LedgerEntry",
    "LedgerSnapshot",
    "Milestone",
    "Obligation",
    "period_key",
    "shift_period",
    "RolloverPolicy",
    "compute_category_breakdown",
    "compute_debt_ratio",
    "compute_net_worth",
    "compute_period_cashflow",
    "project_growth",
    "rollover",
]
