"""Domain services package."""

from .aggregation import (
    compute_asset_composition,
    compute_cashflow_summary,
    compute_category_breakdown,
    compute_debt_ratio,
    compute_expense_breakdown,
    compute_milestone_progress,
    compute_monthly_trend,
    compute_net_worth,
    compute_net_worth_summary,
    compute_obligation_summary,
    compute_period_cashflow,
)
from .projection import project_growth
from .recurrence import RolloverPolicy, resolve_templates, rollover
from .validation import validate_forecast_config

__all__ = [
    "compute_asset_composition",
    "compute_cashflow_summary",
    "compute_category_breakdown",
    "compute_debt_ratio",
    "compute_expense_breakdown",
    "compute_milestone_progress",
    "compute_monthly_trend",
    "compute_net_worth",
    "compute_net_worth_summary",
    "compute_obligation_summary",
    "compute_period_cashflow",
    "project_growth",
    "RolloverPolicy",
    "resolve_templates",
    "rollover",
    "validate_forecast_config",
]
