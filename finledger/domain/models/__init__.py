"""Domain models package."""

from .finance import (
    CashflowSummary,
    CashflowView,
    CategoryAmount,
    CategoryBreakdown,
    MilestoneProgress,
    MonthlyTrendPoint,
    NetWorthSummary,
    ObligationSummary,
    ProjectionSummary,
    RolloverResult,
    YearSnapshot,
)
from .ledger import (
    ForecastConfig,
    LedgerEntry,
    LedgerSnapshot,
    Milestone,
    Obligation,
)

__all__ = [
    "LedgerEntry",
    "LedgerSnapshot",
    "Obligation",
    "Milestone",
    "ForecastConfig",
    "NetWorthSummary",
    "CategoryAmount",
    "CategoryBreakdown",
    "CashflowSummary",
    "CashflowView",
    "MonthlyTrendPoint",
    "ObligationSummary",
    "MilestoneProgress",
    "YearSnapshot",
    "ProjectionSummary",
    "RolloverResult",
]
