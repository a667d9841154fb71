"""Application use cases package."""

from .get_cashflow import CashflowView, GetCashflowUseCase
from .get_category_breakdown import (
    CategoryBreakdown,
    GetCategoryBreakdownUseCase,
)
from .get_milestone_progress import GetMilestoneProgressUseCase
from .get_net_worth_summary import (
    BalanceSheetView,
    GetNetWorthSummaryUseCase,
)
from .get_obligations_summary import GetObligationsSummaryUseCase
from .load_ledger import LoadLedgerResult, LoadLedgerUseCase, SyncStatus
from .project_growth import ProjectGrowthUseCase
from .rollover_recurring import RolloverOutcome, RolloverRecurringUseCase
from .save_ledger import ResetLedgerUseCase, SaveLedgerResult, SaveLedgerUseCase
from .start_session import SessionState, StartSessionUseCase

__all__ = [
    "CashflowView",
    "GetCashflowUseCase",
    "CategoryBreakdown",
    "GetCategoryBreakdownUseCase",
    "GetMilestoneProgressUseCase",
    "BalanceSheetView",
    "GetNetWorthSummaryUseCase",
    "GetObligationsSummaryUseCase",
    "LoadLedgerResult",
    "LoadLedgerUseCase",
    "SyncStatus",
    "ProjectGrowthUseCase",
    "RolloverOutcome",
    "RolloverRecurringUseCase",
    "ResetLedgerUseCase",
    "SaveLedgerResult",
    "SaveLedgerUseCase",
    "SessionState",
    "StartSessionUseCase",
]
