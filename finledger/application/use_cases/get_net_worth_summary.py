"""Use case to compute net worth and debt ratio from a ledger snapshot."""

from dataclasses import dataclass
from decimal import Decimal

from finledger.domain.models import LedgerSnapshot, NetWorthSummary
from finledger.domain.services.aggregation import (
    compute_debt_ratio,
    compute_net_worth_summary,
)
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BalanceSheetView:
    """Net worth summary with the liabilities-to-assets ratio."""

    summary: NetWorthSummary
    debt_ratio: Decimal


class GetNetWorthSummaryUseCase:
    """Compute balance sheet figures for a snapshot."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(self, snapshot: LedgerSnapshot) -> BalanceSheetView:
        """Return the net worth summary and debt ratio.

        Args:
            snapshot: Snapshot to aggregate.

        Returns:
            BalanceSheetView: Totals, net worth and debt ratio.
        """
        summary = compute_net_worth_summary(snapshot)
        debt_ratio = compute_debt_ratio(snapshot)
        self._logger.info(
            f"Net worth computed: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return BalanceSheetView(summary=summary, debt_ratio=debt_ratio)


__all__ = ["GetNetWorthSummaryUseCase", "BalanceSheetView", "NetWorthSummary"]
