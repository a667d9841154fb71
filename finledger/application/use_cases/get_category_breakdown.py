"""Use case to break assets and expenses down by category."""

from datetime import date

from finledger.domain.models import CategoryBreakdown, LedgerSnapshot
from finledger.domain.periods import shift_period
from finledger.domain.services.aggregation import (
    compute_asset_composition,
    compute_expense_breakdown,
)
from finledger.infrastructure.logging.logger import get_app_logger


class GetCategoryBreakdownUseCase:
    """Compute asset composition and per-period expense categories."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def assets(self, snapshot: LedgerSnapshot) -> CategoryBreakdown:
        """Return asset totals by composition group."""
        breakdown = compute_asset_composition(snapshot)
        self._logger.info(
            f"Asset composition computed with "
            f"{len(breakdown.categories)} groups"
        )
        return breakdown

    def expenses(
        self,
        snapshot: LedgerSnapshot,
        period_offset: int = 0,
        today: date | None = None,
    ) -> CategoryBreakdown:
        """Return a month's expenses by subcategory.

        Args:
            snapshot: Snapshot to aggregate.
            period_offset: Months from the current month.
            today: Reference date; defaults to today.

        Returns:
            CategoryBreakdown: Non-zero expense totals per subcategory.
        """
        target = shift_period(today or date.today(), period_offset)
        breakdown = compute_expense_breakdown(snapshot, target)
        self._logger.info(
            f"Expense breakdown computed for period={target} with "
            f"{len(breakdown.categories)} categories"
        )
        return breakdown


__all__ = ["GetCategoryBreakdownUseCase", "CategoryBreakdown"]
