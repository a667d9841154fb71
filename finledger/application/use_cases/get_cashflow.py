"""Use case to compute cashflow for a month and the recent trend."""

from datetime import date

from finledger.domain.constants import DEFAULT_TREND_MONTHS
from finledger.domain.models import CashflowView, LedgerSnapshot
from finledger.domain.periods import shift_period
from finledger.domain.services.aggregation import (
    compute_cashflow_summary,
    compute_monthly_trend,
)
from finledger.infrastructure.logging.logger import get_app_logger


class GetCashflowUseCase:
    """Compute period cashflow and a monthly trend from a snapshot."""

    def __init__(
        self,
        logger=None,
        trend_months: int = DEFAULT_TREND_MONTHS,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            trend_months: Number of months in the trend, current included.
        """
        self._logger = logger or get_app_logger()
        self._trend_months = trend_months

    def execute(
        self,
        snapshot: LedgerSnapshot,
        period_offset: int = 0,
        today: date | None = None,
    ) -> CashflowView:
        """Return cashflow totals for a month relative to today.

        Args:
            snapshot: Snapshot to aggregate.
            period_offset: Months from the current month.
            today: Reference date; defaults to today.

        Returns:
            CashflowView: Month summary and trend ending at the current month.
        """
        reference = today or date.today()
        target = shift_period(reference, period_offset)
        summary = compute_cashflow_summary(snapshot, target)
        trend = compute_monthly_trend(
            snapshot,
            today=reference,
            months=self._trend_months,
        )
        self._logger.info(
            f"Cashflow totals computed: in={summary.total_in}, "
            f"out={summary.total_out}, period={target}"
        )
        return CashflowView(summary=summary, trend=trend)


__all__ = ["GetCashflowUseCase", "CashflowView"]
