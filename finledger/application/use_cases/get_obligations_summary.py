"""Use case to summarize monthly bills and their payment state."""

from datetime import date

from finledger.domain.models import LedgerSnapshot, ObligationSummary
from finledger.domain.services.aggregation import compute_obligation_summary
from finledger.infrastructure.logging.logger import get_app_logger


class GetObligationsSummaryUseCase:
    """Compute obligation totals and overdue bills."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: LedgerSnapshot,
        today: date | None = None,
    ) -> ObligationSummary:
        """Return obligations ordered by due day with totals."""
        summary = compute_obligation_summary(
            snapshot,
            today=today or date.today(),
        )
        if summary.overdue:
            self._logger.warning(
                f"{len(summary.overdue)} obligations overdue for "
                f"owner={snapshot.owner_id}"
            )
        return summary


__all__ = ["GetObligationsSummaryUseCase", "ObligationSummary"]
