"""Use case to report savings goal progress."""

from finledger.domain.models import LedgerSnapshot, MilestoneProgress
from finledger.domain.services.aggregation import compute_milestone_progress


class GetMilestoneProgressUseCase:
    """Compute progress for each milestone of a snapshot."""

    def execute(self, snapshot: LedgerSnapshot) -> list[MilestoneProgress]:
        """Return milestone progress in stored order."""
        return compute_milestone_progress(snapshot)


__all__ = ["GetMilestoneProgressUseCase", "MilestoneProgress"]
