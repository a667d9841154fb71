"""Use case run once per login: load the ledger and roll it over."""

from dataclasses import dataclass
from datetime import date

from finledger.application.ports.ledger_store import LedgerStorePort
from finledger.application.use_cases.load_ledger import (
    LoadLedgerUseCase,
    SyncStatus,
)
from finledger.application.use_cases.rollover_recurring import (
    RolloverOutcome,
    RolloverRecurringUseCase,
)
from finledger.domain.constants import DEFAULT_CURRENCY
from finledger.domain.models import LedgerSnapshot
from finledger.domain.services.recurrence import RolloverPolicy
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SessionState:
    """Ledger state handed to the session after login."""

    snapshot: LedgerSnapshot
    rollover: RolloverOutcome | None
    status: SyncStatus


class StartSessionUseCase:
    """Load the owner's ledger and roll recurring entries forward."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        policy: RolloverPolicy = RolloverPolicy.PERIOD,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port providing ledger persistence.
            logger: Optional logger compatible with logging.Logger-like API.
            policy: Rollover guard policy.
            default_currency: Currency for owners without a stored ledger.
        """
        self._logger = logger or get_app_logger()
        self._load = LoadLedgerUseCase(
            ledger_store,
            logger=self._logger,
            default_currency=default_currency,
        )
        self._rollover = RolloverRecurringUseCase(
            ledger_store,
            logger=self._logger,
            policy=policy,
        )

    def execute(self, owner_id: str, today: date | None = None) -> SessionState:
        """Return the session's starting snapshot.

        Rollover is skipped when the load fell back to a defaulted
        snapshot, so an unreachable store is never overwritten.

        Args:
            owner_id: Owner starting the session.
            today: Date used for rollover; defaults to today.

        Returns:
            SessionState: Snapshot, rollover outcome and sync status.
        """
        loaded = self._load.execute(owner_id)
        if not loaded.status.ok:
            self._logger.warning(
                f"Starting session for owner={owner_id} without sync"
            )
            return SessionState(
                snapshot=loaded.snapshot,
                rollover=None,
                status=loaded.status,
            )
        outcome = self._rollover.execute(loaded.snapshot, as_of=today)
        return SessionState(
            snapshot=outcome.snapshot,
            rollover=outcome,
            status=outcome.status,
        )


__all__ = ["StartSessionUseCase", "SessionState"]
