"""Use case to roll recurring entries into the current period."""

from dataclasses import dataclass
from datetime import date

from finledger.application.ports.ledger_store import (
    LedgerStoreError,
    LedgerStorePort,
)
from finledger.application.use_cases.load_ledger import SyncStatus
from finledger.domain.models import LedgerEntry, LedgerSnapshot
from finledger.domain.services.recurrence import (
    IdFactory,
    RolloverPolicy,
    rollover,
)
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class RolloverOutcome:
    """Result of a persisted rollover.

    Attributes:
        snapshot: Snapshot the session should continue with.
        created: Entries this call materialized and committed.
        period_key: Period that was rolled into.
        status: Outcome of the conditional write.
    """

    snapshot: LedgerSnapshot
    created: list[LedgerEntry]
    period_key: str
    status: SyncStatus


class RolloverRecurringUseCase:
    """Materialize recurring templates and commit them exactly once."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        policy: RolloverPolicy = RolloverPolicy.PERIOD,
        id_factory: IdFactory | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port providing ledger persistence.
            logger: Optional logger compatible with logging.Logger-like API.
            policy: Guard deciding what already counts as rolled over.
            id_factory: Optional builder for new entry ids.
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()
        self._policy = policy
        self._id_factory = id_factory

    def execute(
        self,
        snapshot: LedgerSnapshot,
        as_of: date | None = None,
    ) -> RolloverOutcome:
        """Roll the snapshot into the period containing ``as_of``.

        When entries are created they are committed through the store's
        conditional write. If another session already claimed the period,
        the stored snapshot is reloaded and nothing is reported as created.

        Args:
            snapshot: Snapshot to roll over.
            as_of: Date whose month is targeted; defaults to today.

        Returns:
            RolloverOutcome: Snapshot to continue with and created entries.
        """
        target_date = as_of or date.today()
        result = rollover(
            snapshot,
            target_date,
            policy=self._policy,
            id_factory=self._id_factory,
        )
        if not result.created:
            self._logger.info(
                f"No rollover needed for owner={snapshot.owner_id} "
                f"period={result.period_key}"
            )
            return RolloverOutcome(
                snapshot=snapshot,
                created=[],
                period_key=result.period_key,
                status=SyncStatus(ok=True, last_synced=snapshot.last_synced),
            )

        self._logger.info(
            f"New period {result.period_key} detected for "
            f"owner={snapshot.owner_id}; rolling over "
            f"{len(result.created)} recurring entries"
        )
        try:
            saved = self._ledger_store.commit_rollover(
                result.snapshot,
                result.period_key,
                result.created,
            )
        except LedgerStoreError as exc:
            self._logger.error(
                f"Failed to persist rollover for owner={snapshot.owner_id} "
                f"period={result.period_key}: {exc}"
            )
            return RolloverOutcome(
                snapshot=result.snapshot,
                created=result.created,
                period_key=result.period_key,
                status=SyncStatus(
                    ok=False,
                    last_synced=snapshot.last_synced,
                    error=str(exc),
                ),
            )

        if saved is None:
            return self._adopt_stored(snapshot, result.period_key)

        return RolloverOutcome(
            snapshot=saved,
            created=result.created,
            period_key=result.period_key,
            status=SyncStatus(ok=True, last_synced=saved.last_synced),
        )

    def _adopt_stored(
        self,
        snapshot: LedgerSnapshot,
        period_key: str,
    ) -> RolloverOutcome:
        """Continue with the ledger of the session that won the period.

        The losing session's entries were rolled back, so nothing is
        reported as created. If the winner's ledger cannot be read, the
        pre-rollover snapshot is kept so those entries are never saved.
        """
        self._logger.warning(
            f"Period {period_key} already rolled over for "
            f"owner={snapshot.owner_id}; reloading stored ledger"
        )
        try:
            stored = self._ledger_store.load(snapshot.owner_id)
        except LedgerStoreError as exc:
            self._logger.error(
                f"Failed to reload ledger for owner={snapshot.owner_id} "
                f"after period={period_key} was claimed: {exc}"
            )
            return RolloverOutcome(
                snapshot=snapshot,
                created=[],
                period_key=period_key,
                status=SyncStatus(
                    ok=False,
                    last_synced=snapshot.last_synced,
                    error=str(exc),
                ),
            )
        return RolloverOutcome(
            snapshot=stored,
            created=[],
            period_key=period_key,
            status=SyncStatus(ok=True, last_synced=stored.last_synced),
        )


__all__ = ["RolloverRecurringUseCase", "RolloverOutcome"]
