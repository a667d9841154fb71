"""Use case to persist a ledger snapshot on a best-effort basis."""

from collections.abc import Iterable
from dataclasses import dataclass

from finledger.application.ports.ledger_store import (
    LedgerStoreError,
    LedgerStorePort,
)
from finledger.application.use_cases.load_ledger import SyncStatus
from finledger.domain.models import LedgerSnapshot
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SaveLedgerResult:
    """Snapshot kept in memory after a save and the sync outcome."""

    snapshot: LedgerSnapshot
    status: SyncStatus


class SaveLedgerUseCase:
    """Write a snapshot once; failures are reported, never retried."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port providing ledger persistence.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: LedgerSnapshot,
        fields: Iterable[str] | None = None,
    ) -> SaveLedgerResult:
        """Persist the snapshot.

        The in-memory snapshot is kept as the caller's state whatever the
        outcome; a failed write leaves the stored copy behind until the next
        successful save.

        Args:
            snapshot: Snapshot to persist.
            fields: Optional top-level fields to write.

        Returns:
            SaveLedgerResult: Stamped snapshot on success, the unchanged
            snapshot and a failed status otherwise.
        """
        try:
            saved = self._ledger_store.save(snapshot, fields=fields)
        except LedgerStoreError as exc:
            self._logger.error(
                f"Failed to save ledger for owner={snapshot.owner_id}: {exc}"
            )
            return SaveLedgerResult(
                snapshot=snapshot,
                status=SyncStatus(
                    ok=False,
                    last_synced=snapshot.last_synced,
                    error=str(exc),
                ),
            )
        self._logger.info(
            f"Saved ledger for owner={saved.owner_id} at {saved.last_synced}"
        )
        return SaveLedgerResult(
            snapshot=saved,
            status=SyncStatus(ok=True, last_synced=saved.last_synced),
        )


class ResetLedgerUseCase:
    """Replace an owner's stored ledger with a defaulted one."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        self._save = SaveLedgerUseCase(ledger_store, logger=logger)

    def execute(self, owner_id: str, currency: str | None = None) -> SaveLedgerResult:
        """Save an empty snapshot over every stored field of the owner."""
        if currency is None:
            snapshot = LedgerSnapshot.default(owner_id)
        else:
            snapshot = LedgerSnapshot.default(owner_id, currency=currency)
        return self._save.execute(snapshot)


__all__ = ["SaveLedgerUseCase", "SaveLedgerResult", "ResetLedgerUseCase"]
