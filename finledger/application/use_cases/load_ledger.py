"""Use case to load an owner's ledger with a degraded fallback."""

from dataclasses import dataclass
from datetime import datetime

from finledger.application.ports.ledger_store import (
    LedgerStoreError,
    LedgerStorePort,
)
from finledger.domain.constants import DEFAULT_CURRENCY
from finledger.domain.models import LedgerSnapshot
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SyncStatus:
    """Visible state of the last exchange with the ledger store.

    Attributes:
        ok: Whether the store accepted the last read or write.
        last_synced: Time of the last successful write, when known.
        error: Message describing the failure when ``ok`` is False.
    """

    ok: bool
    last_synced: datetime | None = None
    error: str | None = None


@dataclass(frozen=True)
class LoadLedgerResult:
    """Snapshot returned by a load and how it was obtained."""

    snapshot: LedgerSnapshot
    status: SyncStatus


class LoadLedgerUseCase:
    """Load a snapshot, falling back to an empty one when storage fails."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port providing ledger persistence.
            logger: Optional logger compatible with logging.Logger-like API.
            default_currency: Currency of the fallback snapshot.
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()
        self._default_currency = default_currency

    def execute(self, owner_id: str) -> LoadLedgerResult:
        """Return the owner's snapshot.

        Args:
            owner_id: Owner whose ledger is loaded.

        Returns:
            LoadLedgerResult: Stored snapshot, or a defaulted one flagged as
            unsynced when the store failed.
        """
        try:
            snapshot = self._ledger_store.load(owner_id)
        except LedgerStoreError as exc:
            self._logger.error(
                f"Failed to load ledger for owner={owner_id}: {exc}"
            )
            return LoadLedgerResult(
                snapshot=LedgerSnapshot.default(
                    owner_id,
                    currency=self._default_currency,
                ),
                status=SyncStatus(ok=False, error=str(exc)),
            )
        self._logger.info(
            f"Loaded ledger for owner={owner_id}: "
            f"{len(snapshot.income)} income, {len(snapshot.expenses)} expenses"
        )
        return LoadLedgerResult(
            snapshot=snapshot,
            status=SyncStatus(ok=True, last_synced=snapshot.last_synced),
        )


__all__ = ["LoadLedgerUseCase", "LoadLedgerResult", "SyncStatus"]
