"""Port for loading and saving owner ledgers."""

from collections.abc import Iterable
from typing import Protocol

from finledger.domain.models import LedgerEntry, LedgerSnapshot


class LedgerStoreError(RuntimeError):
    """Raised when the ledger store cannot be read or written."""


class LedgerStorePort(Protocol):
    """Port exposing persistence of ledger snapshots."""

    def prepare(self) -> None:
        """Ensure the store can receive documents."""

    def load(self, owner_id: str) -> LedgerSnapshot:
        """Return the owner's snapshot, defaulted when nothing is stored.

        Raises:
            LedgerStoreError: If the store cannot be read.
        """

    def save(
        self,
        snapshot: LedgerSnapshot,
        fields: Iterable[str] | None = None,
    ) -> LedgerSnapshot:
        """Upsert a snapshot, merging into any stored document.

        Args:
            snapshot: Snapshot to persist.
            fields: Optional top-level fields to write; others are kept.

        Returns:
            LedgerSnapshot: The snapshot stamped with its sync time.

        Raises:
            LedgerStoreError: If the store cannot be written.
        """

    def commit_rollover(
        self,
        snapshot: LedgerSnapshot,
        period_key: str,
        created: list[LedgerEntry],
    ) -> LedgerSnapshot | None:
        """Persist a rollover unless the period was already materialized.

        Returns:
            LedgerSnapshot | None: The stamped snapshot, or None when another
            writer already claimed one of the created templates for the
            period; nothing is written then.

        Raises:
            LedgerStoreError: If the store cannot be written.
        """


__all__ = ["LedgerStoreError", "LedgerStorePort"]
