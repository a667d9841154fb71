"""SQLAlchemy-backed store for ledger snapshots.

Each owner's ledger is one JSON document in ``ledger_documents``. Writes
merge into the stored document, so fields a caller does not send are kept.
Rollovers are committed together with one ``rollover_markers`` row per
created template; the composite primary key turns a concurrent second
rollover of the same period into a rejected transaction.
"""

from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime, timezone
import json
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from finledger.application.ports.database import DatabaseEnginePort
from finledger.application.ports.ledger_store import (
    LedgerStoreError,
    LedgerStorePort,
)
from finledger.domain.constants import DEFAULT_CURRENCY
from finledger.domain.models import LedgerEntry, LedgerSnapshot
from finledger.infrastructure.ledger_codec import (
    DOCUMENT_FIELDS,
    snapshot_from_document,
    snapshot_to_document,
)
from finledger.infrastructure.logging.logger import get_app_logger


CREATE_LEDGER_DOCUMENTS_SQL = """
CREATE TABLE IF NOT EXISTS ledger_documents (
    owner_id TEXT PRIMARY KEY,
    payload TEXT NOT NULL,
    last_synced TEXT
)
"""

CREATE_ROLLOVER_MARKERS_SQL = """
CREATE TABLE IF NOT EXISTS rollover_markers (
    owner_id TEXT NOT NULL,
    period_key TEXT NOT NULL,
    template_name TEXT NOT NULL,
    category TEXT NOT NULL,
    entry_id TEXT NOT NULL,
    created_at TEXT NOT NULL,
    PRIMARY KEY (owner_id, period_key, template_name, category)
)
"""

SELECT_DOCUMENT_SQL = text(
    """
    SELECT payload
    FROM ledger_documents
    WHERE owner_id = :owner_id
    """
)

INSERT_DOCUMENT_SQL = text(
    """
    INSERT INTO ledger_documents (owner_id, payload, last_synced)
    VALUES (:owner_id, :payload, :last_synced)
    """
)

UPDATE_DOCUMENT_SQL = text(
    """
    UPDATE ledger_documents
    SET payload = :payload, last_synced = :last_synced
    WHERE owner_id = :owner_id
    """
)

INSERT_MARKER_SQL = text(
    """
    INSERT INTO rollover_markers (
        owner_id,
        period_key,
        template_name,
        category,
        entry_id,
        created_at
    )
    VALUES (
        :owner_id,
        :period_key,
        :template_name,
        :category,
        :entry_id,
        :created_at
    )
    """
)

ROLLOVER_FIELDS = ("income", "expenses")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SqlAlchemyLedgerStore(LedgerStorePort):
    """Ledger store backed by SQLAlchemy."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        logger=None,
        default_currency: str = DEFAULT_CURRENCY,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
            default_currency: Currency of ledgers with nothing stored yet.
            clock: Optional source of sync timestamps.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._default_currency = default_currency
        self._clock = clock or _utc_now

    def prepare(self) -> None:
        """Create the ledger tables if they do not exist."""
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_LEDGER_DOCUMENTS_SQL)
                conn.exec_driver_sql(CREATE_ROLLOVER_MARKERS_SQL)
        except SQLAlchemyError as exc:
            raise LedgerStoreError(f"Could not prepare ledger tables: {exc}") from exc

    def load(self, owner_id: str) -> LedgerSnapshot:
        """Return the owner's snapshot, defaulted when nothing is stored.

        Args:
            owner_id: Owner whose document is read.

        Returns:
            LedgerSnapshot: Stored snapshot with missing fields defaulted.

        Raises:
            LedgerStoreError: If the database fails or the document is
                unreadable.
        """
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                document = self._fetch_document(conn, owner_id)
        except SQLAlchemyError as exc:
            raise LedgerStoreError(
                f"Could not read ledger for owner={owner_id}: {exc}"
            ) from exc
        if document is None:
            self._logger.info(
                f"No stored ledger for owner={owner_id}; using defaults"
            )
        return self._decode(owner_id, document)

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
            LedgerStoreError: If the database fails.
        """
        selected = self._select_fields(fields)
        stamped = replace(snapshot, last_synced=self._clock())
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                self._upsert(conn, stamped, selected)
        except SQLAlchemyError as exc:
            raise LedgerStoreError(
                f"Could not save ledger for owner={snapshot.owner_id}: {exc}"
            ) from exc
        return stamped

    def commit_rollover(
        self,
        snapshot: LedgerSnapshot,
        period_key: str,
        created: list[LedgerEntry],
    ) -> LedgerSnapshot | None:
        """Persist rolled-over entries unless the period was already claimed.

        Markers and the income/expense fields are written in one
        transaction; a marker conflict rolls both back.

        Args:
            snapshot: Snapshot including the created entries.
            period_key: Period the entries were created for.
            created: Entries created by the rollover.

        Returns:
            LedgerSnapshot | None: Stamped snapshot, or None on conflict.

        Raises:
            LedgerStoreError: If the database fails for another reason.
        """
        stamped = replace(snapshot, last_synced=self._clock())
        markers = [
            {
                "owner_id": snapshot.owner_id,
                "period_key": period_key,
                "template_name": entry.name,
                "category": entry.category.value,
                "entry_id": entry.id,
                "created_at": stamped.last_synced.isoformat(),
            }
            for entry in created
        ]
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                for marker in markers:
                    conn.execute(INSERT_MARKER_SQL, marker)
                self._upsert(conn, stamped, ROLLOVER_FIELDS)
        except IntegrityError:
            self._logger.warning(
                f"Rollover for owner={snapshot.owner_id} period={period_key} "
                "was already committed by another session"
            )
            return None
        except SQLAlchemyError as exc:
            raise LedgerStoreError(
                f"Could not commit rollover for owner={snapshot.owner_id}: {exc}"
            ) from exc
        self._logger.info(
            f"Committed {len(created)} rollover entries for "
            f"owner={snapshot.owner_id} period={period_key}"
        )
        return stamped

    def _upsert(
        self,
        conn: Connection,
        snapshot: LedgerSnapshot,
        fields: tuple[str, ...],
    ) -> None:
        existing = self._fetch_document(conn, snapshot.owner_id)
        incoming = snapshot_to_document(snapshot)
        merged = dict(existing or {})
        for name in fields:
            merged[name] = incoming[name]
        merged["owner_id"] = snapshot.owner_id
        merged["last_synced"] = incoming["last_synced"]
        params = {
            "owner_id": snapshot.owner_id,
            "payload": json.dumps(merged, sort_keys=True),
            "last_synced": incoming["last_synced"],
        }
        if existing is None:
            conn.execute(INSERT_DOCUMENT_SQL, params)
        else:
            conn.execute(UPDATE_DOCUMENT_SQL, params)

    @staticmethod
    def _fetch_document(
        conn: Connection,
        owner_id: str,
    ) -> dict[str, Any] | None:
        row = conn.execute(SELECT_DOCUMENT_SQL, {"owner_id": owner_id}).first()
        if row is None:
            return None
        try:
            document = json.loads(row.payload)
        except ValueError as exc:
            raise LedgerStoreError(
                f"Stored ledger for owner={owner_id} is not valid JSON"
            ) from exc
        if not isinstance(document, dict):
            raise LedgerStoreError(
                f"Stored ledger for owner={owner_id} is not a document"
            )
        return document

    def _decode(
        self,
        owner_id: str,
        document: dict[str, Any] | None,
    ) -> LedgerSnapshot:
        try:
            return snapshot_from_document(
                owner_id,
                document,
                default_currency=self._default_currency,
            )
        except (TypeError, ValueError) as exc:
            raise LedgerStoreError(
                f"Stored ledger for owner={owner_id} is invalid: {exc}"
            ) from exc

    @staticmethod
    def _select_fields(fields: Iterable[str] | None) -> tuple[str, ...]:
        if fields is None:
            return DOCUMENT_FIELDS
        selected = tuple(fields)
        unknown = [name for name in selected if name not in DOCUMENT_FIELDS]
        if unknown:
            raise ValueError(f"Unknown ledger fields: {', '.join(unknown)}")
        return selected


__all__ = [
    "SqlAlchemyLedgerStore",
    "CREATE_LEDGER_DOCUMENTS_SQL",
    "CREATE_ROLLOVER_MARKERS_SQL",
    "ROLLOVER_FIELDS",
]
