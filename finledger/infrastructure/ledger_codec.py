"""Conversion between ledger snapshots and JSON-ready documents.

Amounts are written as strings so Decimal values survive the round trip;
dates and timestamps use ISO format.
"""

from datetime import datetime
from typing import Any

from finledger.domain.constants import DEFAULT_CURRENCY
from finledger.domain.errors import LedgerValidationError
from finledger.domain.models import (
    ForecastConfig,
    LedgerEntry,
    LedgerSnapshot,
    Milestone,
    Obligation,
)
from finledger.utils.decimal_utils import coerce_decimal

ENTRY_COLLECTIONS = ("assets", "liabilities", "income", "expenses")

DOCUMENT_FIELDS = (
    "owner_id",
    *ENTRY_COLLECTIONS,
    "obligations",
    "milestones",
    "forecast",
    "currency",
    "last_synced",
)


def _require_record(field: str, document) -> None:
    if not isinstance(document, dict):
        raise LedgerValidationError(field, document, "must be an object")


def entry_to_document(entry: LedgerEntry) -> dict[str, Any]:
    """Return the document form of a ledger entry."""
    return {
        "id": entry.id,
        "owner_id": entry.owner_id,
        "name": entry.name,
        "amount": str(entry.amount),
        "category": entry.category.value,
        "subcategory": entry.subcategory,
        "date": entry.date.isoformat(),
        "recurring": entry.recurring,
    }


def entry_from_document(document: dict[str, Any]) -> LedgerEntry:
    """Build a ledger entry from its document form."""
    _require_record("entry", document)
    return LedgerEntry(
        id=document.get("id"),
        owner_id=document.get("owner_id"),
        name=document.get("name", ""),
        amount=document.get("amount"),
        category=document.get("category"),
        date=document.get("date"),
        recurring=bool(document.get("recurring", False)),
        subcategory=document.get("subcategory"),
    )


def _obligation_to_document(item: Obligation) -> dict[str, Any]:
    return {
        "id": item.id,
        "owner_id": item.owner_id,
        "name": item.name,
        "amount": str(item.amount),
        "due_day": item.due_day,
        "is_paid": item.is_paid,
    }


def _obligation_from_document(document: dict[str, Any]) -> Obligation:
    _require_record("obligation", document)
    return Obligation(
        id=document.get("id"),
        owner_id=document.get("owner_id"),
        name=document.get("name", ""),
        amount=document.get("amount"),
        due_day=document.get("due_day"),
        is_paid=bool(document.get("is_paid", False)),
    )


def _milestone_to_document(item: Milestone) -> dict[str, Any]:
    return {
        "id": item.id,
        "owner_id": item.owner_id,
        "name": item.name,
        "target_amount": str(item.target_amount),
        "current_amount": str(item.current_amount),
        "deadline": item.deadline.isoformat(),
    }


def _milestone_from_document(document: dict[str, Any]) -> Milestone:
    _require_record("milestone", document)
    return Milestone(
        id=document.get("id"),
        owner_id=document.get("owner_id"),
        name=document.get("name", ""),
        target_amount=document.get("target_amount"),
        current_amount=document.get("current_amount"),
        deadline=document.get("deadline"),
    )


def _forecast_to_document(config: ForecastConfig) -> dict[str, Any]:
    return {
        "initial": str(config.initial),
        "monthly_contribution": str(config.monthly_contribution),
        "annual_rate_percent": str(config.annual_rate_percent),
        "years": config.years,
    }


def _forecast_from_document(document: dict[str, Any]) -> ForecastConfig:
    if document is not None:
        _require_record("forecast", document)
    defaults = _forecast_to_document(ForecastConfig())
    merged = {**defaults, **(document or {})}
    return ForecastConfig(
        initial=coerce_decimal(merged["initial"]),
        monthly_contribution=coerce_decimal(merged["monthly_contribution"]),
        annual_rate_percent=coerce_decimal(merged["annual_rate_percent"]),
        years=int(merged["years"]),
    )


def snapshot_to_document(snapshot: LedgerSnapshot) -> dict[str, Any]:
    """Return the document form of a snapshot.

    Args:
        snapshot: Snapshot to serialize.

    Returns:
        dict[str, Any]: JSON-ready document keyed by ``DOCUMENT_FIELDS``.
    """
    document: dict[str, Any] = {"owner_id": snapshot.owner_id}
    for name in ENTRY_COLLECTIONS:
        document[name] = [
            entry_to_document(entry) for entry in getattr(snapshot, name)
        ]
    document["obligations"] = [
        _obligation_to_document(item) for item in snapshot.obligations
    ]
    document["milestones"] = [
        _milestone_to_document(item) for item in snapshot.milestones
    ]
    document["forecast"] = _forecast_to_document(snapshot.forecast)
    document["currency"] = snapshot.currency
    document["last_synced"] = (
        snapshot.last_synced.isoformat() if snapshot.last_synced else None
    )
    return document


def snapshot_from_document(
    owner_id: str,
    document: dict[str, Any] | None,
    default_currency: str = DEFAULT_CURRENCY,
) -> LedgerSnapshot:
    """Build a snapshot from a stored document.

    Missing fields take their default values and the owner id always comes
    from the caller, whatever the document says.

    Args:
        owner_id: Owner the document was stored for.
        document: Stored document, or None when nothing is stored.
        default_currency: Currency used when the document has none.

    Returns:
        LedgerSnapshot: Snapshot with every collection populated.

    Raises:
        LedgerValidationError: If a stored record fails validation.
    """
    defaults = snapshot_to_document(
        LedgerSnapshot.default(owner_id, currency=default_currency)
    )
    merged = {**defaults, **(document or {}), "owner_id": owner_id}
    last_synced = merged.get("last_synced")
    return LedgerSnapshot(
        owner_id=owner_id,
        assets=tuple(entry_from_document(d) for d in merged["assets"] or []),
        liabilities=tuple(
            entry_from_document(d) for d in merged["liabilities"] or []
        ),
        income=tuple(entry_from_document(d) for d in merged["income"] or []),
        expenses=tuple(
            entry_from_document(d) for d in merged["expenses"] or []
        ),
        obligations=tuple(
            _obligation_from_document(d) for d in merged["obligations"] or []
        ),
        milestones=tuple(
            _milestone_from_document(d) for d in merged["milestones"] or []
        ),
        forecast=_forecast_from_document(merged["forecast"]),
        currency=merged["currency"] or default_currency,
        last_synced=datetime.fromisoformat(last_synced) if last_synced else None,
    )


__all__ = [
    "DOCUMENT_FIELDS",
    "ENTRY_COLLECTIONS",
    "entry_to_document",
    "entry_from_document",
    "snapshot_to_document",
    "snapshot_from_document",
]
