"""Tests for the ledger document codec."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from finledger.domain.constants import Category
from finledger.domain.errors import LedgerValidationError
from finledger.domain.models import ForecastConfig, LedgerEntry, LedgerSnapshot
from finledger.infrastructure.ledger_codec import (
    DOCUMENT_FIELDS,
    entry_to_document,
    snapshot_from_document,
    snapshot_to_document,
)


def test_entry_document_uses_string_amounts_and_iso_dates() -> None:
    """Amounts and dates should be stored in lossless text form."""
    entry = LedgerEntry(
        id="e1",
        owner_id="owner",
        name="Rent",
        amount=Decimal("1500.10"),
        category=Category.EXPENSE,
        date=date(2024, 3, 1),
        recurring=True,
        subcategory="Housing",
    )

    document = entry_to_document(entry)

    assert document["amount"] == "1500.10"
    assert document["date"] == "2024-03-01"
    assert document["category"] == "expense"
    assert document["recurring"] is True


def test_snapshot_document_has_every_field() -> None:
    """Serialized snapshots should carry every top-level field."""
    snapshot = LedgerSnapshot(
        owner_id="owner",
        last_synced=datetime(2024, 4, 1, tzinfo=timezone.utc),
    )

    document = snapshot_to_document(snapshot)

    assert set(document) == set(DOCUMENT_FIELDS)
    assert document["last_synced"] == "2024-04-01T00:00:00+00:00"


def test_missing_fields_take_defaults() -> None:
    """Partial documents should be completed with default values."""
    snapshot = snapshot_from_document(
        "owner",
        {"currency": "USD", "forecast": {"initial": "250"}},
    )

    assert snapshot.assets == ()
    assert snapshot.milestones == ()
    assert snapshot.currency == "USD"
    assert snapshot.forecast == ForecastConfig(initial=Decimal("250"))
    assert snapshot.last_synced is None


def test_owner_comes_from_caller() -> None:
    """The stored owner id should never override the caller's."""
    snapshot = snapshot_from_document(
        "owner",
        {"owner_id": "someone-else"},
        default_currency="GBP",
    )

    assert snapshot.owner_id == "owner"
    assert snapshot.currency == "GBP"


def test_non_object_entry_is_rejected() -> None:
    """Collection items that are not objects should fail validation."""
    with pytest.raises(LedgerValidationError) as excinfo:
        snapshot_from_document("owner", {"expenses": ["oops"]})

    assert excinfo.value.field == "entry"
    assert excinfo.value.value == "oops"
