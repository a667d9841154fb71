"""Tests for the projection_cli adapter."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from finledger.adapters import projection_cli
from finledger.application.use_cases.load_ledger import (
    LoadLedgerResult,
    SyncStatus,
)
from finledger.domain.models import ForecastConfig, LedgerSnapshot
from finledger.infrastructure.settings import LedgerSettings


def _patch_wiring(monkeypatch, snapshot, status=None):
    fake_logger = MagicMock()
    settings = LedgerSettings(owner_id="user-42", currency="EUR")
    store = MagicMock()
    store.load.return_value = snapshot

    monkeypatch.setattr(projection_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        projection_cli,
        "LedgerSettings",
        SimpleNamespace(from_env=lambda: settings),
    )
    monkeypatch.setattr(
        projection_cli,
        "build_auth_provider",
        lambda resolved: SimpleNamespace(current_owner_id=lambda: "user-42"),
    )
    monkeypatch.setattr(
        projection_cli,
        "build_ledger_store",
        lambda settings: store,
    )
    if status is not None:
        loader = MagicMock()
        loader.execute.return_value = LoadLedgerResult(
            snapshot=snapshot,
            status=status,
        )
        monkeypatch.setattr(
            projection_cli,
            "LoadLedgerUseCase",
            lambda *args, **kwargs: loader,
        )
    return fake_logger


def test_main_prints_one_line_per_year(monkeypatch, capsys):
    """Every projected year should be printed."""
    snapshot = LedgerSnapshot(
        owner_id="user-42",
        forecast=ForecastConfig(
            initial=Decimal("1000"),
            monthly_contribution=Decimal("100"),
            annual_rate_percent=Decimal("12"),
            years=1,
        ),
        currency="EUR",
    )
    _patch_wiring(monkeypatch, snapshot)

    projection_cli.main()

    out = capsys.readouterr().out
    assert "Projection for user-42 (EUR)" in out
    assert "year 0: value=1000, invested=1000, interest=0" in out
    assert "year 1: value=2408, invested=2200, interest=208" in out


def test_main_fails_on_invalid_forecast(monkeypatch, capsys):
    """Invalid stored parameters should be reported and exit non-zero."""
    snapshot = LedgerSnapshot(
        owner_id="user-42",
        forecast=ForecastConfig(years=-1),
    )
    fake_logger = _patch_wiring(monkeypatch, snapshot)

    with pytest.raises(SystemExit) as excinfo:
        projection_cli.main()

    assert excinfo.value.code == 1
    fake_logger.error.assert_called_once()
    out = capsys.readouterr().out
    assert "Cannot project stored forecast" in out
    assert "years" in out
    assert "year 0" not in out


def test_main_flags_unsynced_ledger(monkeypatch, capsys):
    """A fallback ledger should be projected with a warning."""
    snapshot = LedgerSnapshot.default("user-42", currency="EUR")
    _patch_wiring(
        monkeypatch,
        snapshot,
        status=SyncStatus(ok=False, error="offline"),
    )

    projection_cli.main()

    out = capsys.readouterr().out
    assert "year 10:" in out
    assert "Warning: ledger not synced (offline)." in out
