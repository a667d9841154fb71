"""Tests for the rollover_cli adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from finledger.adapters import rollover_cli
from finledger.application.use_cases.load_ledger import SyncStatus
from finledger.infrastructure.settings import LedgerSettings


def _patch_wiring(monkeypatch, state):
    fake_logger = MagicMock()
    settings = LedgerSettings(owner_id="user-42")
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = state

    monkeypatch.setattr(rollover_cli, "get_usage_logger", lambda: fake_logger)
    monkeypatch.setattr(
        rollover_cli,
        "LedgerSettings",
        SimpleNamespace(from_env=lambda: settings),
    )
    monkeypatch.setattr(
        rollover_cli,
        "build_auth_provider",
        lambda resolved: SimpleNamespace(
            current_owner_id=lambda: resolved.owner_id
        ),
    )

    def _fake_builder(settings):
        return fake_use_case

    monkeypatch.setattr(
        rollover_cli,
        "build_start_session_use_case",
        _fake_builder,
    )
    return fake_use_case, fake_logger


def test_main_reports_created_entries(monkeypatch, capsys):
    """The CLI should run the session start and print the rollover count."""
    state = SimpleNamespace(
        rollover=SimpleNamespace(
            created=[object(), object()],
            period_key="2024-04",
        ),
        status=SyncStatus(ok=True),
    )
    fake_use_case, fake_logger = _patch_wiring(monkeypatch, state)

    rollover_cli.main()

    fake_use_case.execute.assert_called_once_with("user-42")
    fake_logger.info.assert_called_once()
    captured = capsys.readouterr()
    assert "Rolled over 2 recurring entries into 2024-04." in captured.out
    assert "Warning" not in captured.out


def test_main_warns_when_not_synced(monkeypatch, capsys):
    """An unsynced session should be flagged on the console."""
    state = SimpleNamespace(
        rollover=None,
        status=SyncStatus(ok=False, error="offline"),
    )
    _patch_wiring(monkeypatch, state)

    rollover_cli.main()

    captured = capsys.readouterr()
    assert "Rolled over 0 recurring entries into -." in captured.out
    assert "Warning: ledger not synced (offline)." in captured.out
