"""Tests for the composition root."""

from pathlib import Path
from unittest.mock import MagicMock

from sqlalchemy import create_engine

from finledger.application.use_cases.start_session import StartSessionUseCase
from finledger.domain.services.recurrence import RolloverPolicy
from finledger.infrastructure import container
from finledger.infrastructure.ledger_repository import SqlAlchemyLedgerStore
from finledger.infrastructure.settings import LedgerSettings


class _FakeDatabasePort:
    def __init__(self, ledger_url: str) -> None:
        self._ledger_engine = create_engine(ledger_url)

    def get_ledger_engine(self):
        return self._ledger_engine


def test_build_ledger_store_prepares_tables(tmp_path: Path, monkeypatch) -> None:
    """The store should be ready to load right after it is built."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    db_port = _FakeDatabasePort(f"sqlite:///{tmp_path / 'ledger.db'}")

    store = container.build_ledger_store(
        db_port=db_port,
        settings=LedgerSettings(currency="EUR"),
    )

    assert isinstance(store, SqlAlchemyLedgerStore)
    assert store.load("owner").currency == "EUR"


def test_build_start_session_use_case_uses_settings(monkeypatch) -> None:
    """The session use case should follow the configured policy."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    captured = {}

    def _fake_use_case(ledger_store, logger, policy, default_currency):
        captured.update(
            ledger_store=ledger_store,
            policy=policy,
            default_currency=default_currency,
        )
        return "use_case"

    monkeypatch.setattr(container, "StartSessionUseCase", _fake_use_case)
    store = MagicMock()

    use_case = container.build_start_session_use_case(
        ledger_store=store,
        settings=LedgerSettings(
            currency="USD",
            rollover_policy=RolloverPolicy.TEMPLATE,
        ),
    )

    assert use_case == "use_case"
    assert captured == {
        "ledger_store": store,
        "policy": RolloverPolicy.TEMPLATE,
        "default_currency": "USD",
    }


def test_build_start_session_use_case_returns_use_case(monkeypatch) -> None:
    """Without patches the real use case type should be returned."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())

    use_case = container.build_start_session_use_case(
        ledger_store=MagicMock(),
        settings=LedgerSettings(),
    )

    assert isinstance(use_case, StartSessionUseCase)
