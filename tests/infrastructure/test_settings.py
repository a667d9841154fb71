"""Tests for infrastructure settings and the env auth provider."""

import pytest

from finledger.domain.services.recurrence import RolloverPolicy
from finledger.infrastructure import settings as settings_module
from finledger.infrastructure.auth import EnvAuthProvider
from finledger.infrastructure.settings import LedgerSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in (
        "FINLEDGER_CURRENCY",
        "FINLEDGER_OWNER_ID",
        "FINLEDGER_ROLLOVER_POLICY",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_uses_defaults() -> None:
    """Unset variables should fall back to the defaults."""
    settings = LedgerSettings.from_env()

    assert settings.currency == "INR"
    assert settings.owner_id is None
    assert settings.rollover_policy is RolloverPolicy.PERIOD


def test_from_env_reads_values(monkeypatch) -> None:
    """Configured values should be normalized."""
    monkeypatch.setenv("FINLEDGER_CURRENCY", " eur ")
    monkeypatch.setenv("FINLEDGER_OWNER_ID", "user-42")
    monkeypatch.setenv("FINLEDGER_ROLLOVER_POLICY", "Template")

    settings = LedgerSettings.from_env()

    assert settings.currency == "EUR"
    assert settings.owner_id == "user-42"
    assert settings.rollover_policy is RolloverPolicy.TEMPLATE


def test_from_env_rejects_unknown_policy(monkeypatch) -> None:
    """Unknown rollover policies should raise a ValueError."""
    monkeypatch.setenv("FINLEDGER_ROLLOVER_POLICY", "weekly")

    with pytest.raises(ValueError):
        LedgerSettings.from_env()


def test_auth_provider_returns_configured_owner() -> None:
    """The env auth provider should expose the configured owner."""
    provider = EnvAuthProvider(LedgerSettings(owner_id="user-42"))

    assert provider.current_owner_id() == "user-42"


def test_auth_provider_requires_owner() -> None:
    """A missing owner should raise a RuntimeError."""
    provider = EnvAuthProvider(LedgerSettings())

    with pytest.raises(RuntimeError):
        provider.current_owner_id()
