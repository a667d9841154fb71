"""Composition root for wiring infrastructure adapters."""

from finledger.application.ports.auth import AuthProviderPort
from finledger.application.ports.database import DatabaseEnginePort
from finledger.application.ports.ledger_store import LedgerStorePort
from finledger.application.use_cases.start_session import StartSessionUseCase
from finledger.infrastructure.auth import EnvAuthProvider
from finledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finledger.infrastructure.ledger_repository import SqlAlchemyLedgerStore
from finledger.infrastructure.logging.logger import get_app_logger
from finledger.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_store(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerStorePort:
    """Return the ledger store with its tables prepared."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    store = SqlAlchemyLedgerStore(
        resolved_db,
        logger=get_app_logger(),
        default_currency=resolved_settings.currency,
    )
    store.prepare()
    return store


def build_auth_provider(
    settings: LedgerSettings | None = None,
) -> AuthProviderPort:
    """Return the auth provider supplying owner ids."""
    return EnvAuthProvider(settings or LedgerSettings.from_env())


def build_start_session_use_case(
    ledger_store: LedgerStorePort | None = None,
    settings: LedgerSettings | None = None,
) -> StartSessionUseCase:
    """Return the session start use case configured from settings."""
    resolved_settings = settings or LedgerSettings.from_env()
    resolved_store = ledger_store or build_ledger_store(
        settings=resolved_settings
    )
    return StartSessionUseCase(
        resolved_store,
        logger=get_app_logger(),
        policy=resolved_settings.rollover_policy,
        default_currency=resolved_settings.currency,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_store",
    "build_auth_provider",
    "build_start_session_use_case",
]
