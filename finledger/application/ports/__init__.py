"""Application ports package."""

from .auth import AuthProviderPort
from .database import DatabaseEnginePort
from .ledger_store import LedgerStoreError, LedgerStorePort

__all__ = [
    "AuthProviderPort",
    "DatabaseEnginePort",
    "LedgerStoreError",
    "LedgerStorePort",
]
