"""Auth provider adapters."""

from finledger.application.ports.auth import AuthProviderPort
from finledger.infrastructure.settings import LedgerSettings


class EnvAuthProvider(AuthProviderPort):
    """Owner identity taken from the FINLEDGER_OWNER_ID setting."""

    def __init__(self, settings: LedgerSettings | None = None) -> None:
        self._settings = settings or LedgerSettings.from_env()

    def current_owner_id(self) -> str:
        """Return the configured owner id.

        Raises:
            RuntimeError: If no owner is configured.
        """
        if not self._settings.owner_id:
            raise RuntimeError("Missing environment variable: FINLEDGER_OWNER_ID")
        return self._settings.owner_id


__all__ = ["EnvAuthProvider"]
