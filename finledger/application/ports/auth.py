"""Port supplying the authenticated owner."""

from typing import Protocol


class AuthProviderPort(Protocol):
    """Port exposing the identity every ledger call is scoped to."""

    def current_owner_id(self) -> str:
        """Return the identifier of the signed-in owner."""


__all__ = ["AuthProviderPort"]
