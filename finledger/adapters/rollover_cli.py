"""CLI adapter to start a session and roll recurring entries over.

This module wires the StartSessionUseCase to the configured ledger store and
is meant to run once per login or from a scheduler at month start.
"""

from finledger.infrastructure.container import (
    build_auth_provider,
    build_start_session_use_case,
)
from finledger.infrastructure.logging.logger import get_usage_logger
from finledger.infrastructure.settings import LedgerSettings


def main() -> None:
    """Run the session start for the configured owner."""
    logger = get_usage_logger()
    settings = LedgerSettings.from_env()
    owner_id = build_auth_provider(settings).current_owner_id()
    use_case = build_start_session_use_case(settings=settings)

    state = use_case.execute(owner_id)

    created = len(state.rollover.created) if state.rollover else 0
    period = state.rollover.period_key if state.rollover else "-"
    logger.info(
        f"Session started for owner={owner_id}: created={created}, "
        f"synced={state.status.ok}"
    )
    print(f"Rolled over {created} recurring entries into {period}.")
    if not state.status.ok:
        print(f"Warning: ledger not synced ({state.status.error}).")


if __name__ == "__main__":  # pragma: no cover
    main()
