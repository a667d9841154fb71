"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from finledger.domain.constants import DEFAULT_CURRENCY
from finledger.domain.services.recurrence import RolloverPolicy
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger engine.

    Attributes:
        currency: Currency code of newly defaulted ledgers.
        owner_id: Owner supplied to command-line adapters, when configured.
        rollover_policy: Guard used when rolling recurring entries over.
    """

    currency: str = DEFAULT_CURRENCY
    owner_id: Optional[str] = None
    rollover_policy: RolloverPolicy = RolloverPolicy.PERIOD

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from the environment and .env.

        Raises:
            ValueError: If FINLEDGER_ROLLOVER_POLICY is not recognized.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        currency = os.getenv("FINLEDGER_CURRENCY", DEFAULT_CURRENCY).strip()
        if not currency:
            logger.warning(
                f"Empty FINLEDGER_CURRENCY; using {DEFAULT_CURRENCY}"
            )
            currency = DEFAULT_CURRENCY
        owner_id = (os.getenv("FINLEDGER_OWNER_ID") or "").strip() or None
        raw_policy = (
            os.getenv("FINLEDGER_ROLLOVER_POLICY", RolloverPolicy.PERIOD.value)
            .strip()
            .lower()
        )
        try:
            policy = RolloverPolicy(raw_policy)
        except ValueError as exc:
            raise ValueError(
                "Unsupported rollover policy: "
                f"{raw_policy}. Expected period or template."
            ) from exc
        return cls(
            currency=currency.upper(),
            owner_id=owner_id,
            rollover_policy=policy,
        )


__all__ = ["LedgerSettings"]
