"""CLI adapter printing the growth projection of the stored forecast."""

from finledger.application.use_cases.load_ledger import LoadLedgerUseCase
from finledger.application.use_cases.project_growth import ProjectGrowthUseCase
from finledger.domain.errors import ForecastValidationError
from finledger.infrastructure.container import (
    build_auth_provider,
    build_ledger_store,
)
from finledger.infrastructure.logging.logger import get_app_logger
from finledger.infrastructure.settings import LedgerSettings


def main() -> None:
    """Print one line per projected year for the configured owner."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    owner_id = build_auth_provider(settings).current_owner_id()
    store = build_ledger_store(settings=settings)

    loaded = LoadLedgerUseCase(
        store,
        logger=logger,
        default_currency=settings.currency,
    ).execute(owner_id)
    try:
        projection = ProjectGrowthUseCase(logger=logger).execute(
            loaded.snapshot.forecast
        )
    except ForecastValidationError as exc:
        logger.error(str(exc))
        print(f"Cannot project stored forecast: {exc}")
        raise SystemExit(1) from exc

    currency = loaded.snapshot.currency
    print(f"Projection for {owner_id} ({currency})")
    for year in projection.years:
        print(
            f"year {year.year_index}: value={year.total_value}, "
            f"invested={year.total_invested}, "
            f"interest={year.interest_earned}"
        )
    if not loaded.status.ok:
        print(f"Warning: ledger not synced ({loaded.status.error}).")


if __name__ == "__main__":  # pragma: no cover
    main()
