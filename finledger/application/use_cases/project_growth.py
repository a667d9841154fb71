"""Use case to project compound growth from forecast parameters."""

from finledger.domain.models import ForecastConfig, ProjectionSummary
from finledger.domain.services.projection import project_growth
from finledger.domain.services.validation import validate_forecast_config
from finledger.infrastructure.logging.logger import get_app_logger


class ProjectGrowthUseCase:
    """Validate forecast parameters and run the growth projection."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(self, config: ForecastConfig) -> ProjectionSummary:
        """Return the year-by-year projection.

        Args:
            config: Projection parameters.

        Returns:
            ProjectionSummary: ``years + 1`` yearly snapshots.

        Raises:
            ForecastValidationError: If the parameters are out of range.
        """
        validated = validate_forecast_config(config)
        summary = ProjectionSummary(years=project_growth(validated))
        self._logger.info(
            f"Projected {validated.years} years: "
            f"final value={summary.final.total_value}, "
            f"invested={summary.final.total_invested}"
        )
        return summary


__all__ = ["ProjectGrowthUseCase", "ProjectionSummary"]
