"""Domain error types."""


class LedgerValidationError(ValueError):
    """Raised when a ledger record fails validation at construction.

    Attributes:
        field: Name of the offending field.
        value: Rejected raw value.
    """

    def __init__(self, field: str, value, message: str) -> None:
        super().__init__(f"Invalid {field}={value!r}: {message}")
        self.field = field
        self.value = value


class ForecastValidationError(LedgerValidationError):
    """Raised when projection parameters are out of range."""


__all__ = ["LedgerValidationError", "ForecastValidationError"]
