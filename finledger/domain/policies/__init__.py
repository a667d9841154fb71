"""Domain policies package."""

from .entry_rules import (
    require_amount,
    require_category,
    require_date,
    require_due_day,
    require_identifier,
)

__all__ = [
    "require_amount",
    "require_category",
    "require_date",
    "require_due_day",
    "require_identifier",
]
