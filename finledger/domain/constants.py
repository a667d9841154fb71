"""Domain constants for ledger analytics."""

from enum import Enum


class Category(str, Enum):
    """Closed set of ledger entry categories."""

    CASH = "cash"
    RETIREMENT = "retirement"
    INVESTMENT = "investment"
    PROPERTY = "property"
    VEHICLE = "vehicle"
    OTHER = "other"
    MORTGAGE = "mortgage"
    CREDIT_CARD = "credit_card"
    LOAN = "loan"
    INCOME = "income"
    EXPENSE = "expense"


class Bucket(str, Enum):
    """Logical collection a category belongs to."""

    ASSETS = "assets"
    LIABILITIES = "liabilities"
    INCOME = "income"
    EXPENSES = "expenses"


CATEGORY_BUCKETS = {
    Category.CASH: Bucket.ASSETS,
    Category.RETIREMENT: Bucket.ASSETS,
    Category.INVESTMENT: Bucket.ASSETS,
    Category.PROPERTY: Bucket.ASSETS,
    Category.VEHICLE: Bucket.ASSETS,
    Category.OTHER: Bucket.ASSETS,
    Category.MORTGAGE: Bucket.LIABILITIES,
    Category.CREDIT_CARD: Bucket.LIABILITIES,
    Category.LOAN: Bucket.LIABILITIES,
    Category.INCOME: Bucket.INCOME,
    Category.EXPENSE: Bucket.EXPENSES,
}

DEFAULT_ASSET_CATEGORIES = tuple(
    category
    for category, bucket in CATEGORY_BUCKETS.items()
    if bucket is Bucket.ASSETS
)

DEFAULT_LIABILITY_CATEGORIES = tuple(
    category
    for category, bucket in CATEGORY_BUCKETS.items()
    if bucket is Bucket.LIABILITIES
)

ASSET_COMPOSITION_GROUPS = (
    ("Cash", (Category.CASH,)),
    ("Investments", (Category.INVESTMENT, Category.RETIREMENT)),
    ("Property/Vehicles", (Category.PROPERTY, Category.VEHICLE)),
    ("Other", (Category.OTHER,)),
)

UNCATEGORIZED_LABEL = "Uncategorized"

DEFAULT_CURRENCY = "INR"
DEFAULT_FORECAST_RATE_PERCENT = 12
DEFAULT_FORECAST_YEARS = 10
DEFAULT_TREND_MONTHS = 6


def bucket_for(category: Category) -> Bucket:
    """Return the collection bucket for a category.

    Args:
        category: Entry category.

    Returns:
        Bucket: Collection the category belongs to.
    """
    return CATEGORY_BUCKETS[category]


__all__ = [
    "Category",
    "Bucket",
    "CATEGORY_BUCKETS",
    "DEFAULT_ASSET_CATEGORIES",
    "DEFAULT_LIABILITY_CATEGORIES",
    "ASSET_COMPOSITION_GROUPS",
    "UNCATEGORIZED_LABEL",
    "DEFAULT_CURRENCY",
    "DEFAULT_FORECAST_RATE_PERCENT",
    "DEFAULT_FORECAST_YEARS",
    "DEFAULT_TREND_MONTHS",
    "bucket_for",
]
