"""Domain models for an owner's ledger."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal

from finledger.domain.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_FORECAST_RATE_PERCENT,
    DEFAULT_FORECAST_YEARS,
    Bucket,
    Category,
    bucket_for,
)
from finledger.domain.errors import LedgerValidationError
from finledger.domain.periods import period_key
from finledger.domain.policies import (
    require_amount,
    require_category,
    require_date,
    require_due_day,
    require_identifier,
)


@dataclass(frozen=True)
class LedgerEntry:
    """A single asset, liability, income or expense record.

    Attributes:
        id: Identifier, unique within the owning collection.
        owner_id: Identifier of the owning user.
        name: Free-text label; with the category it keys recurring templates.
        amount: Non-negative amount; direction comes from the collection.
        category: Entry category.
        date: Calendar date of the entry.
        recurring: Whether the entry rolls over into new periods.
        subcategory: Optional refinement used by breakdowns only.
    """

    id: str
    owner_id: str
    name: str
    amount: Decimal
    category: Category
    date: date
    recurring: bool = False
    subcategory: str | None = None

    def __post_init__(self) -> None:
        require_identifier("id", self.id)
        require_identifier("owner_id", self.owner_id)
        if not isinstance(self.name, str):
            raise LedgerValidationError("name", self.name, "must be a string")
        object.__setattr__(self, "amount", require_amount("amount", self.amount))
        object.__setattr__(self, "category", require_category(self.category))
        object.__setattr__(self, "date", require_date("date", self.date))
        object.__setattr__(self, "recurring", bool(self.recurring))
        if self.subcategory is not None and not isinstance(self.subcategory, str):
            raise LedgerValidationError(
                "subcategory",
                self.subcategory,
                "must be a string",
            )

    @property
    def period_key(self) -> str:
        """Return the ``YYYY-MM`` period the entry falls in."""
        return period_key(self.date)

    @property
    def bucket(self) -> Bucket:
        """Return the collection implied by the category."""
        return bucket_for(self.category)


@dataclass(frozen=True)
class Obligation:
    """Fixed monthly bill such as an EMI or subscription."""

    id: str
    owner_id: str
    name: str
    amount: Decimal
    due_day: int
    is_paid: bool = False

    def __post_init__(self) -> None:
        require_identifier("id", self.id)
        require_identifier("owner_id", self.owner_id)
        object.__setattr__(self, "amount", require_amount("amount", self.amount))
        require_due_day(self.due_day)
        object.__setattr__(self, "is_paid", bool(self.is_paid))


@dataclass(frozen=True)
class Milestone:
    """Savings goal tracked against a target amount."""

    id: str
    owner_id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal
    deadline: date

    def __post_init__(self) -> None:
        require_identifier("id", self.id)
        require_identifier("owner_id", self.owner_id)
        object.__setattr__(
            self,
            "target_amount",
            require_amount("target_amount", self.target_amount),
        )
        object.__setattr__(
            self,
            "current_amount",
            require_amount("current_amount", self.current_amount),
        )
        object.__setattr__(
            self,
            "deadline",
            require_date("deadline", self.deadline),
        )


@dataclass(frozen=True)
class ForecastConfig:
    """Parameters for the compound-growth projection.

    Values are stored as given; range checks live in
    ``validate_forecast_config`` so the projection itself stays total.
    """

    initial: Decimal = Decimal("0")
    monthly_contribution: Decimal = Decimal("0")
    annual_rate_percent: Decimal = Decimal(DEFAULT_FORECAST_RATE_PERCENT)
    years: int = DEFAULT_FORECAST_YEARS


def _entries_field():
    return field(default_factory=tuple)


@dataclass(frozen=True)
class LedgerSnapshot:
    """Complete in-memory state of one owner's ledger.

    Collections are tuples; every change produces a new snapshot.
    """

    owner_id: str
    assets: tuple[LedgerEntry, ...] = _entries_field()
    liabilities: tuple[LedgerEntry, ...] = _entries_field()
    income: tuple[LedgerEntry, ...] = _entries_field()
    expenses: tuple[LedgerEntry, ...] = _entries_field()
    obligations: tuple[Obligation, ...] = _entries_field()
    milestones: tuple[Milestone, ...] = _entries_field()
    forecast: ForecastConfig = field(default_factory=ForecastConfig)
    currency: str = DEFAULT_CURRENCY
    last_synced: datetime | None = None

    def __post_init__(self) -> None:
        require_identifier("owner_id", self.owner_id)
        for name in (
            "assets",
            "liabilities",
            "income",
            "expenses",
            "obligations",
            "milestones",
        ):
            items = tuple(getattr(self, name))
            object.__setattr__(self, name, items)
            seen: set[str] = set()
            for item in items:
                if item.id in seen:
                    raise LedgerValidationError(
                        name,
                        item.id,
                        "duplicate id in collection",
                    )
                seen.add(item.id)

    @classmethod
    def default(
        cls,
        owner_id: str,
        currency: str = DEFAULT_CURRENCY,
    ) -> "LedgerSnapshot":
        """Return an empty snapshot with default forecast settings."""
        return cls(owner_id=owner_id, currency=currency)

    def entries(self) -> tuple[LedgerEntry, ...]:
        """Return entries from all four entry collections."""
        return self.assets + self.liabilities + self.income + self.expenses

    def flow_entries(self) -> tuple[LedgerEntry, ...]:
        """Return income and expense entries, income first."""
        return self.income + self.expenses

    def with_entry(self, entry: LedgerEntry) -> "LedgerSnapshot":
        """Return a snapshot with ``entry`` appended to its bucket."""
        attribute = entry.bucket.value
        return replace(self, **{attribute: getattr(self, attribute) + (entry,)})

    def without_entry(self, entry_id: str) -> "LedgerSnapshot":
        """Return a snapshot without the entry carrying ``entry_id``."""
        changes = {}
        for bucket in Bucket:
            items = getattr(self, bucket.value)
            kept = tuple(item for item in items if item.id != entry_id)
            if len(kept) != len(items):
                changes[bucket.value] = kept
        if not changes:
            return self
        return replace(self, **changes)

    def with_obligation_paid(
        self,
        obligation_id: str,
        is_paid: bool,
    ) -> "LedgerSnapshot":
        """Return a snapshot with one obligation's paid flag set."""
        obligations = tuple(
            replace(item, is_paid=is_paid) if item.id == obligation_id else item
            for item in self.obligations
        )
        return replace(self, obligations=obligations)

    def with_forecast(self, forecast: ForecastConfig) -> "LedgerSnapshot":
        """Return a snapshot using new projection parameters."""
        return replace(self, forecast=forecast)


__all__ = [
    "LedgerEntry",
    "Obligation",
    "Milestone",
    "ForecastConfig",
    "LedgerSnapshot",
]
