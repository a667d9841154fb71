"""Domain models for derived financial aggregates."""

from dataclasses import dataclass
from decimal import Decimal

from finledger.domain.models.ledger import LedgerEntry, LedgerSnapshot, Obligation


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset amounts.
        liability_total: Sum of liability amounts.
        net_worth: Assets minus liabilities.
        currency_code: Currency the amounts are expressed in.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    currency_code: str


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated for a given category label."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class CategoryBreakdown:
    """Breakdown of amounts by category label."""

    currency_code: str
    categories: list[CategoryAmount]

    def as_dict(self) -> dict[str, Decimal]:
        """Return the breakdown as a label to amount mapping."""
        return {item.category: item.amount for item in self.categories}


@dataclass(frozen=True)
class CashflowSummary:
    """Summary of cashflow totals for one period."""

    period_key: str
    total_in: Decimal
    total_out: Decimal
    currency_code: str

    @property
    def difference(self) -> Decimal:
        """Return total_in minus total_out."""
        return self.total_in - self.total_out


@dataclass(frozen=True)
class MonthlyTrendPoint:
    """Income and expense totals for one month of a trend."""

    period_key: str
    income: Decimal
    expense: Decimal

    @property
    def savings(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class CashflowView:
    """Cashflow summary and trend for display."""

    summary: CashflowSummary
    trend: list[MonthlyTrendPoint]


@dataclass(frozen=True)
class ObligationSummary:
    """Monthly obligations ordered by due day with payment totals."""

    obligations: list[Obligation]
    overdue: list[Obligation]
    total_monthly: Decimal
    paid_amount: Decimal

    @property
    def outstanding_amount(self) -> Decimal:
        """Return the part of the monthly total not yet paid."""
        return self.total_monthly - self.paid_amount

    @property
    def paid_ratio(self) -> Decimal:
        """Return paid / total, or 0 when nothing is due."""
        if self.total_monthly == 0:
            return Decimal("0")
        return self.paid_amount / self.total_monthly


@dataclass(frozen=True)
class MilestoneProgress:
    """Progress of a savings goal."""

    milestone_id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal
    percent: Decimal

    @property
    def remaining(self) -> Decimal:
        """Return the amount still needed, never negative."""
        return max(self.target_amount - self.current_amount, Decimal("0"))


@dataclass(frozen=True)
class YearSnapshot:
    """Projected position at the start of a projection year."""

    year_index: int
    total_value: Decimal
    total_invested: Decimal
    interest_earned: Decimal


@dataclass(frozen=True)
class ProjectionSummary:
    """Year-by-year projection and its final figures."""

    years: list[YearSnapshot]

    @property
    def final(self) -> YearSnapshot:
        """Return the last projected year."""
        return self.years[-1]


@dataclass(frozen=True)
class RolloverResult:
    """Outcome of rolling recurring entries into a period.

    Attributes:
        snapshot: Snapshot after rollover; the input object when nothing ran.
        created: Entries materialized for the period.
        period_key: Period the rollover targeted.
    """

    snapshot: LedgerSnapshot
    created: list[LedgerEntry]
    period_key: str


__all__ = [
    "NetWorthSummary",
    "CategoryAmount",
    "CategoryBreakdown",
    "CashflowSummary",
    "MonthlyTrendPoint",
    "CashflowView",
    "ObligationSummary",
    "MilestoneProgress",
    "YearSnapshot",
    "ProjectionSummary",
    "RolloverResult",
]
