"""Domain services for ledger aggregates.

Every function here is a pure read over a snapshot: no I/O, no caching, and
empty collections or zero denominators degrade to zero or empty results.
"""

from collections.abc import Callable, Iterable
from datetime import date
from decimal import Decimal

from finledger.domain.constants import (
    ASSET_COMPOSITION_GROUPS,
    DEFAULT_TREND_MONTHS,
    UNCATEGORIZED_LABEL,
)
from finledger.domain.models import (
    CashflowSummary,
    CategoryAmount,
    CategoryBreakdown,
    LedgerEntry,
    LedgerSnapshot,
    MilestoneProgress,
    MonthlyTrendPoint,
    NetWorthSummary,
    ObligationSummary,
)
from finledger.domain.periods import recent_periods, shift_period

EntryPredicate = Callable[[LedgerEntry], bool]
EntryLabel = Callable[[LedgerEntry], str]

_HUNDRED = Decimal("100")


def sum_amounts(entries: Iterable[LedgerEntry]) -> Decimal:
    """Return the sum of entry amounts, 0 for no entries."""
    return sum((entry.amount for entry in entries), Decimal("0"))


def by_category(entry: LedgerEntry) -> str:
    """Label an entry with its category value."""
    return entry.category.value


def by_subcategory(entry: LedgerEntry) -> str:
    """Label an entry with its subcategory, or a fallback label."""
    subcategory = (entry.subcategory or "").strip()
    return subcategory or UNCATEGORIZED_LABEL


def compute_net_worth(snapshot: LedgerSnapshot) -> Decimal:
    """Return total assets minus total liabilities.

    Args:
        snapshot: Ledger snapshot to aggregate.

    Returns:
        Decimal: Net worth; negative when liabilities exceed assets.
    """
    return sum_amounts(snapshot.assets) - sum_amounts(snapshot.liabilities)


def compute_net_worth_summary(snapshot: LedgerSnapshot) -> NetWorthSummary:
    """Return asset, liability and net worth totals for a snapshot."""
    asset_total = sum_amounts(snapshot.assets)
    liability_total = sum_amounts(snapshot.liabilities)
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        currency_code=snapshot.currency,
    )


def compute_debt_ratio(snapshot: LedgerSnapshot) -> Decimal:
    """Return total liabilities divided by total assets.

    Args:
        snapshot: Ledger snapshot to aggregate.

    Returns:
        Decimal: Ratio of liabilities to assets, 0 when there are no assets.
    """
    asset_total = sum_amounts(snapshot.assets)
    if asset_total == 0:
        return Decimal("0")
    return sum_amounts(snapshot.liabilities) / asset_total


def compute_cashflow_summary(
    snapshot: LedgerSnapshot,
    period_key: str,
) -> CashflowSummary:
    """Return income and expense totals for one period.

    Entries are matched on their exact ``YYYY-MM`` key.

    Args:
        snapshot: Ledger snapshot to aggregate.
        period_key: Target period.

    Returns:
        CashflowSummary: Income, expense and difference for the period.
    """
    total_in = sum_amounts(
        entry for entry in snapshot.income if entry.period_key == period_key
    )
    total_out = sum_amounts(
        entry for entry in snapshot.expenses if entry.period_key == period_key
    )
    return CashflowSummary(
        period_key=period_key,
        total_in=total_in,
        total_out=total_out,
        currency_code=snapshot.currency,
    )


def compute_period_cashflow(
    snapshot: LedgerSnapshot,
    period_offset: int = 0,
    *,
    today: date,
) -> Decimal:
    """Return income minus expenses for a month relative to ``today``.

    Args:
        snapshot: Ledger snapshot to aggregate.
        period_offset: Months from the current month; negative is the past.
        today: Date defining the current month.

    Returns:
        Decimal: Net cashflow for the target month.
    """
    target = shift_period(today, period_offset)
    return compute_cashflow_summary(snapshot, target).difference


def compute_monthly_trend(
    snapshot: LedgerSnapshot,
    *,
    today: date,
    months: int = DEFAULT_TREND_MONTHS,
) -> list[MonthlyTrendPoint]:
    """Return income and expense totals for the last ``months`` months.

    Args:
        snapshot: Ledger snapshot to aggregate.
        today: Date defining the most recent month.
        months: Number of months in the trend.

    Returns:
        list[MonthlyTrendPoint]: One point per month, oldest first.
    """
    income: dict[str, Decimal] = {}
    expense: dict[str, Decimal] = {}
    for entry in snapshot.income:
        key = entry.period_key
        income[key] = income.get(key, Decimal("0")) + entry.amount
    for entry in snapshot.expenses:
        key = entry.period_key
        expense[key] = expense.get(key, Decimal("0")) + entry.amount
    return [
        MonthlyTrendPoint(
            period_key=key,
            income=income.get(key, Decimal("0")),
            expense=expense.get(key, Decimal("0")),
        )
        for key in recent_periods(today, max(months, 0))
    ]


def compute_category_breakdown(
    entries: Iterable[LedgerEntry],
    predicate: EntryPredicate | None = None,
    *,
    label: EntryLabel = by_category,
) -> dict[str, Decimal]:
    """Sum entry amounts per label.

    Args:
        entries: Entries to aggregate.
        predicate: Optional filter; entries it rejects are skipped.
        label: Function mapping an entry to its breakdown label.

    Returns:
        dict[str, Decimal]: Totals in order of first appearance; labels
        summing to zero are omitted.
    """
    totals: dict[str, Decimal] = {}
    for entry in entries:
        if predicate is not None and not predicate(entry):
            continue
        key = label(entry)
        totals[key] = totals.get(key, Decimal("0")) + entry.amount
    return {key: amount for key, amount in totals.items() if amount != 0}


def compute_asset_composition(snapshot: LedgerSnapshot) -> CategoryBreakdown:
    """Return asset totals grouped into display groups.

    Args:
        snapshot: Ledger snapshot to aggregate.

    Returns:
        CategoryBreakdown: Non-zero totals for cash, investments,
        property/vehicles and other assets. Besides the three balance
        sheet groups, "Other" collects assets of category ``other`` so every
        asset category is counted.
    """
    group_of = {
        category: group
        for group, categories in ASSET_COMPOSITION_GROUPS
        for category in categories
    }
    totals = compute_category_breakdown(
        snapshot.assets,
        lambda entry: entry.category in group_of,
        label=lambda entry: group_of[entry.category],
    )
    categories = [
        CategoryAmount(category=group, amount=totals[group])
        for group, _ in ASSET_COMPOSITION_GROUPS
        if group in totals
    ]
    return CategoryBreakdown(
        currency_code=snapshot.currency,
        categories=categories,
    )


def compute_expense_breakdown(
    snapshot: LedgerSnapshot,
    period_key: str,
) -> CategoryBreakdown:
    """Return one period's expenses grouped by subcategory."""
    totals = compute_category_breakdown(
        snapshot.expenses,
        lambda entry: entry.period_key == period_key,
        label=by_subcategory,
    )
    return CategoryBreakdown(
        currency_code=snapshot.currency,
        categories=[
            CategoryAmount(category=category, amount=amount)
            for category, amount in totals.items()
        ],
    )


def compute_obligation_summary(
    snapshot: LedgerSnapshot,
    *,
    today: date,
) -> ObligationSummary:
    """Return obligations by due day with paid and overdue information.

    Args:
        snapshot: Ledger snapshot to aggregate.
        today: Date whose day-of-month decides what is overdue.

    Returns:
        ObligationSummary: Sorted obligations, overdue ones and totals.
    """
    ordered = sorted(snapshot.obligations, key=lambda item: item.due_day)
    total = sum((item.amount for item in ordered), Decimal("0"))
    paid = sum(
        (item.amount for item in ordered if item.is_paid),
        Decimal("0"),
    )
    overdue = [
        item for item in ordered if not item.is_paid and today.day > item.due_day
    ]
    return ObligationSummary(
        obligations=ordered,
        overdue=overdue,
        total_monthly=total,
        paid_amount=paid,
    )


def compute_milestone_progress(
    snapshot: LedgerSnapshot,
) -> list[MilestoneProgress]:
    """Return progress towards each savings goal, capped at 100 percent."""
    progress = []
    for milestone in snapshot.milestones:
        if milestone.target_amount == 0:
            percent = Decimal("0")
        else:
            percent = min(
                milestone.current_amount / milestone.target_amount * _HUNDRED,
                _HUNDRED,
            )
        progress.append(
            MilestoneProgress(
                milestone_id=milestone.id,
                name=milestone.name,
                target_amount=milestone.target_amount,
                current_amount=milestone.current_amount,
                percent=percent,
            )
        )
    return progress


__all__ = [
    "sum_amounts",
    "by_category",
    "by_subcategory",
    "compute_net_worth",
    "compute_net_worth_summary",
    "compute_debt_ratio",
    "compute_cashflow_summary",
    "compute_period_cashflow",
    "compute_monthly_trend",
    "compute_category_breakdown",
    "compute_asset_composition",
    "compute_expense_breakdown",
    "compute_obligation_summary",
    "compute_milestone_progress",
]
