"""Tests for ledger aggregation services."""

from datetime import date
from decimal import Decimal

from finledger.domain.constants import Category
from finledger.domain.models import (
    LedgerEntry,
    LedgerSnapshot,
    Milestone,
    Obligation,
)
from finledger.domain.services.aggregation import (
    by_subcategory,
    compute_asset_composition,
    compute_cashflow_summary,
    compute_category_breakdown,
    compute_debt_ratio,
    compute_expense_breakdown,
    compute_milestone_progress,
    compute_monthly_trend,
    compute_net_worth,
    compute_net_worth_summary,
    compute_obligation_summary,
    compute_period_cashflow,
)

TODAY = date(2024, 3, 15)


def _entry(
    entry_id: str,
    amount: str,
    category: Category,
    on: date = TODAY,
    subcategory: str | None = None,
    name: str | None = None,
) -> LedgerEntry:
    return LedgerEntry(
        id=entry_id,
        owner_id="owner",
        name=name or entry_id,
        amount=Decimal(amount),
        category=category,
        date=on,
        subcategory=subcategory,
    )


def test_net_worth_subtracts_liabilities_from_assets() -> None:
    """Net worth should be the asset sum minus the liability sum."""
    snapshot = LedgerSnapshot(
        owner_id="owner",
        assets=(
            _entry("a1", "100", Category.CASH),
            _entry("a2", "200", Category.INVESTMENT),
        ),
        liabilities=(_entry("l1", "50", Category.LOAN),),
    )

    assert compute_net_worth(snapshot) == Decimal("250")
    summary = compute_net_worth_summary(snapshot)
    assert summary.asset_total == Decimal("300")
    assert summary.liability_total == Decimal("50")
    assert summary.net_worth == Decimal("250")
    assert summary.currency_code == "INR"


def test_net_worth_can_be_negative_and_empty_is_zero() -> None:
    """Empty collections yield zero; heavy debt yields a negative value."""
    empty = LedgerSnapshot.default("owner")
    indebted = LedgerSnapshot(
        owner_id="owner",
        liabilities=(_entry("l1", "75.25", Category.CREDIT_CARD),),
    )

    assert compute_net_worth(empty) == Decimal("0")
    assert compute_net_worth(indebted) == Decimal("-75.25")


def test_period_cashflow_matches_exact_month_only() -> None:
    """Entries one day into the next month must be excluded."""
    snapshot = LedgerSnapshot(
        owner_id="owner",
        income=(
            _entry("i1", "1000", Category.INCOME, date(2024, 3, 1)),
            _entry("i2", "500", Category.INCOME, date(2024, 4, 1)),
        ),
        expenses=(
            _entry("e1", "300", Category.EXPENSE, date(2024, 3, 31)),
            _entry("e2", "80", Category.EXPENSE, date(2024, 2, 29)),
        ),
    )

    assert compute_period_cashflow(snapshot, today=TODAY) == Decimal("700")
    assert compute_period_cashflow(snapshot, 1, today=TODAY) == Decimal("500")
    assert compute_period_cashflow(snapshot, -1, today=TODAY) == Decimal("-80")
    assert compute_period_cashflow(snapshot, -2, today=TODAY) == Decimal("0")


def test_cashflow_summary_reports_both_sides() -> None:
    """The summary should expose totals and their difference."""
    snapshot = LedgerSnapshot(
        owner_id="owner",
        income=(_entry("i1", "1000", Category.INCOME),),
        expenses=(_entry("e1", "400", Category.EXPENSE),),
    )

    summary = compute_cashflow_summary(snapshot, "2024-03")

    assert summary.total_in == Decimal("1000")
    assert summary.total_out == Decimal("400")
    assert summary.difference == Decimal("600")


def test_debt_ratio_is_zero_without_assets() -> None:
    """No assets should never divide by zero."""
    snapshot = LedgerSnapshot(
        owner_id="owner",
        liabilities=(_entry("l1", "500", Category.LOAN),),
    )

    assert compute_debt_ratio(snapshot) == Decimal("0")


def test_debt_ratio_divides_liabilities_by_assets() -> None:
    """Debt ratio should be liabilities over assets."""
    snapshot = LedgerSnapshot(
        owner_id="owner",
        assets=(_entry("a1", "400", Category.PROPERTY),),
        liabilities=(_entry("l1", "100", Category.MORTGAGE),),
    )

    assert compute_debt_ratio(snapshot) == Decimal("0.25")


def test_category_breakdown_filters_and_omits_zero_sums() -> None:
    """Breakdown should honor the predicate and drop zero totals."""
    entries = [
        _entry("e1", "100", Category.EXPENSE, subcategory="Housing"),
        _entry("e2", "0", Category.EXPENSE, subcategory="Fun"),
        _entry("e3", "25", Category.EXPENSE, subcategory="Housing"),
        _entry("e4", "40", Category.EXPENSE),
        _entry("e5", "999", Category.EXPENSE, date(2024, 2, 1), "Travel"),
    ]

    totals = compute_category_breakdown(
        entries,
        lambda entry: entry.period_key == "2024-03",
        label=by_subcategory,
    )

    assert totals == {
        "Housing": Decimal("125"),
        "Uncategorized": Decimal("40"),
    }


def test_category_breakdown_defaults_to_category_labels() -> None:
    """Without a label function the category value is used."""
    entries = [
        _entry("a1", "10", Category.CASH),
        _entry("a2", "5", Category.VEHICLE),
        _entry("a3", "7", Category.CASH),
    ]

    assert compute_category_breakdown(entries) == {
        "cash": Decimal("17"),
        "vehicle": Decimal("5"),
    }


def test_asset_composition_groups_categories() -> None:
    """Assets should be grouped into display groups in a fixed order."""
    snapshot = LedgerSnapshot(
        owner_id="owner",
        assets=(
            _entry("a1", "300", Category.PROPERTY),
            _entry("a2", "50", Category.CASH),
            _entry("a3", "20", Category.RETIREMENT),
            _entry("a4", "30", Category.INVESTMENT),
            _entry("a5", "10", Category.VEHICLE),
        ),
    )

    breakdown = compute_asset_composition(snapshot)

    assert [item.category for item in breakdown.categories] == [
        "Cash",
        "Investments",
        "Property/Vehicles",
    ]
    assert breakdown.as_dict()["Investments"] == Decimal("50")
    assert breakdown.as_dict()["Property/Vehicles"] == Decimal("310")


def test_asset_composition_adds_other_group_last() -> None:
    """Other assets should get their own group so totals add up."""
    snapshot = LedgerSnapshot(
        owner_id="owner",
        assets=(
            _entry("a1", "40", Category.OTHER),
            _entry("a2", "60", Category.CASH),
        ),
    )

    breakdown = compute_asset_composition(snapshot)

    assert breakdown.as_dict() == {
        "Cash": Decimal("60"),
        "Other": Decimal("40"),
    }
    assert [item.category for item in breakdown.categories] == ["Cash", "Other"]
    assert sum(breakdown.as_dict().values()) == compute_net_worth(snapshot)


def test_expense_breakdown_is_scoped_to_period() -> None:
    """Only the requested period's expenses should be counted."""
    snapshot = LedgerSnapshot(
        owner_id="owner",
        expenses=(
            _entry("e1", "60", Category.EXPENSE, subcategory="Food"),
            _entry("e2", "70", Category.EXPENSE, date(2024, 1, 3), "Food"),
        ),
    )

    breakdown = compute_expense_breakdown(snapshot, "2024-03")

    assert breakdown.as_dict() == {"Food": Decimal("60")}


def test_monthly_trend_covers_recent_months() -> None:
    """Trend should list every month, including empty ones, oldest first."""
    snapshot = LedgerSnapshot(
        owner_id="owner",
        income=(
            _entry("i1", "1000", Category.INCOME, date(2024, 1, 1)),
            _entry("i2", "1000", Category.INCOME, date(2024, 3, 1)),
        ),
        expenses=(_entry("e1", "250", Category.EXPENSE, date(2024, 3, 2)),),
    )

    trend = compute_monthly_trend(snapshot, today=TODAY, months=3)

    assert [point.period_key for point in trend] == [
        "2024-01",
        "2024-02",
        "2024-03",
    ]
    assert [point.savings for point in trend] == [
        Decimal("1000"),
        Decimal("0"),
        Decimal("750"),
    ]


def test_obligation_summary_orders_and_flags_overdue() -> None:
    """Obligations should sort by due day and flag unpaid past-due bills."""
    snapshot = LedgerSnapshot(
        owner_id="owner",
        obligations=(
            Obligation("o1", "owner", "Insurance", Decimal("300"), 20),
            Obligation("o2", "owner", "Car EMI", Decimal("500"), 5, True),
            Obligation("o3", "owner", "Phone", Decimal("200"), 10),
        ),
    )

    summary = compute_obligation_summary(snapshot, today=TODAY)

    assert [item.id for item in summary.obligations] == ["o2", "o3", "o1"]
    assert [item.id for item in summary.overdue] == ["o3"]
    assert summary.total_monthly == Decimal("1000")
    assert summary.paid_amount == Decimal("500")
    assert summary.outstanding_amount == Decimal("500")
    assert summary.paid_ratio == Decimal("0.5")


def test_obligation_summary_handles_no_obligations() -> None:
    """An empty obligation list should yield zero totals."""
    summary = compute_obligation_summary(
        LedgerSnapshot.default("owner"),
        today=TODAY,
    )

    assert summary.obligations == []
    assert summary.paid_ratio == Decimal("0")


def test_milestone_progress_caps_at_hundred() -> None:
    """Progress should be capped and zero targets should not divide."""
    snapshot = LedgerSnapshot(
        owner_id="owner",
        milestones=(
            Milestone("m1", "owner", "Car", "1000", "250", "2025-01-01"),
            Milestone("m2", "owner", "Trip", "100", "150", "2025-01-01"),
            Milestone("m3", "owner", "Gift", "0", "10", "2025-01-01"),
        ),
    )

    progress = compute_milestone_progress(snapshot)

    assert [item.percent for item in progress] == [
        Decimal("25"),
        Decimal("100"),
        Decimal("0"),
    ]
    assert progress[0].remaining == Decimal("750")
    assert progress[1].remaining == Decimal("0")
