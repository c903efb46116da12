import asyncio
import datetime as dt
from decimal import Decimal

import pytest

from fintrack.db.settings import DEFAULT_COLOR_PALETTE
from fintrack.models.enums import TransactionType
from fintrack.services.analytics import AnalyticsAggregator, build_report, expense_share, generate_analytics
from fintrack.services.colors import ColorAssigner
from fintrack.services.errors import UpstreamFetchError, ValidationError
from fintrack.services.filters import TransactionFilter
from fintrack.services.period import resolve_period
from fintrack.services.store import CategoryRef, TransactionRecord

COLORS = ColorAssigner(DEFAULT_COLOR_PALETTE)


def _tx(
    tx_type: TransactionType,
    amount: str,
    category: str | None = None,
    tx_id: int = 1,
    tx_date: dt.date = dt.date(2024, 3, 10),
) -> TransactionRecord:
    return TransactionRecord(
        id=tx_id,
        owner_id=1,
        type=tx_type,
        amount=Decimal(amount),
        tx_date=tx_date,
        category_id=0,
        category=CategoryRef(id=0, name=category, type=tx_type) if category else None,
    )


class RecordingStore:
    def __init__(self, records: list[TransactionRecord]) -> None:
        self.records = records
        self.queries: list[TransactionFilter] = []

    async def fetch_transactions(self, query: TransactionFilter) -> list[TransactionRecord]:
        self.queries.append(query)
        return self.records


def test_report_for_mixed_transactions() -> None:
    transactions = [
        _tx(TransactionType.INCOME, "5000", "Salary"),
        _tx(TransactionType.EXPENSE, "1500", "Rent"),
        _tx(TransactionType.EXPENSE, "500", "Rent"),
        _tx(TransactionType.EXPENSE, "1000", "Food"),
    ]

    report = build_report(resolve_period("2024"), AnalyticsAggregator(COLORS).aggregate(transactions))

    assert report.year == 2024
    assert report.month is None
    assert report.income == Decimal("5000")
    assert report.total_expenses == Decimal("3000")
    assert [(item.name, item.amount, item.percentage) for item in report.expenses] == [
        ("Rent", Decimal("2000"), Decimal("66.7")),
        ("Food", Decimal("1000"), Decimal("33.3")),
    ]
    assert report.expenses[0].color == COLORS.assign("Rent")
    assert report.net_savings == Decimal("2000")
    assert report.savings_rate == 40


def test_empty_transactions_produce_zero_report() -> None:
    report = build_report(resolve_period("2024", "May"), AnalyticsAggregator(COLORS).aggregate([]))

    assert report.month == "May"
    assert report.income == 0
    assert report.expenses == []
    assert report.total_expenses == 0
    assert report.net_savings == 0
    assert report.savings_rate == 0


def test_categories_keep_first_seen_order() -> None:
    transactions = [
        _tx(TransactionType.EXPENSE, "10", "Zoo"),
        _tx(TransactionType.EXPENSE, "30", "Apples"),
        _tx(TransactionType.EXPENSE, "20", "Zoo"),
        _tx(TransactionType.EXPENSE, "5", "Books"),
    ]

    summary = AnalyticsAggregator(COLORS).aggregate(transactions)

    assert list(summary.expense_by_category) == ["Zoo", "Apples", "Books"]
    assert summary.expense_by_category["Zoo"].amount == Decimal("30")


def test_unresolved_category_is_grouped_as_other() -> None:
    transactions = [
        _tx(TransactionType.EXPENSE, "12.50"),
        _tx(TransactionType.EXPENSE, "7.50", "Other"),
    ]

    breakdown = AnalyticsAggregator(COLORS).aggregate(transactions).breakdown()

    assert len(breakdown) == 1
    assert breakdown[0].name == "Other"
    assert breakdown[0].amount == Decimal("20.00")
    assert breakdown[0].color == COLORS.assign("Other")
    assert breakdown[0].percentage == Decimal("100.0")


def test_category_amounts_sum_to_total_exactly() -> None:
    amounts = ["0.10", "0.20", "0.30", "19.99", "0.01", "333.33"]
    transactions = [
        _tx(TransactionType.EXPENSE, amount, f"Category {index % 4}", tx_id=index)
        for index, amount in enumerate(amounts)
    ]

    summary = AnalyticsAggregator(COLORS).aggregate(transactions)

    assert sum(item.amount for item in summary.breakdown()) == summary.total_expenses
    assert summary.total_expenses == Decimal("353.93")


def test_percentages_sum_close_to_hundred() -> None:
    transactions = [
        _tx(TransactionType.EXPENSE, "1", "A"),
        _tx(TransactionType.EXPENSE, "1", "B"),
        _tx(TransactionType.EXPENSE, "1", "C"),
    ]

    breakdown = AnalyticsAggregator(COLORS).aggregate(transactions).breakdown()
    total = sum(item.percentage for item in breakdown)

    assert [item.percentage for item in breakdown] == [Decimal("33.3")] * 3
    assert abs(total - 100) <= Decimal("0.1") * len(breakdown)


def test_expenses_without_income_give_zero_rate_and_negative_savings() -> None:
    summary = AnalyticsAggregator(COLORS).aggregate([_tx(TransactionType.EXPENSE, "250", "Food")])

    assert summary.total_income == 0
    assert summary.net_savings == Decimal("-250")
    assert summary.savings_rate == 0


def test_overspending_gives_negative_rate() -> None:
    summary = AnalyticsAggregator(COLORS).aggregate(
        [
            _tx(TransactionType.INCOME, "1000"),
            _tx(TransactionType.EXPENSE, "1500", "Travel"),
        ]
    )

    assert summary.net_savings == Decimal("-500")
    assert summary.savings_rate == -50


@pytest.mark.parametrize(
    ("income", "expense", "expected"),
    [
        ("200", "199", 1),  # 0.5 rounds up
        ("200", "201", -1),  # -0.5 rounds away from zero
        ("3", "2", 33),
        ("3", "1", 67),
    ],
)
def test_savings_rate_rounds_half_away_from_zero(income: str, expense: str, expected: int) -> None:
    summary = AnalyticsAggregator(COLORS).aggregate(
        [
            _tx(TransactionType.INCOME, income),
            _tx(TransactionType.EXPENSE, expense, "Misc"),
        ]
    )

    assert summary.savings_rate == expected


def test_expense_share_rounds_to_one_decimal() -> None:
    assert expense_share(Decimal("1"), Decimal("8")) == Decimal("12.5")
    assert expense_share(Decimal("1"), Decimal("16")) == Decimal("6.3")
    assert expense_share(Decimal("5"), Decimal("0")) == Decimal("0")


def test_generate_analytics_queries_the_month_window() -> None:
    store = RecordingStore([_tx(TransactionType.INCOME, "100")])

    report = asyncio.run(generate_analytics(store, 42, "2024", "December", COLORS))

    assert report.income == Decimal("100")
    assert report.month == "December"
    (query,) = store.queries
    assert query.owner_id == 42
    assert query.date_range.start == dt.date(2024, 12, 1)
    assert query.date_range.end == dt.date(2025, 1, 1)
    assert query.type is None
    assert query.oldest_first is True


def test_generate_analytics_rejects_invalid_month_before_fetching() -> None:
    store = RecordingStore([])

    with pytest.raises(ValidationError):
        asyncio.run(generate_analytics(store, 1, "2024", "Marchy", COLORS))

    assert store.queries == []


def test_generate_analytics_propagates_store_failure() -> None:
    class BrokenStore:
        async def fetch_transactions(self, query: TransactionFilter) -> list[TransactionRecord]:
            raise UpstreamFetchError("connection refused")

    with pytest.raises(UpstreamFetchError, match="connection refused"):
        asyncio.run(generate_analytics(BrokenStore(), 1, "2024", None, COLORS))
