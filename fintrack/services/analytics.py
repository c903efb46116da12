from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from fintrack.models.enums import TransactionType
from fintrack.services.colors import UNRESOLVED_CATEGORY_NAME, ColorAssigner
from fintrack.services.filters import DateRange, build_transaction_filter
from fintrack.services.period import Period, resolve_period
from fintrack.services.store import TransactionRecord, TransactionStore

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
ONE_DECIMAL = Decimal("0.1")
WHOLE = Decimal("1")


@dataclass(slots=True)
class CategoryTotal:
    name: str
    color: str
    amount: Decimal = ZERO


@dataclass(slots=True)
class CategoryBreakdown:
    name: str
    amount: Decimal
    color: str
    percentage: Decimal


@dataclass(slots=True)
class AnalyticsSummary:
    total_income: Decimal
    total_expenses: Decimal
    expense_by_category: dict[str, CategoryTotal] = field(default_factory=dict)

    @property
    def net_savings(self) -> Decimal:
        return self.total_income - self.total_expenses

    @property
    def savings_rate(self) -> int:
        if self.total_income <= 0:
            return 0
        rate = self.net_savings / self.total_income * HUNDRED
        return int(rate.quantize(WHOLE, rounding=ROUND_HALF_UP))

    def breakdown(self) -> list[CategoryBreakdown]:
        return [
            CategoryBreakdown(
                name=entry.name,
                amount=entry.amount,
                color=entry.color,
                percentage=expense_share(entry.amount, self.total_expenses),
            )
            for entry in self.expense_by_category.values()
        ]


@dataclass(slots=True)
class AnalyticsReport:
    year: int
    month: str | None
    income: Decimal
    expenses: list[CategoryBreakdown]
    total_expenses: Decimal
    net_savings: Decimal
    savings_rate: int


def expense_share(amount: Decimal, total_expenses: Decimal) -> Decimal:
    if total_expenses <= 0:
        return ZERO
    return (amount / total_expenses * HUNDRED).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


class AnalyticsAggregator:
    def __init__(self, colors: ColorAssigner) -> None:
        self.colors = colors

    def aggregate(self, transactions: Iterable[TransactionRecord]) -> AnalyticsSummary:
        """Fold transactions into income and expense totals.

        Expense categories keep the order in which they were first seen.
        Transactions without a resolved category are grouped under "Other".
        """
        summary = AnalyticsSummary(total_income=ZERO, total_expenses=ZERO)

        for transaction in transactions:
            if transaction.type == TransactionType.INCOME:
                summary.total_income += transaction.amount
            elif transaction.type == TransactionType.EXPENSE:
                summary.total_expenses += transaction.amount
                name = transaction.category.name if transaction.category else UNRESOLVED_CATEGORY_NAME
                entry = summary.expense_by_category.get(name)
                if entry is None:
                    entry = CategoryTotal(name=name, color=self.colors.assign(name))
                    summary.expense_by_category[name] = entry
                entry.amount += transaction.amount

        return summary


def build_report(period: Period, summary: AnalyticsSummary) -> AnalyticsReport:
    return AnalyticsReport(
        year=period.year,
        month=period.month,
        income=summary.total_income,
        expenses=summary.breakdown(),
        total_expenses=summary.total_expenses,
        net_savings=summary.net_savings,
        savings_rate=summary.savings_rate,
    )


async def generate_analytics(
    store: TransactionStore,
    owner_id: int,
    year: str | int | None,
    month: str | None,
    colors: ColorAssigner,
) -> AnalyticsReport:
    period = resolve_period(year, month)
    query = build_transaction_filter(owner_id, date_range=DateRange.from_period(period), oldest_first=True)
    transactions = await store.fetch_transactions(query)

    logger.info(
        "Building analytics for user %s, %s %s from %d transactions",
        owner_id,
        period.month or "full year",
        period.year,
        len(transactions),
    )
    return build_report(period, AnalyticsAggregator(colors).aggregate(transactions))
