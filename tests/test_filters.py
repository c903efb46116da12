import datetime as dt

import pytest

from fintrack.models.enums import TransactionType
from fintrack.services.errors import ValidationError
from fintrack.services.filters import DateRange, build_transaction_filter
from fintrack.services.period import resolve_period


def test_filter_from_period_is_half_open() -> None:
    date_range = DateRange.from_period(resolve_period("2024", "January"))
    query = build_transaction_filter(7, date_range=date_range)

    assert query.owner_id == 7
    assert query.type is None
    assert query.category_id is None
    assert query.oldest_first is False
    assert query.matches(7, TransactionType.EXPENSE, 1, dt.date(2024, 1, 1))
    assert query.matches(7, TransactionType.EXPENSE, 1, dt.date(2024, 1, 31))
    assert not query.matches(7, TransactionType.EXPENSE, 1, dt.date(2024, 2, 1))


def test_inclusive_range_keeps_end_date() -> None:
    date_range = DateRange.inclusive(dt.date(2024, 5, 1), dt.date(2024, 5, 31))

    assert date_range.end == dt.date(2024, 6, 1)
    assert dt.date(2024, 5, 31) in date_range


def test_inclusive_range_rejects_reversed_dates() -> None:
    with pytest.raises(ValidationError):
        DateRange.inclusive(dt.date(2024, 5, 31), dt.date(2024, 5, 1))


def test_optional_type_and_category() -> None:
    query = build_transaction_filter(1, type=TransactionType.INCOME, category_id=3)

    assert query.date_range is None
    assert query.matches(1, TransactionType.INCOME, 3, dt.date(1999, 1, 1))
    assert not query.matches(1, TransactionType.EXPENSE, 3, dt.date(1999, 1, 1))
    assert not query.matches(1, TransactionType.INCOME, 4, dt.date(1999, 1, 1))
    assert not query.matches(2, TransactionType.INCOME, 3, dt.date(1999, 1, 1))
