from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from fintrack.models.enums import TransactionType
from fintrack.services.errors import ValidationError
from fintrack.services.period import Period


@dataclass(frozen=True, slots=True)
class DateRange:
    start: dt.date
    end: dt.date

    @classmethod
    def from_period(cls, period: Period) -> DateRange:
        return cls(start=period.start, end=period.end)

    @classmethod
    def inclusive(cls, start: dt.date, end: dt.date) -> DateRange:
        if end < start:
            raise ValidationError("end must not be before start")
        return cls(start=start, end=end + dt.timedelta(days=1))

    def __contains__(self, day: dt.date) -> bool:
        return self.start <= day < self.end


@dataclass(frozen=True, slots=True)
class TransactionFilter:
    owner_id: int
    date_range: DateRange | None = None
    type: TransactionType | None = None
    category_id: int | None = None
    oldest_first: bool = False

    def matches(self, owner_id: int, tx_type: TransactionType, category_id: int, tx_date: dt.date) -> bool:
        if owner_id != self.owner_id:
            return False
        if self.date_range is not None and tx_date not in self.date_range:
            return False
        if self.type is not None and tx_type != self.type:
            return False
        if self.category_id is not None and category_id != self.category_id:
            return False
        return True


def build_transaction_filter(
    owner_id: int,
    date_range: DateRange | None = None,
    type: TransactionType | None = None,
    category_id: int | None = None,
    oldest_first: bool = False,
) -> TransactionFilter:
    return TransactionFilter(
        owner_id=owner_id,
        date_range=date_range,
        type=type,
        category_id=category_id,
        oldest_first=oldest_first,
    )
