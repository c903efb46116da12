import datetime as dt
from dataclasses import dataclass

from fintrack.services.errors import ValidationError

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

MIN_YEAR = dt.MINYEAR
MAX_YEAR = dt.MAXYEAR - 1


@dataclass(frozen=True, slots=True)
class Period:
    year: int
    month: str | None
    start: dt.date
    end: dt.date


def parse_year(year: str | int | None) -> int:
    if year is None or (isinstance(year, str) and not year.strip()):
        raise ValidationError("Year is required")

    try:
        value = int(year)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Year must be an integer") from exc

    if not MIN_YEAR <= value <= MAX_YEAR:
        raise ValidationError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
    return value


def parse_month(month: str) -> int:
    normalized = month.strip().lower()
    try:
        return MONTH_NAMES.index(normalized) + 1
    except ValueError as exc:
        raise ValidationError(f"Invalid month: {month}") from exc


def resolve_period(year: str | int | None, month: str | None = None) -> Period:
    """Resolve a year and an optional English month name to ``[start, end)``.

    Without a month the period covers the whole year. December rolls the end
    over into January of the following year.
    """
    year_value = parse_year(year)

    if not month:
        return Period(
            year=year_value,
            month=None,
            start=dt.date(year_value, 1, 1),
            end=dt.date(year_value + 1, 1, 1),
        )

    month_value = parse_month(month)
    start = dt.date(year_value, month_value, 1)
    if month_value == 12:
        end = dt.date(year_value + 1, 1, 1)
    else:
        end = dt.date(year_value, month_value + 1, 1)

    return Period(year=year_value, month=month, start=start, end=end)
