"""Calendar period arithmetic.

Weeks start on Monday. Every ``*_start`` helper returns midnight and every
``*_end`` helper returns the last millisecond of its day, so a period is the
inclusive range ``[start, end]``. Inputs may be ``date`` or ``datetime``.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import List, Union

from dateutil.relativedelta import relativedelta

DateLike = Union[date, datetime]

END_OF_DAY = time(23, 59, 59, 999000)


def as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def day_start(value: DateLike) -> datetime:
    return datetime.combine(as_date(value), time.min)


def day_end(value: DateLike) -> datetime:
    return datetime.combine(as_date(value), END_OF_DAY)


def month_start(value: DateLike) -> datetime:
    return day_start(as_date(value).replace(day=1))


def month_end(value: DateLike) -> datetime:
    first = as_date(value).replace(day=1)
    return day_end(first + relativedelta(months=1, days=-1))


def week_start(value: DateLike) -> datetime:
    day = as_date(value)
    return day_start(day - timedelta(days=day.isoweekday() - 1))


def week_end(value: DateLike) -> datetime:
    return day_end(week_start(value) + timedelta(days=6))


def week_dates(value: DateLike) -> List[date]:
    first = week_start(value).date()
    return [first + timedelta(days=offset) for offset in range(7)]


def add_months(value: DateLike, months: int) -> date:
    """Shift by calendar months, clamping to the last day of a shorter month."""

    return as_date(value) + relativedelta(months=months)


def generate_month_grid(year: int, month: int) -> List[date]:
    """Dates shown on a month page, padded with neighbouring days to whole weeks.

    ``month`` is 1-based.
    """

    first = date(year, month, 1)
    current = week_start(first).date()
    last = week_end(month_end(first)).date()
    dates: List[date] = []
    while current <= last:
        dates.append(current)
        current += timedelta(days=1)
    return dates


def is_same_day(first: DateLike, second: DateLike) -> bool:
    return as_date(first) == as_date(second)


def is_today(value: DateLike) -> bool:
    return is_same_day(value, datetime.now())


def is_past_date(value: DateLike) -> bool:
    return as_date(value) < date.today()
