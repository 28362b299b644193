# app/utils/dates.py
import calendar
from datetime import date, datetime, time
from typing import Optional, Tuple


def first_day(value: date, year: Optional[int] = None, month: Optional[int] = None) -> date:
    """First calendar day of the month of ``value`` (year/month overridable)."""
    return date(year or value.year, month or value.month, 1)


def last_day(value: date, year: Optional[int] = None, month: Optional[int] = None) -> date:
    """Last calendar day of the month of ``value`` (year/month overridable)."""
    year = year or value.year
    month = month or value.month
    return date(year, month, calendar.monthrange(year, month)[1])


def resolve_period(
    start: Optional[datetime],
    end: Optional[datetime],
    now: Optional[datetime] = None,
) -> Tuple[datetime, datetime]:
    """
    Fill in a missing period bound with the current month.

    A missing start becomes the first day of the month at midnight and a
    missing end becomes the very end of the last day, so filtering with an
    inclusive range keeps every moment of the month.
    """
    now = now or datetime.now()
    if start is None:
        start = datetime.combine(first_day(now), time.min)
    if end is None:
        end = datetime.combine(last_day(now), time.max)
    return start, end
