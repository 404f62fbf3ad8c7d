from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Iterable


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(int(year), int(month))[1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar date of the month (inclusive)."""
    return date(int(year), int(month), 1), date(int(year), int(month), days_in_month(year, month))


def count_working_days(year: int, month: int, weekly_offs: Iterable[int] = ()) -> int:
    """Calendar days in the month minus the weekly off-days (Monday=0 .. Sunday=6)."""
    offs = {int(d) for d in weekly_offs}
    if not offs:
        return days_in_month(year, month)
    return sum(
        1
        for day in range(1, days_in_month(year, month) + 1)
        if date(int(year), int(month), day).weekday() not in offs
    )
