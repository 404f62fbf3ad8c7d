from __future__ import annotations

import calendar
from enum import Enum


class DayStatus(str, Enum):
    """Trạng thái một ngày công (closed set used by the aggregator)."""

    PRESENT = "Present"
    HALF_DAY = "HalfDay"
    ABSENT = "Absent"
    HOLIDAY = "Holiday"
    LEAVE = "Leave"


class SalaryStatus(str, Enum):
    """Lifecycle of a salary record: Draft -> Paid, never back."""

    DRAFT = "Draft"
    PAID = "Paid"


class Month(str, Enum):
    JANUARY = "January"
    FEBRUARY = "February"
    MARCH = "March"
    APRIL = "April"
    MAY = "May"
    JUNE = "June"
    JULY = "July"
    AUGUST = "August"
    SEPTEMBER = "September"
    OCTOBER = "October"
    NOVEMBER = "November"
    DECEMBER = "December"

    @property
    def number(self) -> int:
        return list(Month).index(self) + 1

    @classmethod
    def from_number(cls, value: int) -> "Month":
        if not 1 <= int(value) <= 12:
            raise ValueError(f"Month number out of range: {value!r}")
        return list(cls)[int(value) - 1]

    @classmethod
    def parse(cls, value) -> "Month":
        """Accept a Month, a full or abbreviated English name, or 1..12."""

        if isinstance(value, Month):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unknown month: {value!r}")
        if isinstance(value, int):
            return cls.from_number(value)

        text = str(value or "").strip()
        if text.isdigit():
            return cls.from_number(int(text))

        lowered = text.lower()
        for idx, abbr in enumerate(calendar.month_abbr):
            if idx and lowered in {abbr.lower(), calendar.month_name[idx].lower()}:
                return cls.from_number(idx)
        raise ValueError(f"Unknown month: {value!r}")
