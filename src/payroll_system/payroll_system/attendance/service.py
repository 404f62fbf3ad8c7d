from __future__ import annotations

import logging
from decimal import ROUND_FLOOR, Decimal

from ..common.datetime_utils import days_in_month
from ..core.constants import OVERTIME_THRESHOLD_HOURS, PRESENT_DAY_UNIT
from ..core.enums import DayStatus, Month
from .model import AttendanceDay, AttendanceSummary
from .repository import AttendanceRepository

log = logging.getLogger(__name__)

# Weight of a day towards present_days; Holiday/Leave are excluded from both counts.
_PRESENT_WEIGHT = {
    DayStatus.PRESENT: Decimal("1"),
    DayStatus.HALF_DAY: Decimal("0.5"),
    DayStatus.ABSENT: Decimal("0"),
}


def floor_to_unit(value: Decimal, unit: Decimal = PRESENT_DAY_UNIT) -> Decimal:
    return (value / unit).to_integral_value(rounding=ROUND_FLOOR) * unit


class AttendanceAggregator:
    """Reduce one employee's month of attendance to payroll statistics.

    count_unmarked_as_absent: days without any record count as absent (default).
    When False only explicit Absent days and the missing half of HalfDays do.
    """

    def __init__(self, attendance: AttendanceRepository, *, count_unmarked_as_absent: bool = True):
        self._attendance = attendance
        self._count_unmarked_as_absent = bool(count_unmarked_as_absent)

    def aggregate(self, employee_id: int, month: Month, year: int) -> AttendanceSummary:
        month = Month.parse(month)
        total_days = days_in_month(year, month.number)

        records = self._attendance.list_for_month(int(employee_id), month, int(year))
        daily_stats: dict = {}
        for day in records:
            if day.work_date.year != int(year) or day.work_date.month != month.number:
                continue
            daily_stats[day.work_date] = day

        if not daily_stats:
            log.debug("No attendance for employee=%s %s %s, using zero summary", employee_id, month.value, year)
            return AttendanceSummary(
                employee_id=int(employee_id),
                month=month,
                year=int(year),
                total_days=total_days,
                absent_days=Decimal(total_days) if self._count_unmarked_as_absent else Decimal("0"),
                unmarked_days=total_days,
            )

        return self._summarize(int(employee_id), month, int(year), total_days, daily_stats)

    def _summarize(self, employee_id: int, month: Month, year: int, total_days: int, daily_stats: dict) -> AttendanceSummary:
        days: list[AttendanceDay] = list(daily_stats.values())

        present = sum((_PRESENT_WEIGHT.get(d.status, Decimal("0")) for d in days), Decimal("0"))
        present = floor_to_unit(present)

        half_days = sum(1 for d in days if d.status == DayStatus.HALF_DAY)
        holiday_days = sum(1 for d in days if d.status == DayStatus.HOLIDAY)
        leave_days = sum(1 for d in days if d.status == DayStatus.LEAVE)
        explicit_absent = sum(1 for d in days if d.status == DayStatus.ABSENT)
        unmarked_days = total_days - len(days)

        if self._count_unmarked_as_absent:
            absent = Decimal(total_days) - present - holiday_days - leave_days
        else:
            absent = Decimal(explicit_absent) + Decimal(half_days) * Decimal("0.5")
        absent = max(absent, Decimal("0"))

        overtime = sum(
            (d.effective_hours - OVERTIME_THRESHOLD_HOURS for d in days if d.effective_hours > OVERTIME_THRESHOLD_HOURS),
            Decimal("0"),
        )

        return AttendanceSummary(
            employee_id=employee_id,
            month=month,
            year=year,
            total_days=total_days,
            present_days=present,
            absent_days=absent,
            total_overtime_hours=overtime,
            half_days=half_days,
            holiday_days=holiday_days,
            leave_days=leave_days,
            unmarked_days=unmarked_days,
            daily_stats=dict(sorted(daily_stats.items())),
        )
