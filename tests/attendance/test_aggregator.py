from datetime import date, datetime
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.attendance.model import AttendanceDay
from src.payroll_system.payroll_system.attendance.service import AttendanceAggregator, floor_to_unit
from src.payroll_system.payroll_system.core.enums import DayStatus, Month
from src.payroll_system.payroll_system.core.exceptions import PersistenceError
from tests.fakes import InMemoryAttendance


def _day(d: int, status: DayStatus, hours=None, *, month: int = 3, year: int = 2025, employee_id: int = 1):
    return AttendanceDay(
        employee_id=employee_id,
        work_date=date(year, month, d),
        status=status,
        hours_worked=None if hours is None else Decimal(str(hours)),
    )


@pytest.mark.parametrize(
    "month, year, expected",
    [
        (Month.FEBRUARY, 2024, 29),
        (Month.FEBRUARY, 2025, 28),
        (Month.FEBRUARY, 2100, 28),
        (Month.APRIL, 2025, 30),
        (Month.DECEMBER, 2025, 31),
    ],
)
def test_total_days_is_calendar_length(month, year, expected):
    summary = AttendanceAggregator(InMemoryAttendance()).aggregate(1, month, year)
    assert summary.total_days == expected


def test_half_day_counts_half_and_leave_holiday_are_excluded():
    days = [_day(d, DayStatus.PRESENT, 8) for d in range(1, 21)]
    days += [_day(21, DayStatus.HALF_DAY, 4), _day(22, DayStatus.HOLIDAY), _day(23, DayStatus.LEAVE)]
    days += [_day(24, DayStatus.ABSENT)]

    summary = AttendanceAggregator(InMemoryAttendance(days)).aggregate(1, Month.MARCH, 2025)

    assert summary.present_days == Decimal("20.5")
    assert summary.half_days == 1
    assert summary.holiday_days == 1
    assert summary.leave_days == 1
    assert summary.unmarked_days == 31 - 24
    # 31 - 20.5 present - 1 holiday - 1 leave
    assert summary.absent_days == Decimal("8.5")
    assert len(summary.daily_stats) == 24


def test_unmarked_days_not_absent_when_policy_disabled():
    days = [_day(1, DayStatus.PRESENT, 8), _day(2, DayStatus.HALF_DAY, 4), _day(3, DayStatus.ABSENT)]

    summary = AttendanceAggregator(InMemoryAttendance(days), count_unmarked_as_absent=False).aggregate(
        1, Month.MARCH, 2025
    )

    assert summary.present_days == Decimal("1.5")
    assert summary.absent_days == Decimal("1.5")
    assert summary.unmarked_days == 28


def test_overtime_accumulates_hours_beyond_nine():
    days = [
        _day(3, DayStatus.PRESENT, 9),
        _day(4, DayStatus.PRESENT, "11.5"),
        _day(5, DayStatus.PRESENT, 10),
        _day(6, DayStatus.HALF_DAY, 4),
    ]

    summary = AttendanceAggregator(InMemoryAttendance(days)).aggregate(1, Month.MARCH, 2025)

    assert summary.total_overtime_hours == Decimal("3.5")


def test_hours_fall_back_to_punch_times():
    day = AttendanceDay(
        employee_id=1,
        work_date=date(2025, 3, 3),
        status=DayStatus.PRESENT,
        check_in=datetime(2025, 3, 3, 8, 0),
        check_out=datetime(2025, 3, 3, 20, 30),
    )

    summary = AttendanceAggregator(InMemoryAttendance([day])).aggregate(1, Month.MARCH, 2025)

    assert day.effective_hours == Decimal("12.5")
    assert summary.total_overtime_hours == Decimal("3.5")


def test_no_attendance_gives_zero_summary_not_error():
    summary = AttendanceAggregator(InMemoryAttendance()).aggregate(7, "March", 2025)

    assert summary.present_days == 0
    assert summary.total_days == 31
    assert summary.daily_stats == {}
    assert summary.total_overtime_hours == 0
    assert summary.has_attendance_data is False


def test_failing_source_is_an_error_not_a_zero_summary():
    aggregator = AttendanceAggregator(InMemoryAttendance(fail=True))

    with pytest.raises(PersistenceError):
        aggregator.aggregate(1, Month.MARCH, 2025)


def test_rows_from_other_months_are_ignored():
    days = [_day(1, DayStatus.PRESENT, 8), _day(1, DayStatus.PRESENT, 8, month=4)]

    class LeakyRepo:
        def list_for_month(self, employee_id, month, year):
            return days

    summary = AttendanceAggregator(LeakyRepo()).aggregate(1, Month.MARCH, 2025)

    assert summary.present_days == 1
    assert list(summary.daily_stats) == [date(2025, 3, 1)]


def test_floor_to_unit_never_rounds_up():
    assert floor_to_unit(Decimal("12.74")) == Decimal("12.5")
    assert floor_to_unit(Decimal("12.5")) == Decimal("12.5")
    assert floor_to_unit(Decimal("12.49")) == Decimal("12.0")


def test_summary_to_dict_uses_json_numbers():
    days = [_day(3, DayStatus.PRESENT, 10)]

    payload = AttendanceAggregator(InMemoryAttendance(days)).aggregate(1, Month.MARCH, 2025).to_dict()

    assert payload["presentDays"] == 1
    assert payload["totalOvertimeHours"] == 1
    assert payload["month"] == "March"
    assert payload["dailyStats"]["2025-03-03"]["status"] == "Present"
    assert payload["hasAttendanceData"] is True
