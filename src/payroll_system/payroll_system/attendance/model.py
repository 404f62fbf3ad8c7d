from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.numbers import as_number, numbers_in
from ..core.enums import DayStatus, Month


@dataclass(frozen=True)
class AttendanceDay:
    """Thực thể miền (domain): Một ngày công của một nhân viên."""

    employee_id: int
    work_date: date
    status: DayStatus
    hours_worked: Optional[Decimal] = None
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None

    @property
    def effective_hours(self) -> Decimal:
        """Recorded hours, else check_out - check_in, never below 0."""

        if self.hours_worked is not None:
            return max(Decimal(self.hours_worked), Decimal("0"))
        if self.check_in and self.check_out and self.check_out > self.check_in:
            seconds = int((self.check_out - self.check_in).total_seconds())
            return Decimal(seconds) / Decimal(3600)
        return Decimal("0")

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.isoformat(),
            "status": self.status.value,
            "hoursWorked": as_number(self.effective_hours),
            "checkIn": self.check_in.isoformat() if self.check_in else None,
            "checkOut": self.check_out.isoformat() if self.check_out else None,
        }


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model: một tháng chấm công rút gọn thành số liệu tính lương.

    Derived on every request, never stored except as part of a salary record.
    """

    employee_id: int
    month: Month
    year: int
    total_days: int
    present_days: Decimal = Decimal("0")
    absent_days: Decimal = Decimal("0")
    total_overtime_hours: Decimal = Decimal("0")
    half_days: int = 0
    holiday_days: int = 0
    leave_days: int = 0
    unmarked_days: int = 0
    daily_stats: dict[date, AttendanceDay] = field(default_factory=dict)

    @property
    def has_attendance_data(self) -> bool:
        return bool(self.daily_stats)

    def to_dict(self) -> dict:
        return numbers_in({
            "employeeId": self.employee_id,
            "month": self.month.value,
            "year": self.year,
            "totalDays": self.total_days,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "totalOvertimeHours": self.total_overtime_hours,
            "halfDays": self.half_days,
            "holidayDays": self.holiday_days,
            "leaveDays": self.leave_days,
            "unmarkedDays": self.unmarked_days,
            "hasAttendanceData": self.has_attendance_data,
            "dailyStats": {d.isoformat(): day.to_dict() for d, day in sorted(self.daily_stats.items())},
        })
