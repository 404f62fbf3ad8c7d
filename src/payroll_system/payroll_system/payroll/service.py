from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..attendance.model import AttendanceSummary
from ..attendance.service import AttendanceAggregator
from ..common.datetime_utils import count_working_days, now_local
from ..common.numbers import numbers_in, to_scale
from ..common.validators import require_month, require_non_negative, require_positive_int, require_year
from ..core.constants import FIGURE_SCALE, HOURS_SCALE, MONEY_SCALE
from ..core.enums import Month, SalaryStatus
from ..core.exceptions import DuplicateGenerationError, EmployeeNotFound, ValidationError
from ..employees.model import SalaryStructure
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import Overtime, SalaryComputation, SalaryRecord
from .repository import SalaryRecordRepository

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollPreview:
    """Everything the generate form shows before the user confirms."""

    structure: SalaryStructure
    summary: AttendanceSummary
    working_days: int
    computation: SalaryComputation

    def to_dict(self) -> dict:
        return {
            "workingDays": self.working_days,
            "salaryComponents": numbers_in(self.structure.to_dict()),
            "attendance": self.summary.to_dict(),
            "computation": self.computation.to_dict(),
        }


class SalaryGenerationWorkflow:
    """Use case: turn one month of attendance into a Draft salary record.

    generate() checks the period is free, loads the structure and the attendance
    summary, runs the calculator and inserts one record. The insert is the only
    write, and the store's unique key on (employee, month, year) decides races.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        aggregator: AttendanceAggregator,
        records: SalaryRecordRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        weekly_offs: Iterable[int] = (),
    ):
        self._employees = employees
        self._aggregator = aggregator
        self._records = records
        self._calculator = calculator or StandardPayrollCalculator()
        self._weekly_offs = tuple(int(d) for d in weekly_offs)

    def preview(
        self,
        structure: SalaryStructure,
        summary: AttendanceSummary,
        *,
        overtime_hours: Any = None,
        incentives: Any = 0,
        deductions: Any = 0,
    ) -> SalaryComputation:
        """Pure computation, safe to call on every keystroke.

        Hours and manual amounts are rounded to the scale they are stored at, so a
        saved record recomputes to the same overtime amount and net.
        """

        hours = summary.total_overtime_hours if overtime_hours is None else require_non_negative(
            overtime_hours, "overtimeHours"
        )
        return self._calculator.compute(
            structure,
            summary,
            overtime_hours=to_scale(hours, HOURS_SCALE),
            incentives=to_scale(require_non_negative(incentives, "incentives"), MONEY_SCALE),
            manual_deductions=to_scale(require_non_negative(deductions, "deductions"), MONEY_SCALE),
        )

    def preview_for_employee(
        self,
        employee_id: int,
        month: Any,
        year: Any,
        *,
        overtime_hours: Any = None,
        incentives: Any = 0,
        deductions: Any = 0,
        working_days: Any = None,
    ) -> PayrollPreview:
        employee_id = require_positive_int(employee_id, "employeeId")
        month = require_month(month)
        year = require_year(year)

        structure, summary = self._load_inputs(employee_id, month, year)
        computation = self.preview(
            structure, summary, overtime_hours=overtime_hours, incentives=incentives, deductions=deductions
        )
        return PayrollPreview(
            structure=structure,
            summary=summary,
            working_days=self._resolve_working_days(summary, working_days),
            computation=computation,
        )

    def generate(
        self,
        employee_id: int,
        month: Any,
        year: Any,
        *,
        overtime_hours: Any = None,
        incentives: Any = 0,
        deductions: Any = 0,
        working_days: Any = None,
        remarks: Optional[str] = None,
    ) -> SalaryRecord:
        employee_id = require_positive_int(employee_id, "employeeId")
        month = require_month(month)
        year = require_year(year)

        existing = self._records.find(employee_id=employee_id, month=month, year=year)
        if existing:
            log.warning(
                "Rejected duplicate salary generation employee=%s %s %s (record %s)",
                employee_id, month.value, year, existing.record_id,
            )
            raise DuplicateGenerationError(
                employee_id=employee_id, month=month, year=year, record_id=existing.record_id
            )

        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFound(employee_id)
        if not employee.is_active:
            raise ValidationError(f"Employee {employee_id} is inactive; salary is only generated for active employees")

        structure, summary = self._load_inputs(employee_id, month, year)
        days = self._resolve_working_days(summary, working_days)
        computation = self.preview(
            structure, summary, overtime_hours=overtime_hours, incentives=incentives, deductions=deductions
        )

        record = SalaryRecord(
            employee_id=employee_id,
            month=month,
            year=year,
            working_days=days,
            present_days=summary.present_days,
            salary_components=structure,
            overtime=Overtime(
                hours=computation.overtime_hours,
                rate=to_scale(computation.hourly_rate, FIGURE_SCALE),
                amount=to_scale(computation.overtime_amount, FIGURE_SCALE),
            ),
            deductions=computation.manual_deductions,
            incentives=computation.incentives,
            gross_salary=to_scale(computation.gross_earned, FIGURE_SCALE),
            net_salary=computation.net_salary,
            status=SalaryStatus.DRAFT,
            remarks=str(remarks or "").strip() or None,
            generated_at=now_local(),
        )

        try:
            saved = self._records.save(record)
        except DuplicateGenerationError as e:
            # Lost the race to a concurrent request for the same period.
            winner = self._records.find(employee_id=employee_id, month=month, year=year)
            raise DuplicateGenerationError(
                employee_id=employee_id,
                month=month,
                year=year,
                record_id=winner.record_id if winner else None,
            ) from e

        log.info(
            "Generated salary record %s employee=%s %s %s net=%s",
            saved.record_id, employee_id, month.value, year, saved.net_salary,
        )
        return saved

    def _load_inputs(self, employee_id: int, month: Month, year: int) -> tuple[SalaryStructure, AttendanceSummary]:
        structure = self._employees.get_salary_structure(employee_id)
        if structure is None:
            raise EmployeeNotFound(employee_id)
        summary = self._aggregator.aggregate(employee_id, month, year)
        return structure, summary

    def _resolve_working_days(self, summary: AttendanceSummary, override: Any) -> int:
        if override is not None and override != "":
            days = require_positive_int(override, "workingDays")
            if days > summary.total_days:
                raise ValidationError(f"workingDays cannot exceed {summary.total_days} days in {summary.month.value}")
            return days
        if self._weekly_offs:
            return count_working_days(summary.year, summary.month.number, self._weekly_offs)
        return summary.total_days
