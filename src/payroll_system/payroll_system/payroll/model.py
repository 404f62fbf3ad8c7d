from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.numbers import numbers_in
from ..core.enums import Month, SalaryStatus
from ..employees.model import SalaryStructure

ZERO = Decimal("0")


@dataclass(frozen=True)
class SalaryComputation:
    """Result of one calculator run. Nothing here is rounded except net_salary."""

    prorate_factor: Decimal
    earned_basic: Decimal
    earned_hra: Decimal
    earned_conveyance: Decimal
    earned_medical: Decimal
    earned_special_allowance: Decimal
    gross_earned: Decimal
    hourly_rate: Decimal
    overtime_hours: Decimal
    overtime_amount: Decimal
    incentives: Decimal
    pf: Decimal
    professional_tax: Decimal
    manual_deductions: Decimal
    total_deductions: Decimal
    net_salary: Decimal

    def to_dict(self) -> dict:
        return numbers_in(
            {
                "prorateFactor": self.prorate_factor,
                "earned": {
                    "basic": self.earned_basic,
                    "hra": self.earned_hra,
                    "conveyance": self.earned_conveyance,
                    "medical": self.earned_medical,
                    "specialAllowance": self.earned_special_allowance,
                },
                "grossEarned": self.gross_earned,
                "overtime": {
                    "hours": self.overtime_hours,
                    "rate": self.hourly_rate,
                    "amount": self.overtime_amount,
                },
                "incentives": self.incentives,
                "deductions": {
                    "pf": self.pf,
                    "professionalTax": self.professional_tax,
                    "manual": self.manual_deductions,
                    "total": self.total_deductions,
                },
                "netSalary": self.net_salary,
            }
        )


@dataclass(frozen=True)
class Overtime:
    hours: Decimal = ZERO
    rate: Decimal = ZERO
    amount: Decimal = ZERO


@dataclass(frozen=True)
class SalaryRecord:
    """Bản ghi lương tháng: the system of record for one employee's pay in one month.

    salary_components is a copy of the structure at generation time, never a live
    reference to the employee master.
    """

    employee_id: int
    month: Month
    year: int
    working_days: int
    present_days: Decimal
    salary_components: SalaryStructure
    overtime: Overtime
    deductions: Decimal
    incentives: Decimal
    gross_salary: Decimal
    net_salary: Decimal
    status: SalaryStatus = SalaryStatus.DRAFT
    payment_date: Optional[date] = None
    remarks: Optional[str] = None
    record_id: Optional[int] = None
    generated_at: Optional[datetime] = None

    @property
    def period_key(self) -> tuple[int, Month, int]:
        return self.employee_id, self.month, self.year

    @property
    def is_paid(self) -> bool:
        return self.status == SalaryStatus.PAID

    def with_id(self, record_id: int) -> "SalaryRecord":
        return replace(self, record_id=int(record_id))

    def to_dict(self) -> dict:
        """Durable record shape consumed by payslip tooling."""

        payload = numbers_in(
            {
                "id": self.record_id,
                "employeeId": self.employee_id,
                "month": self.month.value,
                "year": self.year,
                "workingDays": self.working_days,
                "presentDays": self.present_days,
                "salaryComponents": self.salary_components.to_dict(),
                "overtime": {
                    "hours": self.overtime.hours,
                    "rate": self.overtime.rate,
                    "amount": self.overtime.amount,
                },
                "deductions": self.deductions,
                "incentives": self.incentives,
                "grossSalary": self.gross_salary,
                "netSalary": self.net_salary,
                "status": self.status.value,
                "remarks": self.remarks,
            }
        )
        payload["paymentDate"] = self.payment_date.isoformat() if self.payment_date else None
        payload["generatedAt"] = self.generated_at.isoformat() if self.generated_at else None
        return payload
