from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ...attendance.model import AttendanceSummary
from ...core.constants import PRORATION_BASE_DAYS, STANDARD_WORKDAY_HOURS
from ...employees.model import SalaryStructure
from ..model import SalaryComputation
from .base import PayrollCalculator

WHOLE_UNIT = Decimal("1")


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: 30-day proration, basic-derived overtime rate, round only the net.

    earned_x   = x * present_days / 30
    hourly     = basic / 30 / 8
    net        = round(gross + overtime + incentives - (pf + professional_tax + manual))
    """

    def compute(
        self,
        structure: SalaryStructure,
        summary: AttendanceSummary,
        *,
        overtime_hours: Optional[Decimal] = None,
        incentives: Decimal = Decimal("0"),
        manual_deductions: Decimal = Decimal("0"),
    ) -> SalaryComputation:
        present = Decimal(summary.present_days)
        hours = summary.total_overtime_hours if overtime_hours is None else Decimal(overtime_hours)
        incentives = Decimal(incentives)
        manual_deductions = Decimal(manual_deductions)

        # Multiply before dividing so whole-day fractions of round salaries stay exact.
        def earned(amount: Decimal) -> Decimal:
            return amount * present / PRORATION_BASE_DAYS

        earned_basic = earned(structure.basic)
        earned_hra = earned(structure.hra)
        earned_conveyance = earned(structure.conveyance)
        earned_medical = earned(structure.medical)
        earned_special = earned(structure.special_allowance)
        gross = earned_basic + earned_hra + earned_conveyance + earned_medical + earned_special

        hourly_rate = structure.basic / PRORATION_BASE_DAYS / STANDARD_WORKDAY_HOURS
        overtime_amount = hourly_rate * hours

        total_deductions = structure.pf + structure.professional_tax + manual_deductions
        net = (gross + overtime_amount + incentives - total_deductions).quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP)

        return SalaryComputation(
            prorate_factor=present / PRORATION_BASE_DAYS,
            earned_basic=earned_basic,
            earned_hra=earned_hra,
            earned_conveyance=earned_conveyance,
            earned_medical=earned_medical,
            earned_special_allowance=earned_special,
            gross_earned=gross,
            hourly_rate=hourly_rate,
            overtime_hours=hours,
            overtime_amount=overtime_amount,
            incentives=incentives,
            pf=structure.pf,
            professional_tax=structure.professional_tax,
            manual_deductions=manual_deductions,
            total_deductions=total_deductions,
            net_salary=net,
        )
