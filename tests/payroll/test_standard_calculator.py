from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.attendance.model import AttendanceSummary
from src.payroll_system.payroll_system.core.enums import Month
from src.payroll_system.payroll_system.core.exceptions import ValidationError
from src.payroll_system.payroll_system.employees.model import SalaryStructure
from src.payroll_system.payroll_system.payroll.calculator.standard_calculator import StandardPayrollCalculator


def _summary(present, overtime="0", total_days=31):
    return AttendanceSummary(
        employee_id=1,
        month=Month.MARCH,
        year=2025,
        total_days=total_days,
        present_days=Decimal(str(present)),
        total_overtime_hours=Decimal(overtime),
    )


def test_full_month_earns_full_basic():
    calc = StandardPayrollCalculator()
    result = calc.compute(SalaryStructure(basic=30000), _summary(30))

    assert result.prorate_factor == 1
    assert result.earned_basic == Decimal("30000")


def test_partial_month_prorates_on_thirty_days():
    calc = StandardPayrollCalculator()
    result = calc.compute(SalaryStructure(basic=30000), _summary(15))

    assert result.earned_basic == Decimal("15000")


def test_proration_base_ignores_month_length():
    calc = StandardPayrollCalculator()

    feb = calc.compute(SalaryStructure(basic=30000), _summary(28, total_days=28))
    mar = calc.compute(SalaryStructure(basic=30000), _summary(28, total_days=31))

    assert feb.earned_basic == mar.earned_basic == Decimal("28000")


def test_overtime_rate_from_basic_over_thirty_days_of_eight_hours():
    calc = StandardPayrollCalculator()
    result = calc.compute(SalaryStructure(basic=24000), _summary(30), overtime_hours=Decimal("5"))

    assert result.hourly_rate == Decimal("100")
    assert result.overtime_amount == Decimal("500")


def test_overtime_defaults_to_aggregated_hours_but_manual_value_wins():
    calc = StandardPayrollCalculator()
    structure = SalaryStructure(basic=24000)

    auto = calc.compute(structure, _summary(30, overtime="3"))
    manual = calc.compute(structure, _summary(30, overtime="3"), overtime_hours=Decimal("0"))

    assert auto.overtime_hours == 3
    assert auto.overtime_amount == Decimal("300")
    assert manual.overtime_amount == 0


def test_net_salary_end_to_end():
    structure = SalaryStructure(
        basic=20000, hra=8000, conveyance=1600, medical=1250, special_allowance=0, pf=1800, professional_tax=200
    )

    result = StandardPayrollCalculator().compute(structure, _summary(30), overtime_hours=Decimal("0"))

    assert result.gross_earned == Decimal("30850")
    assert result.total_deductions == Decimal("2000")
    assert result.net_salary == Decimal("28850")


def test_only_net_is_rounded():
    # 20000 * 7 / 30 = 4666.666..., kept unrounded until the net.
    structure = SalaryStructure(basic=20000)

    result = StandardPayrollCalculator().compute(structure, _summary(7))

    assert result.earned_basic != result.earned_basic.to_integral_value()
    assert result.net_salary == Decimal("4667")


def test_incentives_and_manual_deductions_apply_after_gross():
    structure = SalaryStructure(basic=30000, pf=1800, professional_tax=200)

    result = StandardPayrollCalculator().compute(
        structure, _summary(30), incentives=Decimal("1000"), manual_deductions=Decimal("500")
    )

    assert result.gross_earned == Decimal("30000")
    assert result.total_deductions == Decimal("2500")
    assert result.net_salary == Decimal("28500")


def test_compute_is_deterministic():
    structure = SalaryStructure(basic=21000, hra=8400, conveyance=1600, medical=1250, special_allowance=777, pf=1800)
    summary = _summary("19.5", overtime="7.25")
    calc = StandardPayrollCalculator()

    first = calc.compute(structure, summary, incentives=Decimal("333"), manual_deductions=Decimal("12.5"))
    second = calc.compute(structure, summary, incentives=Decimal("333"), manual_deductions=Decimal("12.5"))

    assert first == second


def test_structure_rejects_negative_components():
    with pytest.raises(ValidationError):
        SalaryStructure(basic=-1)


def test_structure_fields_default_to_zero():
    s = SalaryStructure.from_dict({"basic": "25000.50"})

    assert s.basic == Decimal("25000.50")
    assert s.hra == s.pf == s.professional_tax == 0
