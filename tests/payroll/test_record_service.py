from datetime import date
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.core.enums import Month, SalaryStatus
from src.payroll_system.payroll_system.core.exceptions import (
    InvalidTransitionError,
    SalaryRecordNotFound,
    ValidationError,
)
from src.payroll_system.payroll_system.employees.model import SalaryStructure
from src.payroll_system.payroll_system.payroll.model import Overtime, SalaryRecord
from src.payroll_system.payroll_system.payroll.record_service import SalaryRecordService
from tests.fakes import InMemorySalaryRecords


def _draft(employee_id=1, month=Month.MARCH, year=2025) -> SalaryRecord:
    return SalaryRecord(
        employee_id=employee_id,
        month=month,
        year=year,
        working_days=31,
        present_days=Decimal("30"),
        salary_components=SalaryStructure(basic=30000, pf=1800),
        overtime=Overtime(),
        deductions=Decimal("0"),
        incentives=Decimal("0"),
        gross_salary=Decimal("30000"),
        net_salary=Decimal("28200"),
    )


@pytest.fixture
def repo():
    return InMemorySalaryRecords()


@pytest.fixture
def svc(repo):
    return SalaryRecordService(repo)


def test_mark_paid_succeeds_once(repo, svc):
    record = repo.save(_draft())

    paid = svc.mark_paid(record.record_id, date(2025, 4, 5), remarks="  NEFT batch 12 ")

    assert paid.status == SalaryStatus.PAID
    assert paid.payment_date == date(2025, 4, 5)
    assert paid.remarks == "NEFT batch 12"
    assert paid.net_salary == record.net_salary

    with pytest.raises(InvalidTransitionError):
        svc.mark_paid(record.record_id, date(2025, 4, 6))
    assert repo.get_by_id(record.record_id).payment_date == date(2025, 4, 5)


def test_mark_paid_requires_a_date(repo, svc):
    record = repo.save(_draft())

    with pytest.raises(ValidationError):
        svc.mark_paid(record.record_id, None)
    assert repo.get_by_id(record.record_id).status == SalaryStatus.DRAFT


def test_delete_allowed_only_while_draft(repo, svc):
    draft = repo.save(_draft(month=Month.MARCH))
    paid = repo.save(_draft(month=Month.APRIL))
    svc.mark_paid(paid.record_id, date(2025, 5, 1))

    svc.delete_draft(draft.record_id)
    with pytest.raises(InvalidTransitionError):
        svc.delete_draft(paid.record_id)

    assert repo.get_by_id(draft.record_id) is None
    assert repo.get_by_id(paid.record_id).status == SalaryStatus.PAID


def test_deleted_draft_frees_the_period(repo, svc):
    draft = repo.save(_draft())
    svc.delete_draft(draft.record_id)

    again = repo.save(_draft())

    assert again.record_id != draft.record_id


def test_lost_race_on_transition_is_reported(repo, svc):
    record = repo.save(_draft())

    class RacingRepo:
        def get_by_id(self, record_id):
            return repo.get_by_id(record_id)

        def mark_paid(self, **kwargs):
            return False

    with pytest.raises(InvalidTransitionError):
        SalaryRecordService(RacingRepo()).mark_paid(record.record_id, date(2025, 4, 1))


def test_missing_record(svc):
    with pytest.raises(SalaryRecordNotFound):
        svc.get(42)
    with pytest.raises(SalaryRecordNotFound):
        svc.mark_paid(42, date(2025, 4, 1))
    with pytest.raises(SalaryRecordNotFound):
        svc.delete_draft(42)


def test_list_for_period_filters_by_month_and_year(repo, svc):
    repo.save(_draft(employee_id=1, month=Month.MARCH))
    repo.save(_draft(employee_id=2, month=Month.MARCH))
    repo.save(_draft(employee_id=1, month=Month.APRIL))
    repo.save(_draft(employee_id=1, month=Month.MARCH, year=2024))

    march = svc.list_for_period(month="March", year="2025")
    mine = svc.list_for_period(month="mar", year=2025, employee_id="1")

    assert {r.employee_id for r in march} == {1, 2}
    assert len(mine) == 1
    assert len(svc.list_for_period()) == 4


def test_record_to_dict_keeps_durable_field_names(repo):
    payload = repo.save(_draft()).to_dict()

    assert set(payload) >= {
        "employeeId", "month", "year", "workingDays", "presentDays", "salaryComponents", "overtime",
        "deductions", "incentives", "grossSalary", "netSalary", "status", "paymentDate", "remarks",
    }
    assert set(payload["salaryComponents"]) == {
        "basic", "hra", "conveyance", "medical", "specialAllowance", "pf", "professionalTax",
    }
    assert set(payload["overtime"]) == {"hours", "rate", "amount"}
    assert payload["month"] == "March"
    assert payload["status"] == "Draft"
    assert payload["netSalary"] == 28200
    assert payload["paymentDate"] is None
