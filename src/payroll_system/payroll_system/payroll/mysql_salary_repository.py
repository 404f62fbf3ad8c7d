from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import Month, SalaryStatus
from ..core.exceptions import DuplicateGenerationError, DuplicateKeyError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_decimal
from ..employees.model import SalaryStructure
from .model import Overtime, SalaryRecord
from .repository import SalaryRecordRepository

_COLUMNS = """
    record_id, employee_id, month, year, working_days, present_days,
    basic, hra, conveyance, medical, special_allowance, pf, professional_tax,
    overtime_hours, overtime_rate, overtime_amount,
    deductions, incentives, gross_salary, net_salary,
    status, payment_date, remarks, generated_at
"""


def _record_from_row(r: dict) -> SalaryRecord:
    return SalaryRecord(
        record_id=int(r["record_id"]),
        employee_id=int(r["employee_id"]),
        month=Month(r["month"]),
        year=int(r["year"]),
        working_days=int(r["working_days"]),
        present_days=to_decimal(r["present_days"]),
        salary_components=SalaryStructure(
            basic=to_decimal(r["basic"]),
            hra=to_decimal(r["hra"]),
            conveyance=to_decimal(r["conveyance"]),
            medical=to_decimal(r["medical"]),
            special_allowance=to_decimal(r["special_allowance"]),
            pf=to_decimal(r["pf"]),
            professional_tax=to_decimal(r["professional_tax"]),
        ),
        overtime=Overtime(
            hours=to_decimal(r["overtime_hours"]),
            rate=to_decimal(r["overtime_rate"]),
            amount=to_decimal(r["overtime_amount"]),
        ),
        deductions=to_decimal(r["deductions"]),
        incentives=to_decimal(r["incentives"]),
        gross_salary=to_decimal(r["gross_salary"]),
        net_salary=to_decimal(r["net_salary"]),
        status=SalaryStatus(r["status"]),
        payment_date=r.get("payment_date"),
        remarks=r.get("remarks"),
        generated_at=r.get("generated_at"),
    )


class MySQLSalaryRecordRepository(SalaryRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find(self, *, employee_id: int, month: Month, year: int) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM salary_records WHERE employee_id=%s AND month=%s AND year=%s",
                (int(employee_id), month.value, int(year)),
            )
            r = fetchone(cur)
            return _record_from_row(r) if r else None

    def get_by_id(self, record_id: int) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salary_records WHERE record_id=%s", (int(record_id),))
            r = fetchone(cur)
            return _record_from_row(r) if r else None

    def save(self, record: SalaryRecord) -> SalaryRecord:
        s = record.salary_components
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO salary_records(
                        employee_id, month, year, working_days, present_days,
                        basic, hra, conveyance, medical, special_allowance, pf, professional_tax,
                        overtime_hours, overtime_rate, overtime_amount,
                        deductions, incentives, gross_salary, net_salary,
                        status, payment_date, remarks, generated_at
                    )
                    VALUES(%s,%s,%s,%s,%s, %s,%s,%s,%s,%s,%s,%s, %s,%s,%s, %s,%s,%s,%s, %s,%s,%s,%s)
                    """,
                    (
                        int(record.employee_id),
                        record.month.value,
                        int(record.year),
                        int(record.working_days),
                        record.present_days,
                        s.basic,
                        s.hra,
                        s.conveyance,
                        s.medical,
                        s.special_allowance,
                        s.pf,
                        s.professional_tax,
                        record.overtime.hours,
                        record.overtime.rate,
                        record.overtime.amount,
                        record.deductions,
                        record.incentives,
                        record.gross_salary,
                        record.net_salary,
                        record.status.value,
                        record.payment_date,
                        record.remarks,
                        record.generated_at,
                    ),
                )
                record_id = int(cur.lastrowid)
        except DuplicateKeyError as e:
            raise DuplicateGenerationError(
                employee_id=record.employee_id, month=record.month, year=record.year
            ) from e
        return record.with_id(record_id)

    def list_for_period(
        self,
        *,
        month: Optional[Month] = None,
        year: Optional[int] = None,
        employee_id: Optional[int] = None,
        limit: int = 500,
    ) -> Sequence[SalaryRecord]:
        clauses: list[str] = []
        params: list[object] = []
        if month is not None:
            clauses.append("month=%s")
            params.append(month.value)
        if year is not None:
            clauses.append("year=%s")
            params.append(int(year))
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM salary_records
                {where}
                ORDER BY year DESC, FIELD(month, {", ".join(["%s"] * 12)}) DESC, employee_id
                LIMIT %s
                """,
                tuple(params[:-1]) + tuple(m.value for m in Month) + (params[-1],),
            )
            return [_record_from_row(r) for r in fetchall(cur)]

    def mark_paid(self, *, record_id: int, payment_date: date, remarks: Optional[str] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE salary_records
                SET status=%s, payment_date=%s, remarks=COALESCE(%s, remarks)
                WHERE record_id=%s AND status=%s
                """,
                (SalaryStatus.PAID.value, payment_date, remarks, int(record_id), SalaryStatus.DRAFT.value),
            )
            return cur.rowcount > 0

    def delete_draft(self, *, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM salary_records WHERE record_id=%s AND status=%s",
                (int(record_id), SalaryStatus.DRAFT.value),
            )
            return cur.rowcount > 0
