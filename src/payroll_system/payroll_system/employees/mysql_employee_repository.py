from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, to_decimal
from .model import Employee, SalaryStructure
from .repository import EmployeeRepository

_SELECT_EMPLOYEE = """
    SELECT e.employee_id, e.employee_code, e.full_name, e.is_active,
           s.basic, s.hra, s.conveyance, s.medical, s.special_allowance, s.pf, s.professional_tax
    FROM employees e
    LEFT JOIN salary_structures s ON s.employee_id = e.employee_id
    WHERE e.employee_id=%s
"""


def _structure_from_row(r: dict) -> SalaryStructure:
    return SalaryStructure(
        basic=to_decimal(r.get("basic")),
        hra=to_decimal(r.get("hra")),
        conveyance=to_decimal(r.get("conveyance")),
        medical=to_decimal(r.get("medical")),
        special_allowance=to_decimal(r.get("special_allowance")),
        pf=to_decimal(r.get("pf")),
        professional_tax=to_decimal(r.get("professional_tax")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_EMPLOYEE, (int(employee_id),))
            r = fetchone(cur)
            if not r:
                return None
            return Employee(
                employee_id=int(r["employee_id"]),
                employee_code=r["employee_code"],
                full_name=r["full_name"],
                salary_structure=_structure_from_row(r),
                is_active=bool(r.get("is_active", 1)),
            )

    def get_salary_structure(self, employee_id: int) -> Optional[SalaryStructure]:
        employee = self.get_by_id(employee_id)
        return employee.salary_structure if employee else None
