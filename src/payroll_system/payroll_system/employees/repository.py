from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee, SalaryStructure


class EmployeeRepository(Protocol):
    """Read access to the employee master.

    Note (DIP): payroll services depend on this interface; the master data itself is
    maintained elsewhere.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_salary_structure(self, employee_id: int) -> Optional[SalaryStructure]:
        """Current structure, or None when the employee does not exist."""

        raise NotImplementedError
