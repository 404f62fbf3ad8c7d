from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from ...attendance.model import AttendanceSummary
from ...employees.model import SalaryStructure
from ..model import SalaryComputation


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    Implementations must be pure: same inputs, same SalaryComputation, no I/O.
    """

    @abstractmethod
    def compute(
        self,
        structure: SalaryStructure,
        summary: AttendanceSummary,
        *,
        overtime_hours: Optional[Decimal] = None,
        incentives: Decimal = Decimal("0"),
        manual_deductions: Decimal = Decimal("0"),
    ) -> SalaryComputation:
        raise NotImplementedError
