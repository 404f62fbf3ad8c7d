from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Month
from .model import AttendanceDay


class AttendanceRepository(Protocol):
    def list_for_month(self, employee_id: int, month: Month, year: int) -> Sequence[AttendanceDay]:
        """All recorded days of the month for one employee, any order.

        An employee without tracked attendance yields an empty sequence; storage
        failures raise PersistenceError.
        """

        raise NotImplementedError
