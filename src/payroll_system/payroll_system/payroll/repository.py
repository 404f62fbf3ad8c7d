from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import Month
from .model import SalaryRecord


class SalaryRecordRepository(Protocol):
    def find(self, *, employee_id: int, month: Month, year: int) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def save(self, record: SalaryRecord) -> SalaryRecord:
        """Insert a new record and return it with record_id set.

        The store enforces uniqueness of (employee_id, month, year) and raises
        DuplicateGenerationError when the period is taken; nothing is written then.
        """

        raise NotImplementedError

    def list_for_period(
        self,
        *,
        month: Optional[Month] = None,
        year: Optional[int] = None,
        employee_id: Optional[int] = None,
        limit: int = 500,
    ) -> Sequence[SalaryRecord]:
        raise NotImplementedError

    def mark_paid(self, *, record_id: int, payment_date: date, remarks: Optional[str] = None) -> bool:
        """Draft -> Paid as one conditional update. False when the record is not a Draft."""

        raise NotImplementedError

    def delete_draft(self, *, record_id: int) -> bool:
        """Delete only while Draft. False when nothing was deleted."""

        raise NotImplementedError
