from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.validators import require_month, require_positive_int, require_year
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.exceptions import InvalidTransitionError, SalaryRecordNotFound, ValidationError
from .model import SalaryRecord
from .repository import SalaryRecordRepository

log = logging.getLogger(__name__)


class SalaryRecordService:
    """Queries and the two allowed mutations of a stored salary record."""

    def __init__(self, records: SalaryRecordRepository):
        self._records = records

    def get(self, record_id: int) -> SalaryRecord:
        record = self._records.get_by_id(int(record_id))
        if not record:
            raise SalaryRecordNotFound(int(record_id))
        return record

    def list_for_period(
        self,
        *,
        month: Any = None,
        year: Any = None,
        employee_id: Any = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[SalaryRecord]:
        return self._records.list_for_period(
            month=require_month(month) if month not in (None, "") else None,
            year=require_year(year) if year not in (None, "") else None,
            employee_id=require_positive_int(employee_id, "employeeId") if employee_id not in (None, "") else None,
            limit=int(limit),
        )

    def mark_paid(self, record_id: int, payment_date: Optional[date], *, remarks: Optional[str] = None) -> SalaryRecord:
        if payment_date is None:
            raise ValidationError("paymentDate is required")

        record = self.get(record_id)
        if record.is_paid:
            log.warning("Rejected mark-paid on already paid salary record %s", record.record_id)
            raise InvalidTransitionError(f"Salary record {record.record_id} is already paid")

        note = str(remarks or "").strip() or None
        if not self._records.mark_paid(record_id=int(record_id), payment_date=payment_date, remarks=note):
            # Someone else paid (or deleted) it between the read and the update.
            raise InvalidTransitionError(f"Salary record {record.record_id} is no longer a draft")

        log.info("Salary record %s marked paid on %s", record.record_id, payment_date.isoformat())
        return self.get(record_id)

    def delete_draft(self, record_id: int) -> None:
        record = self.get(record_id)
        if record.is_paid:
            log.warning("Rejected delete of paid salary record %s", record.record_id)
            raise InvalidTransitionError("Paid salary records cannot be deleted")

        if not self._records.delete_draft(record_id=int(record_id)):
            raise InvalidTransitionError(f"Salary record {record.record_id} is no longer a draft")
        log.info("Deleted draft salary record %s", record.record_id)
