from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class EmployeeNotFound(DomainError):
    """Raised when an employee has no salary structure to pay from."""

    def __init__(self, employee_id: int):
        super().__init__(f"Employee {employee_id} not found")
        self.employee_id = employee_id


class SalaryRecordNotFound(DomainError):
    def __init__(self, record_id: int):
        super().__init__(f"Salary record {record_id} not found")
        self.record_id = record_id


class DuplicateGenerationError(DomainError):
    """A salary record already exists for (employee, month, year).

    Carries the identity of the existing record so callers can redirect to it.
    """

    def __init__(self, *, employee_id: int, month, year: int, record_id: Optional[int] = None):
        month_name = getattr(month, "value", month)
        super().__init__(f"Salary for employee {employee_id} in {month_name} {year} has already been generated")
        self.employee_id = employee_id
        self.month = month
        self.year = year
        self.record_id = record_id


class InvalidTransitionError(DomainError):
    """Raised on an illegal salary status change (double pay, deleting a Paid record)."""


class PersistenceError(DomainError):
    """Underlying storage failure. Safe to retry: nothing partial was committed."""


class DuplicateKeyError(PersistenceError):
    """A unique constraint rejected the write."""
