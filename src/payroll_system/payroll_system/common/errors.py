from __future__ import annotations

from flask import Flask
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    DomainError,
    DuplicateGenerationError,
    EmployeeNotFound,
    InvalidTransitionError,
    PersistenceError,
    SalaryRecordNotFound,
    ValidationError,
)
from .http import fail

# Most specific first; the first isinstance match wins.
_STATUS = (
    (ValidationError, 400, "VALIDATION_ERROR"),
    (EmployeeNotFound, 404, "EMPLOYEE_NOT_FOUND"),
    (SalaryRecordNotFound, 404, "SALARY_RECORD_NOT_FOUND"),
    (DuplicateGenerationError, 409, "DUPLICATE_GENERATION"),
    (InvalidTransitionError, 409, "INVALID_TRANSITION"),
    (PersistenceError, 503, "PERSISTENCE_ERROR"),
)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        for exc_type, status, code in _STATUS:
            if isinstance(e, exc_type):
                break
        else:
            status, code = 400, "DOMAIN_ERROR"

        if status >= 500:
            app.logger.error("Storage failure: %s", e)

        detail = None
        if isinstance(e, DuplicateGenerationError):
            detail = {
                "employeeId": e.employee_id,
                "month": getattr(e.month, "value", e.month),
                "year": e.year,
                "existingRecordId": e.record_id,
            }
        return fail(str(e), status=status, code=code, detail=detail)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        app.logger.exception(e)
        return fail("Internal server error", status=500)
