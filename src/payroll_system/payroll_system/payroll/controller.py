from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import ok
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _adjustments(data: dict) -> dict:
        return {
            "overtime_hours": data.get("overtimeHours"),
            "incentives": data.get("incentives", 0),
            "deductions": data.get("deductions", 0),
            "working_days": data.get("workingDays"),
        }

    @app.route("/api/hr/salary/preview", methods=["POST"], endpoint="salary_preview")
    def salary_preview():
        data = _json_body()
        preview = container.salary_workflow.preview_for_employee(
            data.get("employeeId"), data.get("month"), data.get("year"), **_adjustments(data)
        )
        return ok(preview.to_dict())

    @app.route("/api/hr/salary", methods=["POST"], endpoint="salary_generate")
    def salary_generate():
        data = _json_body()
        record = container.salary_workflow.generate(
            data.get("employeeId"),
            data.get("month"),
            data.get("year"),
            remarks=data.get("remarks"),
            **_adjustments(data),
        )
        return ok(record.to_dict(), status=201)

    @app.route("/api/hr/salary", methods=["GET"], endpoint="salary_list")
    def salary_list():
        records = container.salary_record_service.list_for_period(
            month=request.args.get("month"),
            year=request.args.get("year"),
            employee_id=request.args.get("employeeId"),
        )
        return ok([r.to_dict() for r in records], count=len(records))

    @app.route("/api/hr/salary/<int:record_id>", methods=["GET"], endpoint="salary_detail")
    def salary_detail(record_id: int):
        return ok(container.salary_record_service.get(record_id).to_dict())

    @app.route("/api/hr/salary/<int:record_id>/pay", methods=["POST"], endpoint="salary_mark_paid")
    def salary_mark_paid(record_id: int):
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        elif not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        raw_date = str(data.get("paymentDate") or "").strip()
        if not raw_date:
            raise ValidationError("paymentDate is required")
        try:
            payment_date = parse_iso_date(raw_date)
        except ValueError:
            raise ValidationError("paymentDate must be YYYY-MM-DD")

        record = container.salary_record_service.mark_paid(record_id, payment_date, remarks=data.get("remarks"))
        return ok(record.to_dict())

    @app.route("/api/hr/salary/<int:record_id>", methods=["DELETE"], endpoint="salary_delete")
    def salary_delete(record_id: int):
        container.salary_record_service.delete_draft(record_id)
        return ok({"id": record_id, "deleted": True})
