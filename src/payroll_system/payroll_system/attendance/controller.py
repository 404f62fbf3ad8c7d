from __future__ import annotations

from flask import Flask, request

from ..common.http import ok
from ..common.validators import require_month, require_positive_int, require_year
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/hr/attendance/stats", methods=["GET"], endpoint="attendance_stats")
    def attendance_stats():
        employee_id = require_positive_int(request.args.get("employeeId"), "employeeId")
        month = require_month(request.args.get("month"))
        year = require_year(request.args.get("year"))

        summary = container.attendance_aggregator.aggregate(employee_id, month, year)
        return ok(summary.to_dict())
