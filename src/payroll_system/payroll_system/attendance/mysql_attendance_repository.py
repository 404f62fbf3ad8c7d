from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import month_bounds
from ..core.enums import DayStatus, Month
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_decimal
from .model import AttendanceDay
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_month(self, employee_id: int, month: Month, year: int) -> Sequence[AttendanceDay]:
        start, end = month_bounds(year, month.number)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, status, hours_worked, check_in, check_out
                FROM attendance_days
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (int(employee_id), start, end),
            )
            rows = fetchall(cur)
            return [
                AttendanceDay(
                    employee_id=int(r["employee_id"]),
                    work_date=r["work_date"],
                    status=DayStatus(r["status"]),
                    hours_worked=to_decimal(r["hours_worked"]) if r.get("hours_worked") is not None else None,
                    check_in=r.get("check_in"),
                    check_out=r.get("check_out"),
                )
                for r in rows
            ]
