from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceAggregator
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.mysql_salary_repository import MySQLSalaryRecordRepository
from .payroll.record_service import SalaryRecordService
from .payroll.service import SalaryGenerationWorkflow


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    salary_records_repo: MySQLSalaryRecordRepository

    attendance_aggregator: AttendanceAggregator
    salary_workflow: SalaryGenerationWorkflow
    salary_record_service: SalaryRecordService


def build_container(
    *,
    db_config: dict,
    count_unmarked_as_absent: bool = True,
    weekly_offs: Iterable[int] = (),
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    salary_records_repo = MySQLSalaryRecordRepository(conn)

    attendance_aggregator = AttendanceAggregator(attendance_repo, count_unmarked_as_absent=count_unmarked_as_absent)
    salary_workflow = SalaryGenerationWorkflow(
        employees_repo,
        attendance_aggregator,
        salary_records_repo,
        weekly_offs=weekly_offs,
    )
    salary_record_service = SalaryRecordService(salary_records_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        salary_records_repo=salary_records_repo,
        attendance_aggregator=attendance_aggregator,
        salary_workflow=salary_workflow,
        salary_record_service=salary_record_service,
    )
