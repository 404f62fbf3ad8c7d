"""Example: drive the payroll services directly, without Flask.

Preview first, then generate; a second generate for the same month is rejected.
"""

import importlib

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container
from src.payroll_system.payroll_system.core.exceptions import DuplicateGenerationError


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    preview = container.salary_workflow.preview_for_employee(1, "March", 2025, incentives=500)
    print(preview.to_dict()["computation"])

    try:
        record = container.salary_workflow.generate(1, "March", 2025, incentives=500)
        print("Generated", record.to_dict())
    except DuplicateGenerationError as e:
        print(f"Already generated (record {e.record_id})")


if __name__ == "__main__":
    main()
