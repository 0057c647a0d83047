"""Ví dụ: dùng service layer (không qua Flask).

Chấm công vào ca cho nhân viên 1 rồi in báo cáo chấm công và bảng lương.
"""

import importlib
from pprint import pprint

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_system.hr_system.container import build_container
from src.hr_system.hr_system.core.exceptions import ConflictError


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    try:
        container.attendance_service.clock_in(1)
    except ConflictError as e:
        print(e)

    pprint(container.report_service.attendance_report(employee_id=1).summary)
    pprint(container.report_service.payroll_report())


if __name__ == "__main__":
    main()
