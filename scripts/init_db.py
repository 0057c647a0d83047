from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_system.hr_system.database.bootstrap import apply_schema, list_tables, reset_schema


def main() -> None:
    parser = argparse.ArgumentParser(description="Create (or recreate) the HR schema.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop Employee/Attendance/LeaveRequest/Payroll and the views before applying schema.sql",
    )
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    if args.reset:
        reset_schema(db_config)
    else:
        apply_schema(db_config)
    tables = list_tables(db_config)
    print(
        f"OK: {'Reset' if args.reset else 'Applied'} schema.sql -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
