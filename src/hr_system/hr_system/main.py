from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import ok
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables, seed_reference_data
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    Passing a container (e.g. in-memory repositories in tests) skips every
    database side effect of startup.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")

        if app.config["DEBUG"]:
            print(
                "[hr-system] settings=", settings_module,
                " db=", f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
            )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            if app.config["DEBUG"]:
                print(f"[hr-system] schema ready (tables={len(list_tables(db_config))})")

        container = build_container(db_config=db_config)

        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            created = seed_reference_data(container)
            if app.config["DEBUG"]:
                print(f"[hr-system] reference data ready {created}")

    app.extensions["hr_container"] = container

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return ok({"status": "ok"})

    register_employees(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_payroll(app, container)
    register_reports(app, container)

    return app
