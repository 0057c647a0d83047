from __future__ import annotations

from datetime import datetime

import pytest

from tests.fakes import InMemoryStore, add_employee, build_in_memory_container


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 0)


@pytest.fixture
def store() -> InMemoryStore:
    s = InMemoryStore()
    add_employee(s, 1, "John Doe", "john.doe@example.com")
    add_employee(s, 2, "Jane Smith", "jane.smith@example.com")
    return s


@pytest.fixture
def container(store):
    return build_in_memory_container(store)


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    from src.hr_system.hr_system.main import create_app

    app = create_app(container=container)
    return app.test_client()
