"""Shared fixtures: an in-memory store behind the repository functions + ASGI client.

The fake store honours the same contract as the SQL in `*/repository.py`:
seed rows after bootstrap, store-assigned ids and timestamps, NOT NULL on
name, and the employees.department_id foreign key.
"""

import os
from datetime import datetime, timedelta

import asyncpg
import pytest
from httpx import ASGITransport, AsyncClient

# Never touch a real database from tests.
os.environ.setdefault("DATABASE_URL", "postgres://localhost/acme_hr_directory_test")

from core import bootstrap
from departments import repository as department_repository
from employees import repository as employee_repository
from main import app


class FakeStore:
    """Rows held in dicts, seeded like `bootstrap.bootstrap_schema`."""

    def __init__(self):
        self._now = datetime(2026, 1, 1, 9, 0, 0)
        self.departments = {
            i: {"id": i, "name": name}
            for i, name in enumerate(bootstrap.SEED_DEPARTMENTS, start=1)
        }
        self.employees = {}
        self._next_employee_id = 1
        for name, department_id in bootstrap.SEED_EMPLOYEES:
            self._insert(name, department_id)

    def _tick(self):
        self._now += timedelta(seconds=1)
        return self._now

    def _check_row(self, name, department_id):
        if name is None:
            raise asyncpg.NotNullViolationError(
                'null value in column "name" of relation "employees" violates not-null constraint'
            )
        if department_id is not None and department_id not in self.departments:
            raise asyncpg.ForeignKeyViolationError(
                'insert or update on table "employees" violates foreign key constraint'
            )

    def _insert(self, name, department_id):
        self._check_row(name, department_id)
        now = self._tick()
        row = {
            "id": self._next_employee_id,
            "name": name,
            "department_id": department_id,
            "created_at": now,
            "updated_at": now,
        }
        self.employees[row["id"]] = row
        self._next_employee_id += 1
        return dict(row)

    async def list_departments(self):
        return [dict(row) for _, row in sorted(self.departments.items())]

    async def list_employees(self):
        return [dict(row) for _, row in sorted(self.employees.items())]

    async def create_employee(self, *, name, department_id):
        return self._insert(name, department_id)

    async def update_employee(self, employee_id, *, name, department_id):
        row = self.employees.get(employee_id)
        if row is None:
            return None
        self._check_row(name, department_id)
        row.update(name=name, department_id=department_id, updated_at=self._tick())
        return dict(row)

    async def delete_employee(self, employee_id):
        return self.employees.pop(employee_id, None) is not None


@pytest.fixture
def store(monkeypatch):
    fake = FakeStore()
    monkeypatch.setattr(department_repository, "list_departments", fake.list_departments)
    monkeypatch.setattr(employee_repository, "list_employees", fake.list_employees)
    monkeypatch.setattr(employee_repository, "create_employee", fake.create_employee)
    monkeypatch.setattr(employee_repository, "update_employee", fake.update_employee)
    monkeypatch.setattr(employee_repository, "delete_employee", fake.delete_employee)
    return fake


@pytest.fixture
async def client(store):
    """ASGI client over the app; lifespan is not run, so no pool is needed."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def store_down(monkeypatch, store):
    """Make every repository call fail like an unreachable database."""

    async def _refuse(*args, **kwargs):
        raise ConnectionRefusedError("connection refused")

    for module, name in (
        (department_repository, "list_departments"),
        (employee_repository, "list_employees"),
        (employee_repository, "create_employee"),
        (employee_repository, "update_employee"),
        (employee_repository, "delete_employee"),
    ):
        monkeypatch.setattr(module, name, _refuse)
