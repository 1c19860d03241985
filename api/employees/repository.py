"""
Employee persistence (raw SQL).

Every function issues exactly one statement. `created_at`/`updated_at` are
filled by the store (`DEFAULT now()` on insert, `now()` on update).
"""

from __future__ import annotations

from core import db

_EMPLOYEE_COLUMNS = "id, name, department_id, created_at, updated_at"


async def list_employees() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_EMPLOYEE_COLUMNS}
        FROM employees
        ORDER BY id
        """
    )


async def create_employee(*, name: str | None, department_id: int | None) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO employees (name, department_id)
        VALUES ($1, $2)
        RETURNING {_EMPLOYEE_COLUMNS}
        """,
        name,
        department_id,
    )
    if row is None:
        raise RuntimeError("Failed to create employee.")
    return row


async def update_employee(
    employee_id: int,
    *,
    name: str | None,
    department_id: int | None,
) -> dict | None:
    """
    Overwrite name and department_id (full replace), refresh updated_at.

    Returns None when no row has `employee_id`.
    """
    return await db.fetch_one(
        f"""
        UPDATE employees
        SET name = $1,
            department_id = $2,
            updated_at = now()
        WHERE id = $3
        RETURNING {_EMPLOYEE_COLUMNS}
        """,
        name,
        department_id,
        employee_id,
    )


async def delete_employee(employee_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM employees
        WHERE id = $1
        RETURNING id
        """,
        employee_id,
    )
    return row is not None
