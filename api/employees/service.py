"""
Employee business logic.

Scope:
- one store call per operation, errors logged and reported as a generic 500
- missing-id handling for update/delete (see `settings.strict_employee_lookup`)
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core import errors, settings

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_employee_response(row: dict) -> schemas.EmployeeResponse:
    department_id = row.get("department_id")
    return schemas.EmployeeResponse(
        id=int(row["id"]),
        name=str(row["name"]),
        department_id=int(department_id) if department_id is not None else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _employee_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Employee not found.",
    )


async def list_employees() -> list[schemas.EmployeeResponse]:
    try:
        rows = await repository.list_employees()
    except Exception as exc:
        logger.exception("list_employees_failed")
        raise errors.internal_error() from exc
    return [_to_employee_response(row) for row in rows]


async def create_employee(payload: schemas.EmployeeWriteRequest) -> schemas.EmployeeResponse:
    try:
        row = await repository.create_employee(
            name=payload.name,
            department_id=payload.department_id,
        )
    except Exception as exc:
        logger.exception("create_employee_failed department_id=%s", payload.department_id)
        raise errors.internal_error() from exc
    return _to_employee_response(row)


async def update_employee(
    employee_id: int,
    payload: schemas.EmployeeWriteRequest,
) -> schemas.EmployeeResponse | None:
    """
    Full-replace update. Returns None when no employee has `employee_id`
    (or raises 404 under strict lookup).
    """
    try:
        row = await repository.update_employee(
            employee_id,
            name=payload.name,
            department_id=payload.department_id,
        )
    except Exception as exc:
        logger.exception("update_employee_failed employee_id=%s", employee_id)
        raise errors.internal_error() from exc

    if row is None:
        logger.info("update_employee_missing employee_id=%s", employee_id)
        if settings.strict_employee_lookup():
            raise _employee_not_found()
        return None
    return _to_employee_response(row)


async def delete_employee(employee_id: int) -> None:
    try:
        deleted = await repository.delete_employee(employee_id)
    except Exception as exc:
        logger.exception("delete_employee_failed employee_id=%s", employee_id)
        raise errors.internal_error() from exc

    if not deleted and settings.strict_employee_lookup():
        raise _employee_not_found()
