"""
Department read logic.
"""

from __future__ import annotations

import logging

from core import errors

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_department_response(row: dict) -> schemas.DepartmentResponse:
    return schemas.DepartmentResponse(id=int(row["id"]), name=str(row["name"]))


async def list_departments() -> list[schemas.DepartmentResponse]:
    try:
        rows = await repository.list_departments()
    except Exception as exc:
        logger.exception("list_departments_failed")
        raise errors.internal_error() from exc
    return [_to_department_response(row) for row in rows]
