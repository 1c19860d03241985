"""
Department API endpoints (read-only; rows come from the startup seed).
"""

from __future__ import annotations

from fastapi import APIRouter

from . import schemas, service

router = APIRouter(prefix="/api")


@router.get("/departments", response_model=list[schemas.DepartmentResponse])
async def list_departments() -> list[schemas.DepartmentResponse]:
    return await service.list_departments()
