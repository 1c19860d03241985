"""
Employee API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from . import schemas, service

router = APIRouter(prefix="/api")


@router.get("/employees", response_model=list[schemas.EmployeeResponse])
async def list_employees() -> list[schemas.EmployeeResponse]:
    return await service.list_employees()


@router.post(
    "/employees",
    status_code=status.HTTP_201_CREATED,
    response_model=schemas.EmployeeResponse,
)
async def create_employee(request: schemas.EmployeeWriteRequest) -> schemas.EmployeeResponse:
    return await service.create_employee(request)


@router.put("/employees/{employee_id}", response_model=schemas.EmployeeResponse)
async def update_employee(employee_id: int, request: schemas.EmployeeWriteRequest):
    """
    Replace an employee's name and department.

    An unknown id answers 200 with an empty body unless strict lookup is on.
    """
    employee = await service.update_employee(employee_id, request)
    if employee is None:
        return Response(status_code=status.HTTP_200_OK)
    return employee


@router.delete("/employees/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: int) -> Response:
    await service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
