"""
Pydantic schemas for department endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class DepartmentResponse(BaseModel):
    id: int
    name: str
