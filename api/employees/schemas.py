"""
Employee API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class EmployeeWriteRequest(BaseModel):
    # Both fields are written as given; the store enforces NOT NULL and the FK.
    # Numbers sent as name are stored as their text, like a varchar cast would.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str | None = None
    department_id: int | None = None


class EmployeeResponse(BaseModel):
    id: int
    name: str
    department_id: int | None
    created_at: datetime
    updated_at: datetime
