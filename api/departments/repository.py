"""
Department persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def list_departments() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name
        FROM departments
        ORDER BY id
        """
    )
