"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import asyncpg

from . import settings

DEFAULT_DATABASE_URL = "postgres://localhost/acme_hr_directory"

_pool: asyncpg.Pool | None = None


def database_url() -> str:
    # Passed to asyncpg as-is; it understands sslmode and the other libpq params.
    return os.environ.get("DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=settings.pool_min_size(),
        max_size=settings.pool_max_size(),
        command_timeout=settings.command_timeout(),
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool().fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool().fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


@asynccontextmanager
async def transaction() -> AsyncIterator[asyncpg.Connection]:
    """
    Hold one pooled connection inside a transaction for the block.

    Commits when the block exits cleanly, rolls back if it raises.
    """
    async with pool().acquire() as conn:
        async with conn.transaction():
            yield conn
