"""
Destructive schema bootstrap.

Drops and recreates `departments` and `employees`, then seeds fixed rows.
Runs once per process, before the app accepts requests. All prior data is lost.
"""

from __future__ import annotations

import logging

from . import db

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS: tuple[str, ...] = (
    "DROP TABLE IF EXISTS employees",
    "DROP TABLE IF EXISTS departments",
    """
    CREATE TABLE departments (
        id SERIAL PRIMARY KEY,
        name VARCHAR(100) NOT NULL
    )
    """,
    """
    CREATE TABLE employees (
        id SERIAL PRIMARY KEY,
        name VARCHAR(100) NOT NULL,
        department_id INTEGER REFERENCES departments(id),
        created_at TIMESTAMP DEFAULT now(),
        updated_at TIMESTAMP DEFAULT now()
    )
    """,
)

# Inserted in order, so SERIAL assigns ids 1..4.
SEED_DEPARTMENTS: tuple[str, ...] = (
    "Software Engineering",
    "Human Resources",
    "Finance",
    "Sales",
)

# department_id refers to the position in SEED_DEPARTMENTS (1-based).
SEED_EMPLOYEES: tuple[tuple[str, int], ...] = (
    ("Alice", 1),
    ("Bob", 2),
    ("Charlie", 3),
    ("David", 4),
    ("Sonia", 3),
)


async def bootstrap_schema() -> None:
    async with db.transaction() as conn:
        for statement in SCHEMA_STATEMENTS:
            await conn.execute(statement)
        logger.info("bootstrap_tables_created tables=departments,employees")

        await conn.executemany(
            "INSERT INTO departments (name) VALUES ($1)",
            [(name,) for name in SEED_DEPARTMENTS],
        )
        await conn.executemany(
            "INSERT INTO employees (name, department_id) VALUES ($1, $2)",
            list(SEED_EMPLOYEES),
        )
    logger.info(
        "bootstrap_data_seeded departments=%s employees=%s",
        len(SEED_DEPARTMENTS),
        len(SEED_EMPLOYEES),
    )
