"""
Environment-driven settings.

Values are read on every call so tests (and operators restarting with a new
environment) never see a stale copy.
"""

from __future__ import annotations

import os

DEFAULT_PORT = 3000
DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default


def host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0"


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)


def bootstrap_on_startup() -> bool:
    """
    Drop, recreate and seed the tables before serving (destroys existing data).
    """
    return _env_bool("DB_BOOTSTRAP", True)


def strict_employee_lookup() -> bool:
    """
    When enabled, PUT/DELETE on an unknown employee id answer 404.

    Disabled by default: PUT answers 200 with an empty body and DELETE answers
    204, as existing clients expect.
    """
    return _env_bool("STRICT_EMPLOYEE_LOOKUP", False)


def pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN_SIZE", 1))


def pool_max_size() -> int:
    return max(pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
