"""
Logging setup and per-request access logging.
"""

from __future__ import annotations

import logging
import time

from fastapi import Request

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

access_logger = logging.getLogger("access")


def setup_logging(level: str = "INFO") -> None:
    """
    Console logging on the root logger. Safe to call more than once.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Prevent duplicate handlers
    if root.handlers:
        return

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(console)


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        ms = int((time.perf_counter() - start) * 1000)
        # Traceback is logged once, by the error handler in core/errors.py.
        access_logger.error("%s %s -> unhandled error (%dms)", request.method, request.url.path, ms)
        raise
    ms = int((time.perf_counter() - start) * 1000)
    access_logger.info("%s %s -> %s (%dms)", request.method, request.url.path, response.status_code, ms)
    return response
