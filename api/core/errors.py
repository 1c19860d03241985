"""
Error policy shared by every endpoint.

Callers only ever see one failure class: a generic 500. Store errors,
constraint violations and malformed input are all logged here (or in the
feature services) and never echoed back.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

INTERNAL_ERROR_DETAIL = "Internal Server Error"

logger = logging.getLogger(__name__)


def internal_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR_DETAIL,
    )


def _internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_DETAIL},
    )


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(
            "request_invalid method=%s path=%s errors=%s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        return _internal_error_response()

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "request_failed method=%s path=%s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return _internal_error_response()
