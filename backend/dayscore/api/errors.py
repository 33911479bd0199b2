"""Translate every error raised while serving a request into ``{"error": message}`` bodies."""
from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from dayscore.core.errors import AuthError, DayScoreError, StoreError

LOGGER = logging.getLogger(__name__)

_LOCATION_ROOTS = {"body", "query", "path", "header"}


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    if not errors:
        return "Bad Request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in _LOCATION_ROOTS]
    msg = first.get("msg", "Invalid value")
    return f"{'.'.join(loc)}: {msg}" if loc else msg


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DayScoreError)
    async def handle_domain_error(request: Request, exc: DayScoreError) -> JSONResponse:
        if isinstance(exc, StoreError):
            LOGGER.error("❌ %s %s -> %s", request.method, request.url.path, exc.message, exc_info=exc)
        elif isinstance(exc, AuthError):
            LOGGER.warning("🔒 %s %s -> %s", request.method, request.url.path, exc.message)
        else:
            LOGGER.warning("⚠️ %s %s -> %s", request.method, request.url.path, exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = format_validation_errors(exc.errors())
        LOGGER.warning("⚠️ %s %s -> %s", request.method, request.url.path, message)
        return error_response(400, message)

    @app.middleware("http")
    async def handle_unexpected(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:  # noqa: BLE001
            LOGGER.error("❌ %s %s -> unhandled %s", request.method, request.url.path, exc.__class__.__name__, exc_info=exc)
            return error_response(400, str(exc) or "Bad Request")
