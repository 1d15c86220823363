"""
Global middleware.

Access log in the shape of morgan's ``dev`` format::

    GET /people 200 3.142 ms - 57
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def register_middleware(app: FastAPI) -> None:
    """Attach any app-level middleware."""

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        millis = (time.perf_counter() - started) * 1000
        logger.log(
            _level_for(response.status_code),
            "%s %s %d %.3f ms - %s",
            request.method,
            request.url.path,
            response.status_code,
            millis,
            response.headers.get("content-length", "-"),
        )
        return response
