"""
Error taxonomy and the handlers that render it as JSON.

Every ``ApiError`` becomes ``{key: message}`` with its own status code.
Body validation failures and stray storage errors are reported as 400.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    key = "error"
    default_message = "Bad Request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(ApiError):
    pass


class DuplicateKey(ApiError):
    default_message = "Duplicate key"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"


class InvalidCredentials(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid Credentials"


class Unauthenticated(ApiError):
    """No bearer token on the request."""

    status_code = status.HTTP_401_UNAUTHORIZED
    key = "message"
    default_message = "unauthorized"


class Forbidden(ApiError):
    """A bearer token was sent but did not verify."""

    status_code = status.HTTP_403_FORBIDDEN
    key = "message"
    default_message = "Forbidden"


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content={exc.key: exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": errors})

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})
