"""
FastAPI dependencies for authentication.

Provides ``db_session`` and ``get_current_username`` dependencies that
are used across all protected routes.
"""

from __future__ import annotations

import logging
from typing import AsyncGenerator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import Forbidden, Unauthenticated
from auth.jwt import InvalidToken, TokenService
from auth.password import PasswordHasher
from database.session import get_db_session

logger = logging.getLogger(__name__)


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2 or parts[0] != "Bearer" or not parts[1]:
        return None
    return parts[1]


async def get_current_username(
    request: Request,
    authorization: Optional[str] = Header(None, alias="Authorization"),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """
    Extract and verify the Bearer token, returning the authenticated
    username.  The username is also stored on ``request.state``.

    No token at all is a 401; a token that fails verification is a 403.
    """
    token = _bearer_token(authorization)
    if token is None:
        raise Unauthenticated()

    try:
        username = tokens.verify(token)
    except InvalidToken as exc:
        logger.debug("Rejected token on %s: %s", request.url.path, exc)
        raise Forbidden()

    request.state.username = username
    return username
