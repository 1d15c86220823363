"""
Auth API routes — signup, login.

Route prefix: none (``/signup``, ``/login``)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import BadRequest, InvalidCredentials
from auth.dependencies import db_session, get_password_hasher, get_token_service
from auth.jwt import TokenService
from auth.password import PasswordHasher
from database.helpers import create_user, find_user_by_username

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────


class CredentialsRequest(BaseModel):
    username: str
    password: str


class SignupResponse(BaseModel):
    id: str
    username: str


class LoginResponse(BaseModel):
    token: str


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/signup", response_model=SignupResponse)
async def signup(
    req: CredentialsRequest,
    session: AsyncSession = Depends(db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> Dict[str, Any]:
    """Register a new user."""
    try:
        password_hash = await asyncio.to_thread(hasher.hash, req.password)
    except ValueError as exc:
        raise BadRequest(str(exc))

    user = await create_user(session, req.username, password_hash)
    logger.info("Signed up user %s (%s)", user.username, user.id)
    return {"id": str(user.id), "username": user.username}


@router.post("/login", response_model=LoginResponse)
async def login(
    req: CredentialsRequest,
    session: AsyncSession = Depends(db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, Any]:
    """Login with username + password."""
    user = await find_user_by_username(session, req.username)

    if user is None or not await asyncio.to_thread(hasher.verify, req.password, user.password_hash):
        logger.info("Failed login for %s", req.username)
        raise InvalidCredentials()

    token = tokens.issue(user.username)
    logger.info("Login: %s (%s)", user.username, user.id)
    return {"token": token}
