"""
Async SQLAlchemy engine and session factory.
"""

from __future__ import annotations

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from database.models import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> AsyncEngine:
    """Create the process-wide engine for ``database_url``."""
    if database_url.startswith("sqlite"):
        # In-memory SQLite only exists on a single shared connection.
        return create_async_engine(
            database_url,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(
        database_url,
        echo=False,
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create missing tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Connected to database (%s)", engine.url.get_backend_name())


async def close_db(engine: AsyncEngine) -> None:
    await engine.dispose()
    logger.info("Disconnected from database")


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency function — use in FastAPI `Depends(get_db_session)`."""
    async with request.app.state.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
