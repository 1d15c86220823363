"""
People API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.middleware import register_middleware
from api.routes import router as api_router
from auth.jwt import TokenService
from auth.password import PasswordHasher
from auth.routes import router as auth_router
from config.settings import Settings
from database.session import build_engine, build_session_factory, close_db, init_db

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("sqlalchemy.engine", "aiosqlite", "asyncio"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def create_app(settings: Settings) -> FastAPI:
    engine = build_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db(engine)
        logger.info("Application ready to accept requests.")
        yield
        await close_db(engine)

    app = FastAPI(
        title="People API",
        version="1.0.0",
        description="Authenticated, per-user people records.",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_service = TokenService(
        settings.jwt_secret, ttl_seconds=settings.jwt_expiry_seconds,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router)
    app.include_router(api_router)

    return app


def app_factory() -> FastAPI:
    """Build the app from the environment (``uvicorn main:app_factory --factory``)."""
    settings = Settings()
    configure_logging(settings.debug)
    return create_app(settings)


if __name__ == "__main__":
    settings = Settings()
    configure_logging(settings.debug)
    logger.info("Listening on port %d", settings.port)
    uvicorn.run(
        "main:app_factory",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
