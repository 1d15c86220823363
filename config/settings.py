"""
Application settings loaded from environment variables (and ``.env``).
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str                                     # HMAC secret for auth tokens
    jwt_expiry_seconds: int = 3600                      # 1 hour
    bcrypt_rounds: int = Field(default=10, ge=10)       # bcrypt work factor

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 8000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: List[str] = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }
