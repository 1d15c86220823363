"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.  Only the first 72 bytes of a
password are significant, on every bcrypt release.
"""

from __future__ import annotations

import bcrypt

BCRYPT_MAX_BYTES = 72


def _secret(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password with bcrypt (fresh salt on every call)."""
        return bcrypt.hashpw(_secret(password), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(_secret(password), password_hash.encode())
        except (ValueError, TypeError):
            return False
