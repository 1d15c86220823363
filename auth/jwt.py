"""
JWT-style token creation and verification.

Tokens are base64url-encoded JSON payloads signed with HMAC-SHA256::

    <base64url(payload)>.<hex signature>

The payload carries the subject (``sub``), issue time (``iat``) and expiry
(``exp``), both in whole seconds.  Verification is stateless.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Callable


class InvalidToken(Exception):
    """Token is malformed, tampered with, or expired."""


class TokenService:
    def __init__(
        self,
        secret: str,
        ttl_seconds: int = 3600,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._secret = secret.encode()
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def _sign(self, raw: bytes) -> str:
        return hmac.new(self._secret, raw, hashlib.sha256).hexdigest()

    def issue(self, subject: str) -> str:
        """Create a signed token for ``subject`` expiring after the TTL."""
        now = int(self._clock())
        payload = {"sub": subject, "iat": now, "exp": now + self.ttl_seconds}
        raw = json.dumps(payload, separators=(",", ":")).encode()
        return urlsafe_b64encode(raw).decode() + "." + self._sign(raw)

    def verify(self, token: str) -> str:
        """
        Verify token and return its subject.

        Raises ``InvalidToken`` on bad format, bad signature or expiry.
        """
        try:
            encoded, sig = token.split(".", 1)
            raw = urlsafe_b64decode(encoded.encode())
        except (ValueError, AttributeError) as exc:
            raise InvalidToken("bad format") from exc

        try:
            valid = hmac.compare_digest(sig, self._sign(raw))
        except TypeError as exc:
            # non-ASCII signature text
            raise InvalidToken("bad format") from exc
        if not valid:
            raise InvalidToken("bad signature")

        try:
            payload = json.loads(raw)
            subject = payload["sub"]
            expires_at = float(payload["exp"])
        except (ValueError, KeyError, TypeError) as exc:
            raise InvalidToken("bad payload") from exc

        if self._clock() >= expires_at:
            raise InvalidToken("token expired")
        return subject
