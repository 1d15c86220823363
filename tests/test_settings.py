"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from config.settings import Settings


class TestSettings:
    def setup_method(self):
        self.required = {"jwt_secret": "s", "database_url": "sqlite+aiosqlite://"}

    def test_defaults(self):
        settings = Settings(**self.required)
        assert settings.port == 8000
        assert settings.jwt_expiry_seconds == 3600
        assert settings.bcrypt_rounds == 10
        assert settings.cors_origins == ["*"]

    def test_cors_origins_from_env(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["https://a.example", "https://b.example"]')
        settings = Settings(**self.required)
        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_cors_origins_rejects_non_strings(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '[{"origin": 1}]')
        with pytest.raises(ValidationError):
            Settings(**self.required)

    def test_work_factor_floor(self):
        with pytest.raises(ValidationError):
            Settings(bcrypt_rounds=4, **self.required)
