# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import logging

import pytest
from pydantic import ValidationError

from app.config import Settings, get_settings


class TestSettings:
    """Tests for the Settings class."""

    def test_defaults(self, monkeypatch):
        for name in ("DATABASE_URL", "ENVIRONMENT", "DEBUG"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.DATABASE_URL == "sqlite:///./example_models.db"
        assert settings.DATABASE_ECHO is False
        assert settings.ENVIRONMENT == "development"
        assert settings.API_PORT == 8000
        assert settings.log_level == logging.INFO

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://user:pw@db/examples")
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("DEBUG", "true")

        settings = Settings(_env_file=None)

        assert settings.DATABASE_URL.startswith("postgresql")
        assert settings.ENVIRONMENT == "production"
        assert settings.log_level == logging.DEBUG

    def test_invalid_port_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, API_PORT=70000)

    def test_invalid_environment_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, ENVIRONMENT="qa")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestCreateApp:
    """Settings are passed explicitly into the application."""

    def test_app_keeps_its_settings(self, app, settings):
        assert app.state.settings is settings

    def test_apps_do_not_share_databases(self, settings):
        from fastapi.testclient import TestClient

        from app.main import create_app

        with TestClient(create_app(settings)) as first, TestClient(create_app(settings)) as second:
            first.post("/entities", json={"name": "A"})

            assert second.get("/entities").json() == []
