"""Unit tests for Settings (pydantic-settings)."""

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.enums import Environment


@pytest.mark.unit
class TestSettings:
    def test_loads_from_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./voiceflex.db")
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings()  # type: ignore[call-arg]

        assert settings.database_url == "sqlite+aiosqlite:///./voiceflex.db"
        assert settings.environment == Environment.PRODUCTION
        assert settings.log_level == "DEBUG"

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        monkeypatch.delenv("API_BASE_URL", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        settings = Settings()  # type: ignore[call-arg]

        assert settings.app_name == "VoiceFlex"
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.api_base_url == "http://localhost:8000"
        assert settings.environment == Environment.DEVELOPMENT

    def test_trailing_slash_stripped_from_base_url(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        monkeypatch.setenv("API_BASE_URL", "https://api.voiceflex.local/")

        assert Settings().api_base_url == "https://api.voiceflex.local"  # type: ignore[call-arg]

    def test_database_url_is_required(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ValidationError):
            Settings()  # type: ignore[call-arg]


@pytest.mark.unit
@pytest.mark.parametrize(
    ("environment", "expected"),
    [
        (Environment.DEVELOPMENT, False),
        (Environment.TESTING, True),
        (Environment.CI, True),
        (Environment.PRODUCTION, True),
    ],
)
def test_json_logs_everywhere_but_development(environment, expected):
    assert environment.uses_json_logs is expected
