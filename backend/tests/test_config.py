"""
Tests for configuration module.
"""

import pytest

from docqa.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("API_KEY", "GEMINI_API_KEY", "GEMINI_MODEL", "ENVIRONMENT", "MAX_FILE_SIZE", "PORT"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Test the Settings configuration class."""

    def test_default_settings(self):
        settings = Settings(_env_file=None)

        assert settings.gemini_api_key is None
        assert settings.gemini_model == "gemini-1.5-flash"
        assert settings.request_timeout == 30.0
        assert settings.max_file_size == 10 * 1024 * 1024
        assert settings.max_question_length == 500
        assert settings.max_content_length == 30000
        assert settings.environment == "production"
        assert not settings.is_development

    def test_gemini_api_key_from_env(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "gemini-secret")

        settings = Settings(_env_file=None)

        assert settings.gemini_api_key.get_secret_value() == "gemini-secret"

    def test_api_key_alias_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("API_KEY", "primary")
        monkeypatch.setenv("GEMINI_API_KEY", "secondary")

        settings = Settings(_env_file=None)

        assert settings.gemini_api_key.get_secret_value() == "primary"

    def test_key_is_not_leaked_in_repr(self):
        settings = Settings(_env_file=None, gemini_api_key="super-secret")

        assert "super-secret" not in repr(settings)

    def test_overrides_from_env(self, monkeypatch):
        monkeypatch.setenv("GEMINI_MODEL", "gemini-2.0-flash")
        monkeypatch.setenv("ENVIRONMENT", "Development")
        monkeypatch.setenv("MAX_FILE_SIZE", "2048")

        settings = Settings(_env_file=None)

        assert settings.gemini_model == "gemini-2.0-flash"
        assert settings.max_file_size == 2048
        assert settings.is_development

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GEMINI_API_KEY=from-file\nPORT=8080\n")

        settings = Settings(_env_file=str(env_file))

        assert settings.gemini_api_key.get_secret_value() == "from-file"
        assert settings.port == 8080
