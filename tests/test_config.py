"""Tests for environment-driven settings."""

from asana_mcp.config import DEFAULT_BASE_URL, Settings, get_settings, reload_settings


def test_defaults():
    settings = Settings.from_env()

    assert settings.access_token is None
    assert settings.workspace_id is None
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == 30.0
    assert settings.log_level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("ASANA_ACCESS_TOKEN", " pat-123 ")
    monkeypatch.setenv("ASANA_WORKSPACE_ID", "ws-1")
    monkeypatch.setenv("ASANA_BASE_URL", "https://asana.test/api/1.0/")
    monkeypatch.setenv("ASANA_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("ASANA_MCP_LOG_LEVEL", "debug")

    settings = reload_settings()

    assert settings.access_token == "pat-123"
    assert settings.workspace_id == "ws-1"
    assert settings.base_url == "https://asana.test/api/1.0"
    assert settings.timeout == 5.0
    assert settings.log_level == "DEBUG"
    assert get_settings() is settings


def test_blank_and_invalid_values(monkeypatch):
    monkeypatch.setenv("ASANA_ACCESS_TOKEN", "   ")
    monkeypatch.setenv("ASANA_TIMEOUT_SECONDS", "soon")

    settings = Settings.from_env()

    assert settings.access_token is None
    assert settings.timeout == 30.0
