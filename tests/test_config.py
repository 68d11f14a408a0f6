import pytest

from zoom_mcp.core.config import ZOOM_API_BASE, env, load_settings
from zoom_mcp.core.errors import ConfigError


def test_env_blank_is_default(monkeypatch):
    monkeypatch.setenv("ZOOM_TEST_VALUE", "   ")
    assert env("ZOOM_TEST_VALUE", "fallback") == "fallback"


def test_defaults(monkeypatch):
    for key in ("ZOOM_ACCESS_TOKEN", "ZOOM_API_BASE", "ZOOM_HTTP_TIMEOUT", "MCP_TRANSPORT", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    settings = load_settings()
    assert settings.access_token is None
    assert settings.api_base == ZOOM_API_BASE
    assert settings.http_timeout == 60.0
    assert settings.transport == "stdio"
    assert settings.port == 8000
    assert settings.log_level == "INFO"


def test_overrides(monkeypatch):
    monkeypatch.setenv("ZOOM_ACCESS_TOKEN", " tok ")
    monkeypatch.setenv("ZOOM_API_BASE", "http://localhost:9000/v2/")
    monkeypatch.setenv("ZOOM_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("MCP_TRANSPORT", "SSE")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.access_token == "tok"
    assert settings.api_base == "http://localhost:9000/v2"
    assert settings.http_timeout == 2.5
    assert settings.transport == "sse"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "key, value, message",
    [
        ("MCP_TRANSPORT", "websocket", "MCP_TRANSPORT must be one of stdio, sse"),
        ("PORT", "http", "PORT must be a number"),
        ("PORT", "0", "PORT must be positive"),
        ("ZOOM_HTTP_TIMEOUT", "soon", "ZOOM_HTTP_TIMEOUT must be a number"),
    ],
)
def test_invalid_values_rejected(monkeypatch, key, value, message):
    monkeypatch.setenv(key, value)
    with pytest.raises(ConfigError, match=message):
        load_settings()
