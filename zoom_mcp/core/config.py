from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from zoom_mcp import __version__
from zoom_mcp.core.errors import ConfigError


def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


ZOOM_API_BASE = "https://api.zoom.us/v2"


@dataclass(frozen=True)
class Settings:
    access_token: Optional[str]
    api_base: str = ZOOM_API_BASE
    http_timeout: float = 60.0
    service_name: str = "zoom-mcp-server"
    version: str = __version__
    transport: str = "stdio"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"


TRANSPORTS = ("stdio", "sse")


def _number(key: str, default: str, cast):
    raw = env(key, default)
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {raw!r}")
    return value


def load_settings() -> Settings:
    """Read the process environment once. A missing token is not an error here."""
    transport = env("MCP_TRANSPORT", "stdio").lower()
    if transport not in TRANSPORTS:
        raise ConfigError(f"MCP_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {transport!r}")

    return Settings(
        access_token=env("ZOOM_ACCESS_TOKEN"),
        api_base=env("ZOOM_API_BASE", ZOOM_API_BASE).rstrip("/"),
        http_timeout=_number("ZOOM_HTTP_TIMEOUT", "60", float),
        service_name=env("SERVICE_NAME", "zoom-mcp-server"),
        version=env("VERSION", __version__),
        transport=transport,
        host=env("HOST", "0.0.0.0"),
        port=_number("PORT", "8000", int),
        log_level=env("LOG_LEVEL", "INFO").upper(),
    )
