from __future__ import annotations
import asyncio
import dataclasses
import logging

import click

from zoom_mcp.core.config import load_settings
from zoom_mcp.core.errors import ConfigError
from zoom_mcp.core.log import configure_logging
from zoom_mcp.core.zoom_api import ZoomAPI
from zoom_mcp.server import create_server, run_stdio
from zoom_mcp.tools import Dispatcher

logger = logging.getLogger(__name__)


@click.command()
@click.option("--transport", "-t", type=click.Choice(["stdio", "sse"]), help="MCP transport (default: $MCP_TRANSPORT or stdio)")
@click.option("--host", help="Bind address for the SSE transport")
@click.option("--port", type=click.IntRange(min=1), help="Port for the SSE transport")
@click.option("--log-level", help="Logging level (default: $LOG_LEVEL or INFO)")
def main(transport, host, port, log_level):
    """Serve the Zoom tools over MCP."""
    overrides = {"transport": transport, "host": host, "port": port, "log_level": log_level}
    try:
        settings = load_settings()
    except ConfigError as e:
        raise click.ClickException(str(e))
    settings = dataclasses.replace(settings, **{k: v for k, v in overrides.items() if v is not None})
    configure_logging(settings.log_level)

    if not settings.access_token:
        logger.warning("ZOOM_ACCESS_TOKEN is not set; every tool call will fail until it is")

    dispatcher = Dispatcher(ZoomAPI.from_settings(settings))
    server = create_server(dispatcher, settings)

    try:
        if settings.transport == "sse":
            import uvicorn

            from zoom_mcp.app import create_app

            logger.info("Zoom MCP Server listening on http://%s:%s/sse", settings.host, settings.port)
            uvicorn.run(create_app(server, settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())
        else:
            asyncio.run(run_stdio(server))
    except Exception:
        logger.exception("Fatal error")
        raise SystemExit(1)
