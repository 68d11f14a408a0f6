from __future__ import annotations
import asyncio
import logging
from typing import Any, Dict, List

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from zoom_mcp.core.config import Settings
from zoom_mcp.tools import Dispatcher

logger = logging.getLogger(__name__)


def create_server(dispatcher: Dispatcher, settings: Settings) -> Server:
    server = Server(settings.service_name, version=settings.version)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(name=s["name"], description=s["description"], inputSchema=s["inputSchema"])
            for s in dispatcher.list_tools()
        ]

    # arguments are checked by the dispatcher, which reports problems as error envelopes
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
        result = await asyncio.to_thread(dispatcher.call, name, arguments or {})
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=c["text"]) for c in result["content"]],
            isError=result["isError"],
        )

    return server


async def run_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Zoom MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
