from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from mcp.server.lowlevel import Server
from mcp.server.sse import SseServerTransport

from zoom_mcp.core.config import Settings


def utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def create_app(server: Server, settings: Settings) -> FastAPI:
    """FastAPI app with health routes and the MCP server on /sse."""
    app = FastAPI(title=settings.service_name, version=settings.version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root() -> Dict[str, Any]:
        return {
            "ok": True,
            "message": "Zoom MCP Server alive",
            "service": settings.service_name,
            "version": settings.version,
            "ts": utc_iso(),
            "token_configured": bool(settings.access_token),
            "mcp_sse": "/sse",
        }

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"ok": True, "ts": utc_iso(), "service": settings.service_name, "version": settings.version}

    sse = SseServerTransport("/messages/")

    async def handle_sse(request: Request) -> Response:
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
        return Response()

    app.add_route("/sse", handle_sse, methods=["GET"])
    app.mount("/messages/", app=sse.handle_post_message)

    return app
