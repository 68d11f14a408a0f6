from __future__ import annotations
from typing import Any, Dict

from zoom_mcp.core.zoom_api import ZoomRequest, encode_segment, zoom_path
from zoom_mcp.tools.base import PAGE_SIZE, ZoomTool


def _list_users(args: Dict[str, Any]) -> ZoomRequest:
    return ZoomRequest(
        "GET",
        zoom_path("users"),
        params={
            "status": args.get("status") or "active",
            "page_size": args.get("page_size") or 30,
        },
    )


def _get_user(args: Dict[str, Any]) -> ZoomRequest:
    # user_id may be an email address; "@" is encoded like any other character
    return ZoomRequest("GET", zoom_path("users", encode_segment(args["user_id"])))


TOOLS = [
    ZoomTool(
        name="list_users",
        description="List users in your Zoom account",
        input_schema={
            "type": "object",
            "properties": {
                "status": {
                    "type": "string",
                    "enum": ["active", "inactive", "pending"],
                    "description": "User status filter",
                    "default": "active",
                },
                "page_size": PAGE_SIZE,
            },
        },
        build_request=_list_users,
    ),
    ZoomTool(
        name="get_user",
        description="Get information about a specific user",
        input_schema={
            "type": "object",
            "properties": {
                "user_id": {"type": "string", "description": "User ID or email address"},
            },
            "required": ["user_id"],
        },
        build_request=_get_user,
    ),
]
