"""Tools reading data of meetings that already took place."""
from __future__ import annotations
from typing import Any, Dict

from zoom_mcp.core.zoom_api import ZoomRequest, encode_meeting_id, zoom_path
from zoom_mcp.tools.base import PAGE_SIZE, ZoomTool


def _participants(args: Dict[str, Any]) -> ZoomRequest:
    return ZoomRequest(
        "GET",
        zoom_path("past_meetings", encode_meeting_id(args["meeting_id"]), "participants"),
        params={"page_size": args.get("page_size") or 30},
    )


def _recordings(args: Dict[str, Any]) -> ZoomRequest:
    return ZoomRequest(
        "GET",
        zoom_path("meetings", encode_meeting_id(args["meeting_id"]), "recordings"),
    )


TOOLS = [
    ZoomTool(
        name="get_meeting_participants",
        description="Get list of participants for a past meeting",
        input_schema={
            "type": "object",
            "properties": {
                "meeting_id": {"type": "string", "description": "The meeting ID or UUID"},
                "page_size": PAGE_SIZE,
            },
            "required": ["meeting_id"],
        },
        build_request=_participants,
    ),
    ZoomTool(
        name="get_meeting_recordings",
        description="Get cloud recordings for a meeting",
        input_schema={
            "type": "object",
            "properties": {
                "meeting_id": {"type": "string", "description": "The meeting ID or UUID"},
            },
            "required": ["meeting_id"],
        },
        build_request=_recordings,
    ),
]
