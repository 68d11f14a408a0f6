from __future__ import annotations
from typing import Any, Dict

from zoom_mcp.core.zoom_api import ZoomRequest, encode_meeting_id, zoom_path
from zoom_mcp.tools.base import PAGE_SIZE, ZoomTool, confirm

MEETING_TYPES = ["scheduled", "live", "upcoming", "upcoming_meetings", "previous_meetings"]

# sent only when the caller supplied them
CREATE_OPTIONAL = ("start_time", "duration", "timezone", "agenda", "password")


def _list_meetings(args: Dict[str, Any]) -> ZoomRequest:
    return ZoomRequest(
        "GET",
        zoom_path("users", "me", "meetings"),
        params={
            "type": args.get("type") or "upcoming",
            "page_size": args.get("page_size") or 30,
        },
    )


def _get_meeting(args: Dict[str, Any]) -> ZoomRequest:
    return ZoomRequest("GET", zoom_path("meetings", encode_meeting_id(args["meeting_id"])))


def _create_meeting(args: Dict[str, Any]) -> ZoomRequest:
    body: Dict[str, Any] = {
        "topic": args["topic"],
        "type": args.get("type") or 2,
    }
    for key in CREATE_OPTIONAL:
        if args.get(key) is not None:
            body[key] = args[key]
    body["settings"] = args.get("settings") or {}
    return ZoomRequest("POST", zoom_path("users", "me", "meetings"), body=body)


def _update_meeting(args: Dict[str, Any]) -> ZoomRequest:
    body = {k: v for k, v in args.items() if k != "meeting_id"}
    return ZoomRequest(
        "PATCH",
        zoom_path("meetings", encode_meeting_id(args["meeting_id"])),
        body=body,
    )


def _delete_meeting(args: Dict[str, Any]) -> ZoomRequest:
    occurrence_id = args.get("occurrence_id")
    return ZoomRequest(
        "DELETE",
        zoom_path("meetings", encode_meeting_id(args["meeting_id"])),
        params={"occurrence_id": occurrence_id} if occurrence_id else None,
    )


MEETING_SETTINGS = {
    "type": "object",
    "description": "Additional meeting settings",
    "properties": {
        "host_video": {"type": "boolean", "description": "Start video when host joins"},
        "participant_video": {"type": "boolean", "description": "Start video when participants join"},
        "join_before_host": {"type": "boolean", "description": "Allow participants to join before host"},
        "mute_upon_entry": {"type": "boolean", "description": "Mute participants upon entry"},
        "waiting_room": {"type": "boolean", "description": "Enable waiting room"},
        "audio": {
            "type": "string",
            "enum": ["both", "telephony", "voip"],
            "description": "Audio options",
        },
    },
}

TOOLS = [
    ZoomTool(
        name="list_meetings",
        description=(
            "List all scheduled meetings for the authenticated user. "
            "Returns upcoming, live, and previous meetings."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "type": {
                    "type": "string",
                    "enum": MEETING_TYPES,
                    "description": "The meeting types: scheduled, live, upcoming, upcoming_meetings, or previous_meetings",
                    "default": "upcoming",
                },
                "page_size": PAGE_SIZE,
            },
        },
        build_request=_list_meetings,
    ),
    ZoomTool(
        name="get_meeting",
        description="Get detailed information about a specific meeting by meeting ID",
        input_schema={
            "type": "object",
            "properties": {
                "meeting_id": {"type": "string", "description": "The meeting ID or meeting UUID"},
            },
            "required": ["meeting_id"],
        },
        build_request=_get_meeting,
    ),
    ZoomTool(
        name="create_meeting",
        description="Create a new Zoom meeting with specified settings",
        input_schema={
            "type": "object",
            "properties": {
                "topic": {"type": "string", "description": "Meeting topic/title"},
                "type": {
                    "type": "number",
                    "description": "Meeting type: 1 (instant), 2 (scheduled), 3 (recurring no fixed time), 8 (recurring fixed time)",
                    "default": 2,
                },
                "start_time": {
                    "type": "string",
                    "description": "Meeting start time in ISO 8601 format (e.g., 2023-03-22T07:32:55Z)",
                },
                "duration": {"type": "number", "description": "Meeting duration in minutes"},
                "timezone": {
                    "type": "string",
                    "description": "Timezone for the meeting (e.g., America/New_York)",
                },
                "agenda": {"type": "string", "description": "Meeting description/agenda"},
                "password": {"type": "string", "description": "Meeting password"},
                "settings": MEETING_SETTINGS,
            },
            "required": ["topic"],
        },
        build_request=_create_meeting,
    ),
    ZoomTool(
        name="update_meeting",
        description="Update an existing meeting's settings",
        input_schema={
            "type": "object",
            "properties": {
                "meeting_id": {"type": "string", "description": "The meeting ID to update"},
                "topic": {"type": "string", "description": "Updated meeting topic"},
                "start_time": {"type": "string", "description": "Updated start time in ISO 8601 format"},
                "duration": {"type": "number", "description": "Updated duration in minutes"},
                "agenda": {"type": "string", "description": "Updated meeting agenda"},
                "settings": {"type": "object", "description": "Updated meeting settings"},
            },
            "required": ["meeting_id"],
        },
        build_request=_update_meeting,
        format_result=confirm("updated"),
    ),
    ZoomTool(
        name="delete_meeting",
        description="Delete a scheduled meeting",
        input_schema={
            "type": "object",
            "properties": {
                "meeting_id": {"type": "string", "description": "The meeting ID to delete"},
                "occurrence_id": {
                    "type": "string",
                    "description": "The meeting occurrence ID for recurring meetings",
                },
            },
            "required": ["meeting_id"],
        },
        build_request=_delete_meeting,
        format_result=confirm("deleted"),
    ),
]
