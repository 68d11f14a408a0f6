from __future__ import annotations
import copy
import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Tuple

from zoom_mcp.core.errors import InvalidArguments
from zoom_mcp.core.zoom_api import ZoomRequest

RequestBuilder = Callable[[Dict[str, Any]], ZoomRequest]
ResultFormatter = Callable[[Dict[str, Any], Any], str]

PAGE_SIZE = {
    "type": "number",
    "description": "Number of records per page (max 300)",
    "default": 30,
}


def format_json(args: Dict[str, Any], data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def confirm(action: str) -> ResultFormatter:
    def _format(args: Dict[str, Any], data: Any) -> str:
        return f"Meeting {args['meeting_id']} {action} successfully"

    return _format


@dataclass(frozen=True)
class ZoomTool:
    name: str
    description: str
    input_schema: Dict[str, Any]
    build_request: RequestBuilder
    format_result: ResultFormatter = format_json
    required: Tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "required", tuple(self.input_schema.get("required", ())))

    @property
    def spec(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }

    def check_required(self, args: Dict[str, Any]) -> None:
        for key in self.required:
            if args.get(key) in (None, ""):
                raise InvalidArguments(f"Missing required input: {key}")
