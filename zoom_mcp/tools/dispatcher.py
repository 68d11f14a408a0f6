from __future__ import annotations
import logging
from typing import Any, Dict, List, Mapping, Optional

from zoom_mcp.core.errors import UnknownTool, ZoomMCPError
from zoom_mcp.core.zoom_api import ZoomAPI
from zoom_mcp.tools.base import ZoomTool
from zoom_mcp.tools.loader import load_tools

logger = logging.getLogger(__name__)


def text_result(text: str, is_error: bool = False) -> Dict[str, Any]:
    return {"content": [{"type": "text", "text": text}], "isError": is_error}


class Dispatcher:
    """Maps a tool invocation onto one Zoom API call and wraps the outcome."""

    def __init__(self, api: ZoomAPI, tools: Optional[Mapping[str, ZoomTool]] = None) -> None:
        self.api = api
        self.tools = dict(tools) if tools is not None else load_tools()

    def list_tools(self) -> List[Dict[str, Any]]:
        return [tool.spec for tool in self.tools.values()]

    def call(self, name: str, args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if args is None:
            args = {}

        try:
            tool = self.tools.get(name)
            if tool is None:
                raise UnknownTool(name)
            tool.check_required(args)
            req = tool.build_request(args)
            data = self.api.execute(req)
            return text_result(tool.format_result(args, data))
        except ZoomMCPError as e:
            logger.warning("Tool %s failed: %s", name, e)
            return text_result(f"Error: {e}", is_error=True)
        except Exception as e:
            logger.exception("Tool %s raised", name)
            return text_result(f"Error: {e}", is_error=True)
