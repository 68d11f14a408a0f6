"""MCP server exposing Zoom meeting and user operations as tools."""

__version__ = "1.0.0"
