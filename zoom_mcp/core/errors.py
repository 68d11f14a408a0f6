from __future__ import annotations


class ZoomMCPError(Exception):
    pass


class UnknownTool(ZoomMCPError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArguments(ZoomMCPError):
    pass


class MissingCredential(ZoomMCPError):
    pass


class RemoteApiError(ZoomMCPError):
    """Non-2xx answer from the Zoom API."""

    def __init__(self, status: int, detail: str) -> None:
        super().__init__(f"Zoom API Error: {status} - {detail}")
        self.status = status
        self.detail = detail


class ConfigError(ZoomMCPError):
    pass
