from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import requests

from zoom_mcp.core.config import ZOOM_API_BASE, Settings
from zoom_mcp.core.errors import MissingCredential, RemoteApiError

logger = logging.getLogger(__name__)

TOKEN_ENV = "ZOOM_ACCESS_TOKEN"


@dataclass(frozen=True)
class ZoomRequest:
    method: str
    path: str
    params: Optional[Dict[str, Any]] = None
    body: Optional[Dict[str, Any]] = None


def encode_segment(value: Any) -> str:
    return quote(str(value), safe="")


def encode_meeting_id(value: Any) -> str:
    """Meeting UUIDs starting with "/" or containing "//" must be double encoded."""
    raw = str(value)
    if raw.startswith("/") or "//" in raw:
        return encode_segment(encode_segment(raw))
    return encode_segment(raw)


def zoom_path(*segments: Any) -> str:
    """Join already-encoded segments into an API path, e.g. zoom_path("users", "me")."""
    return "/" + "/".join(str(s) for s in segments)


def safe_json(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return {"text": resp.text}


def error_detail(resp: requests.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


class ZoomAPI:
    def __init__(
        self,
        token: Optional[str],
        base: str = ZOOM_API_BASE,
        timeout: float = 60.0,
        user_agent: str = "zoom-mcp-server",
        session: Optional[requests.Session] = None,
    ) -> None:
        self.token = token.strip() if token else None
        self.base = base.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ZoomAPI":
        return cls(
            settings.access_token,
            base=settings.api_base,
            timeout=settings.http_timeout,
            user_agent=f"{settings.service_name}/{settings.version}",
        )

    @property
    def headers(self) -> Dict[str, str]:
        if not self.token:
            raise MissingCredential(f"{TOKEN_ENV} environment variable is required")
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        headers = self.headers
        url = f"{self.base}{path}"
        logger.debug("%s %s params=%s", method, url, params)

        # transport errors (requests.RequestException) propagate unchanged
        r = self.session.request(
            method,
            url,
            headers=headers,
            params=params,
            json=json_body,
            timeout=self.timeout,
        )
        if not 200 <= r.status_code < 300:
            raise RemoteApiError(r.status_code, error_detail(r))
        return safe_json(r)

    def execute(self, req: ZoomRequest) -> Any:
        return self.request(req.method, req.path, params=req.params, json_body=req.body)
