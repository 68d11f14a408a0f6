import json

import pytest

from zoom_mcp.core.zoom_api import ZoomAPI
from zoom_mcp.tools import Dispatcher


class FakeResponse:
    def __init__(self, status=200, data=None, text=None):
        self.status_code = status
        if text is not None:
            self.text = text
        elif data is not None:
            self.text = json.dumps(data)
        else:
            self.text = ""
        self.content = self.text.encode()

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Records every request and answers with a queued FakeResponse."""

    def __init__(self, response=None):
        self.response = response or FakeResponse(200, {})
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def api(session):
    return ZoomAPI("test-token", session=session)


@pytest.fixture
def dispatcher(api):
    return Dispatcher(api)
