"""Pytest fixtures for testing the interactive WebDriver client."""

import json

import httpx
import pytest
from unittest.mock import MagicMock, AsyncMock

from interactive_webdriver.config import Settings
from interactive_webdriver.core.client import WebDriverClient

SERVER_URL = "http://grid.test:4444/"


class FakeWireServer:
    """
    In-process stand-in for a WebDriver server.

    Routes are keyed by (method, path). Unrouted requests get a 404, like an
    unknown command on a real server.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def respond(self, method, path, status=200, json_body=None, content=None):
        self.routes[(method, path)] = (status, json_body, content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"status": 9, "value": {"message": "unknown command"}})
        status, json_body, content = route
        if content is not None:
            return httpx.Response(status, content=content)
        return httpx.Response(status, json=json_body)

    @property
    def calls(self):
        """(method, path) of every request received, in order."""
        return [(r.method, r.url.path) for r in self.requests]

    def body(self, index=-1):
        """Decoded JSON body of a received request."""
        return json.loads(self.requests[index].content)


@pytest.fixture
def fake_server():
    return FakeWireServer()


@pytest.fixture
def client(fake_server):
    """WebDriverClient wired to the fake server."""
    return WebDriverClient(SERVER_URL, transport=httpx.MockTransport(fake_server.handler))


@pytest.fixture
def unreachable_client():
    """WebDriverClient whose every request fails to connect."""

    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    return WebDriverClient(SERVER_URL, transport=httpx.MockTransport(refuse))


@pytest.fixture
def mock_ctx(client):
    """Create a mock FastMCP Context backed by the fake server."""
    ctx = MagicMock()

    app_ctx = MagicMock()
    app_ctx.settings = Settings()
    app_ctx.client = client

    ctx.request_context.lifespan_context = app_ctx
    ctx.info = AsyncMock()

    return ctx
