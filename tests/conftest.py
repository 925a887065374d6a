"""Shared fixtures for the hobbyfetch test suite."""

import json

import httpx
import pytest

from hobbyfetch.fetcher import Endpoint
from hobbyfetch.log import setup_logging

TEST_URL = "https://api.test/api/challenges/json/rest-get-simple"


@pytest.fixture(autouse=True, scope="session")
def _configure_logging():
    """Configure structlog once so log output never lands on stdout."""
    setup_logging("DEBUG")


@pytest.fixture()
def endpoint() -> Endpoint:
    return Endpoint(url=TEST_URL, user_agent="Chrome")


@pytest.fixture()
def json_transport():
    """Build a MockTransport answering every request with the given JSON payload.

    Requests are recorded on the returned transport's ``requests`` list.
    """
    def build(payload, status_code: int = 200):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(status_code, text=json.dumps(payload),
                                  headers={"Content-Type": "application/json"})

        transport = httpx.MockTransport(handler)
        transport.requests = seen
        return transport

    return build


@pytest.fixture()
def text_transport():
    """Build a MockTransport answering every request with a raw text body."""
    def build(body: str, status_code: int = 200):
        return httpx.MockTransport(lambda request: httpx.Response(status_code, text=body))

    return build


@pytest.fixture()
def unreachable_transport():
    """MockTransport that fails every request the way an unknown host does."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno -2] Name or service not known", request=request)

    return httpx.MockTransport(handler)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers whether its owning client closed it."""

    def __init__(self, handler):
        super().__init__(handler)
        self.closed = False

    def close(self) -> None:
        self.closed = True
        super().close()


@pytest.fixture()
def closing_unreachable_transport() -> RecordingTransport:
    """Unreachable-host transport that records being closed."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    return RecordingTransport(handler)


@pytest.fixture()
def recording_transport():
    """Build a RecordingTransport answering every request with a raw text body."""
    def build(body: str, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, text=body))

    return build
