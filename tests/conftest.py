"""
Pytest configuration and fixtures for offline API testing.
"""

import sys
from pathlib import Path
from typing import Any, Callable, List, Optional
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tumblr_api.api.client import TumblrClient


def envelope(payload: Any = None, status: int = 200, msg: str = "OK") -> dict:
    """Build a response document the way the API wraps every reply."""
    return {"meta": {"status": status, "msg": msg}, "response": payload}


class FakeTumblr:
    """
    Stand-in for the remote API behind an httpx.MockTransport.

    Records every request it receives and answers with the reply set by
    reply(), reply_raw() or a custom handler.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=envelope({}))
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def reply(self, payload: Any = None, status: int = 200, msg: str = "OK", http_status: Optional[int] = None):
        document = envelope(payload, status, msg)
        self._handler = lambda request: httpx.Response(http_status or status, json=document)

    def reply_raw(self, status_code: int = 200, content: bytes = b"", headers: Optional[dict] = None):
        self._handler = lambda request: httpx.Response(status_code, content=content, headers=headers)

    def handle(self, handler: Callable[[httpx.Request], httpx.Response]):
        self._handler = handler

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "No request was sent"
        return self.requests[-1]

    def last_query(self) -> dict:
        """Query string of the last request as a flat dict."""
        query = parse_qs(urlsplit(str(self.last.url)).query)
        return {key: values[0] for key, values in query.items()}

    def last_form(self) -> dict:
        """Form-encoded body of the last request as a flat dict."""
        form = parse_qs(self.last.content.decode("utf-8"))
        return {key: values[0] for key, values in form.items()}


@pytest.fixture
def fake_api():
    """A fresh fake API that answers every request with an empty success."""
    return FakeTumblr()


@pytest.fixture
def client(fake_api):
    """A TumblrClient wired to the fake API."""
    return TumblrClient("ck", "cs", "ok", "os", transport=fake_api.transport)
