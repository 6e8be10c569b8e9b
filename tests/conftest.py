"""
Shared pytest fixtures: an in‑memory ``requests.Session`` replacement and a
streaming response double, plus ready to use builder/transport/client
instances wired to them.
"""

import json

import pytest
import requests

from openai_client_lib import OpenAIClient
from openai_client_lib.api_types import EndpointDispatcher
from openai_client_lib.utils.auth import BearerAuth
from openai_client_lib.utils.http import HttpTransport
from openai_client_lib.utils.request_builder import RequestBuilder

BASE_URL = "https://api.test"
API_KEY = "sk-test-123"


class FakeResponse:
    """Stand‑in for ``requests.Response`` (regular or streaming)."""

    def __init__(self, status_code=200, content=b"", chunks=None, fail_with=None):
        self.status_code = status_code
        self._content = content
        self._chunks = list(chunks or [])
        self._fail_with = fail_with
        self.closed = False

    @property
    def content(self):
        if self._chunks and not self._content:
            return b"".join(self._chunks)
        return self._content

    @property
    def text(self):
        return self.content.decode("utf-8", errors="replace")

    def iter_content(self, chunk_size=None):
        for chunk in self._chunks:
            if self.closed:
                return
            yield chunk
        if self._fail_with is not None:
            raise self._fail_with

    def close(self):
        self.closed = True


class FakeSession:
    """
    Records every request and answers from a queue.

    Queue items are :class:`FakeResponse` objects or exceptions to raise.
    """

    def __init__(self):
        self.calls = []
        self.queue = []
        self.closed = False

    def respond(self, item):
        self.queue.append(item)
        return item

    def respond_json(self, payload, status_code=200):
        return self.respond(
            FakeResponse(status_code=status_code, content=json.dumps(payload).encode())
        )

    def request(self, method, url, headers=None, data=None, timeout=None, stream=False):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": dict(headers or {}),
                "data": data,
                "timeout": timeout,
                "stream": stream,
            }
        )
        if not self.queue:
            raise AssertionError(f"Unexpected request {method} {url}")
        item = self.queue.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    @property
    def last_call(self):
        return self.calls[-1]

    @property
    def last_json(self):
        return json.loads(self.last_call["data"])

    def close(self):
        self.closed = True


def sse(*frames):
    """Render frames as a stream body; dicts become ``data: {json}`` lines."""
    lines = []
    for frame in frames:
        if isinstance(frame, dict):
            lines.append("data: " + json.dumps(frame, ensure_ascii=False))
        else:
            lines.append(frame)
    return ("\n\n".join(lines) + "\n\n").encode("utf-8")


def chunk_event(content, index=0):
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion.chunk",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [{"index": index, "delta": {"content": content}}],
    }


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def builder():
    return RequestBuilder(
        EndpointDispatcher.for_source("openai"),
        BASE_URL,
        BearerAuth(API_KEY),
    )


@pytest.fixture
def transport(session):
    return HttpTransport(timeout=5, session=session)


@pytest.fixture
def client(session):
    return OpenAIClient(api_key=API_KEY, base_url=BASE_URL, session=session)


@pytest.fixture
def connection_error():
    return requests.exceptions.ConnectionError("connection refused")
