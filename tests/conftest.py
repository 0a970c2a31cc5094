"""Pytest fixtures: a TebexHeadless wired to an in-memory httpx transport."""

import json

import httpx
import pytest

from tebex_headless.clients.headless import TebexHeadless


class FakeTebex:
    """Records every request and answers with queued responses."""

    def __init__(self):
        self.requests = []
        self._responses = []

    def reply(self, payload, status_code=200):
        if payload is None:
            self._responses.append(httpx.Response(status_code))
        else:
            self._responses.append(httpx.Response(status_code, json=payload))
        return self

    def reply_text(self, text, status_code=200):
        self._responses.append(httpx.Response(status_code, text=text))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={"data": {}})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake():
    return FakeTebex()


@pytest.fixture
def headless(fake):
    """Unauthenticated client for webstore 'acc1'."""
    return TebexHeadless(webstore_identifier="acc1", http_client=fake.http_client())


@pytest.fixture
def private_headless(fake):
    return TebexHeadless(webstore_identifier="acc1", private_key="secret", http_client=fake.http_client())
