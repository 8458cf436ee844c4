"""Shared fixtures: settings pointed at a fake host and a recording transport."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from adapters.http_client import ApiClient
from core.config import AppSettings

TEST_API_URL = "http://api.test/api"


class RecordingSink:
    """Diagnostic sink that keeps every event for later assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def emit(self, event: str, **fields: Any) -> None:
        self.events.append((event, fields))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


class Recorder:
    """Wraps a handler in an `httpx.MockTransport` and keeps the requests it saw."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None).model_copy(update={"api_url": TEST_API_URL})


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_client(settings: AppSettings, sink: RecordingSink):
    """Build an `ApiClient` whose transport answers with `handler`."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[ApiClient, Recorder]:
        recorder = Recorder(handler)
        client = ApiClient(settings, transport=recorder.transport, diagnostics=sink)
        return client, recorder

    return _make
