"""Общие фикстуры: поддельный management API на httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
import pytest_asyncio

from mqx_apiclient import (
    AsyncConsoleApiClient,
    ConsoleClientSettings,
    SyncConsoleApiClient,
)
from mqx_logger import clear_all_context

BASE_URL = "http://mqx.test"


class FakeBackend:
    """Отвечает заранее заданными конвертами и запоминает запросы."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._replies: dict[tuple[str, str], dict[str, Any]] = {}
        self._errors: dict[tuple[str, str], Exception] = {}

    def reply(
        self,
        method: str,
        path: str,
        payload: Any = None,
        status_code: int = 200,
        text: str | None = None,
        raw: bytes | None = None,
    ) -> None:
        if raw is not None:
            content = {"content": raw}
        elif text is not None:
            content = {"text": text}
        else:
            content = {"json": {} if payload is None else payload}
        self._replies[(method, path)] = {"status_code": status_code, **content}

    def fail(self, method: str, path: str, error: Exception) -> None:
        self._errors[(method, path)] = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.raw_path.decode().split("?")[0])
        if key in self._errors:
            raise self._errors[key]
        if key not in self._replies:
            return httpx.Response(404, text="no route")
        return httpx.Response(**self._replies[key])

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def _clean_log_context():
    clear_all_context()
    yield
    clear_all_context()


@pytest.fixture
def settings() -> ConsoleClientSettings:
    return ConsoleClientSettings(BASE_URL=BASE_URL, SERVICE_VERSION="9.9.9")


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def sync_api(backend, settings):
    client = httpx.Client(
        base_url=BASE_URL, transport=httpx.MockTransport(backend)
    )
    api = SyncConsoleApiClient(settings=settings, client=client)
    yield api
    client.close()


@pytest_asyncio.fixture
async def async_api(backend, settings):
    client = httpx.AsyncClient(
        base_url=BASE_URL, transport=httpx.MockTransport(backend)
    )
    yield AsyncConsoleApiClient(settings=settings, client=client)
    await client.aclose()
