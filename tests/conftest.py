"""Shared fixtures: configuration, a recording logger and a fake WordPress."""

from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from app import create_app
from core.config import Config, load_config

WP_ENV = {
    "WP_API_URL": "https://blog.example.com/",
    "WP_API_USERNAME": "editor",
    "WP_API_PASSWORD": "abcd efgh ijkl",
}


class RecordingLogger:
    """RequestLogger that keeps every call for assertions."""

    def __init__(self) -> None:
        self.proxied: list[tuple[str, str]] = []
        self.rpc: list[tuple[str | None, Any, str | None]] = []
        self.errors: list[tuple[str, int, str]] = []

    def log_proxy(self, method: str, url: str) -> None:
        self.proxied.append((method, url))

    def log_rpc(self, method: str | None, request_id: Any, *, tool: str | None = None) -> None:
        self.rpc.append((method, request_id, tool))

    def log_error(self, route: str, status: int, message: str) -> None:
        self.errors.append((route, status, message))


class FakeWordPress:
    """httpx handler that records requests and replies with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json={"ok": True})
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def wordpress() -> FakeWordPress:
    return FakeWordPress()


@pytest.fixture
def make_client(
    logger: RecordingLogger, wordpress: FakeWordPress
) -> Iterator[Callable[..., TestClient]]:
    """Build a TestClient for a given environment; lifespan runs on entry."""
    clients: list[TestClient] = []

    def factory(env: dict[str, str] | None = None) -> TestClient:
        config: Config = load_config(WP_ENV if env is None else env)
        app = create_app(config, logger, transport=httpx.MockTransport(wordpress))
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client: Callable[..., TestClient]) -> TestClient:
    return make_client()
