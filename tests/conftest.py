"""Shared fixtures: settings and clients backed by ``httpx.MockTransport``."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from github_manager.infrastructure.config import GitHubSettings
from github_manager.infrastructure.http_dispatcher import GitHubDispatcher
from github_manager.manager import GitHubManager

Handler = Callable[[httpx.Request], httpx.Response]

TOKEN = "ghp_test_token"


@pytest.fixture
def settings():
    """Explicit settings that ignore any ``.env`` file on the machine."""
    return GitHubSettings(token=TOKEN, _env_file=None)


@pytest.fixture
def sent():
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(sent):
    def _make(handler: Handler) -> httpx.Client:
        def _record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        return httpx.Client(transport=httpx.MockTransport(_record))

    return _make


@pytest.fixture
def make_dispatcher(settings, make_client):
    def _make(handler: Handler) -> GitHubDispatcher:
        return GitHubDispatcher(settings, client=make_client(handler))

    return _make


@pytest.fixture
def make_gh(settings, make_client):
    def _make(handler: Handler) -> GitHubManager:
        return GitHubManager(settings, client=make_client(handler))

    return _make


def reply(status: int = 200, body: str = "", headers: dict[str, str] | None = None) -> Handler:
    """Handler answering every request with the same response."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, content=body.encode(), headers=headers)

    return _handler
