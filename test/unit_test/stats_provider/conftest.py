from __future__ import annotations

from typing import Callable, Dict, List

import httpx
import pytest

from resource_hub.core.database.entities import Project
from resource_hub.stats_provider import CachingHttpClient


class RecordingTransport(httpx.MockTransport):
    """MockTransport that serves canned responses by URL and records every request."""

    def __init__(self, routes: Dict[str, httpx.Response]) -> None:
        self.routes = routes
        self.requests: List[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.routes.get(str(request.url))
        if response is None:
            return httpx.Response(404, json={"error": "not found"})
        return response


@pytest.fixture
def make_http() -> Callable[..., tuple[CachingHttpClient, RecordingTransport]]:
    """Build a CachingHttpClient whose requests are answered by a RecordingTransport."""

    def _make(routes: Dict[str, httpx.Response], *, name: str = "test", ttl: float = 3600.0):
        transport = RecordingTransport(routes)
        http = CachingHttpClient(name, ttl=ttl, client=httpx.Client(transport=transport))
        return http, transport

    return _make


@pytest.fixture
def make_project() -> Callable[..., Project]:
    """Build an unsaved project whose metadata links are given as keyword arguments."""

    def _make(**links: str) -> Project:
        return Project(slug="demo", details={"links": [{"id": key, "url": url} for key, url in links.items()]})

    return _make
