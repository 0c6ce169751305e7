"""Port: request dispatcher, defined by the domain and implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from github_manager.domain.params import Params
from github_manager.domain.value_objects import ApiRequest, ApiResponse


class RequestDispatcher(Protocol):
    """Abstract contract for sending authenticated requests to the GitHub API."""

    def send(self, request: ApiRequest) -> ApiResponse:
        """Execute *request* and return its envelope; never raises on HTTP status."""
        ...

    def send_get(self, path: str, query: Params | None = None) -> ApiResponse:
        ...

    def send_delete(self, path: str, query: Params | None = None) -> ApiResponse:
        ...

    def send_post(self, path: str, body: Params | None = None) -> ApiResponse:
        ...

    def send_put(self, path: str, body: Params | None = None) -> ApiResponse:
        ...

    def send_patch(self, path: str, body: Params | None = None) -> ApiResponse:
        ...

    def send_raw_post(
        self, path: str, text: str, content_type: str = "text/plain"
    ) -> ApiResponse:
        ...
