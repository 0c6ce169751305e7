"""GitHub REST API dispatcher: implements the RequestDispatcher port."""

from __future__ import annotations

import json
import logging
from types import TracebackType

import httpx

from github_manager.domain.exceptions import GitHubTransportError
from github_manager.domain.params import Params
from github_manager.domain.value_objects import ApiRequest, ApiResponse, HttpMethod
from github_manager.infrastructure.config import GitHubSettings, get_settings

logger = logging.getLogger(__name__)

_ACCEPT = "application/vnd.github+json"


class GitHubDispatcher:
    """Concrete RequestDispatcher backed by a blocking ``httpx.Client``.

    Every call returns its own :class:`ApiResponse`; nothing about the last
    request is kept on the instance, so a dispatcher can be shared by several
    managers. Pass *client* to reuse a configured ``httpx.Client`` (tests
    inject one built on ``httpx.MockTransport``).
    """

    def __init__(
        self,
        settings: GitHubSettings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._timeout = httpx.Timeout(self._settings.request_timeout)
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=self._timeout,
            follow_redirects=False,
        )
        self._headers: dict[str, str] = {
            "Authorization": f"Bearer {self._settings.token.get_secret_value()}",
            "Accept": _ACCEPT,
            "X-GitHub-Api-Version": self._settings.api_version,
            "User-Agent": self._settings.user_agent,
        }

    @property
    def settings(self) -> GitHubSettings:
        return self._settings

    # ── Verb helpers ────────────────────────────────────────────────────

    def send_get(self, path: str, query: Params | None = None) -> ApiResponse:
        """GET *path* (optionally filtered by *query*)."""
        return self.send(ApiRequest(HttpMethod.GET, path, Params.of(query)))

    def send_delete(self, path: str, query: Params | None = None) -> ApiResponse:
        return self.send(ApiRequest(HttpMethod.DELETE, path, Params.of(query)))

    def send_post(self, path: str, body: Params | None = None) -> ApiResponse:
        """POST *body* serialized as a JSON object (``None`` → ``{}``)."""
        return self.send(ApiRequest(HttpMethod.POST, path, body=Params.of(body)))

    def send_put(self, path: str, body: Params | None = None) -> ApiResponse:
        return self.send(ApiRequest(HttpMethod.PUT, path, body=Params.of(body)))

    def send_patch(self, path: str, body: Params | None = None) -> ApiResponse:
        return self.send(ApiRequest(HttpMethod.PATCH, path, body=Params.of(body)))

    def send_raw_post(
        self, path: str, text: str, content_type: str = "text/plain"
    ) -> ApiResponse:
        """POST *text* as-is with its own content type (this call only)."""
        return self.send(
            ApiRequest(HttpMethod.POST, path, content=text, content_type=content_type)
        )

    # ── Core ────────────────────────────────────────────────────────────

    def send(self, request: ApiRequest) -> ApiResponse:
        """Perform one authenticated request and wrap its outcome."""
        url = f"{self._settings.base_url}/{request.target}"
        headers = dict(self._headers)
        kwargs: dict[str, object] = {"timeout": self._timeout}

        if request.body is not None:
            payload = json.dumps(request.body)
            headers["Content-Type"] = "application/json"
            kwargs["content"] = payload
            if self._settings.log_payloads:
                logger.debug("Payload for %s %s: %s", request.method.value, url, payload)
        elif request.content is not None:
            headers["Content-Type"] = request.content_type or "text/plain"
            kwargs["content"] = request.content
            if self._settings.log_payloads:
                logger.debug("Payload for %s %s: %s", request.method.value, url, request.content)

        logger.debug("%s %s", request.method.value, url)
        try:
            resp = self._client.request(request.method.value, url, headers=headers, **kwargs)  # type: ignore[arg-type]
        except httpx.HTTPError as exc:
            logger.debug("Transport failure on %s %s: %s", request.method.value, url, exc)
            raise GitHubTransportError(
                f"Network error on {request.method.value} {url}: {exc}",
                ApiResponse(
                    status_code=None,
                    default_error_message=self._settings.default_error_message,
                ),
            ) from exc

        logger.debug("%s %s -> HTTP %d", request.method.value, url, resp.status_code)
        return ApiResponse(
            status_code=resp.status_code,
            text=resp.text,
            headers={key.lower(): value for key, value in resp.headers.items()},
            default_error_message=self._settings.default_error_message,
        )

    # ── Lifecycle ───────────────────────────────────────────────────────

    def close(self) -> None:
        """Release the underlying HTTP client if this dispatcher created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> GitHubDispatcher:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
