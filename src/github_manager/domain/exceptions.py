"""Domain exception hierarchy.

Transport failures, HTTP-level API errors and undecodable payloads each get
their own branch so callers can catch exactly what they can handle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from github_manager.domain.value_objects import ApiResponse


class GitHubManagerError(Exception):
    """Base exception for the entire library."""


# ── Configuration ───────────────────────────────────────────────────────────


class ConfigurationError(GitHubManagerError):
    """The client configuration is missing or invalid (e.g. no token)."""


# ── Transport ───────────────────────────────────────────────────────────────


class GitHubTransportError(GitHubManagerError):
    """DNS, connection or timeout failure before any HTTP status was received.

    ``response`` is an envelope with ``status_code=None`` and an empty body, so
    its error accessors fall back to the configured default error message.
    """

    def __init__(self, message: str, response: ApiResponse) -> None:
        super().__init__(message)
        self.response = response


# ── GitHub API errors ───────────────────────────────────────────────────────


class GitHubApiError(GitHubManagerError):
    """A non-2xx response reached a typed decode or ``raise_for_status()``."""

    def __init__(
        self,
        message: str,
        response: ApiResponse,
        documentation_url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.response = response
        self.documentation_url = documentation_url

    @property
    def status_code(self) -> int | None:
        return self.response.status_code


class UnauthorizedError(GitHubApiError):
    """Bad or missing credentials (401)."""


class PermissionDeniedError(GitHubApiError):
    """The token lacks the permission for this resource (403)."""


class NotFoundError(GitHubApiError):
    """The resource does not exist or is not visible to the token (404)."""


class ValidationFailedError(GitHubApiError):
    """The request body was rejected by the API (422)."""


class RateLimitError(GitHubApiError):
    """API rate limit exceeded (429 / 403 with rate-limit header)."""


# ── Payload errors ──────────────────────────────────────────────────────────


class MalformedPayloadError(GitHubManagerError):
    """The response body could not be decoded into the requested shape."""
