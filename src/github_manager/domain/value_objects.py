"""Value objects: the per-call request descriptor and response envelope."""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, TextIO

from github_manager.domain.exceptions import (
    GitHubApiError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    UnauthorizedError,
    ValidationFailedError,
)
from github_manager.domain.params import Params

DEFAULT_ERROR_MESSAGE = "Error is not in api request format"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def has_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)


@dataclass(frozen=True, slots=True)
class ApiRequest:
    """One request against the API, relative to the configured base URL.

    ``path`` is built by plain concatenation of segment literals and caller
    identifiers, e.g. ``"repos/" + owner + "/" + repo + "/hooks"``.
    """

    method: HttpMethod
    path: str
    query: Params = field(default_factory=Params)
    body: Params | None = None
    content: str | None = None
    content_type: str | None = None

    def __post_init__(self) -> None:
        if not self.path.strip("/"):
            raise ValueError("An API request needs a non-empty path.")
        if self.body is not None and self.content is not None:
            raise ValueError("A request carries either a JSON body or raw content, not both.")
        if (self.body is not None or self.content is not None) and not self.method.has_body:
            raise ValueError(f"{self.method.value} requests do not carry a body.")

    @property
    def target(self) -> str:
        """Path plus rendered query string, without a leading slash."""
        return self.path.lstrip("/") + Params.of(self.query).create_query_string()


@dataclass(frozen=True, slots=True)
class ApiResponse:
    """Outcome of one completed (or failed) request.

    ``status_code`` is ``None`` when the request never got an HTTP answer
    (DNS, connection or timeout failure).
    """

    status_code: int | None
    text: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    default_error_message: str = DEFAULT_ERROR_MESSAGE

    @property
    def ok(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300

    def header(self, name: str, default: str | None = None) -> str | None:
        return self.headers.get(name.lower(), default)

    # ── Error accessors ─────────────────────────────────────────────────

    def _structured_error(self) -> dict[str, Any] | None:
        if not self.text:
            return None
        try:
            payload = json.loads(self.text)
        except ValueError:
            return None
        return payload if isinstance(payload, dict) else None

    def error_response(self) -> str:
        """Error body text, or the default error message when unstructured."""
        if self._structured_error() is None:
            return self.default_error_message
        return self.text

    def json_error_response(self) -> dict[str, Any] | str:
        """Error body as a JSON object, or the default error message when unstructured."""
        error = self._structured_error()
        if error is None:
            return self.default_error_message
        return error

    def error_message(self) -> str:
        """The ``message`` field of the error body (default error message otherwise)."""
        error = self._structured_error()
        if error is None or not error.get("message"):
            return self.default_error_message
        return str(error["message"])

    def print_error_response(self, file: TextIO | None = None) -> None:
        print(self.error_response(), file=file or sys.stderr)

    def print_json_error_response(self, file: TextIO | None = None) -> None:
        error = self.json_error_response()
        if isinstance(error, dict):
            error = json.dumps(error, indent=4)
        print(error, file=file or sys.stderr)

    # ── Status translation ──────────────────────────────────────────────

    def raise_for_status(self) -> None:
        """Raise the matching :class:`GitHubApiError` subclass when not ``ok``."""
        if self.ok:
            return

        error = self._structured_error() or {}
        message = self.error_message()
        documentation_url = error.get("documentation_url")
        code = self.status_code

        if code == 401:
            raise UnauthorizedError(message, self, documentation_url)

        if code == 403:
            if self.header("x-ratelimit-remaining") == "0":
                raise RateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {self._rate_limit_reset()}.",
                    self,
                    documentation_url,
                )
            raise PermissionDeniedError(message, self, documentation_url)

        if code == 404:
            raise NotFoundError(message, self, documentation_url)

        if code == 422:
            raise ValidationFailedError(message, self, documentation_url)

        if code == 429:
            raise RateLimitError(
                f"GitHub API rate limit exceeded (HTTP 429). Resets at {self._rate_limit_reset()}.",
                self,
                documentation_url,
            )

        raise GitHubApiError(f"GitHub API returned HTTP {code}: {message}", self, documentation_url)

    def _rate_limit_reset(self) -> str:
        reset_raw = self.header("x-ratelimit-reset", "") or ""
        try:
            return datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                "%Y-%m-%d %H:%M:%S UTC"
            )
        except (ValueError, OSError):
            return reset_raw or "unknown"
