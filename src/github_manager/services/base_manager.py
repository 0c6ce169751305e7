"""Shared plumbing for the endpoint managers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from github_manager.domain.exceptions import GitHubTransportError
from github_manager.domain.ports.request_dispatcher import RequestDispatcher
from github_manager.domain.value_objects import ApiResponse
from github_manager.services.response_formatter import (
    Decoder,
    JsonTree,
    ReturnFormat,
    format_response,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseManager:
    """Base class of every manager.

    A manager only builds paths, query strings and bodies; sending goes
    through the injected :class:`RequestDispatcher` and shaping through the
    response formatter. Managers hold no per-call state, so several of them
    can share one dispatcher.
    """

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    def _format(
        self,
        response: ApiResponse,
        fmt: ReturnFormat,
        decoder: Decoder[T],
    ) -> T | JsonTree | str:
        return format_response(response, fmt, decoder)

    def _succeeds(
        self,
        action: str,
        send: Callable[..., ApiResponse],
        *args: Any,
        expected: int = 204,
    ) -> bool:
        """Run ``send(*args)`` and report whether it answered *expected*.

        Transport failures and unexpected statuses are logged and give
        ``False``.
        """
        try:
            response = send(*args)
        except GitHubTransportError as exc:
            logger.warning("%s failed: %s", action, exc)
            return False
        if response.status_code != expected:
            logger.warning(
                "%s failed with HTTP %s: %s",
                action,
                response.status_code,
                response.error_message(),
            )
            return False
        return True
