"""Markdown rendering endpoints."""

from __future__ import annotations

from enum import Enum

from github_manager.domain.params import Params
from github_manager.services.base_manager import BaseManager


class MarkdownMode(str, Enum):
    MARKDOWN = "markdown"
    GFM = "gfm"


class MarkdownManager(BaseManager):
    """Both endpoints answer with HTML, so results are always text.

    A non-2xx answer raises the matching ``GitHubApiError``.
    """

    def render(
        self,
        text: str,
        mode: MarkdownMode = MarkdownMode.MARKDOWN,
        context: str | None = None,
    ) -> str:
        """Render *text*; *context* (``owner/repo``) only matters in ``gfm`` mode."""
        body = Params(text=text, mode=MarkdownMode(mode).value)
        if context is not None:
            body.add_param("context", context)
        response = self._dispatcher.send_post("markdown", body)
        response.raise_for_status()
        return response.text

    def render_raw(self, text: str) -> str:
        response = self._dispatcher.send_raw_post("markdown/raw", text, "text/plain")
        response.raise_for_status()
        return response.text
