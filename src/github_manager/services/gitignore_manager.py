"""Gitignore template endpoints."""

from __future__ import annotations

from github_manager.domain.records.gitignore import GitignoreTemplate
from github_manager.services.base_manager import BaseManager
from github_manager.services.response_formatter import (
    JsonTree,
    ReturnFormat,
    decode_record,
    decode_strings,
)


class GitignoreManager(BaseManager):
    def list_templates(
        self, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> list[str] | JsonTree | str:
        """Names of every available template (a bare JSON array of strings)."""
        response = self._dispatcher.send_get("gitignore/templates")
        return self._format(response, fmt, decode_strings)

    def get_template(
        self, name: str, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> GitignoreTemplate | JsonTree | str:
        response = self._dispatcher.send_get(f"gitignore/templates/{name}")
        return self._format(response, fmt, decode_record(GitignoreTemplate))
