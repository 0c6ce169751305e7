"""Gitignore template record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from github_manager.domain.records.base import GitHubResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class GitignoreTemplate(GitHubResponse):
    name: str | None = None
    source: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> GitignoreTemplate:
        return cls(
            **GitHubResponse.base_fields(data),
            name=data.get("name"),
            source=data.get("source"),
        )
