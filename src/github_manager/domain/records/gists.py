"""Gist records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from github_manager.domain.records.base import (
    GitHubResponse,
    nested,
    nested_or_none,
    round_value,
    to_timestamp,
)
from github_manager.domain.records.users import User


@dataclass(frozen=True, slots=True, kw_only=True)
class GistFile:
    filename: str | None = None
    type: str | None = None
    language: str | None = None
    raw_url: str | None = None
    size: float = 0.0
    truncated: bool = False
    content: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> GistFile:
        return cls(
            filename=data.get("filename"),
            type=data.get("type"),
            language=data.get("language"),
            raw_url=data.get("raw_url"),
            size=float(data.get("size") or 0),
            truncated=bool(data.get("truncated")),
            content=data.get("content"),
        )

    def rounded_size(self, decimals: int = 2) -> float:
        return round_value(self.size, decimals)


@dataclass(frozen=True, slots=True, kw_only=True)
class Gist(GitHubResponse):
    """A gist.

    ``files`` holds the (file name, :class:`GistFile`) pairs in upstream order;
    :attr:`file_map` gives them as a mapping.
    """

    id: str | None = None
    node_id: str | None = None
    url: str | None = None
    forks_url: str | None = None
    commits_url: str | None = None
    git_pull_url: str | None = None
    git_push_url: str | None = None
    html_url: str | None = None
    files: tuple[tuple[str, GistFile], ...] = ()
    public: bool = False
    created_at: str | None = None
    updated_at: str | None = None
    description: str | None = None
    comments: int = 0
    comments_url: str | None = None
    owner: User | None = None
    truncated: bool = False

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Gist:
        owner = nested_or_none(data, "owner")
        return cls(
            **GitHubResponse.base_fields(data),
            id=data.get("id"),
            node_id=data.get("node_id"),
            url=data.get("url"),
            forks_url=data.get("forks_url"),
            commits_url=data.get("commits_url"),
            git_pull_url=data.get("git_pull_url"),
            git_push_url=data.get("git_push_url"),
            html_url=data.get("html_url"),
            files=tuple(
                (name, GistFile.from_json(tree if isinstance(tree, dict) else {}))
                for name, tree in nested(data, "files").items()
            ),
            public=bool(data.get("public")),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            description=data.get("description"),
            comments=data.get("comments") or 0,
            comments_url=data.get("comments_url"),
            owner=User.from_json(owner) if owner is not None else None,
            truncated=bool(data.get("truncated")),
        )

    @property
    def file_map(self) -> dict[str, GistFile]:
        return dict(self.files)

    @property
    def created_at_timestamp(self) -> int | None:
        return to_timestamp(self.created_at)

    @property
    def updated_at_timestamp(self) -> int | None:
        return to_timestamp(self.updated_at)
