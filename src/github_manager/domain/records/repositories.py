"""Repository record (the fields other records nest)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from github_manager.domain.records.base import GitHubResponse, nested, strings, to_timestamp
from github_manager.domain.records.users import User


@dataclass(frozen=True, slots=True, kw_only=True)
class Repository(GitHubResponse):
    id: int = 0
    node_id: str | None = None
    name: str | None = None
    full_name: str | None = None
    owner: User = field(default_factory=User)
    private: bool = False
    html_url: str | None = None
    description: str | None = None
    fork: bool = False
    url: str | None = None
    default_branch: str | None = None
    language: str | None = None
    visibility: str | None = None
    topics: tuple[str, ...] = ()
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    archived: bool = False
    created_at: str | None = None
    updated_at: str | None = None
    pushed_at: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Repository:
        return cls(
            **GitHubResponse.base_fields(data),
            id=data.get("id") or 0,
            node_id=data.get("node_id"),
            name=data.get("name"),
            full_name=data.get("full_name"),
            owner=User.from_json(nested(data, "owner")),
            private=bool(data.get("private")),
            html_url=data.get("html_url"),
            description=data.get("description"),
            fork=bool(data.get("fork")),
            url=data.get("url"),
            default_branch=data.get("default_branch"),
            language=data.get("language"),
            visibility=data.get("visibility"),
            topics=strings(data, "topics"),
            stargazers_count=data.get("stargazers_count") or 0,
            watchers_count=data.get("watchers_count") or 0,
            forks_count=data.get("forks_count") or 0,
            open_issues_count=data.get("open_issues_count") or 0,
            archived=bool(data.get("archived")),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            pushed_at=data.get("pushed_at"),
        )

    @property
    def created_at_timestamp(self) -> int | None:
        return to_timestamp(self.created_at)

    @property
    def updated_at_timestamp(self) -> int | None:
        return to_timestamp(self.updated_at)

    @property
    def pushed_at_timestamp(self) -> int | None:
        return to_timestamp(self.pushed_at)
