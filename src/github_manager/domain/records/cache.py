"""GitHub Actions cache records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from github_manager.domain.records.base import GitHubList, GitHubResponse, items, to_timestamp


class CacheSort(str, Enum):
    """Sort keys accepted by ``GET /repos/{owner}/{repo}/actions/caches``."""

    CREATED_AT = "created_at"
    LAST_ACCESSED_AT = "last_accessed_at"
    SIZE_IN_BYTES = "size_in_bytes"


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheUsage(GitHubResponse):
    """Cache usage of an enterprise or an organization."""

    total_active_caches_size_in_bytes: int = 0
    total_active_caches_count: int = 0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> CacheUsage:
        return cls(
            **GitHubResponse.base_fields(data),
            total_active_caches_size_in_bytes=data.get("total_active_caches_size_in_bytes") or 0,
            total_active_caches_count=data.get("total_active_caches_count") or 0,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class RepositoryCacheUsage(GitHubResponse):
    full_name: str | None = None
    active_caches_size_in_bytes: int = 0
    active_caches_count: int = 0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> RepositoryCacheUsage:
        return cls(
            **GitHubResponse.base_fields(data),
            full_name=data.get("full_name"),
            active_caches_size_in_bytes=data.get("active_caches_size_in_bytes") or 0,
            active_caches_count=data.get("active_caches_count") or 0,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class RepositoriesCacheUsagesList(GitHubList):
    repository_cache_usages: tuple[RepositoryCacheUsage, ...] = ()

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> RepositoriesCacheUsagesList:
        return cls(
            **GitHubList.list_fields(data),
            repository_cache_usages=tuple(
                RepositoryCacheUsage.from_json(item)
                for item in items(data, "repository_cache_usages")
            ),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class ActionCache:
    id: int = 0
    ref: str | None = None
    key: str | None = None
    version: str | None = None
    last_accessed_at: str | None = None
    created_at: str | None = None
    size_in_bytes: int = 0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> ActionCache:
        return cls(
            id=data.get("id") or 0,
            ref=data.get("ref"),
            key=data.get("key"),
            version=data.get("version"),
            last_accessed_at=data.get("last_accessed_at"),
            created_at=data.get("created_at"),
            size_in_bytes=data.get("size_in_bytes") or 0,
        )

    @property
    def last_accessed_at_timestamp(self) -> int | None:
        return to_timestamp(self.last_accessed_at)

    @property
    def created_at_timestamp(self) -> int | None:
        return to_timestamp(self.created_at)


@dataclass(frozen=True, slots=True, kw_only=True)
class RepositoryCachesList(GitHubList):
    actions_caches: tuple[ActionCache, ...] = ()

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> RepositoryCachesList:
        return cls(
            **GitHubList.list_fields(data),
            actions_caches=tuple(
                ActionCache.from_json(item) for item in items(data, "actions_caches")
            ),
        )
