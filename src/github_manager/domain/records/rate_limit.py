"""Rate-limit status records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from github_manager.domain.records.base import GitHubResponse, nested, nested_or_none


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimit:
    limit: int = 0
    remaining: int = 0
    reset: int = 0
    used: int = 0
    resource: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> RateLimit:
        return cls(
            limit=data.get("limit") or 0,
            remaining=data.get("remaining") or 0,
            reset=data.get("reset") or 0,
            used=data.get("used") or 0,
            resource=data.get("resource"),
        )

    @property
    def reset_date(self) -> str:
        """``reset`` (epoch seconds) rendered as ``YYYY-MM-DDTHH:MM:SSZ``."""
        return datetime.fromtimestamp(self.reset, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _optional_limit(data: dict[str, Any], key: str) -> RateLimit | None:
    tree = nested_or_none(data, key)
    return RateLimit.from_json(tree) if tree is not None else None


@dataclass(frozen=True, slots=True, kw_only=True)
class RateResources:
    """Per-resource limits; only ``core`` and ``search`` are always present."""

    core: RateLimit = field(default_factory=RateLimit)
    search: RateLimit = field(default_factory=RateLimit)
    graphql: RateLimit | None = None
    source_import: RateLimit | None = None
    integration_manifest: RateLimit | None = None
    code_scanning_upload: RateLimit | None = None
    actions_runner_registration: RateLimit | None = None
    scim: RateLimit | None = None
    dependency_snapshots: RateLimit | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> RateResources:
        return cls(
            core=RateLimit.from_json(nested(data, "core")),
            search=RateLimit.from_json(nested(data, "search")),
            graphql=_optional_limit(data, "graphql"),
            source_import=_optional_limit(data, "source_import"),
            integration_manifest=_optional_limit(data, "integration_manifest"),
            code_scanning_upload=_optional_limit(data, "code_scanning_upload"),
            actions_runner_registration=_optional_limit(data, "actions_runner_registration"),
            scim=_optional_limit(data, "scim"),
            dependency_snapshots=_optional_limit(data, "dependency_snapshots"),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class RateOverview(GitHubResponse):
    resources: RateResources = field(default_factory=RateResources)
    rate: RateLimit = field(default_factory=RateLimit)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> RateOverview:
        return cls(
            **GitHubResponse.base_fields(data),
            resources=RateResources.from_json(nested(data, "resources")),
            rate=RateLimit.from_json(nested(data, "rate")),
        )
