"""GitHub Actions artifact records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from github_manager.domain.records.base import (
    GitHubList,
    GitHubResponse,
    items,
    nested,
    to_timestamp,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ArtifactWorkflowRun:
    """The workflow run that produced an artifact."""

    id: int = 0
    repository_id: int = 0
    head_repository_id: int = 0
    head_branch: str | None = None
    head_sha: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> ArtifactWorkflowRun:
        return cls(
            id=data.get("id") or 0,
            repository_id=data.get("repository_id") or 0,
            head_repository_id=data.get("head_repository_id") or 0,
            head_branch=data.get("head_branch"),
            head_sha=data.get("head_sha"),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Artifact(GitHubResponse):
    id: int = 0
    node_id: str | None = None
    name: str | None = None
    size_in_bytes: int = 0
    url: str | None = None
    archive_download_url: str | None = None
    expired: bool = False
    created_at: str | None = None
    expires_at: str | None = None
    updated_at: str | None = None
    workflow_run: ArtifactWorkflowRun = field(default_factory=ArtifactWorkflowRun)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Artifact:
        return cls(
            **GitHubResponse.base_fields(data),
            id=data.get("id") or 0,
            node_id=data.get("node_id"),
            name=data.get("name"),
            size_in_bytes=data.get("size_in_bytes") or 0,
            url=data.get("url"),
            archive_download_url=data.get("archive_download_url"),
            expired=bool(data.get("expired")),
            created_at=data.get("created_at"),
            expires_at=data.get("expires_at"),
            updated_at=data.get("updated_at"),
            workflow_run=ArtifactWorkflowRun.from_json(nested(data, "workflow_run")),
        )

    @property
    def created_at_timestamp(self) -> int | None:
        return to_timestamp(self.created_at)

    @property
    def expires_at_timestamp(self) -> int | None:
        return to_timestamp(self.expires_at)

    @property
    def updated_at_timestamp(self) -> int | None:
        return to_timestamp(self.updated_at)


@dataclass(frozen=True, slots=True, kw_only=True)
class ArtifactsList(GitHubList):
    artifacts: tuple[Artifact, ...] = ()

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> ArtifactsList:
        return cls(
            **GitHubList.list_fields(data),
            artifacts=tuple(Artifact.from_json(item) for item in items(data, "artifacts")),
        )
