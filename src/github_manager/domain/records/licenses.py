"""License records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from github_manager.domain.records.base import (
    GitHubResponse,
    nested_or_none,
    round_value,
    strings,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class CommonLicense(GitHubResponse):
    """Short license entry, as returned by ``GET /licenses``."""

    key: str | None = None
    name: str | None = None
    spdx_id: str | None = None
    url: str | None = None
    node_id: str | None = None

    @staticmethod
    def common_fields(data: dict[str, Any]) -> dict[str, Any]:
        return {
            **GitHubResponse.base_fields(data),
            "key": data.get("key"),
            "name": data.get("name"),
            "spdx_id": data.get("spdx_id"),
            "url": data.get("url"),
            "node_id": data.get("node_id"),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> CommonLicense:
        return cls(**CommonLicense.common_fields(data))


@dataclass(frozen=True, slots=True, kw_only=True)
class License(CommonLicense):
    html_url: str | None = None
    description: str | None = None
    implementation: str | None = None
    permissions: tuple[str, ...] = ()
    conditions: tuple[str, ...] = ()
    limitations: tuple[str, ...] = ()
    body: str | None = None
    featured: bool = False

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> License:
        return cls(
            **CommonLicense.common_fields(data),
            html_url=data.get("html_url"),
            description=data.get("description"),
            implementation=data.get("implementation"),
            permissions=strings(data, "permissions"),
            conditions=strings(data, "conditions"),
            limitations=strings(data, "limitations"),
            body=data.get("body"),
            featured=bool(data.get("featured")),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class LicenseLinks:
    self_url: str | None = None
    git: str | None = None
    html: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> LicenseLinks:
        return cls(self_url=data.get("self"), git=data.get("git"), html=data.get("html"))


@dataclass(frozen=True, slots=True, kw_only=True)
class RepositoryLicense(GitHubResponse):
    """License file of a repository, from ``GET /repos/{owner}/{repo}/license``."""

    name: str | None = None
    path: str | None = None
    sha: str | None = None
    size: float = 0.0
    url: str | None = None
    html_url: str | None = None
    git_url: str | None = None
    download_url: str | None = None
    type: str | None = None
    content: str | None = None
    encoding: str | None = None
    links: LicenseLinks | None = None
    license: CommonLicense | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> RepositoryLicense:
        license_tree = nested_or_none(data, "license")
        links = nested_or_none(data, "_links")
        return cls(
            **GitHubResponse.base_fields(data),
            name=data.get("name"),
            path=data.get("path"),
            sha=data.get("sha"),
            size=float(data.get("size") or 0),
            url=data.get("url"),
            html_url=data.get("html_url"),
            git_url=data.get("git_url"),
            download_url=data.get("download_url"),
            type=data.get("type"),
            content=data.get("content"),
            encoding=data.get("encoding"),
            links=LicenseLinks.from_json(links) if links is not None else None,
            license=CommonLicense.from_json(license_tree) if license_tree is not None else None,
        )

    def rounded_size(self, decimals: int = 2) -> float:
        return round_value(self.size, decimals)
