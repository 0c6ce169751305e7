"""User records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from github_manager.domain.records.base import GitHubResponse, nested_or_none, to_timestamp


@dataclass(frozen=True, slots=True, kw_only=True)
class UserPlan:
    name: str | None = None
    space: int = 0
    collaborators: int = 0
    private_repos: int = 0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> UserPlan:
        return cls(
            name=data.get("name"),
            space=data.get("space") or 0,
            collaborators=data.get("collaborators") or 0,
            private_repos=data.get("private_repos") or 0,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class User(GitHubResponse):
    """A GitHub account.

    Nested occurrences (issue authors, gist owners, ...) only fill the
    simple-user fields; ``GET /users/{username}`` also fills the profile ones.
    """

    login: str | None = None
    id: int = 0
    node_id: str | None = None
    avatar_url: str | None = None
    gravatar_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    followers_url: str | None = None
    following_url: str | None = None
    gists_url: str | None = None
    starred_url: str | None = None
    subscriptions_url: str | None = None
    organizations_url: str | None = None
    repos_url: str | None = None
    events_url: str | None = None
    received_events_url: str | None = None
    type: str | None = None
    site_admin: bool = False
    # profile fields
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    hireable: bool = False
    bio: str | None = None
    twitter_username: str | None = None
    public_repos: int = 0
    public_gists: int = 0
    followers: int = 0
    following: int = 0
    created_at: str | None = None
    updated_at: str | None = None
    private_gists: int = 0
    total_private_repos: int = 0
    owned_private_repos: int = 0
    disk_usage: int = 0
    two_factor_authentication: bool = False
    plan: UserPlan | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> User:
        plan = nested_or_none(data, "plan")
        return cls(
            **GitHubResponse.base_fields(data),
            login=data.get("login"),
            id=data.get("id") or 0,
            node_id=data.get("node_id"),
            avatar_url=data.get("avatar_url"),
            gravatar_id=data.get("gravatar_id"),
            url=data.get("url"),
            html_url=data.get("html_url"),
            followers_url=data.get("followers_url"),
            following_url=data.get("following_url"),
            gists_url=data.get("gists_url"),
            starred_url=data.get("starred_url"),
            subscriptions_url=data.get("subscriptions_url"),
            organizations_url=data.get("organizations_url"),
            repos_url=data.get("repos_url"),
            events_url=data.get("events_url"),
            received_events_url=data.get("received_events_url"),
            type=data.get("type"),
            site_admin=bool(data.get("site_admin")),
            name=data.get("name"),
            company=data.get("company"),
            blog=data.get("blog"),
            location=data.get("location"),
            email=data.get("email"),
            hireable=bool(data.get("hireable")),
            bio=data.get("bio"),
            twitter_username=data.get("twitter_username"),
            public_repos=data.get("public_repos") or 0,
            public_gists=data.get("public_gists") or 0,
            followers=data.get("followers") or 0,
            following=data.get("following") or 0,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            private_gists=data.get("private_gists") or 0,
            total_private_repos=data.get("total_private_repos") or 0,
            owned_private_repos=data.get("owned_private_repos") or 0,
            disk_usage=data.get("disk_usage") or 0,
            two_factor_authentication=bool(data.get("two_factor_authentication")),
            plan=UserPlan.from_json(plan) if plan is not None else None,
        )

    @property
    def created_at_timestamp(self) -> int | None:
        return to_timestamp(self.created_at)

    @property
    def updated_at_timestamp(self) -> int | None:
        return to_timestamp(self.updated_at)
