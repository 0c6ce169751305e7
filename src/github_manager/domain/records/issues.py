"""Issue records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from github_manager.domain.records.base import (
    GitHubResponse,
    enum_or_default,
    items,
    nested,
    nested_or_none,
    to_timestamp,
)
from github_manager.domain.records.repositories import Repository
from github_manager.domain.records.users import User


class IssueState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class StateReason(str, Enum):
    COMPLETED = "completed"
    NOT_PLANNED = "not_planned"
    REOPENED = "reopened"


class LockReason(str, Enum):
    """Reasons accepted by ``PUT /repos/{owner}/{repo}/issues/{number}/lock``."""

    OFF_TOPIC = "off-topic"
    TOO_HEATED = "too heated"
    RESOLVED = "resolved"
    SPAM = "spam"


class AuthorAssociation(str, Enum):
    COLLABORATOR = "COLLABORATOR"
    CONTRIBUTOR = "CONTRIBUTOR"
    FIRST_TIMER = "FIRST_TIMER"
    FIRST_TIME_CONTRIBUTOR = "FIRST_TIME_CONTRIBUTOR"
    MANNEQUIN = "MANNEQUIN"
    MEMBER = "MEMBER"
    NONE = "NONE"
    OWNER = "OWNER"


@dataclass(frozen=True, slots=True, kw_only=True)
class Label:
    id: int = 0
    node_id: str | None = None
    url: str | None = None
    name: str | None = None
    description: str | None = None
    color: str | None = None
    default: bool = False

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Label:
        return cls(
            id=data.get("id") or 0,
            node_id=data.get("node_id"),
            url=data.get("url"),
            name=data.get("name"),
            description=data.get("description"),
            color=data.get("color"),
            default=bool(data.get("default")),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Milestone:
    id: int = 0
    node_id: str | None = None
    number: int = 0
    url: str | None = None
    html_url: str | None = None
    labels_url: str | None = None
    state: IssueState = IssueState.OPEN
    title: str | None = None
    description: str | None = None
    creator: User | None = None
    open_issues: int = 0
    closed_issues: int = 0
    created_at: str | None = None
    updated_at: str | None = None
    closed_at: str | None = None
    due_on: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Milestone:
        creator = nested_or_none(data, "creator")
        return cls(
            id=data.get("id") or 0,
            node_id=data.get("node_id"),
            number=data.get("number") or 0,
            url=data.get("url"),
            html_url=data.get("html_url"),
            labels_url=data.get("labels_url"),
            state=enum_or_default(IssueState, data.get("state"), IssueState.OPEN),
            title=data.get("title"),
            description=data.get("description"),
            creator=User.from_json(creator) if creator is not None else None,
            open_issues=data.get("open_issues") or 0,
            closed_issues=data.get("closed_issues") or 0,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            closed_at=data.get("closed_at"),
            due_on=data.get("due_on"),
        )

    @property
    def due_on_timestamp(self) -> int | None:
        return to_timestamp(self.due_on)


@dataclass(frozen=True, slots=True, kw_only=True)
class IssuePullRequest:
    """Present on issues that are really pull requests."""

    url: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    merged_at: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> IssuePullRequest:
        return cls(
            url=data.get("url"),
            html_url=data.get("html_url"),
            diff_url=data.get("diff_url"),
            patch_url=data.get("patch_url"),
            merged_at=data.get("merged_at"),
        )


def _label(item: Any) -> Label:
    # labels may be plain names instead of objects
    if isinstance(item, str):
        return Label(name=item)
    return Label.from_json(item)


@dataclass(frozen=True, slots=True, kw_only=True)
class Issue(GitHubResponse):
    id: int = 0
    node_id: str | None = None
    url: str | None = None
    repository_url: str | None = None
    html_url: str | None = None
    number: int = 0
    state: IssueState = IssueState.OPEN
    state_reason: StateReason | None = None
    title: str | None = None
    body: str | None = None
    user: User = field(default_factory=User)
    labels: tuple[Label, ...] = ()
    assignee: User | None = None
    assignees: tuple[User, ...] = ()
    milestone: Milestone | None = None
    locked: bool = False
    active_lock_reason: LockReason | None = None
    comments: int = 0
    pull_request: IssuePullRequest | None = None
    closed_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    closed_by: User | None = None
    author_association: AuthorAssociation = AuthorAssociation.NONE
    repository: Repository | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Issue:
        assignee = nested_or_none(data, "assignee")
        milestone = nested_or_none(data, "milestone")
        pull_request = nested_or_none(data, "pull_request")
        closed_by = nested_or_none(data, "closed_by")
        repository = nested_or_none(data, "repository")
        return cls(
            **GitHubResponse.base_fields(data),
            id=data.get("id") or 0,
            node_id=data.get("node_id"),
            url=data.get("url"),
            repository_url=data.get("repository_url"),
            html_url=data.get("html_url"),
            number=data.get("number") or 0,
            state=enum_or_default(IssueState, data.get("state"), IssueState.OPEN),
            state_reason=enum_or_default(StateReason, data.get("state_reason")),
            title=data.get("title"),
            body=data.get("body"),
            user=User.from_json(nested(data, "user")),
            labels=tuple(_label(item) for item in items(data, "labels")),
            assignee=User.from_json(assignee) if assignee is not None else None,
            assignees=tuple(User.from_json(item) for item in items(data, "assignees")),
            milestone=Milestone.from_json(milestone) if milestone is not None else None,
            locked=bool(data.get("locked")),
            active_lock_reason=enum_or_default(LockReason, data.get("active_lock_reason")),
            comments=data.get("comments") or 0,
            pull_request=(
                IssuePullRequest.from_json(pull_request) if pull_request is not None else None
            ),
            closed_at=data.get("closed_at"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            closed_by=User.from_json(closed_by) if closed_by is not None else None,
            author_association=enum_or_default(
                AuthorAssociation, data.get("author_association"), AuthorAssociation.NONE
            ),
            repository=Repository.from_json(repository) if repository is not None else None,
        )

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None

    @property
    def created_at_timestamp(self) -> int | None:
        return to_timestamp(self.created_at)

    @property
    def updated_at_timestamp(self) -> int | None:
        return to_timestamp(self.updated_at)

    @property
    def closed_at_timestamp(self) -> int | None:
        return to_timestamp(self.closed_at)
