"""GitHub Actions permission records.

The actions-permissions payload has one shape per scope (enterprise,
organization, repository). Each shape is its own record carrying a fixed
``scope`` discriminant, and :func:`decode_actions_permissions` picks the
variant once, from the scope the caller asked about.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from github_manager.domain.records.base import GitHubResponse, enum_or_default, strings


class PermissionsScope(str, Enum):
    """Owner kind of a permissions resource; the value is its path segment."""

    ENTERPRISE = "enterprises"
    ORGANIZATION = "orgs"
    REPOSITORY = "repos"


class EnabledItems(str, Enum):
    ALL = "all"
    NONE = "none"
    SELECTED = "selected"


class AllowedActions(str, Enum):
    ALL = "all"
    LOCAL_ONLY = "local_only"
    SELECTED = "selected"


class WorkflowPermissions(str, Enum):
    READ = "read"
    WRITE = "write"


@dataclass(frozen=True, slots=True, kw_only=True)
class EnterpriseActionsPermissions(GitHubResponse):
    scope: PermissionsScope = field(default=PermissionsScope.ENTERPRISE, init=False)
    enabled_organizations: EnabledItems = EnabledItems.NONE
    allowed_actions: AllowedActions = AllowedActions.ALL
    selected_actions_url: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> EnterpriseActionsPermissions:
        return cls(
            **GitHubResponse.base_fields(data),
            enabled_organizations=enum_or_default(
                EnabledItems, data.get("enabled_organizations"), EnabledItems.NONE
            ),
            allowed_actions=enum_or_default(
                AllowedActions, data.get("allowed_actions"), AllowedActions.ALL
            ),
            selected_actions_url=data.get("selected_actions_url"),
        )

    def to_body(self) -> dict[str, Any]:
        return {
            "enabled_organizations": self.enabled_organizations.value,
            "allowed_actions": self.allowed_actions.value,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class OrganizationActionsPermissions(GitHubResponse):
    scope: PermissionsScope = field(default=PermissionsScope.ORGANIZATION, init=False)
    enabled_repositories: EnabledItems = EnabledItems.NONE
    allowed_actions: AllowedActions = AllowedActions.ALL
    selected_actions_url: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> OrganizationActionsPermissions:
        return cls(
            **GitHubResponse.base_fields(data),
            enabled_repositories=enum_or_default(
                EnabledItems, data.get("enabled_repositories"), EnabledItems.NONE
            ),
            allowed_actions=enum_or_default(
                AllowedActions, data.get("allowed_actions"), AllowedActions.ALL
            ),
            selected_actions_url=data.get("selected_actions_url"),
        )

    def to_body(self) -> dict[str, Any]:
        return {
            "enabled_repositories": self.enabled_repositories.value,
            "allowed_actions": self.allowed_actions.value,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class RepositoryActionsPermissions(GitHubResponse):
    scope: PermissionsScope = field(default=PermissionsScope.REPOSITORY, init=False)
    enabled: bool = False
    allowed_actions: AllowedActions = AllowedActions.ALL
    selected_actions_url: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> RepositoryActionsPermissions:
        return cls(
            **GitHubResponse.base_fields(data),
            enabled=bool(data.get("enabled")),
            allowed_actions=enum_or_default(
                AllowedActions, data.get("allowed_actions"), AllowedActions.ALL
            ),
            selected_actions_url=data.get("selected_actions_url"),
        )

    def to_body(self) -> dict[str, Any]:
        return {"enabled": self.enabled, "allowed_actions": self.allowed_actions.value}


ActionsPermissions = Union[
    EnterpriseActionsPermissions,
    OrganizationActionsPermissions,
    RepositoryActionsPermissions,
]

_VARIANTS: dict[PermissionsScope, Any] = {
    PermissionsScope.ENTERPRISE: EnterpriseActionsPermissions,
    PermissionsScope.ORGANIZATION: OrganizationActionsPermissions,
    PermissionsScope.REPOSITORY: RepositoryActionsPermissions,
}


def decode_actions_permissions(
    data: dict[str, Any], scope: PermissionsScope | str
) -> ActionsPermissions:
    """Decode *data* into the permissions variant for *scope*."""
    return _VARIANTS[PermissionsScope(scope)].from_json(data)


@dataclass(frozen=True, slots=True, kw_only=True)
class AllowedActionsSettings(GitHubResponse):
    """Which actions may run when ``allowed_actions`` is ``selected``."""

    github_owned_allowed: bool = False
    verified_allowed: bool = False
    patterns_allowed: tuple[str, ...] = ()

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> AllowedActionsSettings:
        return cls(
            **GitHubResponse.base_fields(data),
            github_owned_allowed=bool(data.get("github_owned_allowed")),
            verified_allowed=bool(data.get("verified_allowed")),
            patterns_allowed=strings(data, "patterns_allowed"),
        )

    def to_body(self) -> dict[str, Any]:
        return {
            "github_owned_allowed": self.github_owned_allowed,
            "verified_allowed": self.verified_allowed,
            "patterns_allowed": list(self.patterns_allowed),
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class DefaultWorkflowPermissions(GitHubResponse):
    default_workflow_permissions: WorkflowPermissions = WorkflowPermissions.READ
    can_approve_pull_request_reviews: bool = False

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> DefaultWorkflowPermissions:
        return cls(
            **GitHubResponse.base_fields(data),
            default_workflow_permissions=enum_or_default(
                WorkflowPermissions,
                data.get("default_workflow_permissions"),
                WorkflowPermissions.READ,
            ),
            can_approve_pull_request_reviews=bool(data.get("can_approve_pull_request_reviews")),
        )

    def to_body(self) -> dict[str, Any]:
        return {
            "default_workflow_permissions": self.default_workflow_permissions.value,
            "can_approve_pull_request_reviews": self.can_approve_pull_request_reviews,
        }
