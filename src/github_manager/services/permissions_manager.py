"""GitHub Actions permissions endpoints.

The same operations exist for an enterprise, an organization and a
repository. The scope picks the path prefix and the record variant; *name*
is the enterprise slug, the organization login or ``"owner/repo"``.
"""

from __future__ import annotations

from typing import Any

from github_manager.domain.params import Params
from github_manager.domain.records.permissions import (
    ActionsPermissions,
    AllowedActionsSettings,
    DefaultWorkflowPermissions,
    PermissionsScope,
    decode_actions_permissions,
)
from github_manager.services.base_manager import BaseManager
from github_manager.services.response_formatter import JsonTree, ReturnFormat, decode_record


def _permissions_path(scope: PermissionsScope | str, name: str, suffix: str = "") -> str:
    return f"{PermissionsScope(scope).value}/{name}/actions/permissions{suffix}"


class PermissionsManager(BaseManager):
    def get_actions_permissions(
        self,
        scope: PermissionsScope | str,
        name: str,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> ActionsPermissions | JsonTree | str:
        scope = PermissionsScope(scope)
        response = self._dispatcher.send_get(_permissions_path(scope, name))

        def _decode(tree: Any) -> ActionsPermissions:
            return decode_actions_permissions(tree, scope)

        return self._format(response, fmt, _decode)

    def set_actions_permissions(
        self,
        scope: PermissionsScope | str,
        name: str,
        permissions: ActionsPermissions,
    ) -> bool:
        """Replace the permissions of *name*; *permissions* must be the variant for *scope*."""
        scope = PermissionsScope(scope)
        if permissions.scope is not scope:
            raise ValueError(
                f"{type(permissions).__name__} cannot be applied at {scope.name.lower()} scope."
            )
        return self._succeeds(
            f"Setting actions permissions of {name}",
            self._dispatcher.send_put,
            _permissions_path(scope, name),
            Params(permissions.to_body()),
        )

    def get_allowed_actions(
        self,
        scope: PermissionsScope | str,
        name: str,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> AllowedActionsSettings | JsonTree | str:
        response = self._dispatcher.send_get(_permissions_path(scope, name, "/selected-actions"))
        return self._format(response, fmt, decode_record(AllowedActionsSettings))

    def set_allowed_actions(
        self,
        scope: PermissionsScope | str,
        name: str,
        settings: AllowedActionsSettings,
    ) -> bool:
        return self._succeeds(
            f"Setting allowed actions of {name}",
            self._dispatcher.send_put,
            _permissions_path(scope, name, "/selected-actions"),
            Params(settings.to_body()),
        )

    def get_default_workflow_permissions(
        self,
        scope: PermissionsScope | str,
        name: str,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> DefaultWorkflowPermissions | JsonTree | str:
        response = self._dispatcher.send_get(_permissions_path(scope, name, "/workflow"))
        return self._format(response, fmt, decode_record(DefaultWorkflowPermissions))

    def set_default_workflow_permissions(
        self,
        scope: PermissionsScope | str,
        name: str,
        permissions: DefaultWorkflowPermissions,
    ) -> bool:
        return self._succeeds(
            f"Setting default workflow permissions of {name}",
            self._dispatcher.send_put,
            _permissions_path(scope, name, "/workflow"),
            Params(permissions.to_body()),
        )
