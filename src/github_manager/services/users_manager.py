"""User endpoints."""

from __future__ import annotations

from github_manager.domain.params import Params
from github_manager.domain.records.users import User
from github_manager.services.base_manager import BaseManager
from github_manager.services.response_formatter import (
    JsonTree,
    ReturnFormat,
    decode_list,
    decode_record,
)


class UsersManager(BaseManager):
    def get_authenticated_user(
        self, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> User | JsonTree | str:
        response = self._dispatcher.send_get("user")
        return self._format(response, fmt, decode_record(User))

    def update_authenticated_user(
        self, params: Params, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> User | JsonTree | str:
        """Update profile fields (``name``, ``blog``, ``bio``, ``hireable``, ...)."""
        response = self._dispatcher.send_patch("user", params)
        return self._format(response, fmt, decode_record(User))

    def list_users(
        self,
        params: Params | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[User] | JsonTree | str:
        """All users in sign-up order; page with ``since`` and ``per_page``."""
        response = self._dispatcher.send_get("users", params)
        return self._format(response, fmt, decode_list(decode_record(User)))

    def get_user(
        self, username: str, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> User | JsonTree | str:
        response = self._dispatcher.send_get(f"users/{username}")
        return self._format(response, fmt, decode_record(User))
