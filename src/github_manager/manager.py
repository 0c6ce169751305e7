"""Facade wiring one dispatcher into every endpoint manager."""

from __future__ import annotations

from types import TracebackType

import httpx

from github_manager.infrastructure.config import GitHubSettings, get_settings
from github_manager.infrastructure.http_dispatcher import GitHubDispatcher
from github_manager.services.artifacts_manager import ArtifactsManager
from github_manager.services.cache_manager import CacheManager
from github_manager.services.emojis_manager import EmojisManager
from github_manager.services.gists_manager import GistsManager
from github_manager.services.gitignore_manager import GitignoreManager
from github_manager.services.issues_manager import IssuesManager
from github_manager.services.licenses_manager import LicensesManager
from github_manager.services.markdown_manager import MarkdownManager
from github_manager.services.permissions_manager import PermissionsManager
from github_manager.services.rate_limit_manager import RateLimitManager
from github_manager.services.users_manager import UsersManager
from github_manager.services.webhooks_manager import WebhooksManager


class GitHubManager:
    """Entry point of the client.

    ::

        with GitHubManager(GitHubSettings(token="ghp_...")) as gh:
            issue = gh.issues.get_issue("octocat", "hello-world", 1)

    Without *settings* the configuration is read from the environment
    (``GITHUB_MANAGER_TOKEN`` ...) and a missing token raises
    ``ConfigurationError``.
    """

    def __init__(
        self,
        settings: GitHubSettings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._dispatcher = GitHubDispatcher(settings or get_settings(), client=client)

        self.artifacts = ArtifactsManager(self._dispatcher)
        self.cache = CacheManager(self._dispatcher)
        self.permissions = PermissionsManager(self._dispatcher)
        self.gitignore = GitignoreManager(self._dispatcher)
        self.emojis = EmojisManager(self._dispatcher)
        self.markdown = MarkdownManager(self._dispatcher)
        self.rate_limit = RateLimitManager(self._dispatcher)
        self.licenses = LicensesManager(self._dispatcher)
        self.users = UsersManager(self._dispatcher)
        self.issues = IssuesManager(self._dispatcher)
        self.webhooks = WebhooksManager(self._dispatcher)
        self.gists = GistsManager(self._dispatcher)

    @property
    def dispatcher(self) -> GitHubDispatcher:
        return self._dispatcher

    def close(self) -> None:
        self._dispatcher.close()

    def __enter__(self) -> GitHubManager:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
