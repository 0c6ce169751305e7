"""Repository webhook endpoints."""

from __future__ import annotations

from github_manager.domain.params import Params
from github_manager.domain.records.webhooks import RepositoryWebhook, WebhookConfig
from github_manager.services.base_manager import BaseManager
from github_manager.services.response_formatter import (
    JsonTree,
    ReturnFormat,
    decode_list,
    decode_record,
)


class WebhooksManager(BaseManager):
    def list_webhooks(
        self,
        owner: str,
        repo: str,
        params: Params | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[RepositoryWebhook] | JsonTree | str:
        response = self._dispatcher.send_get(f"repos/{owner}/{repo}/hooks", params)
        return self._format(response, fmt, decode_list(decode_record(RepositoryWebhook)))

    def create_webhook(
        self,
        owner: str,
        repo: str,
        config: WebhookConfig,
        params: Params | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositoryWebhook | JsonTree | str:
        """Create a ``web`` hook; *params* may carry ``events`` and ``active``."""
        body = Params(name="web", config=config.to_body())
        body.update(Params.of(params))
        response = self._dispatcher.send_post(f"repos/{owner}/{repo}/hooks", body)
        return self._format(response, fmt, decode_record(RepositoryWebhook))

    def get_webhook(
        self,
        owner: str,
        repo: str,
        hook_id: int,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositoryWebhook | JsonTree | str:
        response = self._dispatcher.send_get(f"repos/{owner}/{repo}/hooks/{hook_id}")
        return self._format(response, fmt, decode_record(RepositoryWebhook))

    def update_webhook(
        self,
        owner: str,
        repo: str,
        hook_id: int,
        params: Params,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositoryWebhook | JsonTree | str:
        """Patch a hook; *params* may carry ``config``, ``events``, ``add_events``,
        ``remove_events`` and ``active``."""
        body = Params.of(params)
        if isinstance(body.get("config"), WebhookConfig):
            body["config"] = body["config"].to_body()
        response = self._dispatcher.send_patch(f"repos/{owner}/{repo}/hooks/{hook_id}", body)
        return self._format(response, fmt, decode_record(RepositoryWebhook))

    def delete_webhook(self, owner: str, repo: str, hook_id: int) -> bool:
        return self._succeeds(
            f"Deleting webhook {hook_id} of {owner}/{repo}",
            self._dispatcher.send_delete,
            f"repos/{owner}/{repo}/hooks/{hook_id}",
        )

    def ping_webhook(self, owner: str, repo: str, hook_id: int) -> bool:
        """Trigger a ``ping`` event to the hook."""
        return self._succeeds(
            f"Pinging webhook {hook_id} of {owner}/{repo}",
            self._dispatcher.send_post,
            f"repos/{owner}/{repo}/hooks/{hook_id}/pings",
        )

    def test_push_webhook(self, owner: str, repo: str, hook_id: int) -> bool:
        """Replay the latest push to the hook (a no-op unless it subscribes to ``push``)."""
        return self._succeeds(
            f"Testing webhook {hook_id} of {owner}/{repo}",
            self._dispatcher.send_post,
            f"repos/{owner}/{repo}/hooks/{hook_id}/tests",
        )
