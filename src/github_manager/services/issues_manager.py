"""Repository issue endpoints."""

from __future__ import annotations

from github_manager.domain.params import Params
from github_manager.domain.records.issues import Issue, LockReason
from github_manager.services.base_manager import BaseManager
from github_manager.services.response_formatter import (
    JsonTree,
    ReturnFormat,
    decode_list,
    decode_record,
)


class IssuesManager(BaseManager):
    def list_repository_issues(
        self,
        owner: str,
        repo: str,
        params: Params | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Issue] | JsonTree | str:
        """Issues (and pull requests) of a repository.

        *params* may carry ``milestone``, ``state``, ``assignee``, ``creator``,
        ``mentioned``, ``labels``, ``sort``, ``direction``, ``since``,
        ``per_page`` and ``page``.
        """
        response = self._dispatcher.send_get(f"repos/{owner}/{repo}/issues", params)
        return self._format(response, fmt, decode_list(decode_record(Issue)))

    def create_issue(
        self,
        owner: str,
        repo: str,
        title: str,
        params: Params | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Issue | JsonTree | str:
        body = Params(title=title)
        body.update(Params.of(params))
        response = self._dispatcher.send_post(f"repos/{owner}/{repo}/issues", body)
        return self._format(response, fmt, decode_record(Issue))

    def get_issue(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Issue | JsonTree | str:
        response = self._dispatcher.send_get(f"repos/{owner}/{repo}/issues/{issue_number}")
        return self._format(response, fmt, decode_record(Issue))

    def update_issue(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        params: Params,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Issue | JsonTree | str:
        response = self._dispatcher.send_patch(
            f"repos/{owner}/{repo}/issues/{issue_number}", params
        )
        return self._format(response, fmt, decode_record(Issue))

    def lock_issue(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        reason: LockReason | None = None,
    ) -> bool:
        body = Params()
        if reason is not None:
            body.add_param("lock_reason", LockReason(reason).value)
        return self._succeeds(
            f"Locking issue #{issue_number} of {owner}/{repo}",
            self._dispatcher.send_put,
            f"repos/{owner}/{repo}/issues/{issue_number}/lock",
            body,
        )

    def unlock_issue(self, owner: str, repo: str, issue_number: int) -> bool:
        return self._succeeds(
            f"Unlocking issue #{issue_number} of {owner}/{repo}",
            self._dispatcher.send_delete,
            f"repos/{owner}/{repo}/issues/{issue_number}/lock",
        )
