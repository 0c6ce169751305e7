"""GitHub Actions artifacts endpoints."""

from __future__ import annotations

from github_manager.domain.params import Params
from github_manager.domain.records.artifacts import Artifact, ArtifactsList
from github_manager.services.base_manager import BaseManager
from github_manager.services.response_formatter import JsonTree, ReturnFormat, decode_record


class ArtifactsManager(BaseManager):
    def list_artifacts(
        self,
        owner: str,
        repo: str,
        params: Params | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> ArtifactsList | JsonTree | str:
        """List a repository's artifacts; *params* may carry ``per_page``, ``page`` and ``name``."""
        response = self._dispatcher.send_get(f"repos/{owner}/{repo}/actions/artifacts", params)
        return self._format(response, fmt, decode_record(ArtifactsList))

    def get_artifact(
        self,
        owner: str,
        repo: str,
        artifact_id: int,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Artifact | JsonTree | str:
        response = self._dispatcher.send_get(
            f"repos/{owner}/{repo}/actions/artifacts/{artifact_id}"
        )
        return self._format(response, fmt, decode_record(Artifact))

    def delete_artifact(self, owner: str, repo: str, artifact_id: int) -> bool:
        return self._succeeds(
            f"Deleting artifact {artifact_id} of {owner}/{repo}",
            self._dispatcher.send_delete,
            f"repos/{owner}/{repo}/actions/artifacts/{artifact_id}",
        )

    def get_artifact_download_url(
        self, owner: str, repo: str, artifact_id: int, archive_format: str = "zip"
    ) -> str | None:
        """Short-lived archive URL, read from the ``Location`` of the 302 answer.

        Raises the matching ``GitHubApiError`` when GitHub refuses the download.
        """
        response = self._dispatcher.send_get(
            f"repos/{owner}/{repo}/actions/artifacts/{artifact_id}/{archive_format}"
        )
        if response.status_code == 302:
            return response.header("location")
        response.raise_for_status()
        return None

    def list_workflow_run_artifacts(
        self,
        owner: str,
        repo: str,
        run_id: int,
        params: Params | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> ArtifactsList | JsonTree | str:
        response = self._dispatcher.send_get(
            f"repos/{owner}/{repo}/actions/runs/{run_id}/artifacts", params
        )
        return self._format(response, fmt, decode_record(ArtifactsList))
