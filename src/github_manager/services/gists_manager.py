"""Gist endpoints."""

from __future__ import annotations

import logging

from github_manager.domain.exceptions import GitHubTransportError
from github_manager.domain.params import Params
from github_manager.domain.records.gists import Gist
from github_manager.services.base_manager import BaseManager
from github_manager.services.response_formatter import (
    JsonTree,
    ReturnFormat,
    decode_list,
    decode_record,
)

logger = logging.getLogger(__name__)


def _files_body(files: dict[str, str | None]) -> dict[str, dict[str, str] | None]:
    # a None content deletes the file on update
    return {
        name: {"content": content} if content is not None else None
        for name, content in files.items()
    }


class GistsManager(BaseManager):
    def list_gists(
        self,
        params: Params | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Gist] | JsonTree | str:
        """Gists of the authenticated user; *params* may carry ``since``, ``per_page`` and ``page``."""
        response = self._dispatcher.send_get("gists", params)
        return self._format(response, fmt, decode_list(decode_record(Gist)))

    def list_public_gists(
        self,
        params: Params | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Gist] | JsonTree | str:
        response = self._dispatcher.send_get("gists/public", params)
        return self._format(response, fmt, decode_list(decode_record(Gist)))

    def get_gist(
        self, gist_id: str, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> Gist | JsonTree | str:
        response = self._dispatcher.send_get(f"gists/{gist_id}")
        return self._format(response, fmt, decode_record(Gist))

    def create_gist(
        self,
        files: dict[str, str],
        description: str | None = None,
        public: bool = False,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Gist | JsonTree | str:
        """Create a gist from a ``{filename: content}`` mapping."""
        if not files:
            raise ValueError("A gist needs at least one file.")
        body = Params(files=_files_body(files), public=public)
        if description is not None:
            body.add_param("description", description)
        response = self._dispatcher.send_post("gists", body)
        return self._format(response, fmt, decode_record(Gist))

    def update_gist(
        self,
        gist_id: str,
        files: dict[str, str | None] | None = None,
        description: str | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Gist | JsonTree | str:
        """Change the description and/or files; a ``None`` content removes that file."""
        body = Params()
        if files:
            body.add_param("files", _files_body(files))
        if description is not None:
            body.add_param("description", description)
        response = self._dispatcher.send_patch(f"gists/{gist_id}", body)
        return self._format(response, fmt, decode_record(Gist))

    def delete_gist(self, gist_id: str) -> bool:
        return self._succeeds(
            f"Deleting gist {gist_id}", self._dispatcher.send_delete, f"gists/{gist_id}"
        )

    def star_gist(self, gist_id: str) -> bool:
        return self._succeeds(
            f"Starring gist {gist_id}", self._dispatcher.send_put, f"gists/{gist_id}/star"
        )

    def unstar_gist(self, gist_id: str) -> bool:
        return self._succeeds(
            f"Unstarring gist {gist_id}", self._dispatcher.send_delete, f"gists/{gist_id}/star"
        )

    def is_gist_starred(self, gist_id: str) -> bool:
        """``True`` on 204, ``False`` on 404 (not starred) or any failure."""
        try:
            response = self._dispatcher.send_get(f"gists/{gist_id}/star")
        except GitHubTransportError as exc:
            logger.warning("Checking star of gist %s failed: %s", gist_id, exc)
            return False
        if response.status_code == 204:
            return True
        if response.status_code != 404:
            logger.warning(
                "Checking star of gist %s failed with HTTP %s: %s",
                gist_id,
                response.status_code,
                response.error_message(),
            )
        return False
