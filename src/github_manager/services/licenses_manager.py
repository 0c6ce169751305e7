"""License endpoints."""

from __future__ import annotations

from github_manager.domain.params import Params
from github_manager.domain.records.licenses import CommonLicense, License, RepositoryLicense
from github_manager.services.base_manager import BaseManager
from github_manager.services.response_formatter import (
    JsonTree,
    ReturnFormat,
    decode_list,
    decode_record,
)


class LicensesManager(BaseManager):
    def list_common_licenses(
        self,
        params: Params | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[CommonLicense] | JsonTree | str:
        """Commonly used licenses; *params* may carry ``featured``, ``per_page`` and ``page``."""
        response = self._dispatcher.send_get("licenses", params)
        return self._format(response, fmt, decode_list(decode_record(CommonLicense)))

    def get_license(
        self, key: str, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> License | JsonTree | str:
        response = self._dispatcher.send_get(f"licenses/{key}")
        return self._format(response, fmt, decode_record(License))

    def get_repository_license(
        self, owner: str, repo: str, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> RepositoryLicense | JsonTree | str:
        response = self._dispatcher.send_get(f"repos/{owner}/{repo}/license")
        return self._format(response, fmt, decode_record(RepositoryLicense))
