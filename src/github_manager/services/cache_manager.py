"""GitHub Actions cache endpoints."""

from __future__ import annotations

from github_manager.domain.params import Params
from github_manager.domain.records.cache import (
    CacheUsage,
    RepositoriesCacheUsagesList,
    RepositoryCacheUsage,
    RepositoryCachesList,
)
from github_manager.services.base_manager import BaseManager
from github_manager.services.response_formatter import JsonTree, ReturnFormat, decode_record


class CacheManager(BaseManager):
    def get_enterprise_cache_usage(
        self, enterprise: str, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> CacheUsage | JsonTree | str:
        response = self._dispatcher.send_get(f"enterprises/{enterprise}/actions/cache/usage")
        return self._format(response, fmt, decode_record(CacheUsage))

    def get_organization_cache_usage(
        self, org: str, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> CacheUsage | JsonTree | str:
        response = self._dispatcher.send_get(f"orgs/{org}/actions/cache/usage")
        return self._format(response, fmt, decode_record(CacheUsage))

    def list_repositories_cache_usage(
        self,
        org: str,
        params: Params | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositoriesCacheUsagesList | JsonTree | str:
        response = self._dispatcher.send_get(
            f"orgs/{org}/actions/cache/usage-by-repository", params
        )
        return self._format(response, fmt, decode_record(RepositoriesCacheUsagesList))

    def get_repository_cache_usage(
        self, owner: str, repo: str, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> RepositoryCacheUsage | JsonTree | str:
        response = self._dispatcher.send_get(f"repos/{owner}/{repo}/actions/cache/usage")
        return self._format(response, fmt, decode_record(RepositoryCacheUsage))

    def list_repository_caches(
        self,
        owner: str,
        repo: str,
        params: Params | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositoryCachesList | JsonTree | str:
        """List caches; *params* may carry ``ref``, ``key``, ``sort`` (a ``CacheSort``) and ``direction``."""
        response = self._dispatcher.send_get(f"repos/{owner}/{repo}/actions/caches", params)
        return self._format(response, fmt, decode_record(RepositoryCachesList))

    def delete_caches_by_key(
        self,
        owner: str,
        repo: str,
        key: str,
        ref: str | None = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositoryCachesList | JsonTree | str:
        """Delete every cache matching *key* (and *ref*); GitHub answers with the deleted caches."""
        query = Params(key=key).add_param("ref", ref)
        response = self._dispatcher.send_delete(f"repos/{owner}/{repo}/actions/caches", query)
        return self._format(response, fmt, decode_record(RepositoryCachesList))

    def delete_cache_by_id(self, owner: str, repo: str, cache_id: int) -> bool:
        return self._succeeds(
            f"Deleting cache {cache_id} of {owner}/{repo}",
            self._dispatcher.send_delete,
            f"repos/{owner}/{repo}/actions/caches/{cache_id}",
        )
