"""Rate-limit status endpoint."""

from __future__ import annotations

from github_manager.domain.records.rate_limit import RateOverview
from github_manager.services.base_manager import BaseManager
from github_manager.services.response_formatter import JsonTree, ReturnFormat, decode_record


class RateLimitManager(BaseManager):
    def get_rate_limit_status(
        self, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> RateOverview | JsonTree | str:
        """Current quota per resource; this call does not count against it."""
        response = self._dispatcher.send_get("rate_limit")
        return self._format(response, fmt, decode_record(RateOverview))
