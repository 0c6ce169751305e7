"""Ordered request parameters shared by query strings and JSON bodies."""

from __future__ import annotations

from enum import Enum
from typing import Any

import httpx


def _query_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_query_value(item) for item in value]
    return value


class Params(dict[str, Any]):
    """Insertion-ordered parameter collection.

    The same instance can be sent as a JSON body (nested dicts and lists are
    kept as-is) or rendered as a query string::

        >>> Params(per_page=50, page=2).create_query_string()
        '?per_page=50&page=2'
    """

    def add_param(self, key: str, value: Any) -> Params:
        """Set *key* and return ``self`` so calls can be chained."""
        self[key] = value
        return self

    def add_params(self, **params: Any) -> Params:
        self.update(params)
        return self

    def create_query_string(self) -> str:
        """Render the non-``None`` entries as ``?k=v&...`` (empty when none).

        Booleans become ``true``/``false``, sequences repeat the key, and
        reserved characters in values are percent-escaped.
        """
        query = {key: _query_value(value) for key, value in self.items() if value is not None}
        if not query:
            return ""
        return f"?{httpx.QueryParams(query)}"

    @classmethod
    def of(cls, params: dict[str, Any] | None) -> Params:
        """Copy *params* into a fresh instance (``None`` → empty)."""
        return cls(params or {})
