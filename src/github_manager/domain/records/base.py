"""Record base contract: pure data structures decoded from JSON trees.

Every record is a frozen dataclass with two construction paths:

* ``Record(...)`` with explicit field values (never touches the network);
* ``Record.from_json(tree)`` from an already-fetched JSON object.

Optional upstream fields never raise when absent: they resolve to ``None``,
``0``, ``False`` or an empty collection.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

E = TypeVar("E", bound=Enum)


# ── Field helpers ───────────────────────────────────────────────────────────


def to_timestamp(value: str | None) -> int | None:
    """Epoch milliseconds for an ISO-8601 date such as ``2022-10-30T10:15:00Z``."""
    if not value:
        return None
    try:
        return int(datetime.fromisoformat(value.replace("Z", "+00:00")).timestamp() * 1000)
    except ValueError:
        return None


def round_value(value: float, decimals: int = 2) -> float:
    return round(value, decimals)


def enum_or_default(enum_cls: type[E], value: str | None, default: E | None = None) -> E | None:
    """Map an upstream string onto *enum_cls*; absent values give *default*."""
    if value is None:
        return default
    return enum_cls(value)


def nested(data: dict[str, Any], key: str) -> dict[str, Any]:
    """Nested object under *key*, or an empty tree when missing/null."""
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def nested_or_none(data: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    return value if isinstance(value, dict) else None


def items(data: dict[str, Any], key: str) -> list[Any]:
    """Array under *key*, or an empty list when missing/null."""
    value = data.get(key)
    return value if isinstance(value, list) else []


def strings(data: dict[str, Any], key: str) -> tuple[str, ...]:
    return tuple(str(item) for item in items(data, key))


# ── Base records ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, kw_only=True)
class GitHubResponse:
    """Fields every record carries.

    When a record is decoded from a GitHub error object (``message`` +
    ``documentation_url``) the error survives on the instance instead of
    being lost.
    """

    message: str | None = None
    documentation_url: str | None = None

    @property
    def instantiated_with_error(self) -> bool:
        return self.documentation_url is not None

    @staticmethod
    def base_fields(data: dict[str, Any]) -> dict[str, Any]:
        return {
            "message": data.get("message"),
            "documentation_url": data.get("documentation_url"),
        }

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True, kw_only=True)
class GitHubList(GitHubResponse):
    """Paginated list payload.

    ``total_count`` is what the API reports overall and may exceed the number
    of elements actually returned in this page.
    """

    total_count: int = 0

    @staticmethod
    def list_fields(data: dict[str, Any]) -> dict[str, Any]:
        return {
            **GitHubResponse.base_fields(data),
            "total_count": data.get("total_count") or 0,
        }
