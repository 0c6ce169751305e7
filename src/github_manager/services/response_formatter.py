"""Response formatter: turns a raw response into the shape the caller asked for.

Three shapes are available per call:

* ``ReturnFormat.STRING``: the body text, untouched;
* ``ReturnFormat.JSON``: a generic tree (``dict`` or ``list``);
* ``ReturnFormat.LIBRARY_OBJECT``: a typed record built by a decoder.

Every typed-decode failure is reported as :class:`MalformedPayloadError`, so
callers handle bad payloads the same way whatever record is involved.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from github_manager.domain.exceptions import MalformedPayloadError
from github_manager.domain.value_objects import ApiResponse

T = TypeVar("T")

JsonTree = dict[str, Any] | list[Any]
Decoder = Callable[[Any], T]


class ReturnFormat(str, Enum):
    """Shape of a manager call's result."""

    STRING = "string"
    JSON = "json"
    LIBRARY_OBJECT = "library_object"


def parse_json(text: str) -> JsonTree:
    """Parse *text* into an object or array, detected from the payload itself."""
    try:
        tree = json.loads(text)
    except ValueError as exc:
        raise MalformedPayloadError(f"Response is not valid JSON: {exc}") from exc
    if not isinstance(tree, (dict, list)):
        raise MalformedPayloadError(
            f"Expected a JSON object or array, got {type(tree).__name__}."
        )
    return tree


def decode_record(record_cls: type[T]) -> Decoder[T]:
    """Decoder calling ``record_cls.from_json`` on a JSON object."""

    def _decode(tree: Any) -> T:
        if not isinstance(tree, dict):
            raise MalformedPayloadError(
                f"{record_cls.__name__} expects a JSON object, got {type(tree).__name__}."
            )
        return record_cls.from_json(tree)  # type: ignore[attr-defined]

    return _decode


def decode_list(item_decoder: Decoder[T]) -> Decoder[list[T]]:
    """Decoder for bare JSON arrays, assembled element by element."""

    def _decode(tree: Any) -> list[T]:
        if not isinstance(tree, list):
            raise MalformedPayloadError(
                f"Expected a JSON array, got {type(tree).__name__}."
            )
        return [item_decoder(item) for item in tree]

    return _decode


def decode_strings(tree: Any) -> list[str]:
    """Decoder for arrays of plain strings (e.g. template names)."""
    if not isinstance(tree, list):
        raise MalformedPayloadError(f"Expected a JSON array, got {type(tree).__name__}.")
    return [str(item) for item in tree]


def decode(tree: Any, decoder: Decoder[T]) -> T:
    """Run *decoder* and normalise every failure to :class:`MalformedPayloadError`."""
    try:
        return decoder(tree)
    except MalformedPayloadError:
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise MalformedPayloadError(f"Unexpected payload shape: {exc!r}") from exc


def format_response(
    response: ApiResponse,
    fmt: ReturnFormat,
    decoder: Decoder[T],
) -> T | JsonTree | str:
    """Format *response* according to *fmt*.

    ``STRING`` hands back error bodies unchanged and ``JSON`` gives
    :meth:`ApiResponse.json_error_response` for them; only the typed path
    raises the matching ``GitHubApiError`` for a non-2xx status.
    """
    fmt = ReturnFormat(fmt)
    if fmt is ReturnFormat.STRING:
        return response.text
    if fmt is ReturnFormat.JSON:
        if not response.ok:
            return response.json_error_response()
        return parse_json(response.text)
    response.raise_for_status()
    return decode(parse_json(response.text), decoder)
