"""Emojis endpoint."""

from __future__ import annotations

import json
from typing import Any

from github_manager.domain.exceptions import MalformedPayloadError
from github_manager.services.base_manager import BaseManager
from github_manager.services.response_formatter import JsonTree, ReturnFormat, parse_json


def _emoji_map(tree: Any) -> dict[str, str]:
    if not isinstance(tree, dict):
        raise MalformedPayloadError(f"Expected a JSON object, got {type(tree).__name__}.")
    return {str(name): str(url) for name, url in tree.items()}


class EmojisManager(BaseManager):
    def get_emojis(
        self, *names: str, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> dict[str, str] | JsonTree | str:
        """Emoji name → image URL, restricted to *names* when any are given.

        Names are matched case-insensitively. With a filter, ``STRING`` gives
        the filtered mapping as JSON text.
        """
        fmt = ReturnFormat(fmt)
        response = self._dispatcher.send_get("emojis")
        if not names or not response.ok:
            return self._format(response, fmt, _emoji_map)

        wanted = {name.lower() for name in names}
        emojis = {
            name: url
            for name, url in _emoji_map(parse_json(response.text)).items()
            if name.lower() in wanted
        }
        if fmt is ReturnFormat.STRING:
            return json.dumps(emojis)
        return emojis
