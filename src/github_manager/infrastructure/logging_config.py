"""Opt-in logging setup for scripts and notebooks using the client."""

from __future__ import annotations

import logging

from github_manager.infrastructure.config import GitHubSettings

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


def configure_logging(level: str | None = None, settings: GitHubSettings | None = None) -> None:
    """Install a root handler; the library itself never configures handlers.

    *level* wins over ``settings.log_level``; with neither, ``INFO`` is used.
    Request lines are logged at ``DEBUG``.
    """
    if level is None:
        level = settings.log_level if settings is not None else "INFO"
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
