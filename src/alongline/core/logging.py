"""
Logging setup for the CLI and the API.

The packaged `config/logging.yaml` is the base; the level comes from
`settings.app.log_level` (`ALONGLINE_LOG_LEVEL`) unless the caller passes one.
Projection internals log at DEBUG (winning segment, clipped line).
"""

from __future__ import annotations

import copy
import logging.config
from typing import Any

from alongline.config.settings import get_logging_config, get_settings


def build_logging_config(level: str | None = None) -> dict[str, Any]:
    """Return a fresh dictConfig payload with `level` applied to root and all handlers."""
    # The packaged config is cached; work on a copy so levels never leak between calls.
    config = copy.deepcopy(get_logging_config())
    level = (level or get_settings().app.log_level).upper()

    config.setdefault("root", {})["level"] = level
    for handler in config.get("handlers", {}).values():
        if isinstance(handler, dict):
            handler["level"] = level
    return config


def configure_logging(level: str | None = None) -> None:
    """Configure the Python logging system for an AlongLine entrypoint."""
    logging.config.dictConfig(build_logging_config(level))
