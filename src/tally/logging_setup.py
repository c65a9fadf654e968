"""
Shared logging configuration for Tally.

Modules log through ``logging.getLogger(__name__)``. Entry points (CLI, GUI)
call :func:`configure_logging` once; the level comes from the argument, then
the TALLY_LOG_LEVEL environment variable, then the default.
"""

from __future__ import annotations

import logging
import os

from tally.config import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR

_HANDLER_NAME = "tally"


def resolve_level(level: str | None = None) -> int:
    """Translate a level name into a logging level, falling back to the default."""
    name = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper().strip()
    resolved = logging.getLevelName(name)
    if isinstance(resolved, int):
        return resolved
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def configure_logging(level: str | None = None) -> logging.Logger:
    """Install a single stream handler on the root logger.

    Safe to call repeatedly: the handler installed on the first call is
    reused and only the root level is updated. Handlers added by a host
    application keep their own formatters.
    """
    root = logging.getLogger()
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(resolve_level(level))
    return root


__all__ = ["configure_logging", "resolve_level"]
