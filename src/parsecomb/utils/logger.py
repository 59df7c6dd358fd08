"""Logging helpers for parsecomb.

All loggers live under the ``parsecomb`` namespace so applications can tune
the whole library with one ``logging.getLogger("parsecomb")`` call. Nothing
here installs handlers.

Input text can be arbitrarily long, so log and error messages show it
through preview().
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "parsecomb"
PREVIEW_LENGTH = 20


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the parsecomb namespace.

    >>> get_logger("parsecomb.grammar").name
    'parsecomb.grammar'
    >>> get_logger("mymodule").name
    'parsecomb.mymodule'
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def preview(text: str, limit: int = PREVIEW_LENGTH) -> str:
    """Shorten input text for a log line, marking the cut with '...'."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
