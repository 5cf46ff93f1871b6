"""Logger factory for Puma modules.

All package loggers live under the "puma" namespace, so a consumer can
turn on scanner diagnostics with a single call:

    >>> import logging
    >>> logging.getLogger("puma").setLevel(logging.DEBUG)

The scanner only logs at DEBUG level (unknown characters and line
continuations) and never installs handlers.
"""

from __future__ import annotations

import logging

_ROOT = "puma"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name, placed under the puma namespace.

    Args:
        name: Module name, usually __name__

    Example:
        >>> get_logger("puma.lexer.core").name
        'puma.lexer.core'
        >>> get_logger("tokens").name
        'puma.tokens'
    """
    if name != _ROOT and not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
