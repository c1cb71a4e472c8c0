"""Debug logging and console-safe text for SVCS."""

from __future__ import annotations

import sys

from .env import is_debug_mode


def displayable(text: str) -> str:
    """Replace lone surrogates (undecodable path or argv bytes) with U+FFFD.

    Stores keep the original bytes; only what reaches the console is replaced.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def log_debug(message: str) -> None:
    """Log debug message to stderr.

    Only outputs if SVCS_DEBUG is set.
    """
    if is_debug_mode():
        print(f"[svcs] {displayable(message)}", file=sys.stderr)
