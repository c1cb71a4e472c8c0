"""Environment utilities for SVCS."""

from __future__ import annotations

import os
from pathlib import Path


def is_debug_mode() -> bool:
    """Check if debug mode is enabled.

    Returns:
        True if SVCS_DEBUG is set to a truthy value
    """
    val = os.environ.get("SVCS_DEBUG", "").lower()
    return val in ("1", "true", "yes", "on")


def get_home_dir() -> Path:
    """Get user home directory.

    Returns:
        Path to home directory
    """
    return Path.home()


def get_global_svcs_dir() -> Path:
    """Get global SVCS directory (~/.svcs).

    Returns:
        Path to global SVCS config directory
    """
    return get_home_dir() / ".svcs"


def get_project_root() -> Path:
    """Resolve the repository root from SVCS_PROJECT_ROOT, falling back to cwd."""
    val = os.environ.get("SVCS_PROJECT_ROOT")
    if isinstance(val, str) and val.strip():
        return Path(val.strip()).expanduser()
    return Path.cwd()
