"""Utility modules for SVCS."""

from .fs import atomic_write, ensure_dir, ensure_file, read_text_or_empty, safe_json_load
from .env import get_global_svcs_dir, get_home_dir, get_project_root, is_debug_mode
from .log import displayable, log_debug

__all__ = [
    "atomic_write",
    "ensure_dir",
    "ensure_file",
    "read_text_or_empty",
    "safe_json_load",
    "get_global_svcs_dir",
    "get_home_dir",
    "get_project_root",
    "is_debug_mode",
    "displayable",
    "log_debug",
]
