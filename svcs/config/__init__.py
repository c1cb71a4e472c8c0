"""Configuration management for SVCS."""

from .types import (
    HashMode,
    RepositoryLayout,
    SvcsConfig,
)
from .loader import ConfigLoader

__all__ = [
    "HashMode",
    "RepositoryLayout",
    "SvcsConfig",
    "ConfigLoader",
]
