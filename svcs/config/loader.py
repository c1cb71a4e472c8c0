"""Configuration loader for SVCS.

Handles loading and merging configuration from multiple sources.
"""

from __future__ import annotations

from typing import Any

from ..utils.env import get_global_svcs_dir
from ..utils.fs import safe_json_load
from ..utils.log import log_debug
from .types import RepositoryLayout, SvcsConfig


class ConfigLoader:
    """Loads and manages SVCS configuration."""

    def __init__(self, layout: RepositoryLayout | None = None):
        """Initialize config loader.

        Args:
            layout: Repository layout (for project-local settings)
        """
        self.layout = layout
        self._config: SvcsConfig | None = None

    @property
    def config(self) -> SvcsConfig:
        """Get loaded configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> SvcsConfig:
        """Load configuration from all sources.

        Priority (highest to lowest):
        1. Project settings (store/settings.json)
        2. Global config (~/.svcs/config.json)
        3. Default values

        Returns:
            Merged SvcsConfig
        """
        merged: dict[str, Any] = {}

        global_config_path = get_global_svcs_dir() / "config.json"
        if global_config_path.exists():
            global_data = safe_json_load(global_config_path, {})
            if isinstance(global_data, dict):
                merged = self._deep_merge(merged, global_data)
            log_debug(f"Loaded global config from {global_config_path}")

        if self.layout is not None:
            project_config_path = self.layout.settings_file
            if project_config_path.exists():
                project_data = safe_json_load(project_config_path, {})
                if isinstance(project_data, dict):
                    merged = self._deep_merge(merged, project_data)
                log_debug(f"Loaded project settings from {project_config_path}")

        return SvcsConfig.from_dict(merged)

    def reload(self) -> SvcsConfig:
        """Force reload configuration."""
        self._config = None
        return self.config

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Deep merge two dictionaries.

        Args:
            base: Base dictionary
            override: Dictionary to merge (takes precedence)

        Returns:
            Merged dictionary
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = value
        return result
