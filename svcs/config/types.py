"""Configuration schemas for SVCS.

Defines the repository layout and the settings dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

HashMode = Literal["message", "content"]

STORE_DIR_NAME = "store"


@dataclass(frozen=True)
class RepositoryLayout:
    """Resolved store paths for one repository root."""
    root: Path
    store_name: str = STORE_DIR_NAME

    @property
    def store_dir(self) -> Path:
        return self.root / self.store_name

    @property
    def config_file(self) -> Path:
        """Committer name."""
        return self.store_dir / "config"

    @property
    def index_file(self) -> Path:
        """Tracked paths, one per line."""
        return self.store_dir / "index"

    @property
    def log_file(self) -> Path:
        return self.store_dir / "log"

    @property
    def commits_dir(self) -> Path:
        return self.store_dir / "commits"

    @property
    def settings_file(self) -> Path:
        return self.store_dir / "settings.json"

    def resolve(self, path: str) -> Path:
        """Resolve a tracked path against the repository root."""
        return self.root / path


@dataclass
class SvcsConfig:
    """Main SVCS configuration."""
    hash_mode: HashMode = "message"
    atomic_snapshots: bool = True
    strict_exit_codes: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> SvcsConfig:
        """Create SvcsConfig from dictionary."""
        hash_val = data.get("hashMode", "message")
        hash_mode: HashMode = "message"
        if isinstance(hash_val, str) and hash_val in {"message", "content"}:
            hash_mode = hash_val

        atomic = data.get("atomicSnapshots", True)
        strict = data.get("strictExitCodes", False)

        return cls(
            hash_mode=hash_mode,
            atomic_snapshots=atomic if isinstance(atomic, bool) else True,
            strict_exit_codes=strict if isinstance(strict, bool) else False,
        )
