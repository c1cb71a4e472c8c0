"""SVCS controller - main orchestrator.

Wires the stores and engines to one repository root.
"""

from __future__ import annotations

from pathlib import Path

from ..config import ConfigLoader, RepositoryLayout, SvcsConfig
from ..utils.fs import ensure_dir, ensure_file
from ..utils.log import log_debug
from .checkout import CheckoutEngine, CheckoutResult
from .commit import CommitEngine, CommitResult
from .errors import MissingFile
from .history_log import HistoryLog
from .identity import IdentityStore
from .snapshot_store import SnapshotStore
from .tracked_set import TrackedSet


class SvcsController:
    """Main controller for SVCS operations."""

    def __init__(self, project_root: Path | str | None = None, config: SvcsConfig | None = None):
        """Initialize controller.

        Args:
            project_root: Repository root directory (defaults to cwd)
            config: Explicit configuration; loaded from disk when omitted
        """
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.layout = RepositoryLayout(root=self.project_root)
        self._config_loader = ConfigLoader(layout=self.layout)
        self._config = config
        self._snapshots: SnapshotStore | None = None

        self.tracked = TrackedSet(self.layout)
        self.identity = IdentityStore(self.layout)
        self.history = HistoryLog(self.layout.log_file)

    @property
    def config(self) -> SvcsConfig:
        """Get current configuration."""
        if self._config is not None:
            return self._config
        return self._config_loader.config

    @property
    def snapshots(self) -> SnapshotStore:
        """Get snapshot store (lazy init)."""
        if self._snapshots is None:
            self._snapshots = SnapshotStore(
                commits_dir=self.layout.commits_dir,
                atomic=self.config.atomic_snapshots,
            )
        return self._snapshots

    def init(self) -> None:
        """Create the store directory and its files if they are missing."""
        ensure_dir(self.layout.store_dir)
        ensure_file(self.layout.config_file)
        ensure_file(self.layout.index_file)
        ensure_file(self.layout.log_file)
        ensure_dir(self.layout.commits_dir)

    def add(self, path: str) -> None:
        """Track a file.

        Raises:
            MissingFile: path does not name an existing file
        """
        if not self.layout.resolve(path).is_file():
            raise MissingFile(path)
        self.tracked.add(path)
        log_debug(f"Tracking '{path}'")

    def tracked_paths(self) -> list[str]:
        return self.tracked.paths()

    def get_username(self) -> str:
        return self.identity.get()

    def set_username(self, name: str) -> str:
        return self.identity.set(name)

    def commit(self, message: str) -> CommitResult:
        engine = CommitEngine(
            layout=self.layout,
            tracked=self.tracked,
            identity=self.identity,
            snapshots=self.snapshots,
            history=self.history,
            hash_mode=self.config.hash_mode,
        )
        return engine.commit(message)

    def checkout(self, commit_id: str) -> CheckoutResult:
        engine = CheckoutEngine(
            layout=self.layout,
            snapshots=self.snapshots,
            history=self.history,
        )
        return engine.checkout(commit_id)

    def log_text(self) -> str:
        return self.history.read_text()
