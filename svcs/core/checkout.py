"""Checkout engine: restores working files from a snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config.types import RepositoryLayout
from ..utils.log import log_debug
from .errors import CommitNotFound, SnapshotMissing
from .history_log import HistoryLog
from .snapshot_store import SnapshotStore


@dataclass
class CheckoutResult:
    """Result of a successful checkout."""
    commit_id: str
    restored: list[str] = field(default_factory=list)


class CheckoutEngine:
    def __init__(self, layout: RepositoryLayout, snapshots: SnapshotStore, history: HistoryLog):
        self.layout = layout
        self.snapshots = snapshots
        self.history = history

    def checkout(self, commit_id: str) -> CheckoutResult:
        """Overlay a snapshot's entries onto the working directory.

        Files that are not in the snapshot are left alone.

        Raises:
            CommitNotFound: commit_id is not in the history log
            SnapshotMissing: the log has the commit but its directory is gone
        """
        if not self.history.contains(commit_id):
            raise CommitNotFound(commit_id)

        snapshot = self.snapshots.open(commit_id)
        if snapshot is None:
            raise SnapshotMissing(commit_id)

        restored: list[str] = []
        for name in snapshot.names():
            data = snapshot.read(name)
            if data is None:
                continue
            self.layout.resolve(name).write_bytes(data)
            restored.append(name)

        log_debug(f"Checked out {commit_id} ({len(restored)} files)")
        return CheckoutResult(commit_id=commit_id, restored=restored)
