"""Change detection: decides whether a new commit is warranted."""

from __future__ import annotations

from typing import Mapping, Sequence

from ..config.types import RepositoryLayout
from ..utils.log import log_debug
from .history_log import CommitRecord
from .snapshot_store import SnapshotStore


def should_commit(
    history: Sequence[CommitRecord],
    tracked: Mapping[str, str],
    snapshots: SnapshotStore,
    layout: RepositoryLayout,
) -> bool:
    """Compare the working files against the newest snapshot.

    Args:
        history: Commit records, newest first
        tracked: Snapshot key -> tracked path (see TrackedSet.keyed)
        snapshots: Store holding the snapshots named in `history`
        layout: Repository layout used to resolve tracked paths

    Returns:
        True on the first tracked file that is new or differs byte-for-byte
        from the latest snapshot (or when there is no history yet), False if
        everything matches.
    """
    if not history:
        return True

    latest = history[0]
    snapshot = snapshots.open(latest.hash)
    if snapshot is None:
        log_debug(
            f"Snapshot for latest commit {latest.hash} is missing; treating as changed."
            " The new commit does not restore it unless it reuses the same id"
        )
        return True

    for key, path in tracked.items():
        stored = snapshot.read(key)
        if stored is None:
            log_debug(f"'{path}' is not in snapshot {latest.hash}")
            return True
        if layout.resolve(path).read_bytes() != stored:
            log_debug(f"'{path}' differs from snapshot {latest.hash}")
            return True

    return False
