"""Core modules for SVCS."""

from .checkout import CheckoutEngine, CheckoutResult
from .commit import CommitEngine, CommitResult, hash_message
from .controller import SvcsController
from .history_log import CommitRecord, HistoryLog
from .snapshot_store import Snapshot, SnapshotStore

__all__ = [
    "CheckoutEngine",
    "CheckoutResult",
    "CommitEngine",
    "CommitRecord",
    "CommitResult",
    "HistoryLog",
    "Snapshot",
    "SnapshotStore",
    "SvcsController",
    "hash_message",
]
