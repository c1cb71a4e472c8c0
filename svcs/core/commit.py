"""Commit engine: hashing, change detection, snapshot and log update."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Mapping

from ..config.types import HashMode, RepositoryLayout
from ..utils.log import log_debug
from .change_detector import should_commit
from .errors import MissingFile, NothingToCommit
from .history_log import CommitRecord, HistoryLog, normalize_author, normalize_message
from .identity import IdentityStore
from .snapshot_store import SnapshotStore
from .tracked_set import TrackedSet


@dataclass
class CommitResult:
    """Result of a successful commit."""
    commit_id: str
    author: str
    message: str
    file_count: int


def hash_message(message: str) -> str:
    """Commit id for a message: lowercase hex SHA-256 of its UTF-8 bytes.

    Lone surrogates from undecodable argv bytes map back to the original bytes.
    """
    return hashlib.sha256(message.encode("utf-8", "surrogateescape")).hexdigest()


def hash_message_and_content(message: str, contents: Mapping[str, bytes]) -> str:
    """Commit id mixing the message with every stored entry, in key order."""
    digest = hashlib.sha256(message.encode("utf-8", "surrogateescape"))
    for key in sorted(contents):
        digest.update(b"\0")
        digest.update(key.encode("utf-8", "surrogateescape"))
        digest.update(b"\0")
        digest.update(contents[key])
    return digest.hexdigest()


class CommitEngine:
    """Creates commits for a repository."""

    def __init__(
        self,
        layout: RepositoryLayout,
        tracked: TrackedSet,
        identity: IdentityStore,
        snapshots: SnapshotStore,
        history: HistoryLog,
        hash_mode: HashMode = "message",
    ):
        self.layout = layout
        self.tracked = tracked
        self.identity = identity
        self.snapshots = snapshots
        self.history = history
        self.hash_mode = hash_mode

    def commit(self, message: str) -> CommitResult:
        """Snapshot the tracked files and prepend a log record.

        The message is normalized first, so the id is computed from the text
        that ends up in the log.

        Raises:
            NothingToCommit: Nothing is tracked, or nothing changed since the
                latest snapshot
            MissingFile: A tracked file no longer exists
        """
        message = normalize_message(message)
        keyed = self.tracked.keyed()
        if not keyed:
            raise NothingToCommit()

        for path in keyed.values():
            if not self.layout.resolve(path).is_file():
                raise MissingFile(path)

        if not should_commit(self.history.read_all(), keyed, self.snapshots, self.layout):
            raise NothingToCommit()

        contents = {key: self.layout.resolve(path).read_bytes() for key, path in keyed.items()}
        if self.hash_mode == "content":
            commit_id = hash_message_and_content(message, contents)
        else:
            commit_id = hash_message(message)

        with self.snapshots.create(commit_id) as pending:
            for key, data in contents.items():
                pending.write(key, data)

        author = normalize_author(self.identity.get())
        self.history.append(CommitRecord(hash=commit_id, author=author, message=message))
        log_debug(f"Committed {commit_id} ({len(contents)} files)")

        return CommitResult(
            commit_id=commit_id,
            author=author,
            message=message,
            file_count=len(contents),
        )
