"""Snapshot storage for SVCS.

Each snapshot is a directory under store/commits/ named by the commit hash,
holding one file per tracked item (keyed by basename).
"""

from __future__ import annotations

import os
import shutil
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from ..utils.fs import atomic_write
from ..utils.log import log_debug


@dataclass
class Snapshot:
    """Read-only handle on a stored snapshot."""
    commit_id: str
    path: Path

    def names(self) -> list[str]:
        """Stored entry names, sorted."""
        return sorted(
            entry.name
            for entry in self.path.iterdir()
            if entry.is_file()
        )

    def read(self, name: str) -> bytes | None:
        """Stored bytes for an entry, or None if the snapshot has no such entry."""
        entry = self.path / name
        if not entry.is_file():
            return None
        return entry.read_bytes()


@dataclass
class PendingSnapshot:
    """A snapshot being written. Entries land in `target` as they are written."""
    commit_id: str
    target: Path
    overlay: bool = False
    written: list[str] = field(default_factory=list)

    def write(self, name: str, data: bytes) -> None:
        """Store an entry, replacing any same-named entry."""
        if self.overlay:
            atomic_write(self.target / name, data, mode="wb")
        else:
            (self.target / name).write_bytes(data)
        if name not in self.written:
            self.written.append(name)


class SnapshotStore:
    """Manages snapshot directories."""

    STAGING_SUFFIX = ".staging"

    def __init__(self, commits_dir: Path, atomic: bool = True):
        """Initialize snapshot store.

        Args:
            commits_dir: Directory holding one subdirectory per snapshot
            atomic: Stage new snapshots and rename them into place
        """
        self.commits_dir = Path(commits_dir)
        self.atomic = atomic

    def path_for(self, commit_id: str) -> Path:
        return self.commits_dir / commit_id

    def exists(self, commit_id: str) -> bool:
        return self.path_for(commit_id).is_dir()

    def open(self, commit_id: str) -> Snapshot | None:
        """Get a handle on a stored snapshot, or None if its directory is absent."""
        path = self.path_for(commit_id)
        if not path.is_dir():
            return None
        return Snapshot(commit_id=commit_id, path=path)

    @contextmanager
    def create(self, commit_id: str) -> Iterator[PendingSnapshot]:
        """Materialize a snapshot.

        New snapshots are written into a staging directory next to the final
        location and renamed into place when the block exits cleanly; on error
        the staging directory is removed and nothing becomes visible.

        A snapshot id that already exists (same message committed again) is
        overlaid entry by entry instead.

        Yields:
            PendingSnapshot to write entries into
        """
        self.commits_dir.mkdir(parents=True, exist_ok=True)
        target = self.path_for(commit_id)

        if target.exists() or not self.atomic:
            if target.exists():
                log_debug(f"Overlaying existing snapshot {commit_id}")
            target.mkdir(parents=True, exist_ok=True)
            yield PendingSnapshot(commit_id=commit_id, target=target, overlay=True)
            return

        staging = Path(tempfile.mkdtemp(
            dir=self.commits_dir,
            prefix=f".{commit_id}.",
            suffix=self.STAGING_SUFFIX,
        ))
        pending = PendingSnapshot(commit_id=commit_id, target=staging)
        try:
            yield pending
            os.replace(staging, target)
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            raise

        pending.target = target
        log_debug(f"Snapshot {commit_id} written ({len(pending.written)} files)")
