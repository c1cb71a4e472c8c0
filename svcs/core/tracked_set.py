"""Tracked-set store: the ordered list of paths under version control."""

from __future__ import annotations

from pathlib import PurePath

from ..config.types import RepositoryLayout
from ..utils.fs import read_text_or_empty


def snapshot_key(path: str) -> str:
    """Name under which a tracked path is stored inside a snapshot."""
    return PurePath(path).name


class TrackedSet:
    """Append-only list of tracked paths, persisted in store/index."""

    def __init__(self, layout: RepositoryLayout):
        self.layout = layout

    def paths(self) -> list[str]:
        """Tracked paths in insertion order (duplicates kept)."""
        content = read_text_or_empty(self.layout.index_file)
        return [line for line in content.splitlines() if line.strip()]

    def add(self, path: str) -> None:
        self.layout.index_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.layout.index_file, "a", encoding="utf-8", errors="surrogateescape") as f:
            f.write(f"{path}\n")

    def keyed(self) -> dict[str, str]:
        """Map snapshot key -> tracked path.

        When two tracked paths share a basename the later one wins, matching
        what ends up stored in the snapshot.
        """
        mapping: dict[str, str] = {}
        for path in self.paths():
            mapping[snapshot_key(path)] = path
        return mapping
