"""Identity store: the committer name in store/config."""

from __future__ import annotations

from ..config.types import RepositoryLayout
from ..utils.fs import atomic_write, read_text_or_empty


class IdentityStore:
    def __init__(self, layout: RepositoryLayout):
        self.layout = layout

    def get(self) -> str:
        """Stored committer name, "" when unset."""
        return read_text_or_empty(self.layout.config_file)

    def set(self, name: str) -> str:
        atomic_write(self.layout.config_file, name)
        return self.get()
