"""Expected, user-facing failures.

Each error carries the exact line the CLI prints for it.
"""

from __future__ import annotations


class SvcsError(Exception):
    """Base class for recoverable SVCS failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NothingToCommit(SvcsError):
    """No tracked files, or tracked files unchanged since the latest snapshot."""

    def __init__(self) -> None:
        super().__init__("Nothing to commit.")


class CommitNotFound(SvcsError):
    """Checkout target is absent from the history log."""

    def __init__(self, commit_id: str):
        super().__init__("Commit does not exist.")
        self.commit_id = commit_id


class MissingFile(SvcsError):
    """A path given to `add` (or a tracked path at commit time) does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Can't find '{path}'.")
        self.path = path


class MissingArgument(SvcsError):
    """A command was invoked without its required argument."""


class UnknownCommand(SvcsError):
    def __init__(self, command: str):
        super().__init__(f"'{command}' is not a SVCS command.")
        self.command = command


class SnapshotMissing(SvcsError):
    """The log names a commit whose snapshot directory is gone."""

    def __init__(self, commit_id: str):
        super().__init__(f"Snapshot for commit {commit_id} is missing.")
        self.commit_id = commit_id
