"""History log: newest-first commit records persisted in store/log.

Each record is written as a block::

    commit <hash>
    Author: <name>
    <message>
    <blank line>

New blocks are prepended to the existing text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from ..utils.fs import atomic_write, read_text_or_empty

_HEADER_RE = re.compile(r"^commit (\S+)\nAuthor: (.*)\n", re.MULTILINE)
_SEPARATOR = "\n\n"
_BLANK_LINES_RE = re.compile(r"\n{2,}")


def normalize_message(message: str) -> str:
    """Make a message safe to embed in a log block.

    Leading and trailing newlines are dropped and runs of newlines collapse
    to one newline, so a block separator can only appear at the end of a block.
    """
    return _BLANK_LINES_RE.sub("\n", message.strip("\n"))


def normalize_author(author: str) -> str:
    """Author names live on a single header line."""
    return " ".join(author.splitlines())


@dataclass(frozen=True)
class CommitRecord:
    """One entry of the history log."""
    hash: str
    author: str
    message: str

    def to_block(self) -> str:
        return f"commit {self.hash}\nAuthor: {self.author}\n{self.message}{_SEPARATOR}"


def parse_log(text: str) -> list[CommitRecord]:
    """Parse log text into records, newest first.

    A header only counts when it starts the text or follows a block
    separator. Messages written through normalize_message never contain a
    separator, so message lines that look like a header stay in the message.
    """
    headers = [
        m for m in _HEADER_RE.finditer(text)
        if m.start() == 0 or text[:m.start()].endswith(_SEPARATOR)
    ]

    records: list[CommitRecord] = []
    for idx, match in enumerate(headers):
        end = headers[idx + 1].start() if idx + 1 < len(headers) else len(text)
        body = text[match.end():end]
        if body.endswith(_SEPARATOR):
            body = body[: -len(_SEPARATOR)]
        else:
            body = body.rstrip("\n")
        records.append(CommitRecord(hash=match.group(1), author=match.group(2), message=body))
    return records


class HistoryLog:
    """Append-to-front log of commit records."""

    def __init__(self, log_file: Path):
        self.log_file = Path(log_file)

    def read_text(self) -> str:
        """Raw log text as persisted."""
        return read_text_or_empty(self.log_file)

    def read_all(self) -> list[CommitRecord]:
        return parse_log(self.read_text())

    def latest(self) -> CommitRecord | None:
        records = self.read_all()
        return records[0] if records else None

    def append(self, record: CommitRecord) -> None:
        """Prepend a record ahead of the existing log content."""
        atomic_write(self.log_file, record.to_block() + self.read_text())

    def contains(self, commit_id: str) -> bool:
        """Exact match of commit_id against the header lines."""
        return any(record.hash == commit_id for record in self.read_all())
