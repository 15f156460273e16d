"""Commit history for SVCS.

The log is a text file with one commit per line, newest first:

    id:<identifier>&&&author:<author>&&&comment:<comment>

Field values escape backslash, CR, LF and ``&`` so any text round-trips and
the ``&&&`` delimiter never appears inside a value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from ..utils.fs import atomic_write, read_text
from ..utils.log import log_debug
from .errors import SnapshotError


FIELD_DELIMITER = "&&&"
KEY_SEPARATOR = ":"

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", "&": "\\+"}
_UNESCAPES = {"\\": "\\", "n": "\n", "r": "\r", "+": "&"}
_ESCAPE_RE = re.compile(r"[\\\n\r&]")
_UNESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def escape_field(value: str) -> str:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], value)


def unescape_field(value: str) -> str:
    # Unknown escapes are kept as written
    return _UNESCAPE_RE.sub(lambda m: _UNESCAPES.get(m.group(1), m.group(0)), value)


@dataclass(frozen=True, slots=True)
class Commit:
    """One entry of the history log."""
    identifier: str
    author: str
    comment: str
    
    def to_line(self) -> str:
        """Serialize to a single log line (no trailing newline)."""
        fields = (
            ("id", self.identifier),
            ("author", self.author),
            ("comment", self.comment),
        )
        return FIELD_DELIMITER.join(
            f"{key}{KEY_SEPARATOR}{escape_field(value)}" for key, value in fields
        )
    
    @classmethod
    def from_line(cls, line: str) -> Commit:
        """Parse a log line.
        
        Raises:
            ValueError: A required field is missing
        """
        fields: dict[str, str] = {}
        for part in line.split(FIELD_DELIMITER):
            key, sep, value = part.partition(KEY_SEPARATOR)
            if sep:
                fields[key] = unescape_field(value)
        
        missing = [key for key in ("id", "author", "comment") if key not in fields]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")
        
        return cls(
            identifier=fields["id"],
            author=fields["author"],
            comment=fields["comment"],
        )
    
    def __str__(self) -> str:
        return f"commit {self.identifier}\nAuthor: {self.author}\n{self.comment}\n"


class HistoryLog:
    """Newest-first, append-at-front commit log."""
    
    def __init__(self, log_path: Path):
        self.log_path = Path(log_path)
    
    def all(self) -> list[Commit]:
        """Read every commit, newest first.
        
        Raises:
            SnapshotError: A line cannot be parsed
        """
        commits = []
        for lineno, line in enumerate(read_text(self.log_path).split("\n"), 1):
            if not line.strip():
                continue
            try:
                commits.append(Commit.from_line(line))
            except ValueError as e:
                raise SnapshotError(f"Corrupt log entry at {self.log_path}:{lineno}: {e}") from e
        return commits
    
    def contains(self, identifier: str) -> bool:
        return self.get(identifier) is not None
    
    def get(self, identifier: str) -> Commit | None:
        """Get the commit with the given identifier, or None."""
        for commit in self.all():
            if commit.identifier == identifier:
                return commit
        return None
    
    def prepend(self, commit: Commit) -> None:
        """Record a commit as the newest entry.
        
        The whole log is rewritten into a temp file and swapped in, so a
        failure leaves the previous log untouched.
        """
        existing = read_text(self.log_path)
        atomic_write(self.log_path, f"{commit.to_line()}\n{existing}")
        log_debug(f"Logged commit {commit.identifier}")
