"""Commit and checkout orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..utils.log import log_debug
from .errors import NotFoundError
from .hasher import ContentHasher, content_id
from .history import Commit, HistoryLog
from .index import TrackIndex
from .snapshot_store import SnapshotStore, entry_name


@dataclass(frozen=True, slots=True)
class Committed:
    """A new commit was recorded."""
    identifier: str
    file_count: int


@dataclass(frozen=True, slots=True)
class NothingToCommit:
    """Tracked contents match an existing commit."""
    identifier: str


@dataclass(frozen=True, slots=True)
class Restored:
    """Working directory was restored to a commit."""
    identifier: str
    file_count: int


@dataclass(frozen=True, slots=True)
class CommitNotFound:
    """No commit with the requested identifier."""
    identifier: str


CommitResult = Committed | NothingToCommit
CheckoutResult = Restored | CommitNotFound


class SnapshotEngine:
    """Turns tracked files into content-addressed commits and back."""
    
    def __init__(
        self,
        root: Path,
        index: TrackIndex,
        history: HistoryLog,
        store: SnapshotStore,
    ):
        self.root = Path(root)
        self.index = index
        self.history = history
        self.store = store
        self.hasher = ContentHasher(self.root)
    
    def commit(self, comment: str, author: str = "") -> CommitResult:
        """Snapshot the tracked files.
        
        Every tracked file is read before anything is written, so a missing
        file aborts the commit without touching the store or the log.
        
        Args:
            comment: Commit message
            author: Author name, empty if unknown
            
        Returns:
            Committed, or NothingToCommit if the content is already recorded
            
        Raises:
            NotFoundError: A tracked file no longer exists
        """
        paths = self.index.list()
        try:
            contents = self.hasher.read_all(paths)
        except FileNotFoundError as e:
            raise NotFoundError(f"Can't find '{e.filename}'.") from e
        
        identifier = content_id(contents)
        if self.history.contains(identifier):
            log_debug(f"Content matches existing commit {identifier}")
            return NothingToCommit(identifier)
        
        if self.store.exists(identifier):
            # Left behind by an interrupted commit; the log never recorded it
            log_debug(f"Discarding unlogged snapshot {identifier}")
            self.store.discard(identifier)
        
        entries = [(entry_name(self.root, p), data) for p, data in zip(paths, contents)]
        file_count = self.store.save(identifier, entries)
        try:
            self.history.prepend(Commit(identifier=identifier, author=author, comment=comment))
        except BaseException:
            self.store.discard(identifier)
            raise
        return Committed(identifier=identifier, file_count=file_count)
    
    def checkout(self, identifier: str) -> CheckoutResult:
        """Restore the working directory to a recorded commit.
        
        Args:
            identifier: Commit identifier
            
        Returns:
            Restored, or CommitNotFound if the log has no such commit
        """
        if not self.history.contains(identifier):
            return CommitNotFound(identifier)
        
        file_count = self.store.restore(identifier, self.root)
        return Restored(identifier=identifier, file_count=file_count)
