"""Core modules for SVCS."""

from .controller import VcsController
from .engine import (
    CheckoutResult,
    CommitNotFound,
    CommitResult,
    Committed,
    NothingToCommit,
    Restored,
    SnapshotEngine,
)
from .errors import InvalidPathError, InvalidRootError, NotFoundError, SnapshotError, SvcsError
from .hasher import ContentHasher, content_id
from .history import Commit, HistoryLog
from .index import TrackIndex
from .snapshot_store import SnapshotStore

__all__ = [
    "VcsController",
    "SnapshotEngine",
    "CommitResult",
    "CheckoutResult",
    "Committed",
    "NothingToCommit",
    "Restored",
    "CommitNotFound",
    "SvcsError",
    "NotFoundError",
    "InvalidRootError",
    "InvalidPathError",
    "SnapshotError",
    "ContentHasher",
    "content_id",
    "Commit",
    "HistoryLog",
    "TrackIndex",
    "SnapshotStore",
]
