"""SVCS controller - main entry point for callers.

Bootstraps the control directory and exposes the user-level operations.
"""

from __future__ import annotations

from pathlib import Path

from ..config import AuthorConfig, Layout
from ..utils.fs import ensure_dir, ensure_file
from ..utils.log import log_debug
from .engine import CheckoutResult, CommitResult, SnapshotEngine
from .errors import InvalidRootError
from .history import Commit, HistoryLog
from .index import TrackIndex
from .snapshot_store import SnapshotStore


class VcsController:
    """Version control over one working directory."""
    
    def __init__(self, root: Path | str, layout: Layout | None = None):
        """Initialize controller.
        
        Args:
            root: Working-directory root
            layout: Control directory layout (defaults to Layout())
            
        Raises:
            InvalidRootError: root is not a directory
        """
        self.root = Path(root)
        if not self.root.is_dir():
            raise InvalidRootError(self.root)
        self.layout = layout or Layout()
        self._bootstrap()
        
        self.author_config = AuthorConfig(self.layout.config_path(self.root))
        self.index = TrackIndex(
            self.layout.index_path(self.root),
            self.root,
            control_dir=self.layout.control_path(self.root),
        )
        self.history = HistoryLog(self.layout.log_path(self.root))
        self.store = SnapshotStore(self.layout.commits_path(self.root))
        self.engine = SnapshotEngine(self.root, self.index, self.history, self.store)
    
    def _bootstrap(self) -> None:
        control = self.layout.control_path(self.root)
        if not control.exists():
            log_debug(f"Creating {control}")
        ensure_dir(control)
        ensure_file(self.layout.config_path(self.root))
        ensure_file(self.layout.index_path(self.root))
        ensure_file(self.layout.log_path(self.root))
        ensure_dir(self.layout.commits_path(self.root))
    
    def configure_author(self, name: str) -> None:
        self.author_config.set(name)
    
    def get_author(self) -> str | None:
        return self.author_config.get()
    
    def track_file(self, path: str) -> str:
        """Track a file.
        
        Raises:
            NotFoundError: Nothing exists at path
        """
        return self.index.add(path)
    
    def list_tracked_files(self) -> list[str]:
        return self.index.list()
    
    def list_history(self) -> list[Commit]:
        """All commits, newest first."""
        return self.history.all()
    
    def commit(self, comment: str) -> CommitResult:
        """Commit tracked files under the configured author."""
        return self.engine.commit(comment, author=self.get_author() or "")
    
    def checkout(self, identifier: str) -> CheckoutResult:
        return self.engine.checkout(identifier)
