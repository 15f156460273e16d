"""Persistent index of tracked files."""

from __future__ import annotations

import os
from pathlib import Path

from ..utils.fs import atomic_write, read_text
from ..utils.log import log_debug
from .errors import InvalidPathError, NotFoundError


class TrackIndex:
    """Ordered list of tracked paths, one per line.
    
    Paths are kept exactly as given. Insertion order decides the order in
    which file contents are hashed, and duplicates are allowed.
    """
    
    def __init__(self, index_path: Path, root: Path, control_dir: Path | None = None):
        """Initialize track index.
        
        Args:
            index_path: File holding the tracked paths
            root: Working-directory root that relative paths resolve against
            control_dir: Directory whose contents may never be tracked
        """
        self.index_path = Path(index_path)
        self.root = Path(root)
        self.control_dir = Path(control_dir) if control_dir is not None else None
    
    def list(self) -> list[str]:
        """List tracked paths in insertion order."""
        lines = read_text(self.index_path).split("\n")
        return [line.strip() for line in lines if line.strip()]
    
    def add(self, path: str) -> str:
        """Start tracking a path.
        
        Args:
            path: Path as typed by the user, relative to the root or absolute
            
        Returns:
            The stored path string
            
        Raises:
            NotFoundError: Nothing exists at path
            InvalidPathError: path is the control directory or inside it
        """
        if not path.strip() or not (self.root / path).exists():
            raise NotFoundError(f"Can't find '{path}'.")
        if self._in_control_dir(path):
            raise InvalidPathError(f"Can't track '{path}': it belongs to the version control data.")
        
        current = read_text(self.index_path)
        if current and not current.endswith("\n"):
            current += "\n"
        atomic_write(self.index_path, f"{current}{path}\n")
        log_debug(f"Tracking {path}")
        return path
    
    def _in_control_dir(self, path: str) -> bool:
        if self.control_dir is None:
            return False
        control = Path(os.path.realpath(self.control_dir))
        target = Path(os.path.realpath(self.root / path))
        return target == control or control in target.parents
