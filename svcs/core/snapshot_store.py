"""Snapshot storage for SVCS.

Each commit owns a directory ``commits/<identifier>/`` holding a plain copy
of every tracked file as it was at commit time.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path, PurePosixPath
from typing import Iterable

from ..utils.log import log_debug
from .errors import NotFoundError, SnapshotError


def entry_name(root: Path, path: str) -> str:
    """Name under which a tracked path is stored inside a snapshot.
    
    Paths inside the root keep their relative location so files with the
    same base name in different directories do not collide. Paths outside
    the root are stored by base name.
    """
    root = Path(os.path.abspath(root))
    target = Path(os.path.abspath(root / path))
    try:
        return target.relative_to(root).as_posix()
    except ValueError:
        return target.name


class SnapshotStore:
    """Manages per-commit file copies."""
    
    def __init__(self, commits_dir: Path):
        """Initialize snapshot store.
        
        Args:
            commits_dir: Directory holding one subdirectory per commit
        """
        self.commits_dir = Path(commits_dir)
    
    def exists(self, identifier: str) -> bool:
        return self._container(identifier).is_dir()
    
    def save(self, identifier: str, entries: Iterable[tuple[str, bytes]]) -> int:
        """Store a new snapshot.
        
        Args:
            identifier: Commit identifier
            entries: (name, content) pairs in tracking order
            
        Returns:
            Number of files written
            
        Raises:
            SnapshotError: The snapshot already exists, or two entries
                share a name with different content
        """
        container = self._container(identifier)
        if container.exists():
            raise SnapshotError(f"Snapshot already exists: {identifier}")
        
        files: dict[str, bytes] = {}
        for name, content in entries:
            _check_name(name)
            if name in files and files[name] != content:
                raise SnapshotError(f"Two tracked files would be stored as '{name}'")
            files[name] = content
        
        self.commits_dir.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(dir=self.commits_dir, prefix=f".{identifier[:12]}.", suffix=".tmp"))
        
        try:
            for name, content in files.items():
                dst = staging / name
                dst.parent.mkdir(parents=True, exist_ok=True)
                with open(dst, "wb") as f:
                    f.write(content)
            os.rename(staging, container)
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            raise
        
        log_debug(f"Saved snapshot {identifier} ({len(files)} files)")
        return len(files)
    
    def restore(self, identifier: str, destination_root: Path) -> int:
        """Copy a snapshot's files into a directory.
        
        Existing files at the destination are overwritten.
        
        Args:
            identifier: Commit identifier
            destination_root: Directory to restore into
            
        Returns:
            Number of files restored
            
        Raises:
            NotFoundError: No snapshot for identifier
        """
        container = self._container(identifier)
        if not container.is_dir():
            raise NotFoundError(f"Snapshot not found: {identifier}")
        
        destination_root = Path(destination_root)
        file_count = 0
        for name in self.entries(identifier):
            dst = destination_root / name
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(container / name, dst)
            file_count += 1
        
        log_debug(f"Restored {file_count} files from {identifier}")
        return file_count
    
    def discard(self, identifier: str) -> None:
        """Remove a snapshot container if it exists."""
        container = self._container(identifier)
        if container.exists():
            shutil.rmtree(container)
    
    def entries(self, identifier: str) -> list[str]:
        """List stored file names (POSIX relative paths), sorted."""
        container = self._container(identifier)
        names = []
        for root, _, files in os.walk(container):
            for file in files:
                rel_path = (Path(root) / file).relative_to(container)
                names.append(rel_path.as_posix())
        return sorted(names)
    
    def _container(self, identifier: str) -> Path:
        if not identifier or "/" in identifier or "\\" in identifier or identifier in (".", ".."):
            raise NotFoundError(f"Snapshot not found: {identifier}")
        return self.commits_dir / identifier


def _check_name(name: str) -> None:
    path = PurePosixPath(name)
    if not name or path.is_absolute() or ".." in path.parts:
        raise SnapshotError(f"Invalid snapshot entry name: '{name}'")
