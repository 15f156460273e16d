"""Exceptions raised by the SVCS core."""

from __future__ import annotations

from pathlib import Path


class SvcsError(Exception):
    """Base class for SVCS errors."""


class NotFoundError(SvcsError):
    """Raised when a path, tracked file, or commit does not exist."""


class InvalidRootError(SvcsError):
    """Raised when the working-directory root is not a directory."""

    def __init__(self, root: Path | str):
        super().__init__(f"Not a directory: {root}")
        self.root = root


class SnapshotError(SvcsError):
    """Raised when stored snapshot or history data is inconsistent."""


class InvalidPathError(SvcsError):
    """Raised when a path cannot be tracked."""
