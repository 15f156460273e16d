"""Content identifiers for commits."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Iterable


def content_id(buffers: Iterable[bytes]) -> str:
    """SHA-256 hex digest of the buffers concatenated in order."""
    digest = hashlib.sha256()
    for buf in buffers:
        digest.update(buf)
    return digest.hexdigest()


class ContentHasher:
    """Derives commit identifiers from tracked file contents."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def read_all(self, paths: Iterable[str]) -> list[bytes]:
        """Read every path relative to the root, in order.

        Raises:
            FileNotFoundError / OSError from the underlying read
        """
        return [(self.root / p).read_bytes() for p in paths]
