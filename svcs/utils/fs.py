"""File system utilities for SVCS.

Provides atomic writes, directory creation, and small read helpers.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def atomic_write(file_path: Path | str, content: str | bytes, mode: str = "w") -> None:
    """Write content atomically using tempfile + rename pattern.
    
    Args:
        file_path: Target file path
        content: Content to write
        mode: Write mode ('w' for text, 'wb' for binary)
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    
    # Temp file must live on the same filesystem for os.replace
    fd, tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp"
    )
    
    try:
        if "b" in mode:
            with os.fdopen(fd, mode) as f:
                f.write(content)
        else:
            with os.fdopen(fd, mode, encoding="utf-8", newline="") as f:
                f.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def ensure_dir(dir_path: Path | str) -> Path:
    """Ensure directory exists, creating it if necessary.
    
    Args:
        dir_path: Directory path to create
        
    Returns:
        Path object for the directory
    """
    path = Path(dir_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_file(file_path: Path | str) -> Path:
    """Create an empty file if nothing exists at the path yet."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(exist_ok=True)
    return path


def read_text(file_path: Path | str, default: str = "") -> str:
    """Read a UTF-8 text file, returning default if it does not exist.
    
    Args:
        file_path: Path to read
        default: Value returned when the file is missing
        
    Returns:
        File contents or default
    """
    try:
        with open(file_path, encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        return default
