"""Utility modules for SVCS."""

from .fs import atomic_write, ensure_dir, ensure_file, read_text
from .env import get_working_root, is_debug_mode
from .log import log_debug

__all__ = [
    "atomic_write",
    "ensure_dir",
    "ensure_file",
    "read_text",
    "get_working_root",
    "is_debug_mode",
    "log_debug",
]
