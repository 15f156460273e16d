"""Environment utilities for SVCS."""

from __future__ import annotations

import os
from pathlib import Path


ROOT_ENV = "SVCS_ROOT"
DEBUG_ENV = "SVCS_DEBUG"


def is_debug_mode() -> bool:
    """Check if debug mode is enabled.
    
    Returns:
        True if SVCS_DEBUG is set to a truthy value
    """
    val = os.environ.get(DEBUG_ENV, "").lower()
    return val in ("1", "true", "yes", "on")


def get_working_root() -> Path:
    """Get the working-directory root.
    
    Returns:
        SVCS_ROOT if set, otherwise the current directory
    """
    val = os.environ.get(ROOT_ENV)
    if isinstance(val, str) and val.strip():
        return Path(val.strip()).expanduser()
    return Path.cwd()
