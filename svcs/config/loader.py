"""Author configuration for SVCS."""

from __future__ import annotations

from pathlib import Path

from ..utils.fs import atomic_write, read_text


class AuthorConfig:
    """Stores the configured author name as a single trimmed text value."""
    
    def __init__(self, config_path: Path):
        self.config_path = Path(config_path)
    
    def get(self) -> str | None:
        """Get the configured author name.
        
        Returns:
            The trimmed name, or None if unset
        """
        name = read_text(self.config_path).strip()
        return name or None
    
    def set(self, name: str | None) -> None:
        """Persist the author name; None or blank clears it."""
        atomic_write(self.config_path, (name or "").strip())
