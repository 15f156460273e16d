"""Configuration types for SVCS.

Defines the on-disk layout of the control directory and process settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..utils.env import get_working_root


@dataclass(frozen=True)
class Layout:
    """Names of the control directory and the files inside it."""
    control_dir: str = "vcs"
    config_name: str = "config.txt"
    index_name: str = "index.txt"
    log_name: str = "log.txt"
    commits_name: str = "commits"

    def control_path(self, root: Path) -> Path:
        return root / self.control_dir

    def config_path(self, root: Path) -> Path:
        return self.control_path(root) / self.config_name

    def index_path(self, root: Path) -> Path:
        return self.control_path(root) / self.index_name

    def log_path(self, root: Path) -> Path:
        return self.control_path(root) / self.log_name

    def commits_path(self, root: Path) -> Path:
        return self.control_path(root) / self.commits_name


@dataclass
class Settings:
    """Process-level settings."""
    root: Path
    layout: Layout = field(default_factory=Layout)

    @classmethod
    def from_env(cls) -> Settings:
        """Create Settings from SVCS_ROOT."""
        return cls(root=get_working_root())
