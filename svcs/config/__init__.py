"""Configuration management for SVCS."""

from .types import Layout, Settings
from .loader import AuthorConfig

__all__ = [
    "Layout",
    "Settings",
    "AuthorConfig",
]
