"""SVCS - a minimal single-user version control system.

Tracks files in one working directory, snapshots them under a SHA-256
content identifier, and restores any earlier snapshot.
"""

__version__ = "1.0.0"
