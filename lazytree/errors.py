"""Error kinds raised by tree construction and rendering.

Only directory-level failures are exceptions. Per-entry problems (unreadable
metadata, broken symlinks) are carried in entry data and rendered degraded.
"""

from __future__ import annotations

from pathlib import Path


class LazyTreeError(Exception):
    """Base class for fatal lazytree errors."""


class PathNotFoundError(LazyTreeError):
    """The root path given on the command line does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Path not found: {path}")


class DirectoryUnreadableError(LazyTreeError):
    """A directory could not be opened or listed during traversal."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot read directory {path}: {reason}")
