"""Datatypes shared by the scanner, static renderer, and interactive model."""

from __future__ import annotations

import stat
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class PermissionBits:
    """POSIX ``st_mode`` view; absent on platforms without mode bits."""

    mode: int

    @property
    def setuid(self) -> bool:
        return bool(self.mode & stat.S_ISUID)

    @property
    def setgid(self) -> bool:
        return bool(self.mode & stat.S_ISGID)

    @property
    def sticky(self) -> bool:
        return bool(self.mode & stat.S_ISVTX)

    @property
    def world_writable(self) -> bool:
        return bool(self.mode & stat.S_IWOTH)

    @property
    def any_execute(self) -> bool:
        return bool(self.mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))

    @property
    def is_device(self) -> bool:
        return stat.S_ISCHR(self.mode) or stat.S_ISBLK(self.mode)

    @property
    def is_socket_or_fifo(self) -> bool:
        return stat.S_ISSOCK(self.mode) or stat.S_ISFIFO(self.mode)


@dataclass(frozen=True)
class ResolvedMetadata:
    """Metadata observed after following symlinks."""

    is_directory: bool
    permissions: PermissionBits | None = None


@dataclass(frozen=True)
class EntryMetadata:
    """Link-aware metadata plus the resolved view when it could be read.

    ``resolved`` is ``None`` when following the entry failed (broken link or
    permission problem). ``symlink_target`` is the raw ``readlink`` text.
    """

    is_symlink: bool
    resolved: ResolvedMetadata | None
    symlink_target: str | None = None


@dataclass(frozen=True)
class DirEntryDescriptor:
    """One scanned directory child, valid for the duration of a scan."""

    name: str
    path: Path
    is_directory: bool
    is_symlink: bool = False
    symlink_target: str | None = None
    metadata: EntryMetadata | None = None

    @property
    def is_broken_link(self) -> bool:
        """Return whether this is a symlink whose target cannot be resolved."""
        if not self.is_symlink:
            return False
        return self.metadata is None or self.metadata.resolved is None

    @property
    def target_is_directory(self) -> bool:
        """Return whether the symlink's resolved target is a directory."""
        if self.metadata is None or self.metadata.resolved is None:
            return False
        return self.metadata.resolved.is_directory


@dataclass(eq=False)
class TreeNode:
    """Persistent interactive-tree node; parent exclusively owns ``children``.

    Children are populated once at build time. Toggling ``expanded`` changes
    visibility only.
    """

    name: str
    path: Path
    is_directory: bool
    depth: int
    expanded: bool = False
    children: list["TreeNode"] = field(default_factory=list)
    descriptor: DirEntryDescriptor | None = None


@dataclass(frozen=True)
class DisplayRow:
    """One flattened row: accumulated tree glyphs plus the node it shows."""

    prefix: str
    node: TreeNode


__all__ = [
    "PermissionBits",
    "ResolvedMetadata",
    "EntryMetadata",
    "DirEntryDescriptor",
    "TreeNode",
    "DisplayRow",
]
