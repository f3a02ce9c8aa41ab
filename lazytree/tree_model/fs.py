"""Filesystem metadata reads and single-level directory scanning."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from .types import DirEntryDescriptor, EntryMetadata, PermissionBits, ResolvedMetadata

logger = logging.getLogger(__name__)

HAS_POSIX_MODE_BITS = os.name == "posix"


def _permission_bits(st: os.stat_result) -> PermissionBits | None:
    """Return mode bits for POSIX platforms, ``None`` elsewhere."""
    if not HAS_POSIX_MODE_BITS:
        return None
    return PermissionBits(st.st_mode)


def _resolved_from_stat(st: os.stat_result) -> ResolvedMetadata:
    return ResolvedMetadata(
        is_directory=stat.S_ISDIR(st.st_mode),
        permissions=_permission_bits(st),
    )


def read_entry_metadata(path: Path) -> EntryMetadata | None:
    """Read link-aware and resolved metadata for ``path``.

    Returns ``None`` when even the link-aware ``lstat`` fails. When only the
    resolved view fails (broken link, unreadable target) the result carries
    ``resolved=None``.
    """
    try:
        link_stat = os.lstat(path)
    except OSError as exc:
        logger.debug("cannot read metadata for %s: %s", path, exc)
        return None

    if not stat.S_ISLNK(link_stat.st_mode):
        return EntryMetadata(is_symlink=False, resolved=_resolved_from_stat(link_stat))

    try:
        target: str | None = os.readlink(path)
    except OSError:
        target = None
    try:
        resolved: ResolvedMetadata | None = _resolved_from_stat(os.stat(path))
    except OSError as exc:
        logger.debug("cannot resolve symlink %s: %s", path, exc)
        resolved = None
    return EntryMetadata(is_symlink=True, resolved=resolved, symlink_target=target)


def describe_path(path: Path) -> DirEntryDescriptor:
    """Build a descriptor for a path that is not being listed, e.g. a tree root.

    Roots are followed through symlinks so ``lazytree link-to-dir`` lists the
    linked directory.
    """
    metadata = read_entry_metadata(path)
    is_directory = bool(metadata and metadata.resolved and metadata.resolved.is_directory)
    return DirEntryDescriptor(
        name=path.name or str(path),
        path=path,
        is_directory=is_directory,
        is_symlink=bool(metadata and metadata.is_symlink),
        symlink_target=metadata.symlink_target if metadata else None,
        metadata=metadata,
    )


def descent_target(entry: DirEntryDescriptor, ancestors: frozenset[str]) -> str | None:
    """Return the real path to descend into for ``entry``, or ``None`` for a leaf.

    Directories and symlinks to directories are followed. A link whose real
    path is already on the ancestor chain is listed but not descended.
    """
    if not (entry.is_directory or entry.target_is_directory):
        return None
    real = os.path.realpath(entry.path)
    if real in ancestors:
        logger.debug("not descending into %s: %s is an ancestor", entry.path, real)
        return None
    return real


def _sort_key(item: DirEntryDescriptor) -> bytes:
    return os.fsencode(item.name)


def list_directory_children(
    directory: Path,
    show_hidden: bool,
) -> tuple[list[DirEntryDescriptor], OSError | None]:
    """List immediate children of ``directory`` filtered and sorted by raw name.

    Returns ``(children, scan_error)``. ``scan_error`` is set only when the
    directory itself cannot be opened or read; individual children whose type
    cannot be determined are skipped.
    """
    children: list[DirEntryDescriptor] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                child_path = Path(child.path)
                try:
                    is_symlink = child.is_symlink()
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError as exc:
                    logger.debug("skipping unreadable entry %s: %s", child_path, exc)
                    continue

                metadata = read_entry_metadata(child_path)
                children.append(
                    DirEntryDescriptor(
                        name=name,
                        path=child_path,
                        is_directory=is_dir,
                        is_symlink=is_symlink,
                        symlink_target=metadata.symlink_target if metadata else None,
                        metadata=metadata,
                    )
                )
    except OSError as exc:
        return [], exc

    children.sort(key=_sort_key)
    return children, None


__all__ = [
    "HAS_POSIX_MODE_BITS",
    "read_entry_metadata",
    "describe_path",
    "descent_target",
    "list_directory_children",
]
