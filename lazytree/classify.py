"""Semantic color classification for tree entries.

``classify`` is a pure first-match decision table over link identity,
permission bits, file type, and extension. Renderers map the resulting
``ColorClass`` to escape codes through a ``UITheme``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from .tree_model.types import EntryMetadata

ARCHIVE_EXTENSIONS = frozenset({"zip", "tar", "gz", "bz2", "xz", "7z", "rar", "tgz", "tbz2", "txz"})
IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "bmp", "svg", "ico", "webp", "tiff", "tif"})
MEDIA_EXTENSIONS = frozenset({"mp3", "mp4", "avi", "mkv", "flac", "wav", "ogg", "mov", "wmv", "webm", "m4a"})


class ColorClass(Enum):
    SYMLINK = "symlink"
    SETUID_FILE = "setuid_file"
    SETGID_FILE = "setgid_file"
    STICKY_DIRECTORY = "sticky_directory"
    DIRECTORY = "directory"
    SPECIAL_DEVICE = "special_device"
    SPECIAL_SOCKET = "special_socket"
    WORLD_WRITABLE = "world_writable"
    EXECUTABLE = "executable"
    ARCHIVE = "archive"
    IMAGE = "image"
    MEDIA = "media"
    PLAIN = "plain"


def extension_class(path: Path) -> ColorClass:
    """Classify by case-insensitive extension alone."""
    suffix = path.suffix.lower().lstrip(".")
    if not suffix:
        return ColorClass.PLAIN
    if suffix in ARCHIVE_EXTENSIONS:
        return ColorClass.ARCHIVE
    if suffix in IMAGE_EXTENSIONS:
        return ColorClass.IMAGE
    if suffix in MEDIA_EXTENSIONS:
        return ColorClass.MEDIA
    return ColorClass.PLAIN


def classify(metadata: EntryMetadata | None, path: Path) -> ColorClass:
    """Return the single color class for an entry.

    Symlinks win over everything, unreadable metadata falls back to
    ``PLAIN``, and setuid/setgid dominate world-writable, executable and
    extension classes. Without POSIX permission bits only the directory and
    extension rules apply.
    """
    if metadata is not None and metadata.is_symlink:
        return ColorClass.SYMLINK
    if metadata is None or metadata.resolved is None:
        return ColorClass.PLAIN

    resolved = metadata.resolved
    perms = resolved.permissions
    if resolved.is_directory:
        if perms is not None and perms.sticky:
            return ColorClass.STICKY_DIRECTORY
        return ColorClass.DIRECTORY

    if perms is not None:
        if perms.is_device:
            return ColorClass.SPECIAL_DEVICE
        if perms.is_socket_or_fifo:
            return ColorClass.SPECIAL_SOCKET
        if perms.setuid:
            return ColorClass.SETUID_FILE
        if perms.setgid:
            return ColorClass.SETGID_FILE
        if perms.world_writable:
            return ColorClass.WORLD_WRITABLE
        if perms.any_execute:
            return ColorClass.EXECUTABLE

    return extension_class(path)


__all__ = [
    "ARCHIVE_EXTENSIONS",
    "IMAGE_EXTENSIONS",
    "MEDIA_EXTENSIONS",
    "ColorClass",
    "extension_class",
    "classify",
]
