"""Static tree rendering plus glyph and name helpers shared with interactive mode.

``iter_tree_lines`` walks depth-first and yields each line as soon as it is
known, so callers can stream output for large trees. A directory that cannot
be listed raises ``DirectoryUnreadableError`` after the lines already yielded.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from .classify import ColorClass, classify
from .errors import DirectoryUnreadableError
from .tree_model.fs import describe_path, descent_target, list_directory_children
from .tree_model.glyphs import BRANCH, LAST_BRANCH, PIPE_PREFIX, SPACE_PREFIX, branch_glyphs
from .tree_model.types import DirEntryDescriptor
from .ui_theme import PLAIN_THEME, UITheme

BROKEN_LINK_MARKER = "[broken link]"


def display_name(entry: DirEntryDescriptor) -> str:
    """Compose the visible name: ``link -> target``, ``dir/`` or bare name."""
    if entry.is_symlink:
        if entry.is_broken_link or entry.symlink_target is None:
            return f"{entry.name} -> {BROKEN_LINK_MARKER}"
        slash = "/" if entry.target_is_directory else ""
        return f"{entry.name}{slash} -> {entry.symlink_target}"
    if entry.is_directory:
        return f"{entry.name}/"
    return entry.name


def entry_color_class(entry: DirEntryDescriptor) -> ColorClass:
    return classify(entry.metadata, entry.path)


def styled_name(entry: DirEntryDescriptor, theme: UITheme) -> str:
    """Return ``display_name`` painted with the entry's color class."""
    return theme.paint(display_name(entry), entry_color_class(entry))


def root_label(root: DirEntryDescriptor, theme: UITheme) -> str:
    """Root rows show the bare name with no connector or trailing slash."""
    return theme.paint(root.name, entry_color_class(root))


def iter_tree_lines(
    root: Path,
    show_hidden: bool = False,
    max_depth: int | None = None,
    theme: UITheme = PLAIN_THEME,
) -> Iterator[str]:
    """Yield tree lines for ``root``; the root itself is depth 0."""
    root_entry = describe_path(root)
    yield root_label(root_entry, theme)
    if not root_entry.is_directory:
        return

    def walk(directory: Path, prefix: str, depth: int, ancestors: frozenset[str]) -> Iterator[str]:
        """Emit one sibling group at ``depth`` and recurse into directories."""
        if max_depth is not None and depth > max_depth:
            return
        children, scan_error = list_directory_children(directory, show_hidden)
        if scan_error is not None:
            raise DirectoryUnreadableError(directory, scan_error)

        total = len(children)
        for idx, child in enumerate(children):
            connector, extension = branch_glyphs(idx == total - 1)
            yield f"{prefix}{connector}{styled_name(child, theme)}"
            real = descent_target(child, ancestors)
            if real is not None:
                yield from walk(child.path, prefix + extension, depth + 1, ancestors | {real})

    yield from walk(root, "", 1, frozenset({os.path.realpath(root)}))


def render_tree(
    root: Path,
    show_hidden: bool = False,
    max_depth: int | None = None,
    theme: UITheme = PLAIN_THEME,
) -> str:
    """Render the whole tree as one newline-terminated string."""
    return "".join(f"{line}\n" for line in iter_tree_lines(root, show_hidden, max_depth, theme))


def write_tree(
    out: TextIO,
    root: Path,
    show_hidden: bool = False,
    max_depth: int | None = None,
    theme: UITheme = PLAIN_THEME,
) -> int:
    """Stream tree lines to ``out`` and return the number of lines written."""
    count = 0
    for line in iter_tree_lines(root, show_hidden, max_depth, theme):
        out.write(line)
        out.write("\n")
        count += 1
    out.flush()
    return count


__all__ = [
    "BRANCH",
    "LAST_BRANCH",
    "PIPE_PREFIX",
    "SPACE_PREFIX",
    "BROKEN_LINK_MARKER",
    "branch_glyphs",
    "display_name",
    "entry_color_class",
    "styled_name",
    "root_label",
    "iter_tree_lines",
    "render_tree",
    "write_tree",
]
