"""Filesystem-backed tree model shared by static and interactive modes.

This package contains the non-UI tree primitives:
- entry descriptors, permission views, persistent nodes and display rows
- metadata reads and one-level directory scanning
- depth-bounded tree construction, expand/collapse and flattening
- cursor clamping over flattened rows
"""

from __future__ import annotations

from .build import build_tree
from .flatten import collapse, expand, flatten, toggle
from .fs import (
    HAS_POSIX_MODE_BITS,
    describe_path,
    descent_target,
    list_directory_children,
    read_entry_metadata,
)
from .glyphs import BRANCH, LAST_BRANCH, PIPE_PREFIX, SPACE_PREFIX, branch_glyphs
from .navigation import clamp_index, last_index, move_cursor
from .types import (
    DirEntryDescriptor,
    DisplayRow,
    EntryMetadata,
    PermissionBits,
    ResolvedMetadata,
    TreeNode,
)

__all__ = [
    "PermissionBits",
    "ResolvedMetadata",
    "EntryMetadata",
    "DirEntryDescriptor",
    "TreeNode",
    "DisplayRow",
    "HAS_POSIX_MODE_BITS",
    "read_entry_metadata",
    "describe_path",
    "descent_target",
    "list_directory_children",
    "build_tree",
    "expand",
    "collapse",
    "toggle",
    "flatten",
    "BRANCH",
    "LAST_BRANCH",
    "PIPE_PREFIX",
    "SPACE_PREFIX",
    "branch_glyphs",
    "clamp_index",
    "move_cursor",
    "last_index",
]
