"""Depth-bounded construction of the persistent interactive tree."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import DirectoryUnreadableError
from .fs import describe_path, descent_target, list_directory_children
from .types import TreeNode

logger = logging.getLogger(__name__)


def build_tree(root: Path, show_hidden: bool = False, max_depth: int | None = None) -> TreeNode:
    """Scan ``root`` once and return its fully populated node tree.

    Children are read for every directory whose children would sit at or
    above ``max_depth``. The root starts expanded; every other node starts
    collapsed. Raises ``DirectoryUnreadableError`` for any unlistable
    directory, matching the static renderer.
    """
    root_entry = describe_path(root)
    root_node = TreeNode(
        name=root_entry.name,
        path=root,
        is_directory=root_entry.is_directory,
        depth=0,
        expanded=True,
        descriptor=root_entry,
    )
    node_count = 1

    def populate(node: TreeNode, ancestors: frozenset[str]) -> None:
        """Attach scanned children to ``node`` and recurse into directories.

        ``ancestors`` holds the real paths on the chain from the root, so a
        symlink that loops back is kept as a leaf.
        """
        nonlocal node_count
        child_depth = node.depth + 1
        if max_depth is not None and child_depth > max_depth:
            return
        children, scan_error = list_directory_children(node.path, show_hidden)
        if scan_error is not None:
            raise DirectoryUnreadableError(node.path, scan_error)
        for child in children:
            real = descent_target(child, ancestors)
            child_node = TreeNode(
                name=child.name,
                path=child.path,
                is_directory=real is not None,
                depth=child_depth,
                descriptor=child,
            )
            if real is not None:
                populate(child_node, ancestors | {real})
            node.children.append(child_node)
            node_count += 1

    if root_node.is_directory:
        populate(root_node, frozenset({os.path.realpath(root)}))
    logger.debug("built tree for %s with %d nodes", root, node_count)
    return root_node


__all__ = ["build_tree"]
