"""Expand/collapse transitions and flattening into display rows."""

from __future__ import annotations

from .glyphs import branch_glyphs
from .types import DisplayRow, TreeNode


def expand(node: TreeNode) -> bool:
    """Expand a collapsed directory. Returns whether anything changed."""
    if not node.is_directory or node.expanded:
        return False
    node.expanded = True
    return True


def collapse(node: TreeNode) -> bool:
    """Collapse an expanded directory, keeping its built children."""
    if not node.is_directory or not node.expanded:
        return False
    node.expanded = False
    return True


def toggle(node: TreeNode) -> bool:
    if node.expanded:
        return collapse(node)
    return expand(node)


def flatten(root: TreeNode) -> list[DisplayRow]:
    """Return visible rows depth-first; the root row carries no prefix."""
    rows: list[DisplayRow] = [DisplayRow("", root)]

    def walk(node: TreeNode, prefix: str) -> None:
        total = len(node.children)
        for idx, child in enumerate(node.children):
            connector, extension = branch_glyphs(idx == total - 1)
            rows.append(DisplayRow(prefix + connector, child))
            if child.is_directory and child.expanded:
                walk(child, prefix + extension)

    if root.is_directory and root.expanded:
        walk(root, "")
    return rows


__all__ = ["expand", "collapse", "toggle", "flatten"]
