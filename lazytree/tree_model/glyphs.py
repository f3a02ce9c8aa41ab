"""Branch glyphs shared by the static renderer and flattened interactive rows."""

from __future__ import annotations

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_PREFIX = "│   "
SPACE_PREFIX = "    "


def branch_glyphs(is_last: bool) -> tuple[str, str]:
    """Return ``(connector, child_prefix_extension)`` for one sibling.

    Only the last sibling drops the vertical bar, so rows below a non-last
    entry keep their ancestor line continuous.
    """
    if is_last:
        return LAST_BRANCH, SPACE_PREFIX
    return BRANCH, PIPE_PREFIX
