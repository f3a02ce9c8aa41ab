"""Cursor movement over a flattened row list."""

from __future__ import annotations


def clamp_index(index: int, row_count: int) -> int:
    """Clamp ``index`` into ``[0, row_count - 1]`` (``0`` for empty lists)."""
    if row_count <= 0:
        return 0
    return max(0, min(index, row_count - 1))


def move_cursor(selected: int, delta: int, row_count: int) -> int:
    """Move ``selected`` by ``delta`` rows without wrapping past either end."""
    return clamp_index(selected + delta, row_count)


def last_index(row_count: int) -> int:
    return max(0, row_count - 1)


__all__ = ["clamp_index", "move_cursor", "last_index"]
