"""Interactive collapsible tree view.

The controller owns a ``TreeNode`` snapshot built once at startup, keeps the
flattened rows and cursor index in ``InteractiveState``, and alternates
between a bounded-timeout key read and a full redraw. Terminal teardown is
unconditional through ``TerminalController.raw_mode``.
"""

from __future__ import annotations

import logging
import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .ansi import clip_ansi_line, selected_with_ansi
from .input import read_key
from .render import root_label, styled_name
from .terminal import TerminalController
from .tree_model import (
    DisplayRow,
    TreeNode,
    build_tree,
    clamp_index,
    collapse,
    expand,
    flatten,
    last_index,
    move_cursor,
    toggle,
)
from .ui_theme import UITheme

logger = logging.getLogger(__name__)

POLL_TIMEOUT_MS = 200
EXPANDED_MARKER = "[-]"
COLLAPSED_MARKER = "[+]"

QUIT_KEYS = frozenset({"q", "Q", "ESC", "CTRL_C"})
UP_KEYS = frozenset({"UP", "k"})
DOWN_KEYS = frozenset({"DOWN", "j"})
EXPAND_KEYS = frozenset({"RIGHT", "l"})
COLLAPSE_KEYS = frozenset({"LEFT", "h"})
TOGGLE_KEYS = frozenset({"ENTER", " "})
TOP_KEYS = frozenset({"HOME", "g"})
BOTTOM_KEYS = frozenset({"END", "G"})
PAGE_UP_KEYS = frozenset({"PAGE_UP"})
PAGE_DOWN_KEYS = frozenset({"PAGE_DOWN"})


@dataclass
class InteractiveState:
    """Mutable session state: tree snapshot, visible rows, cursor, viewport."""

    root: TreeNode
    rows: list[DisplayRow] = field(default_factory=list)
    selected: int = 0
    top: int = 0
    page_rows: int = 1
    dirty: bool = True

    @classmethod
    def from_root(cls, root: TreeNode) -> "InteractiveState":
        return cls(root=root, rows=flatten(root))

    def selected_node(self) -> TreeNode:
        return self.rows[self.selected].node

    def refresh_rows(self) -> None:
        """Re-flatten after a mutation, keeping the numeric cursor index."""
        self.rows = flatten(self.root)
        self.selected = clamp_index(self.selected, len(self.rows))
        self.dirty = True

    def move(self, delta: int) -> bool:
        target = move_cursor(self.selected, delta, len(self.rows))
        if target == self.selected:
            return False
        self.selected = target
        self.dirty = True
        return True

    def jump(self, index: int) -> bool:
        return self.move(clamp_index(index, len(self.rows)) - self.selected)

    def apply_to_selected(self, transition: Callable[[TreeNode], bool]) -> bool:
        """Run ``expand``/``collapse``/``toggle`` on the node under the cursor."""
        if not transition(self.selected_node()):
            return False
        self.refresh_rows()
        return True


def handle_key(state: InteractiveState, key: str) -> bool:
    """Dispatch one key token. Returns ``True`` when the session should end."""
    if key in QUIT_KEYS:
        return True
    if key in UP_KEYS:
        state.move(-1)
    elif key in DOWN_KEYS:
        state.move(1)
    elif key in TOP_KEYS:
        state.jump(0)
    elif key in BOTTOM_KEYS:
        state.jump(last_index(len(state.rows)))
    elif key in PAGE_UP_KEYS:
        state.move(-max(1, state.page_rows))
    elif key in PAGE_DOWN_KEYS:
        state.move(max(1, state.page_rows))
    elif key in EXPAND_KEYS:
        state.apply_to_selected(expand)
    elif key in COLLAPSE_KEYS:
        state.apply_to_selected(collapse)
    elif key in TOGGLE_KEYS:
        state.apply_to_selected(toggle)
    return False


def format_row(row: DisplayRow, theme: UITheme) -> str:
    """Render one display row with its expand marker on directories."""
    node = row.node
    if node.descriptor is None:
        name = f"{node.name}/" if node.is_directory else node.name
    elif node.depth == 0:
        name = root_label(node.descriptor, theme)
    else:
        name = styled_name(node.descriptor, theme)
    if not node.is_directory:
        return f"{row.prefix}{name}"
    marker = EXPANDED_MARKER if node.expanded else COLLAPSED_MARKER
    if theme.tree_marker:
        marker = f"{theme.tree_marker}{marker}{theme.reset}"
    return f"{row.prefix}{name} {marker}"


def scroll_to_selection(state: InteractiveState, visible_rows: int) -> None:
    """Move the viewport so the cursor row stays visible."""
    visible_rows = max(1, visible_rows)
    if state.selected < state.top:
        state.top = state.selected
    elif state.selected >= state.top + visible_rows:
        state.top = state.selected - visible_rows + 1
    state.top = max(0, min(state.top, max(0, len(state.rows) - visible_rows)))


def build_status_line(state: InteractiveState, width: int) -> str:
    position = f"{state.selected + 1}/{len(state.rows)}"
    hint = "q quit  ←/→ collapse/expand"
    text = f" {position}  {state.selected_node().path}  │ {hint}"
    return clip_ansi_line(text, max(1, width - 1))


def render_frame(state: InteractiveState, theme: UITheme, width: int, height: int) -> str:
    """Build one full-screen frame: tree rows plus a status line."""
    content_rows = max(1, height - 1)
    state.page_rows = content_rows
    scroll_to_selection(state, content_rows)
    line_width = max(1, width - 1)

    out: list[str] = ["\033[H\033[J"]
    end = min(len(state.rows), state.top + content_rows)
    for idx in range(state.top, end):
        text = clip_ansi_line(format_row(state.rows[idx], theme), line_width)
        if theme.reset:
            # Clipping can drop the closing reset of a painted name.
            text += theme.reset
        if idx == state.selected:
            text = selected_with_ansi(text)
        out.append(text)
        out.append("\r\n")
    out.extend("\r\n" for _ in range(content_rows - (end - state.top)))
    status = build_status_line(state, width)
    if theme.status:
        status = f"{theme.status}{status}{theme.reset}"
    out.append(status)
    return "".join(out)


def run_main_loop(
    state: InteractiveState,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
    key_reader: Callable[[int, int | None], str] = read_key,
) -> None:
    """Render/read/dispatch until a quit key arrives.

    Raw mode is entered here and always left again, including when a
    render or key handler raises.
    """
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                state.dirty = True
            if state.dirty:
                terminal.write(render_frame(state, theme, term.columns, term.lines))
                state.dirty = False

            key = key_reader(stdin_fd, POLL_TIMEOUT_MS)
            if not key:
                continue
            if handle_key(state, key):
                break


def run_interactive(
    root: Path,
    show_hidden: bool,
    max_depth: int | None,
    theme: UITheme,
) -> None:
    """Build the tree snapshot for ``root`` and run the interactive session.

    The filesystem is read before the terminal switches modes, so scan
    errors are reported on the normal screen.
    """
    tree = build_tree(root, show_hidden=show_hidden, max_depth=max_depth)
    state = InteractiveState.from_root(tree)
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    logger.debug("interactive session started with %d visible rows", len(state.rows))
    run_main_loop(state, terminal, stdin_fd, theme)
    logger.debug("interactive session ended")


__all__ = [
    "POLL_TIMEOUT_MS",
    "EXPANDED_MARKER",
    "COLLAPSED_MARKER",
    "InteractiveState",
    "handle_key",
    "format_row",
    "scroll_to_selection",
    "build_status_line",
    "render_frame",
    "run_main_loop",
    "run_interactive",
]
