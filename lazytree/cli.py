"""Command-line front door for lazytree.

Parses CLI options, merges them over persisted defaults, and validates the
root path. Then dispatches into the static renderer or the interactive view.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from . import __version__, config
from .errors import DirectoryUnreadableError, LazyTreeError, PathNotFoundError
from .interactive import run_interactive
from .render import write_tree
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    """argparse type for depth limits."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def color_enabled(mode: str, stream: TextIO) -> bool:
    """Resolve ``auto|always|never`` against whether ``stream`` is a terminal."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazytree",
        description="Display a directory tree, optionally as a collapsible interactive view.",
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory to display. Defaults to current directory.")
    parser.add_argument(
        "-a",
        "--all",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show hidden entries (names starting with '.').",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=_non_negative_int,
        default=None,
        help="Maximum depth to traverse; 0 shows only the root.",
    )
    parser.add_argument(
        "-C",
        "--color",
        choices=config.COLOR_MODES,
        default=None,
        help="Colorize entries by type and permissions (default: auto).",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Open a keyboard-navigable, collapsible tree view.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the effective --all/--depth/--color/--theme values as defaults.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace, out: TextIO) -> None:
    """Execute one invocation; raises ``LazyTreeError`` on fatal failures."""
    stored = config.load_config()
    show_hidden = args.all if args.all is not None else config.load_show_hidden(stored)
    max_depth = args.depth if args.depth is not None else config.load_max_depth(stored)
    color_mode = args.color or config.load_color_mode(stored)
    theme_name = args.theme or config.load_theme_name(stored)

    root = Path(args.path)
    try:
        found = root.exists() or root.is_symlink()
    except OSError as exc:
        # An unsearchable parent makes the existence check itself fail.
        raise DirectoryUnreadableError(root.parent, exc) from exc
    if not found:
        raise PathNotFoundError(root)

    if args.save_defaults:
        config.save_defaults(show_hidden, color_mode, theme_name, max_depth)

    theme = resolve_theme(theme_name, no_color=not color_enabled(color_mode, out))
    logger.debug(
        "rendering %s show_hidden=%s max_depth=%s theme=%s", root, show_hidden, max_depth, theme.name
    )
    if args.interactive:
        if not (sys.stdin.isatty() and out.isatty()):
            raise SystemExit("Error: interactive mode requires a terminal")
        run_interactive(root, show_hidden, max_depth, theme)
        return
    write_tree(out, root, show_hidden=show_hidden, max_depth=max_depth, theme=theme)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and display the tree.

    Fatal errors exit with status 1 and an ``Error: ...`` message on stderr.
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        run(args, sys.stdout)
    except LazyTreeError as exc:
        raise SystemExit(f"Error: {exc}") from exc


if __name__ == "__main__":
    main()
