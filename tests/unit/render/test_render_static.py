"""Tests for static tree rendering.

Covers connector/prefix shapes, depth limits, hidden filtering, symlink
names, color painting and fatal directory errors.
"""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazytree.errors import DirectoryUnreadableError
from lazytree.render import iter_tree_lines, render_tree, write_tree
from lazytree.tree_model import fs
from lazytree.tree_model import list_directory_children as real_list
from lazytree.ui_theme import DEFAULT_THEME

HAS_SYMLINKS = hasattr(os, "symlink") and os.name == "posix"


class StaticRenderTests(unittest.TestCase):
    def test_sorted_children_with_hidden_entry_filtered(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            root.mkdir()
            (root / "b.txt").write_text("b\n", encoding="utf-8")
            (root / "a").mkdir()
            (root / ".hidden").write_text("", encoding="utf-8")

            output = render_tree(root)
            with_hidden = render_tree(root, show_hidden=True)

        self.assertEqual(output, "root\n├── a/\n└── b.txt\n")
        self.assertEqual(with_hidden, "root\n├── .hidden\n├── a/\n└── b.txt\n")

    def test_hidden_directories_drop_their_whole_subtree(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            (root / ".git" / "objects").mkdir(parents=True)
            (root / "src").mkdir()
            (root / "src" / ".env").write_text("", encoding="utf-8")
            (root / "src" / "main.py").write_text("", encoding="utf-8")

            hidden_off = render_tree(root).splitlines()
            hidden_on = render_tree(root, show_hidden=True).splitlines()

        self.assertEqual(
            hidden_on,
            ["root", "├── .git/", "│   └── objects/", "└── src/", "    ├── .env", "    └── main.py"],
        )
        self.assertEqual(hidden_off, ["root", "└── src/", "    └── main.py"])

    def test_prefix_keeps_vertical_bar_only_below_non_last_siblings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            (root / "a").mkdir(parents=True)
            (root / "a" / "a1").write_text("", encoding="utf-8")
            (root / "a" / "a2").write_text("", encoding="utf-8")
            (root / "z").mkdir()
            (root / "z" / "z1").write_text("", encoding="utf-8")

            lines = render_tree(root).splitlines()

        self.assertEqual(
            lines,
            [
                "root",
                "├── a/",
                "│   ├── a1",
                "│   └── a2",
                "└── z/",
                "    └── z1",
            ],
        )

    def test_depth_limit_counts_root_as_depth_zero(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            (root / "x" / "y" / "z").mkdir(parents=True)

            depth_one = render_tree(root, max_depth=1)
            depth_zero = render_tree(root, max_depth=0)
            unlimited = render_tree(root)

        self.assertEqual(depth_one, "root\n└── x/\n")
        self.assertEqual(depth_zero, "root\n")
        self.assertEqual(unlimited, "root\n└── x/\n    └── y/\n        └── z/\n")

    def test_empty_directory_prints_only_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "empty"
            root.mkdir()
            self.assertEqual(render_tree(root), "empty\n")

    def test_file_root_is_a_single_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "only.txt"
            target.write_text("", encoding="utf-8")
            self.assertEqual(render_tree(target), "only.txt\n")

    def test_rendering_twice_is_identical(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            for name in ("delta", "alpha", "Charlie", "bravo"):
                (root / name).mkdir(parents=True)
                (root / name / "file.txt").write_text("", encoding="utf-8")

            first = render_tree(root, theme=DEFAULT_THEME)
            second = render_tree(root, theme=DEFAULT_THEME)

        self.assertEqual(first, second)

    def test_theme_paints_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            (root / "docs").mkdir(parents=True)
            (root / "notes.md").write_text("", encoding="utf-8")
            if os.name == "posix":
                os.chmod(root / "docs", 0o755)
                os.chmod(root / "notes.md", 0o644)

            lines = render_tree(root, theme=DEFAULT_THEME).splitlines()

        self.assertEqual(lines[1], f"├── {DEFAULT_THEME.directory}docs/{DEFAULT_THEME.reset}")
        self.assertEqual(lines[2], "└── notes.md")

    @unittest.skipUnless(HAS_SYMLINKS, "requires POSIX symlinks")
    def test_symlink_names_show_targets_and_linked_directories_are_listed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            (root / "real").mkdir(parents=True)
            (root / "real" / "inside.txt").write_text("", encoding="utf-8")
            (root / "file.txt").write_text("", encoding="utf-8")
            os.symlink("real", root / "dirlink")
            os.symlink("file.txt", root / "filelink")
            os.symlink("/nonexistent", root / "link")

            lines = render_tree(root).splitlines()

        self.assertEqual(
            lines,
            [
                "root",
                "├── dirlink/ -> real",
                "│   └── inside.txt",
                "├── file.txt",
                "├── filelink -> file.txt",
                "├── link -> [broken link]",
                "└── real/",
                "    └── inside.txt",
            ],
        )

    @unittest.skipUnless(HAS_SYMLINKS, "requires POSIX symlinks")
    def test_symlink_back_to_an_ancestor_is_listed_but_not_descended(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            (root / "sub").mkdir(parents=True)
            os.symlink("..", root / "sub" / "up")
            os.symlink(".", root / "self")

            lines = render_tree(root).splitlines()

        self.assertEqual(
            lines,
            [
                "root",
                "├── self/ -> .",
                "└── sub/",
                "    └── up/ -> ..",
            ],
        )

    def test_entry_with_unreadable_metadata_is_listed_uncolored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            root.mkdir()
            (root / "a.txt").write_text("", encoding="utf-8")
            (root / "b.zip").write_text("", encoding="utf-8")
            real_read = fs.read_entry_metadata

            def fake_read(path: Path):
                if path.name == "b.zip":
                    return None
                return real_read(path)

            with mock.patch("lazytree.tree_model.fs.read_entry_metadata", side_effect=fake_read):
                lines = render_tree(root, theme=DEFAULT_THEME).splitlines()

        self.assertEqual(len(lines), 3)
        self.assertEqual(lines[2], "└── b.zip")

    def test_unreadable_subdirectory_is_fatal_after_partial_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            (root / "locked").mkdir(parents=True)
            (root / "open.txt").write_text("", encoding="utf-8")

            def fake_list(directory: Path, show_hidden: bool):
                if directory.name == "locked":
                    return [], PermissionError(13, "Permission denied")
                return real_list(directory, show_hidden)

            emitted: list[str] = []
            with mock.patch("lazytree.render.list_directory_children", side_effect=fake_list):
                with self.assertRaises(DirectoryUnreadableError) as ctx:
                    for line in iter_tree_lines(root):
                        emitted.append(line)

        self.assertEqual(emitted, ["root", "├── locked/"])
        self.assertEqual(ctx.exception.path.name, "locked")

    def test_write_tree_streams_lines_and_counts_them(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "root"
            (root / "a").mkdir(parents=True)
            out = io.StringIO()
            count = write_tree(out, root)

        self.assertEqual(count, 2)
        self.assertEqual(out.getvalue(), "root\n└── a/\n")


if __name__ == "__main__":
    unittest.main()
