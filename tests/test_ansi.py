from __future__ import annotations

import unittest

from lazytree.ansi import clip_ansi_line, selected_with_ansi


class AnsiHelpersTests(unittest.TestCase):
    def test_clip_keeps_escapes_and_counts_visible_columns(self) -> None:
        text = "├── \033[1;34mdocs/\033[0m"
        self.assertEqual(clip_ansi_line(text, 6), "├── \033[1;34mdo")
        self.assertEqual(clip_ansi_line(text, 9), text)
        self.assertEqual(clip_ansi_line(text, 0), "")

    def test_wide_characters_take_two_columns(self) -> None:
        self.assertEqual(clip_ansi_line("日本", 4), "日本")
        self.assertEqual(clip_ansi_line("日本語", 5), "日本")

    def test_selection_survives_internal_resets(self) -> None:
        self.assertEqual(
            selected_with_ansi("a\033[0mb"),
            "\033[7ma\033[0;7mb\033[0m",
        )
        self.assertEqual(selected_with_ansi(""), "")


if __name__ == "__main__":
    unittest.main()
