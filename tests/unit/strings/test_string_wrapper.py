"""Tests for splitting unterminated string literals at the width limit."""

from __future__ import annotations

import unittest

from commentwrap import StringWrapper, TextBuffer, WrapConfig
from commentwrap.strings import find_closing_delimiter

OPEN_LITERAL = 'x = "alpha beta gamma delta'


class StringWrapperTests(unittest.TestCase):
    def _wrapper(self, width: int = 20, **kwargs) -> StringWrapper:
        return StringWrapper(WrapConfig(width=width), **kwargs)

    def test_unterminated_literal_is_split_into_adjacent_literals(self) -> None:
        buffer = TextBuffer(OPEN_LITERAL)
        result = self._wrapper().wrap(buffer, 4)
        self.assertEqual(buffer.text, 'x = "alpha beta "\n"gamma delta')
        self.assertTrue(result.changed)
        self.assertEqual(result.lines_wrapped, 1)

    def test_fragments_keep_string_content(self) -> None:
        buffer = TextBuffer(OPEN_LITERAL)
        self._wrapper().wrap(buffer, 4)
        first, second = buffer.text.split("\n")
        self.assertEqual(first[5:-1] + second[1:], OPEN_LITERAL[5:])

    def test_align_indents_continuation_under_literal(self) -> None:
        buffer = TextBuffer(OPEN_LITERAL)
        self._wrapper(align=True).wrap(buffer, 4)
        self.assertEqual(buffer.text, 'x = "alpha beta "\n    "gamma delta')

    def test_escaped_newline_style(self) -> None:
        buffer = TextBuffer(OPEN_LITERAL)
        self._wrapper(line_end="\\", line_continue="").wrap(buffer, 4)
        self.assertEqual(buffer.text, 'x = "alpha beta \\\ngamma delta')

    def test_long_remainder_is_split_repeatedly(self) -> None:
        buffer = TextBuffer('x = "say \\"hi\\" to everyone in the room')
        result = self._wrapper().wrap(buffer, 4)
        self.assertEqual(buffer.text, 'x = "say \\"hi\\" to "\n"everyone in the "\n"room')
        self.assertEqual(result.lines_wrapped, 2)

    def test_split_on_whitespace_keeps_space_with_preceding_fragment(self) -> None:
        buffer = TextBuffer(OPEN_LITERAL)
        result = self._wrapper(width=16).wrap(buffer, 4)
        self.assertEqual(buffer.text, 'x = "alpha "\n"beta gamma "\n"delta')
        self.assertEqual(result.lines_wrapped, 2)

    def test_terminated_literal_is_left_alone(self) -> None:
        text = 'x = "alpha beta gamma delta" + suffix_value'
        buffer = TextBuffer(text)
        result = self._wrapper().wrap(buffer, 4)
        self.assertEqual(buffer.text, text)
        self.assertFalse(result.changed)

    def test_literal_within_width_is_left_alone(self) -> None:
        buffer = TextBuffer('x = "short')
        self.assertFalse(self._wrapper().wrap(buffer, 4).changed)
        self.assertEqual(buffer.text, 'x = "short')

    def test_position_not_on_start_delimiter_is_a_no_op(self) -> None:
        buffer = TextBuffer(OPEN_LITERAL)
        self.assertFalse(self._wrapper().wrap(buffer, 2).changed)
        self.assertEqual(buffer.text, OPEN_LITERAL)

    def test_single_long_word_is_not_split(self) -> None:
        text = 'x = "' + "a" * 30
        buffer = TextBuffer(text)
        self.assertFalse(self._wrapper().wrap(buffer, 4).changed)
        self.assertEqual(buffer.text, text)

    def test_following_line_is_never_merged(self) -> None:
        buffer = TextBuffer(OPEN_LITERAL + '\n"existing"')
        self._wrapper().wrap(buffer, 4)
        self.assertEqual(buffer.text, 'x = "alpha beta "\n"gamma delta\n"existing"')

    def test_point_travels_with_moved_text(self) -> None:
        buffer = TextBuffer(OPEN_LITERAL, point=len(OPEN_LITERAL))
        result = self._wrapper().wrap(buffer, 4)
        self.assertEqual(result.point, len(buffer.text))
        self.assertEqual(buffer.point, len(buffer.text))

    def test_invalid_delimiters_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            StringWrapper(start_delim="")
        with self.assertRaises(ValueError):
            StringWrapper(line_end="\n")


class FindClosingDelimiterTests(unittest.TestCase):
    def test_escaped_delimiter_is_skipped(self) -> None:
        text = 'a\\"b"c'
        self.assertEqual(find_closing_delimiter(text, 0, len(text), '"'), 4)

    def test_missing_delimiter(self) -> None:
        self.assertIsNone(find_closing_delimiter("abc", 0, 3, '"'))

    def test_multi_character_delimiter(self) -> None:
        text = 'abc"""x'
        self.assertEqual(find_closing_delimiter(text, 0, len(text), '"""'), 3)


if __name__ == "__main__":
    unittest.main()
