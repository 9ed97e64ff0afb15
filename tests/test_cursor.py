"""Tests for the cursor mapper."""

import pytest
from conftest import WIDTHS, WRAP_CORPUS

from terminal_kit.engine import compute_cursor_visual
from terminal_kit.text.buffer import byte_len
from terminal_kit.text.cursor import (
    LineCursor,
    VisualPosition,
    byte_offset_to_cursor,
    cursor_to_byte_offset,
    cursor_visual_position,
    find_visual_row,
    offset_for_column,
    visual_column,
)
from terminal_kit.text.wrap import wrapped_row_ranges


class TestVisualPosition:
    """Byte offset to (row, column) under wrapping."""

    def test_row_boundary_belongs_to_later_row(self) -> None:
        assert compute_cursor_visual("hello world", 6, 5) == VisualPosition(1, 0)

    def test_consumed_separator_belongs_to_earlier_row(self) -> None:
        assert compute_cursor_visual("hello world", 5, 5) == VisualPosition(0, 5)

    def test_end_of_text(self) -> None:
        assert compute_cursor_visual("hello world", 11, 5) == VisualPosition(1, 5)

    def test_clamped(self) -> None:
        assert compute_cursor_visual("hello world", 100, 5) == VisualPosition(1, 5)
        assert compute_cursor_visual("hello world", -3, 5) == VisualPosition(0, 0)

    def test_wide_columns(self) -> None:
        assert cursor_visual_position("日本語", 3, 4) == VisualPosition(0, 2)
        assert cursor_visual_position("日本語", 6, 4) == VisualPosition(1, 0)
        assert cursor_visual_position("日本語", 9, 4) == VisualPosition(1, 2)

    def test_after_newline(self) -> None:
        assert compute_cursor_visual("ab\ncd", 2, 10) == VisualPosition(0, 2)
        assert compute_cursor_visual("ab\ncd", 3, 10) == VisualPosition(1, 0)

    def test_line_buffer(self) -> None:
        assert compute_cursor_visual(["ab", "cd"], 4, 10) == VisualPosition(1, 1)

    def test_empty(self) -> None:
        assert compute_cursor_visual("", 0, 10) == VisualPosition(0, 0)

    @pytest.mark.parametrize("text", WRAP_CORPUS)
    @pytest.mark.parametrize("width", WIDTHS)
    def test_always_inside_a_row(self, text: str, width: int) -> None:
        rows = wrapped_row_ranges(text, width)
        for offset in range(byte_len(text) + 1):
            pos = cursor_visual_position(text, offset, width)
            assert 0 <= pos.row < len(rows)
            assert pos.col >= 0


class TestFindVisualRow:

    def test_empty_ranges(self) -> None:
        assert find_visual_row([], 5) == 0

    def test_last_start_at_or_before(self) -> None:
        ranges = [(0, 5), (6, 11)]
        assert find_visual_row(ranges, 0) == 0
        assert find_visual_row(ranges, 5) == 0
        assert find_visual_row(ranges, 6) == 1
        assert find_visual_row(ranges, 11) == 1

    def test_visual_column(self) -> None:
        assert visual_column("日本語", 0, 6) == 4
        assert visual_column("abc", 2, 1) == 0


class TestLineCursor:
    """(line, char) cursor to byte offset and back."""

    def test_to_offset(self) -> None:
        lines = ["hello", "日本語"]
        assert cursor_to_byte_offset(lines, (0, 0)) == 0
        assert cursor_to_byte_offset(lines, (1, 0)) == 6
        assert cursor_to_byte_offset(lines, (1, 2)) == 12

    def test_column_past_end_clamps(self) -> None:
        assert cursor_to_byte_offset(["hello", "日本語"], (1, 99)) == 15

    def test_line_past_end_clamps(self) -> None:
        assert cursor_to_byte_offset(["hello", "日本語"], (5, 0)) == 15

    def test_empty_buffer(self) -> None:
        assert cursor_to_byte_offset([], (3, 3)) == 0
        assert byte_offset_to_cursor([], 3) == LineCursor(0, 0)

    def test_from_offset(self) -> None:
        lines = ["hello", "日本語"]
        assert byte_offset_to_cursor(lines, 5) == LineCursor(0, 5)
        assert byte_offset_to_cursor(lines, 6) == LineCursor(1, 0)
        assert byte_offset_to_cursor(lines, 9) == LineCursor(1, 1)

    def test_inside_multibyte_floors(self) -> None:
        assert byte_offset_to_cursor(["日本語"], 4) == LineCursor(0, 1)

    def test_past_end(self) -> None:
        assert byte_offset_to_cursor(["ab", "日本"], 100) == LineCursor(1, 2)

    def test_round_trip(self, sample_lines: list[str]) -> None:
        lines = sample_lines + ["e\u0301\u200d!"]
        for line_idx, line in enumerate(lines):
            for col in range(len(line) + 1):
                offset = cursor_to_byte_offset(lines, (line_idx, col))
                assert byte_offset_to_cursor(lines, offset) == (line_idx, col)


class TestOffsetForColumn:

    def test_furthest_offset_within_goal(self) -> None:
        assert offset_for_column("日本語", (0, 9), 3) == 3
        assert offset_for_column("日本語", (0, 9), 4) == 6

    def test_goal_past_row_end(self) -> None:
        assert offset_for_column("hello world", (6, 11), 40) == 11

    def test_goal_zero(self) -> None:
        assert offset_for_column("hello world", (6, 11), 0) == 6
