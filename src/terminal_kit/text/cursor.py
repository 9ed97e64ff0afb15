"""Cursor mapper - byte offsets to visual rows/columns and line/column positions.

Two independent mappings live here:

- byte offset -> (row, column) under a wrap result, used to place the
  terminal cursor inside a wrapped text box
- (line, char index) <-> byte offset over the unwrapped line list, used
  for buffer-native movement (up/down by logical line, home/end)

Character indices are code point counts. They are converted to byte
offsets by walking the line, never by byte arithmetic.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import AbstractSet, NamedTuple, Sequence

from terminal_kit.text.buffer import byte_len, byte_slice, char_byte_len, iter_chars
from terminal_kit.text.width import char_width, text_width
from terminal_kit.text.wrap import DEFAULT_BREAK_CHARS, RowRange, wrapped_row_ranges


class VisualPosition(NamedTuple):
    """Cursor position in wrapped rows; col is measured in terminal cells."""
    row: int
    col: int


class LineCursor(NamedTuple):
    """Cursor position in the unwrapped buffer; col counts characters."""
    line: int
    col: int


def find_visual_row(ranges: Sequence[RowRange], offset: int) -> int:
    """
    Find the row index that owns a byte offset.

    The owning row is the last one whose start is at or before the offset.
    An offset on the boundary shared by two rows belongs to the later row,
    the end of text belongs to the last row, and an offset sitting on a
    consumed separator belongs to the row the separator ended.
    """
    if not ranges:
        return 0
    starts = [start for start, _ in ranges]
    return max(0, bisect_right(starts, offset) - 1)


def visual_column(text: str, start: int, offset: int) -> int:
    """Summed display width of the characters in [start, offset)."""
    if offset <= start:
        return 0
    return text_width(byte_slice(text, start, offset))


def cursor_visual_position(
    text: str,
    offset: int,
    width: int,
    break_chars: AbstractSet[str] = DEFAULT_BREAK_CHARS,
) -> VisualPosition:
    """
    Map a byte offset to its (row, column) under wrapping at width.

    The offset is clamped to [0, len(text)] first, then into the owning
    row's range.
    """
    offset = max(0, min(offset, byte_len(text)))
    ranges = wrapped_row_ranges(text, width, break_chars)
    row = find_visual_row(ranges, offset)
    start, end = ranges[row]
    clamped = max(start, min(offset, end))
    return VisualPosition(row, visual_column(text, start, clamped))


def cursor_to_byte_offset(lines: Sequence[str], cursor: tuple[int, int]) -> int:
    """
    Convert a (line, char index) cursor to a byte offset in the flattened buffer.

    A column past the end of its line clamps to the line end; a line past
    the end of the buffer clamps to the end of the buffer.
    """
    row, col = cursor
    if not lines:
        return 0
    row = max(0, row)
    col = max(0, col)

    offset = 0
    for idx, line in enumerate(lines):
        if idx < row:
            offset += byte_len(line) + 1
            continue
        for chars_seen, (byte_idx, _ch) in enumerate(iter_chars(line)):
            if chars_seen == col:
                return offset + byte_idx
        return offset + byte_len(line)

    # Row past the last line: end of buffer, without the phantom separator
    return offset - 1


def byte_offset_to_cursor(lines: Sequence[str], offset: int) -> LineCursor:
    """
    Convert a byte offset in the flattened buffer to a (line, char index) cursor.

    An offset inside a multi-byte character floors to that character. An
    offset past the end maps to the end of the last line.
    """
    if not lines:
        return LineCursor(0, 0)

    remaining = max(0, offset)
    for idx, line in enumerate(lines):
        line_bytes = byte_len(line)
        if remaining <= line_bytes:
            chars = 0
            consumed = 0
            for ch in line:
                size = char_byte_len(ch)
                if consumed + size > remaining:
                    break
                consumed += size
                chars += 1
            return LineCursor(idx, chars)
        remaining -= line_bytes + 1

    last = len(lines) - 1
    return LineCursor(last, len(lines[last]))


def offset_for_column(text: str, row: RowRange, goal_col: int) -> int:
    """
    Find the furthest byte offset in a row whose visual column is <= goal_col.

    Used for vertical movement across wrapped rows, where the cursor keeps
    its column as closely as the target row allows.
    """
    start, end = row
    target = start
    acc = 0
    for off, ch in iter_chars(byte_slice(text, start, end), start):
        w = char_width(ch)
        if acc + w > goal_col:
            break
        acc += w
        target = off + char_byte_len(ch)
    return target
