"""Text engine: display width, word wrap and cursor mapping over UTF-8 offsets."""

from terminal_kit.text.buffer import byte_len, flatten, flattened_len, split_lines
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
from terminal_kit.text.width import char_width, pad_to_width, text_width, truncate_to_width
from terminal_kit.text.wrap import (
    DEFAULT_BREAK_CHARS,
    PLAIN_BREAK_CHARS,
    RowRange,
    wrap_text,
    wrapped_row_count,
    wrapped_row_ranges,
)

__all__ = [
    "DEFAULT_BREAK_CHARS",
    "PLAIN_BREAK_CHARS",
    "LineCursor",
    "RowRange",
    "VisualPosition",
    "byte_len",
    "byte_offset_to_cursor",
    "char_width",
    "cursor_to_byte_offset",
    "cursor_visual_position",
    "find_visual_row",
    "flatten",
    "flattened_len",
    "offset_for_column",
    "pad_to_width",
    "split_lines",
    "text_width",
    "truncate_to_width",
    "visual_column",
    "wrap_text",
    "wrapped_row_count",
    "wrapped_row_ranges",
]
