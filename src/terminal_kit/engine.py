"""Pure entry points of the layout engine.

These are the four computations every interactive widget is built on.
None of them keeps state or raises for degenerate input.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from terminal_kit.layout.scrollbar import ScrollbarGeometry, compute_thumb
from terminal_kit.layout.viewport import calculate_viewport_offset
from terminal_kit.text.buffer import flatten
from terminal_kit.text.cursor import VisualPosition, cursor_visual_position
from terminal_kit.text.wrap import RowRange, wrapped_row_ranges

Buffer = Union[str, Sequence[str]]


def _flattened(buffer: Buffer) -> str:
    if isinstance(buffer, str):
        return buffer
    return flatten(buffer)


def compute_wrap(text: Buffer, width: int) -> list[RowRange]:
    """Visual row ranges of text wrapped at width; never empty."""
    return wrapped_row_ranges(_flattened(text), width)


def compute_cursor_visual(buffer: Buffer, cursor: int, width: int) -> VisualPosition:
    """(row, column) of a byte-offset cursor in the wrapped buffer."""
    return cursor_visual_position(_flattened(buffer), cursor, width)


def compute_viewport(selected: int, visible_height: int, offset: int) -> int:
    """Scroll offset that keeps selected visible, anchored by direction of travel."""
    return calculate_viewport_offset(selected, visible_height, offset)


def compute_scrollbar(
    track_height: int,
    visible: int,
    total: int,
    offset: int,
) -> Optional[ScrollbarGeometry]:
    """Thumb geometry, or None when there is no track, no content or nothing visible."""
    if track_height <= 0 or total <= 0 or visible <= 0:
        return None
    return compute_thumb(track_height, visible, total, offset)
