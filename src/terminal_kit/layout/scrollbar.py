"""Scrollbar geometry - thumb size and position, plus the drag inverse.

All arithmetic is integer and saturating: degenerate inputs (empty track,
empty content, content that fits) produce a valid geometry instead of an
error.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from terminal_kit.layout.rect import Rect


class ScrollbarGeometry(NamedTuple):
    """Thumb geometry relative to the top of the track."""
    thumb_height: int
    thumb_top: int
    max_scroll: int


class BarPosition(NamedTuple):
    """Where a vertical bar is drawn: column, first row and track height."""
    x: int
    top: int
    height: int


class InputScrollbar(NamedTuple):
    """Absolute geometry of a text box's internal scrollbar."""
    x: int
    top: int
    height: int
    thumb_top: int
    thumb_height: int
    max_scroll: int


def compute_thumb(track_height: int, visible: int, total: int, scroll: int) -> ScrollbarGeometry:
    """
    Compute thumb size and position for a vertical scroller.

    Args:
        track_height: Drawable track height in rows
        visible: Number of content rows visible at once
        total: Total content rows
        scroll: Index of the topmost visible content row

    Returns:
        ScrollbarGeometry where thumb_height >= 1, thumb_top lies in
        [0, track_height - thumb_height] and max_scroll = max(0, total - visible)
    """
    track_height = max(0, track_height)
    max_scroll = max(0, total - visible)
    if total <= 0:
        thumb_height = 1
    else:
        thumb_height = max(1, min(track_height, track_height * max(0, visible) // total))
    max_thumb_top = max(0, track_height - thumb_height)
    if max_scroll == 0:
        thumb_top = 0
    else:
        thumb_top = max(0, min(scroll, max_scroll)) * max_thumb_top // max_scroll
    return ScrollbarGeometry(thumb_height, thumb_top, max_scroll)


def start_drag(pointer_row: int, thumb_top: int, thumb_height: int) -> tuple[bool, int]:
    """
    Begin a drag at a track-relative row.

    Returns (within_thumb, grab_offset). Clicking the thumb keeps the grab
    point under the pointer; clicking the bare track grabs the thumb by its
    middle so that it centres on the pointer.
    """
    within = thumb_top <= pointer_row < thumb_top + thumb_height
    grab_offset = pointer_row - thumb_top if within else thumb_height // 2
    return within, grab_offset


def desired_thumb_top(
    pointer_row: int,
    track_top: int,
    track_height: int,
    grab_offset: int,
    thumb_height: int,
) -> tuple[int, int]:
    """
    Thumb position that follows an absolute pointer row during a drag.

    Returns (desired_top, max_thumb_top) with desired_top clamped into
    [0, max_thumb_top].
    """
    max_thumb_top = max(0, track_height - thumb_height)
    desired = max(0, pointer_row - track_top - grab_offset)
    return min(desired, max_thumb_top), max_thumb_top


def thumb_to_scroll(thumb_top: int, max_thumb_top: int, max_scroll: int) -> int:
    """
    Map a thumb position back to a scroll offset.

    Rounds up, so the returned offset is the smallest one whose forward
    mapping lands the thumb at thumb_top. That makes a drag followed by a
    re-render stable: scroll -> thumb -> scroll -> thumb never drifts.
    """
    if max_thumb_top <= 0 or max_scroll <= 0:
        return 0
    thumb_top = max(0, min(thumb_top, max_thumb_top))
    return -(-thumb_top * max_scroll // max_thumb_top)


def bar_geometry(area: Rect, reserve_bottom_row: bool = False) -> BarPosition:
    """Bar in the rightmost column of area, optionally leaving the last row free."""
    height = area.height
    if reserve_bottom_row:
        height = max(0, height - 1)
    return BarPosition(area.x + max(0, area.width - 1), area.y, height)


def internal_input_geometry(
    area: Rect,
    content_height: int,
    total_rows: int,
    scroll: int,
) -> Optional[InputScrollbar]:
    """
    Scrollbar geometry for a multi-line text box, in absolute coordinates.

    Returns None when every row fits or the area is empty.
    """
    if total_rows <= content_height or area.is_empty:
        return None
    height = min(content_height, area.height)
    if height <= 0:
        return None
    geom = compute_thumb(height, content_height, total_rows, scroll)
    return InputScrollbar(
        x=area.x + area.width - 1,
        top=area.y,
        height=height,
        thumb_top=area.y + geom.thumb_top,
        thumb_height=geom.thumb_height,
        max_scroll=max(0, total_rows - content_height),
    )
