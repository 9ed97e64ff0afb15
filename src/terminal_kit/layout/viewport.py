"""Viewport scroller - keep the selected row visible with directional anchoring.

When the selection leaves the visible window the viewport jumps just far
enough to bring it back: moving above the window anchors the selection to
the first visible row, moving below anchors it to the last. Selections
already in view never move the viewport.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from terminal_kit.layout.rect import Rect


def calculate_viewport_offset(selected: int, visible_height: int, current_offset: int) -> int:
    """
    Compute the scroll offset that keeps selected visible.

    Args:
        selected: Selected row index
        visible_height: Rows in the viewport; values below 1 are treated as 1
        current_offset: Index of the first visible row before the update

    Returns:
        New index of the first visible row
    """
    height = max(1, visible_height)
    if selected < current_offset:
        return max(0, selected)
    if selected >= current_offset + height:
        return max(0, selected - (height - 1))
    return current_offset


def select_next(selected: int, length: int) -> int:
    """Next index, wrapping from the last item to the first."""
    if length <= 0:
        return 0
    return (selected + 1) % length


def select_prev(selected: int, length: int) -> int:
    """Previous index, wrapping from the first item to the last."""
    if length <= 0:
        return 0
    if selected <= 0:
        return length - 1
    return selected - 1


@dataclass
class ListState:
    """Selection and scroll offset shared by every list-like widget."""
    selected: int = 0
    viewport_offset: int = 0

    def clamp_selection(self, length: int) -> None:
        """Clamp selection into [0, length - 1], or 0 for an empty list."""
        if length <= 0:
            self.selected = 0
        elif self.selected >= length:
            self.selected = length - 1

    def set_selected(self, idx: int, length: int) -> None:
        self.selected = 0 if length <= 0 else max(0, min(idx, length - 1))

    def select_next(self, length: int) -> None:
        self.selected = select_next(self.selected, length)

    def select_prev(self, length: int) -> None:
        self.selected = select_prev(self.selected, length)

    def jump_top(self) -> None:
        self.selected = 0

    def jump_bottom(self, length: int) -> None:
        if length > 0:
            self.selected = length - 1

    def scroll_lines(self, delta: int, length: int) -> None:
        """Move selection by delta rows, clamped to the list (no wrapping)."""
        if length <= 0:
            self.selected = 0
            return
        self.selected = max(0, min(self.selected + delta, length - 1))

    def page_down(self, visible_height: int, length: int) -> None:
        self.scroll_lines(max(1, visible_height), length)

    def page_up(self, visible_height: int, length: int) -> None:
        self.scroll_lines(-max(1, visible_height), length)

    def update_offset(self, visible_height: int) -> None:
        """Re-anchor viewport_offset around the current selection."""
        self.viewport_offset = calculate_viewport_offset(
            self.selected, visible_height, self.viewport_offset
        )

    def visible_range(self, visible_height: int, length: int) -> range:
        """Indices drawn for the current selection; anchors first."""
        offset = calculate_viewport_offset(self.selected, visible_height, self.viewport_offset)
        return range(offset, min(offset + max(1, visible_height), max(0, length)))


def index_at_content(
    content_area: Rect,
    selected: int,
    viewport_offset: int,
    total: int,
    col: int,
    row: int,
) -> Optional[int]:
    """
    Map a pointer position to the list index drawn under it.

    Returns None when the point is outside the content area, the list is
    empty or the area has no height. Rows past the last item map to the
    last item.
    """
    if total <= 0 or content_area.height <= 0:
        return None
    if not content_area.contains(col, row):
        return None
    offset = calculate_viewport_offset(selected, content_area.height, viewport_offset)
    return min(offset + (row - content_area.y), total - 1)


def index_at(
    list_area: Rect,
    selected: int,
    viewport_offset: int,
    total: int,
    col: int,
    row: int,
) -> Optional[int]:
    """Same as index_at_content, for a list drawn inside a one-cell border."""
    return index_at_content(list_area.inner(1), selected, viewport_offset, total, col, row)
