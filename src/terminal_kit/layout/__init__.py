"""Layout geometry: rects, viewport scrolling, scrollbars and dialog regions."""

from terminal_kit.layout.rect import Padding, Rect, split_rows, split_vertical
from terminal_kit.layout.scrollbar import (
    ScrollbarGeometry,
    compute_thumb,
    desired_thumb_top,
    start_drag,
    thumb_to_scroll,
)
from terminal_kit.layout.viewport import (
    ListState,
    calculate_viewport_offset,
    index_at,
    index_at_content,
    select_next,
    select_prev,
)

__all__ = [
    "ListState",
    "Padding",
    "Rect",
    "ScrollbarGeometry",
    "calculate_viewport_offset",
    "compute_thumb",
    "desired_thumb_top",
    "index_at",
    "index_at_content",
    "select_next",
    "select_prev",
    "split_rows",
    "split_vertical",
    "start_drag",
    "thumb_to_scroll",
]
