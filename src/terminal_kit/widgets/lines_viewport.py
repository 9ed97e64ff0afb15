"""Paint a window of pre-wrapped lines split across two backing lists."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.style import Style

from terminal_kit.layout.rect import Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.styled import Line, render_lines


def render_lines_slice(
    canvas: Canvas,
    area: Rect,
    base_style: Optional[Style],
    history_lines: Sequence[Line],
    tail_lines: Sequence[Line],
    start: int,
) -> int:
    """
    Render area.height rows starting at row start of history + tail.

    The two sequences are treated as one without concatenating them, so
    a long transcript plus a live tail can scroll without copying either.

    Returns:
        Rows painted
    """
    area = area.intersection(canvas.area)
    if area.is_empty:
        return 0
    if base_style is not None:
        canvas.set_style(area, base_style)

    start = max(0, start)
    remaining = area.height
    history_len = len(history_lines)

    if start < history_len:
        visible = list(history_lines[start: start + remaining])
        visible.extend(tail_lines[: remaining - len(visible)])
    else:
        tail_start = start - history_len
        visible = list(tail_lines[tail_start: tail_start + remaining])

    return render_lines(canvas, area, visible)
