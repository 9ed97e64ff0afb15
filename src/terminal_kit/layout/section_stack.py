"""Vertically stacked sections of styled lines with shared padding."""

from __future__ import annotations

from typing import Callable, Literal, Optional, Sequence

from rich.style import Style

from terminal_kit.layout.rect import Padding, Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.styled import Line, render_line
from terminal_kit.theme import Theme, ThemeElement

Section = list[Line]
Justify = Literal["left", "center", "right"]


def wrap_section(title: str, theme: Theme, body: Sequence[Line]) -> Optional[Section]:
    """Prefix body with a bold title and a blank line; None when body is empty."""
    if not body:
        return None
    heading = Line.plain(title, theme.style(ThemeElement.PRIMARY) + Style(bold=True))
    return [heading, Line(), *body]


def _justified(row: Rect, width: int, justify: Justify) -> Rect:
    if justify == "left" or width >= row.width:
        return row
    shift = row.width - width if justify == "right" else (row.width - width) // 2
    return Rect(row.x + shift, row.y, row.width - shift, 1)


def render_block_stack(
    canvas: Canvas,
    inner: Rect,
    blocks: Sequence[Optional[Sequence[Line]]],
    padding: Padding = Padding(),
    justify: Justify = "left",
    block_style: Optional[Callable[[int, Sequence[Line]], Optional[Style]]] = None,
) -> int:
    """
    Paint sections top to bottom, each surrounded by padding.

    Empty and None sections are skipped but keep their index, so
    block_style sees the position in blocks. Each section is as tall as
    its lines plus vertical padding; the last one that fits is cut at the
    bottom of inner. Lines are clipped, not wrapped.

    Returns:
        Rows used
    """
    if inner.is_empty:
        return 0

    cursor = inner.y
    for idx, lines in enumerate(blocks):
        if not lines:
            continue
        if cursor >= inner.bottom:
            break
        height = min(len(lines) + padding.vertical, inner.bottom - cursor)
        area = Rect(inner.x, cursor, inner.width, height)

        style = block_style(idx, lines) if block_style else None
        if style is not None:
            canvas.fill(area, style)

        content = area.pad(padding)
        for row, line in enumerate(lines[: content.height]):
            row_area = Rect(content.x, content.y + row, content.width, 1)
            render_line(canvas, _justified(row_area, line.width, justify), line)
        cursor += height
    return cursor - inner.y
