"""Styled text runs and helpers that paint them onto a canvas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, Optional

from rich.style import Style

from terminal_kit.layout.rect import Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.text.width import text_width
from terminal_kit.text.wrap import DEFAULT_BREAK_CHARS, wrap_text


@dataclass(frozen=True)
class Span:
    """A run of text in a single style."""
    text: str
    style: Style = field(default_factory=Style)

    @property
    def width(self) -> int:
        return text_width(self.text)


@dataclass
class Line:
    """One row of styled spans; style is layered under every span."""
    spans: list[Span] = field(default_factory=list)
    style: Style = field(default_factory=Style)

    @classmethod
    def plain(cls, text: str, style: Optional[Style] = None) -> Line:
        return cls([Span(text, style or Style())])

    @classmethod
    def of(cls, spans: Iterable[Span], style: Optional[Style] = None) -> Line:
        return cls(list(spans), style or Style())

    @property
    def width(self) -> int:
        return sum(span.width for span in self.spans)

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)

    def append(self, text: str, style: Optional[Style] = None) -> Line:
        self.spans.append(Span(text, style or Style()))
        return self

    def patch_style(self, style: Style) -> Line:
        """Return a copy with style layered over the line style."""
        return Line(list(self.spans), self.style + style)


def render_line(
    canvas: Canvas,
    area: Rect,
    line: Line,
    base_style: Optional[Style] = None,
) -> int:
    """
    Paint a line into the first row of area, clipped to its width.

    The rest of the row is filled with base_style when one is given.

    Returns:
        Columns written
    """
    if area.is_empty:
        return 0
    if base_style is not None:
        canvas.fill(area.with_height(1), base_style)

    col = area.x
    remaining = area.width
    for span in line.spans:
        if remaining <= 0:
            break
        written = canvas.put_text(col, area.y, span.text, line.style + span.style, remaining)
        col += written
        remaining -= written
    return area.width - remaining


def render_lines(
    canvas: Canvas,
    area: Rect,
    lines: Iterable[Line],
    base_style: Optional[Style] = None,
) -> int:
    """Paint lines top to bottom until the area runs out. Returns rows painted."""
    rows = 0
    for line in lines:
        if rows >= area.height:
            break
        render_line(canvas, Rect(area.x, area.y + rows, area.width, 1), line, base_style)
        rows += 1
    return rows


def render_paragraph(
    canvas: Canvas,
    area: Rect,
    text: str,
    style: Optional[Style] = None,
    break_chars: AbstractSet[str] = DEFAULT_BREAK_CHARS,
) -> int:
    """
    Wrap text to the area width and paint as many rows as fit.

    Returns:
        Number of wrapped rows the text needs, which may exceed area.height
    """
    if area.is_empty:
        return 0
    rows = wrap_text(text, area.width, break_chars)
    render_lines(canvas, area, (Line.plain(row, style) for row in rows))
    return len(rows)
