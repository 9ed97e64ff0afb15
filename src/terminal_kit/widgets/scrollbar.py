"""Scrollbar painting and pointer dragging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rich.style import Style

from terminal_kit.layout.scrollbar import (
    ScrollbarGeometry,
    compute_thumb,
    desired_thumb_top,
    start_drag,
    thumb_to_scroll,
)
from terminal_kit.render.canvas import Canvas
from terminal_kit.theme import Theme, ThemeElement

THUMB_GLYPH = "█"


def render_scrollbar(
    canvas: Canvas,
    x: int,
    top: int,
    height: int,
    geometry: ScrollbarGeometry,
    theme: Theme,
    track: bool = True,
) -> None:
    """
    Paint a vertical scrollbar in column x.

    With track=True the whole column is painted as track and thumb
    backgrounds. Otherwise only the thumb is drawn, as a solid glyph over
    whatever is already there.
    """
    thumb_end = geometry.thumb_top + geometry.thumb_height
    track_style = theme.style(ThemeElement.BACKGROUND_TRACK)
    thumb_style = theme.style(ThemeElement.BACKGROUND_THUMB)
    glyph_style = Style(color=theme.tertiary)

    for row in range(max(0, height)):
        in_thumb = geometry.thumb_top <= row < thumb_end
        y = top + row
        if track:
            canvas.put_char(x, y, " ", thumb_style if in_thumb else track_style)
        elif in_thumb:
            canvas.put_char(x, y, THUMB_GLYPH, glyph_style)


@dataclass
class ScrollbarDrag:
    """
    Pointer drag on a scrollbar track.

    press() starts a drag and returns the new scroll offset when the click
    landed on the bare track (the thumb jumps to centre on the pointer),
    or None when it grabbed the thumb itself. drag() returns the offset
    that keeps the grab point under the pointer.
    """
    active: bool = False
    grab_offset: int = 0

    def press(
        self,
        pointer_row: int,
        track_top: int,
        track_height: int,
        visible: int,
        total: int,
        scroll: int,
    ) -> Optional[int]:
        geom = compute_thumb(track_height, visible, total, scroll)
        within, self.grab_offset = start_drag(pointer_row - track_top, geom.thumb_top, geom.thumb_height)
        self.active = True
        if within:
            return None
        return self._scroll_for(pointer_row, track_top, track_height, geom)

    def drag(
        self,
        pointer_row: int,
        track_top: int,
        track_height: int,
        visible: int,
        total: int,
        scroll: int,
    ) -> Optional[int]:
        if not self.active:
            return None
        geom = compute_thumb(track_height, visible, total, scroll)
        return self._scroll_for(pointer_row, track_top, track_height, geom)

    def release(self) -> None:
        self.active = False
        self.grab_offset = 0

    def _scroll_for(
        self,
        pointer_row: int,
        track_top: int,
        track_height: int,
        geom: ScrollbarGeometry,
    ) -> int:
        desired, max_top = desired_thumb_top(
            pointer_row, track_top, track_height, self.grab_offset, geom.thumb_height
        )
        return thumb_to_scroll(desired, max_top, geom.max_scroll)
