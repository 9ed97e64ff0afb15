"""InputBox - paint a TextInput with prompt, wrapping, scrolling and scrollbar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rich.style import Style

from terminal_kit.layout.rect import Rect
from terminal_kit.layout.scrollbar import InputScrollbar, ScrollbarGeometry, internal_input_geometry
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.styled import Line, Span, render_lines
from terminal_kit.text.buffer import byte_len, byte_slice
from terminal_kit.text.cursor import VisualPosition
from terminal_kit.text.width import text_width
from terminal_kit.text.wrap import wrapped_row_ranges
from terminal_kit.theme import Theme, ThemeElement
from terminal_kit.widgets.scrollbar import render_scrollbar
from terminal_kit.widgets.text_input import TextInput


@dataclass(frozen=True)
class InputBoxOutcome:
    """What a render pass decided; feed scroll_offset back into the next frame."""
    scroll_offset: int
    scrollbar: Optional[InputScrollbar]
    cursor_screen_pos: tuple[int, int]


def cursor_screen_pos(content: Rect, cursor: VisualPosition, scroll: int) -> tuple[int, int]:
    """Absolute cursor cell, clamped into the content area."""
    row = min(max(0, cursor.row - scroll), max(0, content.height - 1))
    col = min(cursor.col, max(0, content.width - 1))
    return content.x + col, content.y + row


def text_lines(text: str, content_width: int, style: Optional[Style] = None) -> list[Line]:
    """Wrap text into one Line per visual row; empty text gives one empty row."""
    if not text:
        return [Line.plain("", style)]
    return [
        Line.plain(byte_slice(text, start, end), style)
        for start, end in wrapped_row_ranges(text, content_width)
    ]


def suggestion_lines(text: str, suggestion: str, style: Style, content_width: int) -> list[Line]:
    """
    Wrap text followed by an inline completion suggestion.

    Rows are computed over the combined string so the suggestion wraps
    exactly as it would once accepted; the suggestion part is styled.
    """
    full = text + suggestion
    if not full:
        return [Line.plain("")]
    split = byte_len(text)
    lines: list[Line] = []
    for start, end in wrapped_row_ranges(full, content_width):
        if end <= split:
            lines.append(Line.plain(byte_slice(full, start, end)))
        elif start >= split:
            lines.append(Line.plain(byte_slice(full, start, end), style))
        else:
            lines.append(Line([
                Span(byte_slice(full, start, split)),
                Span(byte_slice(full, split, end), style),
            ]))
    return lines


class InputBox:
    """
    Renderer for a TextInput inside a rect.

    The box paints its background, an optional title row, the prompt, the
    wrapped text (or placeholder, or text plus suggestion), an optional
    right-aligned hint and an optional scrollbar. It keeps no state: the
    caller stores the returned scroll offset and passes it back next frame.
    """

    def __init__(
        self,
        text_input: TextInput,
        theme: Theme,
        *,
        scroll_offset: int = 0,
        follow_cursor: bool = False,
        show_scrollbar: bool = False,
        suggestion: Optional[str] = None,
        title: Optional[str] = None,
        prompt: Optional[str] = None,
        right_hint: Optional[str] = None,
        cursor_active: bool = True,
        placeholder_element: ThemeElement = ThemeElement.TERTIARY,
        input_bg: Optional[str] = None,
        prompt_gap: int = 1,
        prompt_padding_left: int = 0,
        padding_top: int = 1,
        padding_bottom: int = 1,
    ):
        self.input = text_input
        self.theme = theme
        self.scroll_offset = scroll_offset
        self.follow_cursor = follow_cursor
        self.show_scrollbar = show_scrollbar
        self.suggestion = suggestion or None
        self.title = title
        self.prompt = prompt
        self.right_hint = right_hint
        self.cursor_active = cursor_active
        self.placeholder_element = placeholder_element
        self.input_bg = input_bg
        self.prompt_gap = prompt_gap
        self.prompt_padding_left = prompt_padding_left
        self.padding_top = padding_top
        self.padding_bottom = padding_bottom

    def content_area(self, area: Rect) -> Rect:
        """Rect the text is wrapped into, right of the prompt and inside the padding."""
        prompt = self.prompt if self.prompt is not None else self.input.prefix
        prompt_cols = text_width(prompt) + self.prompt_gap + self.prompt_padding_left

        pad_top = min(self.padding_top, area.height)
        pad_bottom = min(self.padding_bottom, area.height - pad_top)
        inner = area
        if area.height > pad_top + pad_bottom:
            inner = Rect(area.x, area.y + pad_top, area.width, area.height - pad_top - pad_bottom)
        return Rect(inner.x + prompt_cols, inner.y, max(1, inner.width - prompt_cols), inner.height)

    def render(self, canvas: Canvas, area: Rect) -> InputBoxOutcome:
        if area.is_empty or canvas.area.is_empty:
            return InputBoxOutcome(self.scroll_offset, None, (area.x, area.y))

        theme = self.theme
        bg = self.input_bg or theme.background_surface
        base_style = Style(color=theme.foreground, bgcolor=bg)
        canvas.fill(area, base_style)

        if self.title and area.height >= 3:
            title_style = theme.style(ThemeElement.SECONDARY) + Style(bold=True)
            canvas.put_text(area.x, area.y, self.title, title_style, area.width)

        content = self.content_area(area)
        lines = self._build_lines(content.width, bg)
        total_rows = max(1, len(lines))
        cursor = self.input.cursor_visual_position(content.width)

        max_scroll = max(0, total_rows - content.height)
        scroll = min(self.scroll_offset, max_scroll)
        if self.follow_cursor:
            if cursor.row < scroll:
                scroll = cursor.row
            elif cursor.row >= scroll + content.height:
                scroll = cursor.row - (content.height - 1)
            scroll = max(0, min(scroll, max_scroll))

        render_lines(canvas, content, lines[scroll: scroll + content.height])

        inner = Rect(area.x, content.y, area.width, content.height)
        self._render_prompt(canvas, inner, bg)
        if self.right_hint:
            self._render_hint(canvas, content, bg)

        scrollbar = None
        if self.show_scrollbar:
            scrollbar = internal_input_geometry(content, content.height, total_rows, scroll)
            if scrollbar is not None:
                geom = ScrollbarGeometry(
                    scrollbar.thumb_height, scrollbar.thumb_top - scrollbar.top, scrollbar.max_scroll
                )
                render_scrollbar(canvas, scrollbar.x, scrollbar.top, scrollbar.height, geom, theme)

        pos = cursor_screen_pos(content, cursor, scroll)
        if self.cursor_active:
            canvas.cursor = pos
        return InputBoxOutcome(scroll, scrollbar, pos)

    def _build_lines(self, content_width: int, bg: str) -> list[Line]:
        text = self.input.text
        placeholder = self.input.placeholder
        if not text and placeholder:
            style = self.theme.style(self.placeholder_element) + Style(bgcolor=bg, dim=True)
            return text_lines(placeholder, content_width, style)
        if self.suggestion:
            style = self.theme.style(ThemeElement.SECONDARY) + Style(bgcolor=bg, dim=True)
            return suggestion_lines(text, self.suggestion, style, content_width)
        return text_lines(text, content_width)

    def _render_prompt(self, canvas: Canvas, inner: Rect, bg: str) -> None:
        prompt = self.prompt if self.prompt is not None else self.input.prefix
        if not prompt or inner.is_empty:
            return
        style = self.theme.style(ThemeElement.PRIMARY) + Style(bgcolor=bg, bold=True)
        label = " " * self.prompt_padding_left + prompt + " " * self.prompt_gap
        canvas.put_text(inner.x, inner.y, label, style, inner.width)

    def _render_hint(self, canvas: Canvas, content: Rect, bg: str) -> None:
        hint = self.right_hint or ""
        hint_cols = text_width(hint)
        available = content.width - (1 if self.show_scrollbar else 0)
        if hint_cols == 0 or hint_cols > available or content.is_empty:
            return
        style = self.theme.style(ThemeElement.INFO) + Style(bgcolor=bg, dim=True, bold=True, italic=True)
        canvas.put_text(content.x + available - hint_cols, content.y, hint, style)
