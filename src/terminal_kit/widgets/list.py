"""Virtualized list rendering with optional border chrome and scrollbar."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Optional

from rich.style import Style

from terminal_kit.layout.rect import Padding, Rect
from terminal_kit.layout.scrollbar import compute_thumb
from terminal_kit.layout.viewport import calculate_viewport_offset
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.styled import Line, render_line
from terminal_kit.theme import Theme, ThemeElement
from terminal_kit.widgets.scrollbar import render_scrollbar

EMPTY_LIST_TEXT = "No items"


@dataclass(frozen=True)
class ListItem:
    """One rendered row: its content and the style that fills the row."""
    line: Line
    style: Style = field(default_factory=Style)

    @classmethod
    def text(cls, text: str, style: Optional[Style] = None) -> ListItem:
        return cls(Line.plain(text), style or Style())


ItemRenderer = Callable[[int, bool], ListItem]


@dataclass(frozen=True)
class ListChrome:
    """Frame drawn around a list: bordered with a title, or plain."""
    bordered: bool = True
    title: str = ""
    padding: Padding = field(default_factory=Padding)

    @classmethod
    def with_border(cls, title: str) -> ListChrome:
        return cls(bordered=True, title=title)

    @classmethod
    def plain(cls) -> ListChrome:
        return cls(bordered=False)

    def with_padding(self, padding: Padding) -> ListChrome:
        return replace(self, padding=padding)

    def paint(self, canvas: Canvas, area: Rect, theme: Theme) -> Rect:
        """Paint the chrome and return the inner content area."""
        canvas.fill(area, theme.style(ThemeElement.BACKGROUND_SURFACE))
        inner = area
        if self.bordered:
            inner = canvas.draw_border(
                area,
                theme.style(ThemeElement.BORDER_FOCUSED),
                title=self.title or None,
                chars=theme.border_chars,
            )
        return inner.pad(self.padding)


def make_list_item(text: str, theme: Theme, selected: bool, hovered: bool = False) -> ListItem:
    """Plain text row styled for its selection/hover state."""
    return make_list_item_with_element(text, theme, ThemeElement.BASE, selected, hovered)


def make_list_item_with_element(
    text: str,
    theme: Theme,
    element: ThemeElement,
    selected: bool,
    hovered: bool = False,
) -> ListItem:
    return ListItem.text(text, theme.list_item_style(element, selected, hovered))


def render_list_with_chrome(
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    chrome: ListChrome,
    selected: int,
    current_offset: int,
    length: int,
    render_item: ItemRenderer,
) -> int:
    """
    Render only the visible slice of a list.

    render_item(index, is_selected) is called once per visible row. An
    empty list shows a dim "No items" row; a list longer than the viewport
    gets a thumb in the rightmost inner column.

    Returns:
        The viewport offset used for this frame
    """
    inner = chrome.paint(canvas, area, theme)
    if inner.is_empty:
        return current_offset

    visible_height = inner.height
    offset = calculate_viewport_offset(selected, visible_height, current_offset)
    end = min(offset + visible_height, length)

    show_scrollbar = length > visible_height and inner.width > 1
    content = inner.with_width(inner.width - 1) if show_scrollbar else inner

    if length == 0:
        item = make_list_item_with_element(EMPTY_LIST_TEXT, theme, ThemeElement.TERTIARY, False)
        render_line(canvas, content.with_height(1), item.line, item.style)

    for row, index in enumerate(range(offset, end)):
        item = render_item(index, index == selected)
        row_area = Rect(content.x, content.y + row, content.width, 1)
        render_line(canvas, row_area, item.line, item.style)

    if show_scrollbar:
        geom = compute_thumb(inner.height, inner.height, length, offset)
        render_scrollbar(canvas, inner.right - 1, inner.y, inner.height, geom, theme, track=False)

    return offset


def render_list(
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    title: str,
    selected: int,
    current_offset: int,
    length: int,
    render_item: ItemRenderer,
) -> int:
    """Bordered list with a title."""
    return render_list_with_chrome(
        canvas, area, theme, ListChrome.with_border(title),
        selected, current_offset, length, render_item,
    )
