"""Tab strip helpers shared by tabbed dialogs and the wizard."""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from rich.style import Style

from terminal_kit.layout.viewport import ListState
from terminal_kit.render.styled import Line, Span
from terminal_kit.runtime.input import Key, KeyEvent
from terminal_kit.text.width import text_width, truncate_to_width
from terminal_kit.theme import Theme, ThemeElement

Tab = TypeVar("Tab")


def _position(order: Sequence[Tab], current: Tab) -> int:
    try:
        return list(order).index(current)
    except ValueError:
        return 0


def next_tab(order: Sequence[Tab], current: Tab) -> Tab:
    """Tab after current, wrapping; an unknown current counts as the first tab."""
    return order[(_position(order, current) + 1) % len(order)]


def prev_tab(order: Sequence[Tab], current: Tab) -> Tab:
    return order[(_position(order, current) - 1) % len(order)]


def tab_navigation(order: Sequence[Tab], current: Tab, event: KeyEvent) -> Tab:
    """Tab after handling Tab / Shift+Tab; any other key returns current."""
    if event.key == Key.BACKTAB or (event.key == Key.TAB and event.shift):
        return prev_tab(order, current)
    if event.key == Key.TAB:
        return next_tab(order, current)
    return current


def handle_list_navigation(event: KeyEvent, state: ListState, length: int, visible_height: int) -> bool:
    """Up/Down over a list. Returns True when the key was a navigation key."""
    if event.key == Key.UP:
        state.select_prev(length)
    elif event.key == Key.DOWN:
        state.select_next(length)
    else:
        return False
    state.update_offset(visible_height)
    return True


def is_confirm_key(event: KeyEvent) -> bool:
    return event.key == Key.ENTER or (event.is_char and event.char == " ")


def default_tab_style(theme: Theme, is_active: bool) -> Style:
    if is_active:
        return theme.style(ThemeElement.SELECTION)
    return theme.style(ThemeElement.TERTIARY)


def tab_bar_line(
    order: Sequence[Tab],
    active: Tab,
    width: int,
    label: Callable[[Tab], str],
    style: Callable[[Tab, bool], Style],
) -> Line:
    """
    One line of tab labels separated by single spaces.

    The last label is padded so the active style fills the rest of the
    row; labels that do not fit are cut at the width.
    """
    spans: list[Span] = []
    used = 0
    for i, tab in enumerate(order):
        if i > 0:
            if used >= width:
                break
            spans.append(Span(" "))
            used += 1
        text = truncate_to_width(label(tab), max(0, width - used))
        if not text:
            break
        spans.append(Span(text, style(tab, tab == active)))
        used += text_width(text)

    if spans and used < width:
        last = spans[-1]
        spans[-1] = Span(last.text + " " * (width - used), last.style)
    return Line(spans)
