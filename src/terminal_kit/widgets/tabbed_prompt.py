"""Centered dialog with a tab strip, optional title and search field, a body and a help footer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence

from rich.style import Style

from terminal_kit.layout.rect import Padding, Rect, split_vertical
from terminal_kit.layout.region import DialogLayout, DialogOptions, layout_centered
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.styled import Line, render_line
from terminal_kit.text.width import text_width, truncate_to_width
from terminal_kit.theme import Theme, ThemeElement
from terminal_kit.widgets.help_bar import render_help_bar
from terminal_kit.widgets.search_bar import render_search_bar
from terminal_kit.widgets.tabs import Tab, default_tab_style, tab_bar_line
from terminal_kit.widgets.text_input import TextInput

TAB_BAR_ROWS = 1
TITLE_ROWS = 1
SEARCH_ROWS = 3
FOOTER_ROWS = 2

DEFAULT_PROMPT_DIALOG_OPTS = DialogOptions(
    max_width=60,
    max_height=20,
    header_rows=TAB_BAR_ROWS + TITLE_ROWS + SEARCH_ROWS,
    footer_rows=FOOTER_ROWS,
    padding=Padding.uniform(1),
)

BodyRenderer = Callable[[Canvas, Rect, Theme], None]


@dataclass
class SearchSpec:
    """Search field shown under the title."""
    input: TextInput
    title: Optional[str] = None


def header_rows(has_search: bool, has_title: bool) -> int:
    return TAB_BAR_ROWS + (TITLE_ROWS if has_title else 0) + (SEARCH_ROWS if has_search else 0)


def prompt_dialog_opts(has_search: bool = True, has_title: bool = True) -> DialogOptions:
    """Dialog sizing for render_tabbed_prompt_dialog; hit-testing must use the same value."""
    return replace(
        DEFAULT_PROMPT_DIALOG_OPTS,
        header_rows=header_rows(has_search, has_title),
        footer_rows=FOOTER_ROWS,
    )


def _render_title(canvas: Canvas, area: Rect, theme: Theme, title: str, right_hints: Optional[str]) -> None:
    title_style = theme.style(ThemeElement.PRIMARY) + Style(bold=True)
    hints = right_hints.strip() if right_hints else ""
    room = max(0, area.width - text_width(title) - 1)
    hints = truncate_to_width(hints, room, "...")
    if not hints:
        render_line(canvas, area, Line.plain(title, title_style))
        return
    hint_width = text_width(hints)
    render_line(canvas, area.with_width(area.width - hint_width), Line.plain(title, title_style))
    hint_area = Rect(area.right - hint_width, area.y, hint_width, 1)
    render_help_bar(canvas, hint_area, theme, hints, "right")


def render_tabbed_prompt_dialog(
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    opts: DialogOptions,
    order: Sequence[Tab],
    active: Tab,
    label: Callable[[Tab], str],
    title: str,
    search: Optional[SearchSpec],
    body: BodyRenderer,
    footer_text: str,
    *,
    style: Optional[Callable[[Tab, bool], Style]] = None,
    title_right_hints: Optional[str] = None,
) -> DialogLayout:
    """
    Draw the dialog centered in area.

    The header rows of opts are recomputed from whether a title and a
    search field are present; the footer help text goes on the last
    footer row. Returns the layout so callers can hit-test the body.
    """
    has_title = bool(title)
    opts = replace(opts, header_rows=header_rows(search is not None, has_title))
    layout = layout_centered(canvas, area, theme, opts)

    lengths = [TAB_BAR_ROWS]
    if has_title:
        lengths.append(TITLE_ROWS)
    if search is not None:
        lengths.append(SEARCH_ROWS)
    header = split_vertical(layout.header, lengths)

    tab_style = style or (lambda tab, is_active: default_tab_style(theme, is_active))
    tab_line = tab_bar_line(order, active, header[0].width, label, tab_style)
    render_line(canvas, header[0], tab_line, theme.base_style())

    if has_title:
        _render_title(canvas, header[1], theme, title, title_right_hints)
    if search is not None:
        render_search_bar(canvas, header[-1], theme, search.input, search.title)

    body(canvas, layout.body, theme)

    footer = layout.footer
    if footer.height > 1:
        footer = Rect(footer.x, footer.bottom - 1, footer.width, 1)
    render_help_bar(canvas, footer, theme, footer_text)
    return layout
