"""Key-hints bar: a row of "key description" hints with optional right-side info."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.style import Style

from terminal_kit.layout.rect import Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.text.width import text_width
from terminal_kit.theme import Theme, ThemeElement
from terminal_kit.widgets.help_bar import ENTRY_SEPARATOR, HelpEntry, render_help_entries

HELP_HINT = "? for help"
HELP_HINT_WIDTH = 15


def hint_to_entry(hint: str) -> HelpEntry:
    """"ctrl+r search" -> HelpEntry("ctrl+r", "search")."""
    key, sep, rest = hint.partition(" ")
    if not sep:
        return HelpEntry(hint)
    return HelpEntry(key, rest.lstrip())


def _entry_width(entry: HelpEntry) -> int:
    width = text_width(entry.key)
    if entry.description:
        if entry.key:
            width += 1
        width += text_width(entry.description)
    return width


def hints_text_width(hints: Sequence[str]) -> int:
    """Columns the hints take when laid out with the entry separator."""
    if not hints:
        return 0
    widths = sum(_entry_width(hint_to_entry(hint)) for hint in hints)
    return widths + len(ENTRY_SEPARATOR) * (len(hints) - 1)


def render_key_hints(
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    hints: Sequence[str],
    right_info: Optional[str] = None,
    *,
    background: Optional[Style] = None,
    fill_background: bool = True,
    highlight_style: Optional[Style] = None,
) -> None:
    """
    Render key hints left aligned in area.

    A trailing "? for help" hint is pulled out and right aligned in its
    own slot. right_info is a short summary drawn right aligned just
    before that slot; it only gets the columns the hints leave free.
    highlight_style colors bracketed keys such as "[EXEC]".

    Args:
        canvas: Target canvas
        area: Row(s) to draw in; only the first row is used
        theme: Colors
        hints: "key description" strings
        right_info: Optional summary text
        background: Fill style, the void background by default
        fill_background: Set False to draw over what is already there
        highlight_style: Style for bracketed keys
    """
    if area.is_empty:
        return
    if fill_background:
        canvas.fill(area, background or theme.style(ThemeElement.BACKGROUND_VOID))

    main_hints: Sequence[str] = hints
    help_hint: Optional[str] = None
    if hints and hints[-1] == HELP_HINT:
        main_hints, help_hint = hints[:-1], hints[-1]

    right_width = min(HELP_HINT_WIDTH, area.width) if help_hint else 0
    middle_width = area.width - right_width
    left = Rect(area.x, area.y, middle_width, area.height)

    info = right_info.strip() if right_info else ""
    if info:
        room = max(0, middle_width - hints_text_width(main_hints))
        info_width = min(text_width(info), room)
        if info_width > 0:
            left = left.with_width(middle_width - info_width)
            info_area = Rect(left.right, area.y, info_width, area.height)
            render_help_entries(canvas, info_area, theme, [HelpEntry("", info)], "", "right",
                                highlight_style)

    if not left.is_empty:
        render_help_entries(canvas, left, theme, [hint_to_entry(h) for h in main_hints],
                            ENTRY_SEPARATOR, "left", highlight_style)

    if help_hint and right_width > 0:
        right_area = Rect(area.x + middle_width, area.y, right_width, area.height)
        render_help_entries(canvas, right_area, theme, [hint_to_entry(help_hint)], "", "right",
                            highlight_style)
