"""Key hint footers: "key description" pairs or a plain help sentence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Optional

from rich.style import Style

from terminal_kit.layout.rect import Padding, Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.styled import Line, Span, render_line
from terminal_kit.text.wrap import wrap_text
from terminal_kit.theme import Theme, ThemeElement

Justify = Literal["left", "center", "right"]

ENTRY_SEPARATOR = "  "


@dataclass(frozen=True)
class HelpEntry:
    key: str
    description: str = ""


def parse_help_text(text: str) -> list[HelpEntry]:
    """
    Split "key description  key description" into entries.

    Entries are separated by two spaces; within an entry the first space
    separates the key from its description.
    """
    entries = []
    for pair in text.split(ENTRY_SEPARATOR):
        if not pair:
            continue
        key, _, description = pair.partition(" ")
        entries.append(HelpEntry(key, description))
    return entries


def help_line(
    theme: Theme,
    entries: Iterable[HelpEntry],
    separator: str = ENTRY_SEPARATOR,
    highlight_style: Optional[Style] = None,
) -> Line:
    """
    Build the styled line for a list of entries.

    Keys are secondary and descriptions tertiary. Bracketed keys such as
    "[EXEC]" are bold, in highlight_style when one is given.
    """
    key_style = theme.style(ThemeElement.SECONDARY)
    desc_style = theme.style(ThemeElement.TERTIARY)

    spans: list[Span] = []
    for i, entry in enumerate(entries):
        if i > 0 and separator:
            spans.append(Span(separator, desc_style))
        if entry.key:
            style = key_style
            if entry.key.startswith("["):
                style = (highlight_style or key_style) + Style(bold=True)
            spans.append(Span(entry.key, style))
        if entry.description:
            if entry.key:
                spans.append(Span(" ", desc_style))
            spans.append(Span(entry.description, desc_style))
    return Line(spans)


def _aligned(area: Rect, width: int, justify: Justify) -> Rect:
    if justify == "left" or width >= area.width:
        return area
    shift = area.width - width if justify == "right" else (area.width - width) // 2
    return Rect(area.x + shift, area.y, area.width - shift, area.height)


def render_help_entries(
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    entries: Iterable[HelpEntry],
    separator: str = ENTRY_SEPARATOR,
    justify: Justify = "left",
    highlight_style: Optional[Style] = None,
) -> None:
    if area.is_empty:
        return
    line = help_line(theme, entries, separator, highlight_style)
    render_line(canvas, _aligned(area, line.width, justify), line)


def render_help_bar(
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    text: str,
    justify: Justify = "left",
) -> None:
    """
    Render a help footer from a formatted string.

    Text containing double spaces is parsed into key/description entries.
    Anything else is a plain sentence, wrapped in tertiary color and
    indented one column when left aligned.
    """
    if area.is_empty:
        return
    if ENTRY_SEPARATOR in text:
        render_help_entries(canvas, area, theme, parse_help_text(text), ENTRY_SEPARATOR, justify)
        return

    style = theme.style(ThemeElement.TERTIARY)
    target = area.pad(Padding(left=1)) if justify == "left" else area
    if target.is_empty:
        return
    for row, text_row in enumerate(wrap_text(text.strip(), target.width)[: target.height]):
        line = Line.plain(text_row.strip(), style)
        row_area = Rect(target.x, target.y + row, target.width, 1)
        render_line(canvas, _aligned(row_area, line.width, justify), line)
