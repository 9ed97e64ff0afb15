"""Ready-made list rows: toggles, plain labels and label/value pairs."""

from __future__ import annotations

from enum import Enum, auto

from rich.style import Style

from terminal_kit.render.styled import Line, Span
from terminal_kit.theme import Theme, ThemeElement
from terminal_kit.widgets.list import ListItem

INDENT = "  "


class ToggleTone(Enum):
    """Colors of a toggle's label: enabled is always success."""
    SUCCESS_ERROR = auto()    # disabled shows as error
    SUCCESS_SURFACE = auto()  # disabled shows as plain foreground


def toggle_item(label: str, enabled: bool, selected: bool, theme: Theme, tone: ToggleTone) -> ListItem:
    if enabled:
        status = theme.success
    elif tone == ToggleTone.SUCCESS_ERROR:
        status = theme.error
    else:
        status = theme.foreground

    base = Style(color=theme.foreground, bgcolor=theme.background_surface)
    if selected:
        base = theme.style(ThemeElement.SELECTION)
        label_style = Style(bold=True)
    else:
        label_style = Style(color=status, bold=True)
    return ListItem(Line([Span(INDENT), Span(label, label_style)]), base)


def plain_item(label: str, selected: bool, theme: Theme) -> ListItem:
    style = theme.style(ThemeElement.SELECTION if selected else ThemeElement.PRIMARY)
    return ListItem(Line([Span(INDENT), Span(label)]), style)


def value_item(
    label: str,
    value: str,
    selected: bool,
    theme: Theme,
    value_element: ThemeElement = ThemeElement.SECONDARY,
) -> ListItem:
    """Bold label followed by a value in its own color."""
    base = theme.list_item_style(ThemeElement.BASE, selected, False)
    line = Line([
        Span(INDENT),
        Span(label, theme.style(ThemeElement.PRIMARY) + Style(bold=True)),
        Span(" "),
        Span(value, theme.style(value_element)),
    ])
    return ListItem(line, base)
