"""Theme - named colors resolved to rich styles for each UI element."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum, auto
from typing import NamedTuple

from rich.color import Color, ColorParseError, blend_rgb
from rich.style import Style


class ThemeElement(Enum):
    """Semantic UI elements a widget can ask the theme to style."""
    BASE = auto()
    FOREGROUND = auto()
    PRIMARY = auto()
    SECONDARY = auto()
    TERTIARY = auto()
    QUATERNARY = auto()
    SUCCESS = auto()
    ERROR = auto()
    INFO = auto()
    SELECTION = auto()
    CURSOR = auto()
    BORDER = auto()
    BORDER_FOCUSED = auto()
    BACKGROUND_SURFACE = auto()
    BACKGROUND_VOID = auto()
    BACKGROUND_HOVER = auto()
    BACKGROUND_INPUT = auto()
    BACKGROUND_TRACK = auto()
    BACKGROUND_THUMB = auto()


class BorderChars(NamedTuple):
    """Box-drawing characters for a one-cell border."""
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str


PLAIN_BORDER = BorderChars("┌", "┐", "└", "┘", "─", "│")
ROUNDED_BORDER = BorderChars("╭", "╮", "╰", "╯", "─", "│")
ASCII_BORDER = BorderChars("+", "+", "+", "+", "-", "|")


@dataclass(frozen=True)
class Theme:
    """
    Color palette for the toolkit.

    Colors are "#rrggbb" strings; anything rich can parse is accepted and
    an unparseable value raises ValueError at construction.
    """
    name: str = "dark"
    background: str = "#0a0c0e"
    foreground: str = "#e6e8eb"
    primary: str = "#e8ecf4"
    secondary: str = "#a8b0bc"
    tertiary: str = "#8691a0"
    quaternary: str = "#6c798a"
    accent: str = "#6ea8ff"
    success: str = "#5ec97b"
    error: str = "#ec636e"
    info: str = "#5aafff"
    selection: str = "#3c4859"
    cursor: str = "#e8ecf4"
    border: str = "#3a4350"
    border_focused: str = "#6ea8ff"
    background_void: str = "#06080a"
    background_surface: str = "#13171c"
    background_hover: str = "#1f262e"
    background_input: str = "#0c0f12"
    background_track: str = "#181e25"
    background_thumb: str = "#485463"
    border_chars: BorderChars = field(default=PLAIN_BORDER)

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name in ("name", "border_chars"):
                continue
            value = getattr(self, f.name)
            try:
                Color.parse(value)
            except ColorParseError as e:
                raise ValueError(f"Invalid color for {f.name}: {value!r}") from e

    @classmethod
    def dark(cls) -> Theme:
        return cls()

    @classmethod
    def light(cls) -> Theme:
        return cls(
            name="light",
            background="#fafafa",
            foreground="#1f2329",
            primary="#111418",
            secondary="#4b5563",
            tertiary="#6b7280",
            quaternary="#9ca3af",
            accent="#2563eb",
            success="#15803d",
            error="#b91c1c",
            info="#1d4ed8",
            selection="#dbe4f3",
            cursor="#111418",
            border="#d1d5db",
            border_focused="#2563eb",
            background_void="#ffffff",
            background_surface="#f3f4f6",
            background_hover="#e5e7eb",
            background_input="#ffffff",
            background_track="#e5e7eb",
            background_thumb="#9ca3af",
            border_chars=ROUNDED_BORDER,
        )

    def style(self, element: ThemeElement) -> Style:
        """Resolve an element to a rich Style."""
        E = ThemeElement
        if element == E.BASE:
            return Style(color=self.foreground, bgcolor=self.background)
        if element == E.CURSOR:
            return Style(bgcolor=self.cursor)
        if element == E.SELECTION:
            return Style(color=self.primary, bgcolor=self.selection, bold=True)

        foregrounds = {
            E.FOREGROUND: self.foreground,
            E.PRIMARY: self.primary,
            E.SECONDARY: self.secondary,
            E.TERTIARY: self.tertiary,
            E.QUATERNARY: self.quaternary,
            E.SUCCESS: self.success,
            E.ERROR: self.error,
            E.INFO: self.info,
            E.BORDER: self.border,
            E.BORDER_FOCUSED: self.border_focused,
        }
        if element in foregrounds:
            return Style(color=foregrounds[element])

        backgrounds = {
            E.BACKGROUND_SURFACE: self.background_surface,
            E.BACKGROUND_VOID: self.background_void,
            E.BACKGROUND_HOVER: self.background_hover,
            E.BACKGROUND_INPUT: self.background_input,
            E.BACKGROUND_TRACK: self.background_track,
            E.BACKGROUND_THUMB: self.background_thumb,
        }
        return Style(bgcolor=backgrounds[element])

    def base_style(self) -> Style:
        return self.style(ThemeElement.BASE)

    def surface_style(self) -> Style:
        """Default text on the raised dialog surface."""
        return Style(color=self.foreground, bgcolor=self.background_surface)

    def border_focused_style(self) -> Style:
        return self.style(ThemeElement.BORDER_FOCUSED) + Style(bold=True)

    def list_item_style(self, element: ThemeElement, selected: bool, hovered: bool) -> Style:
        """
        Style for one list row.

        Selection wins over hover. Base rows sit on the surface color (or the
        hover color); other elements keep their own color and only pick up
        the hover background.
        """
        if selected:
            return self.style(ThemeElement.SELECTION)
        if element == ThemeElement.BASE:
            bg = self.background_hover if hovered else self.background_surface
            return Style(color=self.foreground, bgcolor=bg)
        style = self.style(element)
        if hovered:
            style += Style(bgcolor=self.background_hover)
        return style


def blend(foreground: str, background: str, opacity: float) -> str:
    """
    Mix two colors; opacity 1.0 gives foreground, 0.0 gives background.

    Returns a "#rrggbb" string.
    """
    opacity = max(0.0, min(1.0, opacity))
    fg = Color.parse(foreground).get_truecolor()
    bg = Color.parse(background).get_truecolor()
    return blend_rgb(bg, fg, opacity).hex
