"""Search field shown at the top of pickers."""

from __future__ import annotations

from typing import Optional

from terminal_kit.layout.rect import Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.theme import Theme, ThemeElement
from terminal_kit.widgets.input_box import InputBox, InputBoxOutcome
from terminal_kit.widgets.text_input import TextInput


def render_search_bar(
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    text_input: TextInput,
    title: Optional[str] = None,
) -> InputBoxOutcome:
    """Single input box that follows the cursor, with an optional title row and a dim placeholder."""
    box = InputBox(
        text_input,
        theme,
        follow_cursor=True,
        title=title,
        placeholder_element=ThemeElement.TERTIARY,
    )
    return box.render(canvas, area)
