"""Read-only review step, usually the last page of a wizard."""

from __future__ import annotations

from typing import Callable, Optional

from terminal_kit.layout.rect import Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.styled import Line, render_lines
from terminal_kit.runtime.input import Key, KeyEvent
from terminal_kit.theme import Theme
from terminal_kit.wizard.framework import StepAction, T, WizardStep

SUMMARY_HEIGHT = 6


class SummaryStep(WizardStep[T]):
    """
    Shows lines built from the item; Enter saves, Left or h goes back.

    A key handler added with with_key_handler sees every key first and
    may return an action to override the defaults.
    """

    def __init__(self, title: str, help_text: str, lines: Callable[[T], list[Line]]):
        self._title = title
        self._help = help_text
        self.lines = lines
        self.nav_hint: Optional[str] = None
        self.on_key: Optional[Callable[[KeyEvent, T], Optional[StepAction]]] = None
        self.height: Optional[int] = None

    def with_nav_hint(self, hint: str) -> SummaryStep[T]:
        self.nav_hint = hint
        return self

    def with_key_handler(self, handler: Callable[[KeyEvent, T], Optional[StepAction]]) -> SummaryStep[T]:
        self.on_key = handler
        return self

    def with_height(self, height: int) -> SummaryStep[T]:
        self.height = height
        return self

    @property
    def title(self) -> str:
        return self._title

    @property
    def help_text(self) -> str:
        return self._help

    @property
    def navigation_hint(self) -> Optional[str]:
        return self.nav_hint

    @property
    def content_height(self) -> int:
        return self.height if self.height is not None else SUMMARY_HEIGHT

    def render(self, canvas: Canvas, area: Rect, theme: Theme, item: T) -> None:
        render_lines(canvas, area, self.lines(item))

    def handle_key(self, event: KeyEvent, item: T) -> StepAction:
        if self.on_key is not None:
            action = self.on_key(event, item)
            if action is not None:
                return action
        if event.key == Key.ESCAPE:
            return StepAction.CANCEL
        if event.key == Key.LEFT or (event.is_char and event.char == "h"):
            return StepAction.PREVIOUS
        if event.key == Key.ENTER:
            return StepAction.SAVE
        return StepAction.CONTINUE

    def validate(self, item: T) -> Optional[str]:
        return None

    def __repr__(self) -> str:
        return f"SummaryStep(title={self._title!r})"
