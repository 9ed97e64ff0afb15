"""Wizard step editing one text field of the item."""

from __future__ import annotations

from typing import Callable, Optional

from rich.style import Style

from terminal_kit.layout.rect import Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.styled import Line, render_line
from terminal_kit.runtime.input import Key, KeyEvent
from terminal_kit.theme import Theme
from terminal_kit.widgets.input_box import InputBox
from terminal_kit.widgets.text_input import TextInput
from terminal_kit.wizard.framework import StepAction, T, WizardStep
from terminal_kit.wizard.layout import input_step_layout

# (ok, message); ok=True renders as success, False as error
Status = tuple[bool, str]


class SimpleTextStep(WizardStep[T]):
    """
    Single text input bound to the item through a getter and setter.

    Every edit is written straight to the item. Enter validates the text
    and moves on; a failing validator keeps the step open and shows its
    message under the input until the next edit.
    """

    def __init__(
        self,
        title: str,
        help_text: str,
        field_label: str,
        placeholder: str,
        getter: Callable[[T], str],
        setter: Callable[[T, str], None],
        validator: Callable[[str], Optional[str]],
    ):
        self._title = title
        self._help = help_text
        self.field_label = field_label
        self.placeholder = placeholder
        self.getter = getter
        self.setter = setter
        self.validator = validator
        self.input = TextInput(placeholder=placeholder)
        self.validation_error: Optional[str] = None
        self.status: Optional[Callable[[T], Optional[Status]]] = None

    def with_status(self, status: Callable[[T], Optional[Status]]) -> SimpleTextStep[T]:
        """Show a live status line computed from the item instead of validation errors."""
        self.status = status
        return self

    @property
    def title(self) -> str:
        return self._title

    @property
    def help_text(self) -> str:
        return self._help

    def enter(self, item: T) -> None:
        self.input.set_text(self.getter(item))
        self.validation_error = None

    def render(self, canvas: Canvas, area: Rect, theme: Theme, item: T) -> None:
        _, input_area, message_area, _ = input_step_layout(area)

        shown = self.input
        value = self.getter(item)
        if shown.text != value:
            shown = TextInput(value, placeholder=self.placeholder)
        InputBox(shown, theme, follow_cursor=True, title=self.field_label).render(canvas, input_area)

        message = self._message(item)
        if message is not None:
            ok, text = message
            color = theme.success if ok else theme.error
            mark = "✓" if ok else "✗"
            line = Line.plain(f"{mark} {text}", Style(color=color, bold=True))
            render_line(canvas, message_area.with_height(1), line)

    def _message(self, item: T) -> Optional[Status]:
        if self.status is not None:
            status = self.status(item)
            if status is not None:
                return status
        if self.validation_error:
            return False, self.validation_error
        return None

    def handle_key(self, event: KeyEvent, item: T) -> StepAction:
        if event.key == Key.ESCAPE:
            return StepAction.CANCEL
        if event.key == Key.ENTER:
            self.setter(item, self.input.text)
            self.validation_error = self.validator(self.input.text)
            return StepAction.CONTINUE if self.validation_error else StepAction.NEXT

        if self.input.handle_key(event):
            self.setter(item, self.input.text)
            self.validation_error = None
        return StepAction.CONTINUE

    def validate(self, item: T) -> Optional[str]:
        return self.validator(self.getter(item))

    def __repr__(self) -> str:
        return f"SimpleTextStep(title={self._title!r})"
