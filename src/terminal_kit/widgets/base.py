"""Base widget protocol and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Protocol, TypeVar, runtime_checkable

from terminal_kit.layout.rect import Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.runtime.input import KeyEvent, MouseEvent
from terminal_kit.theme import Theme

Action = TypeVar("Action")


@runtime_checkable
class Widget(Protocol):
    """Protocol for TUI widgets."""

    def render(self, canvas: Canvas, area: Rect, theme: Theme) -> None:
        """Paint the widget into area."""
        ...

    def handle_key(self, event: KeyEvent) -> bool:
        """Handle key event. Returns True if consumed."""
        ...

    def handle_mouse(self, event: MouseEvent, area: Rect) -> bool:
        """Handle mouse event inside the widget's last area. Returns True if consumed."""
        ...


class BaseWidget(ABC):
    """Base class with common widget functionality."""

    def __init__(self) -> None:
        self._focused = False
        self._visible = True

    @property
    def focused(self) -> bool:
        return self._focused

    @focused.setter
    def focused(self, value: bool) -> None:
        self._focused = value

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = value

    @property
    def focusable(self) -> bool:
        return True

    @abstractmethod
    def render(self, canvas: Canvas, area: Rect, theme: Theme) -> None:
        """Subclasses must implement rendering."""

    def handle_key(self, event: KeyEvent) -> bool:
        """Default: don't consume events."""
        return False

    def handle_mouse(self, event: MouseEvent, area: Rect) -> bool:
        return False


class UiComponent(ABC, Generic[Action]):
    """
    Component that reports what happened as actions.

    Input handlers return an action (or None) instead of mutating shared
    application state; the owner decides what to do with it, typically
    by feeding it back through update.
    """

    @abstractmethod
    def update(self, action: Action) -> None:
        """Apply an action to the component state."""

    @abstractmethod
    def view(self, canvas: Canvas, area: Rect, theme: Theme) -> None:
        """Render within the provided area."""

    def handle_key(self, event: KeyEvent) -> Optional[Action]:
        return None

    def handle_mouse(self, event: MouseEvent, area: Rect) -> Optional[Action]:
        return None
