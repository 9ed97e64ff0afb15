"""Model - the application contract driven by Program."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from terminal_kit.layout.rect import Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.runtime.command import Command
from terminal_kit.runtime.input import KeyEvent, MouseEvent
from terminal_kit.theme import Theme

Msg = TypeVar("Msg")


class Model(ABC, Generic[Msg]):
    """
    Application state plus its transitions and rendering.

    Program calls init once, then loops: view, read an event, translate it
    into a message with on_key/on_mouse, and apply it with update.
    """

    def init(self) -> Command[Msg]:
        """Startup command executed once before the event loop starts."""
        return Command.none()

    @abstractmethod
    def update(self, msg: Msg) -> Command[Msg]:
        """Apply a message to state and optionally emit follow-up commands."""

    @abstractmethod
    def view(self, canvas: Canvas, area: Rect, theme: Theme, inline: bool = False) -> None:
        """
        Render the full application into area.

        inline is True when the program draws into an inline viewport
        instead of the alternate screen; dialogs should then size
        themselves with DialogOptions(inline=True).
        """

    def on_key(self, event: KeyEvent) -> Optional[Msg]:
        return None

    def on_mouse(self, event: MouseEvent) -> Optional[Msg]:
        return None

    def should_quit(self) -> bool:
        """Checked after every update; True ends the loop."""
        return False
