"""Low-level terminal operations - screen modes, cursor and mouse reporting."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal I/O abstraction for TUI applications."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def write(text: str) -> None:
        """Write text to terminal."""
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    def clear() -> None:
        """Clear screen and move cursor to home."""
        Terminal.write("\x1b[2J\x1b[H")

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        Terminal.write("\x1b[0m")

    @staticmethod
    def hide_cursor() -> None:
        Terminal.write("\x1b[?25l")

    @staticmethod
    def show_cursor() -> None:
        Terminal.write("\x1b[?25h")

    @staticmethod
    def enable_mouse() -> None:
        """Report button presses, drags and motion using SGR encoding."""
        Terminal.write("\x1b[?1000h\x1b[?1002h\x1b[?1003h\x1b[?1006h")

    @staticmethod
    def disable_mouse() -> None:
        Terminal.write("\x1b[?1006l\x1b[?1003l\x1b[?1002l\x1b[?1000l")

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows or no termios - just yield
            yield
            return
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        Terminal.write("\x1b[?1049h")
        try:
            yield
        finally:
            Terminal.write("\x1b[?1049l")

    @staticmethod
    @contextmanager
    def mouse_reporting(enabled: bool = True) -> Iterator[None]:
        if not enabled:
            yield
            return
        Terminal.enable_mouse()
        try:
            yield
        finally:
            Terminal.disable_mouse()

    @staticmethod
    @contextmanager
    def managed_mode(inline: bool = False, mouse: bool = False) -> Iterator[None]:
        """
        Full TUI mode: alternate screen, hidden cursor, raw input.

        Inline sessions skip the alternate screen and draw below the
        current prompt instead.
        """
        screen = nullcontext() if inline else Terminal.alternate_screen()
        with screen:
            Terminal.hide_cursor()
            try:
                with Terminal.raw_mode(), Terminal.mouse_reporting(mouse):
                    yield
            finally:
                Terminal.show_cursor()
                Terminal.reset()
