"""Program - the single-threaded Model/Command/Update/View loop."""

from __future__ import annotations

import logging
from collections import deque
from typing import Optional

from terminal_kit.errors import ProgramError
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.terminal import TerminalRenderer
from terminal_kit.runtime.command import drain_pending, enqueue_command
from terminal_kit.runtime.config import ExitKeys, ProgramConfig
from terminal_kit.runtime.input import InputReader, Key, KeyEvent
from terminal_kit.runtime.model import Model
from terminal_kit.runtime.terminal import Terminal

logger = logging.getLogger(__name__)


def should_exit_key(event: KeyEvent, exit_keys: ExitKeys) -> bool:
    """Whether a key event is one of the configured exit shortcuts."""
    if event.key == Key.ESCAPE and not event.alt:
        return exit_keys.esc
    if event.is_char and event.char == "q":
        return exit_keys.q
    if event.is_ctrl("c"):
        return exit_keys.ctrl_c
    return False


class Program:
    """
    Run a Model against the terminal.

    Each iteration renders one frame, waits up to tick_rate for input,
    checks the exit keys, translates the event into a message and drains
    every pending message through update. Rendering never overlaps an
    update.
    """

    def __init__(
        self,
        model: Model,
        config: Optional[ProgramConfig] = None,
        reader: Optional[InputReader] = None,
        renderer: Optional[TerminalRenderer] = None,
    ):
        self.model = model
        self.config = config or ProgramConfig()
        self.reader = reader or InputReader()
        self.renderer = renderer or TerminalRenderer()
        self._pending: deque = deque()

    def render_to_canvas(self, width: int, height: int) -> Canvas:
        """Render one frame into a fresh canvas without touching the terminal."""
        canvas = Canvas(width, height)
        self.model.view(canvas, canvas.area, self.config.theme, self.config.inline)
        return canvas

    def run(self) -> None:
        """
        Run until an exit key is pressed or the model asks to quit.

        Raises:
            ProgramError: If terminal I/O fails
        """
        logger.info("Starting %s (inline=%s, mouse=%s)",
                    self.config.title, self.config.inline, self.config.mouse)
        enqueue_command(self.model.init(), self._pending)
        drain_pending(self.model, self._pending)

        try:
            with Terminal.managed_mode(inline=self.config.inline, mouse=self.config.mouse):
                if self.config.inline:
                    self._reserve_inline_rows()
                self._loop()
        except OSError as e:
            raise ProgramError(f"Terminal I/O failed: {e}") from e
        finally:
            logger.info("Stopped %s", self.config.title)

    def _loop(self) -> None:
        while not self.model.should_quit():
            self._draw()

            event = self.reader.read(timeout=self.config.tick_rate)
            if event is None:
                continue

            if isinstance(event, KeyEvent):
                if should_exit_key(event, self.config.exit_keys):
                    logger.debug("Exit key %r", event.raw)
                    break
                msg = self.model.on_key(event)
            else:
                msg = self.model.on_mouse(event)

            if msg is not None:
                self._pending.append(msg)
                drain_pending(self.model, self._pending)

        if self.config.inline:
            Terminal.write("\x1b8" + "\r\n" * self.config.inline_height)

    def _draw(self) -> None:
        size = Terminal.size()
        if self.config.inline:
            canvas = self.render_to_canvas(size.cols, min(self.config.inline_height, size.rows))
            Terminal.write(self.renderer.render_inline(canvas))
        else:
            canvas = self.render_to_canvas(size.cols, size.rows)
            Terminal.write(self.renderer.render_frame(canvas))

    def _reserve_inline_rows(self) -> None:
        rows = self.config.inline_height
        Terminal.write("\r\n" * rows + f"\x1b[{rows}A\r\x1b7")
