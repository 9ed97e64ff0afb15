"""Render a canvas to terminal escape sequences."""

from __future__ import annotations

from rich.color import ColorSystem
from rich.style import Style

from terminal_kit.render.canvas import Canvas
from terminal_kit.render.cell import Cell

RESET = "\x1b[0m"


class TerminalRenderer:
    """
    Render a Canvas to ANSI escape sequences for terminal display.

    Optimizes output by only emitting SGR codes when the style changes:
    consecutive cells sharing a style are grouped into one run.
    """

    def __init__(
        self,
        reset_at_end: bool = True,
        color_system: ColorSystem = ColorSystem.TRUECOLOR,
    ):
        self.reset_at_end = reset_at_end
        self.color_system = color_system

    def render_row(self, row: list[Cell], trim: bool = False) -> str:
        """Render one row of cells; trim drops trailing unstyled spaces."""
        last_col = len(row) - 1
        if trim:
            while last_col >= 0 and row[last_col].is_default():
                last_col -= 1

        parts: list[str] = []
        run: list[str] = []
        run_style: Style = Style()
        for cell in row[: last_col + 1]:
            if cell.style != run_style and run:
                parts.append(self._paint(run, run_style))
                run = []
            run_style = cell.style
            run.append(cell.char)
        if run:
            parts.append(self._paint(run, run_style))
        return "".join(parts)

    def render(self, canvas: Canvas) -> str:
        """Render canvas to an ANSI string, one line per row."""
        lines = [self.render_row(row, trim=True) for row in canvas.rows()]
        result = "\n".join(lines)
        if self.reset_at_end:
            result += RESET
        return result

    def render_frame(self, canvas: Canvas, origin_row: int = 0) -> str:
        """
        Render canvas as a full frame with absolute cursor addressing.

        Every row is positioned explicitly, so the output is correct in raw
        mode where a bare newline does not return the carriage. When the
        canvas carries a cursor position the cursor is moved there and shown.
        """
        out: list[str] = ["\x1b[?25l"]
        for y, row in enumerate(canvas.rows()):
            out.append(f"\x1b[{origin_row + y + 1};1H")
            out.append(self.render_row(row))
            out.append(RESET)
        if canvas.cursor is not None:
            cx, cy = canvas.cursor
            out.append(f"\x1b[{origin_row + cy + 1};{cx + 1}H\x1b[?25h")
        return "".join(out)

    def render_inline(self, canvas: Canvas) -> str:
        """
        Render canvas below a saved cursor position.

        The caller reserves canvas.height rows and saves the cursor (ESC 7)
        at their top-left corner once; every frame restores it and draws
        rows with relative movement, leaving the scrollback untouched.
        """
        out: list[str] = ["\x1b[?25l\x1b8"]
        for y, row in enumerate(canvas.rows()):
            if y:
                out.append("\r\n")
            out.append(self.render_row(row))
            out.append(RESET + "\x1b[K")
        if canvas.cursor is not None:
            cx, cy = canvas.cursor
            out.append("\x1b8")
            if cy:
                out.append(f"\x1b[{cy}B")
            if cx:
                out.append(f"\x1b[{cx}C")
            out.append("\x1b[?25h")
        return "".join(out)

    def _paint(self, chars: list[str], style: Style) -> str:
        text = "".join(chars)
        if not style:
            return text
        return style.render(text, color_system=self.color_system)
