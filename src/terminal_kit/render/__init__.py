"""Cell grid, styled text, path mentions and ANSI output."""

from terminal_kit.render.canvas import Canvas
from terminal_kit.render.cell import CONTINUATION, Cell
from terminal_kit.render.paths import MentionPathFormatter, PathDisplayConfig, PathFormatter
from terminal_kit.render.styled import Line, Span, render_line, render_lines, render_paragraph
from terminal_kit.render.terminal import TerminalRenderer

__all__ = [
    "CONTINUATION",
    "Canvas",
    "Cell",
    "Line",
    "MentionPathFormatter",
    "PathDisplayConfig",
    "PathFormatter",
    "Span",
    "TerminalRenderer",
    "render_line",
    "render_lines",
    "render_paragraph",
]
