"""
terminal-kit: layout engine and widgets for terminal user interfaces

Wrap text, place cursors, scroll lists and draw scrollbars with pure,
width-aware functions, then build dialogs, pickers and wizards on top.

Quick Start:
    >>> import terminal_kit as tk
    >>> tk.compute_wrap("hello world", 5)
    [(0, 5), (6, 11)]
    >>> tk.compute_viewport(12, 5, 0)
    8

Features:
    - Greedy word wrap over UTF-8 byte offsets with wide-character widths
    - Cursor mapping between byte offsets and visual (row, column)
    - Direction-anchored viewport scrolling and scrollbar geometry
    - Centered, bordered and inline dialog layout
    - Text input, lists, fuzzy dropdowns, pickers and multi-step wizards
    - An event loop that drives any Model on a real terminal
"""

__version__ = "0.1.0"

# Engine
from terminal_kit.engine import compute_cursor_visual, compute_scrollbar, compute_viewport, compute_wrap
from terminal_kit.layout.rect import Rect
from terminal_kit.layout.scrollbar import ScrollbarGeometry
from terminal_kit.text.cursor import VisualPosition

# Rendering
from terminal_kit.render.canvas import Canvas
from terminal_kit.theme import Theme

# Runtime
from terminal_kit.runtime.command import Command
from terminal_kit.runtime.config import ProgramConfig
from terminal_kit.runtime.model import Model
from terminal_kit.runtime.program import Program

__all__ = [
    # Version
    "__version__",
    # Engine
    "compute_wrap",
    "compute_cursor_visual",
    "compute_viewport",
    "compute_scrollbar",
    "Rect",
    "ScrollbarGeometry",
    "VisualPosition",
    # Rendering
    "Canvas",
    "Theme",
    # Runtime
    "Command",
    "Model",
    "Program",
    "ProgramConfig",
]
