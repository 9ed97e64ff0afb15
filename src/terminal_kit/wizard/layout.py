"""Standard body splits for wizard steps."""

from __future__ import annotations

from terminal_kit.layout.rect import Rect, split_vertical


def input_step_layout(area: Rect) -> list[Rect]:
    """
    Split a single-input step body.

    Returns four bands: top padding (1), input box (3), validation or
    status line (2) and the remaining filler.
    """
    return split_vertical(area, [1, 3, 2, 0], fill_index=3)


def padded_list_layout(area: Rect) -> list[Rect]:
    """One blank row, then the rest for the list."""
    return split_vertical(area, [1, 0], fill_index=1)
