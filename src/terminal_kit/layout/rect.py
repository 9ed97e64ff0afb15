"""Rectangles and band splitting for terminal layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class Padding:
    """Inner spacing in cells on each side of a rect."""
    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0

    @classmethod
    def uniform(cls, n: int) -> Padding:
        return cls(n, n, n, n)

    @classmethod
    def symmetric(cls, horizontal: int, vertical: int) -> Padding:
        return cls(horizontal, horizontal, vertical, vertical)

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


@dataclass(frozen=True)
class Rect:
    """Rectangle bounds in terminal cells; (x, y) is the top-left corner."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        """First column past the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """First row past the bottom edge."""
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, col: int, row: int) -> bool:
        """Whether (col, row) lies inside; top-left inclusive, bottom-right exclusive."""
        return self.x <= col < self.right and self.y <= row < self.bottom

    def inner(self, margin: int = 1) -> Rect:
        """Shrink by margin on every side, saturating at zero size."""
        return self.pad(Padding.uniform(margin))

    def pad(self, padding: Padding) -> Rect:
        """Shrink by padding, saturating at zero size."""
        width = max(0, self.width - padding.horizontal)
        height = max(0, self.height - padding.vertical)
        return Rect(
            self.x + min(padding.left, self.width),
            self.y + min(padding.top, self.height),
            width,
            height,
        )

    def intersection(self, other: Rect) -> Rect:
        """Overlapping part of two rects; zero-sized when they do not overlap."""
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))

    def with_height(self, height: int) -> Rect:
        return Rect(self.x, self.y, self.width, max(0, height))

    def with_width(self, width: int) -> Rect:
        return Rect(self.x, self.y, max(0, width), self.height)


def split_rows(area: Rect, header_rows: int, footer_rows: int) -> tuple[Rect, Rect, Rect]:
    """
    Split an area into header, body and footer bands.

    The header is taken first, then the footer from what remains; the body
    gets the rest. Bands never exceed the area.
    """
    header_h = max(0, min(header_rows, area.height))
    footer_h = max(0, min(footer_rows, area.height - header_h))
    body_h = area.height - header_h - footer_h

    header = Rect(area.x, area.y, area.width, header_h)
    body = Rect(area.x, area.y + header_h, area.width, body_h)
    footer = Rect(area.x, area.y + header_h + body_h, area.width, footer_h)
    return header, body, footer


def split_vertical(
    area: Rect,
    lengths: Sequence[int],
    fill_index: Optional[int] = None,
) -> list[Rect]:
    """
    Stack bands of fixed heights top to bottom.

    Args:
        area: Area to split
        lengths: Requested height of each band
        fill_index: Band that absorbs the remaining height, if any

    Returns:
        One rect per requested band. Bands that run past the bottom of the
        area are clipped, possibly to zero height.
    """
    heights = [max(0, n) for n in lengths]
    if fill_index is not None and 0 <= fill_index < len(heights):
        fixed = sum(h for i, h in enumerate(heights) if i != fill_index)
        heights[fill_index] = max(0, area.height - fixed)

    bands: list[Rect] = []
    y = area.y
    for h in heights:
        clipped = max(0, min(h, area.bottom - y))
        bands.append(Rect(area.x, y, area.width, clipped))
        y += clipped
    return bands
