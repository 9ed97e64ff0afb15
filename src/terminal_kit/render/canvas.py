"""Canvas - fixed-size 2D grid of cells that widgets paint into."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from rich.style import Style

from terminal_kit.layout.rect import Rect
from terminal_kit.render.cell import CONTINUATION, Cell
from terminal_kit.text.width import char_width, truncate_to_width
from terminal_kit.theme import PLAIN_BORDER, BorderChars


@dataclass
class Canvas:
    """
    A width x height grid of Cells.

    get/set are strict and raise IndexError outside the grid. The painting
    helpers (put_text, fill, set_style, draw_border) clip silently, so
    widgets can paint into any rect without checking bounds first.

    cursor is where the terminal cursor should be shown after the frame
    is drawn, or None to keep it hidden.
    """
    width: int = 80
    height: int = 24
    cursor: Optional[tuple[int, int]] = None
    _buffer: list[list[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.width = max(0, self.width)
        self.height = max(0, self.height)
        if not self._buffer:
            self._buffer = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        return self._buffer[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at position (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        self._buffer[y][x] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: canvas[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set cell using indexing: canvas[x, y] = cell."""
        x, y = pos
        self.set(x, y, cell)

    def put_char(self, x: int, y: int, char: str, style: Optional[Style] = None) -> None:
        """Put one character, layering style over the cell's existing style."""
        if not self.in_bounds(x, y):
            return
        cell = self._buffer[y][x]
        cell.char = char
        if style is not None:
            cell.style = cell.style + style

    def put_text(
        self,
        x: int,
        y: int,
        text: str,
        style: Optional[Style] = None,
        max_width: Optional[int] = None,
    ) -> int:
        """
        Put a string starting at (x, y), measured in display columns.

        Double-width characters take two cells and are never split at the
        clip edge. Zero-width characters attach to the preceding cell.

        Returns:
            Number of columns written
        """
        if not 0 <= y < self.height:
            return 0
        limit = self.width - x
        if max_width is not None:
            limit = min(limit, max_width)
        if limit <= 0:
            return 0

        col = x
        used = 0
        last: Optional[tuple[int, int]] = None
        for ch in text:
            w = char_width(ch)
            if w == 0:
                if last is not None:
                    self._buffer[last[1]][last[0]].char += ch
                continue
            if used + w > limit:
                break
            if col >= 0:
                self.put_char(col, y, ch, style)
                if w == 2:
                    self.put_char(col + 1, y, CONTINUATION, style)
                last = (col, y)
            col += w
            used += w
        return used

    def fill(self, area: Rect, style: Optional[Style] = None, char: str = " ") -> None:
        """Replace every cell in area with char in style."""
        clipped = area.intersection(self.area)
        for row in range(clipped.y, clipped.bottom):
            for col in range(clipped.x, clipped.right):
                self._buffer[row][col] = Cell(char, style if style is not None else Style())

    def set_style(self, area: Rect, style: Style) -> None:
        """Layer style over every cell in area, keeping the characters."""
        clipped = area.intersection(self.area)
        for row in range(clipped.y, clipped.bottom):
            for col in range(clipped.x, clipped.right):
                cell = self._buffer[row][col]
                cell.style = cell.style + style

    def clear(self, area: Optional[Rect] = None) -> None:
        """Reset cells in area (or the whole grid) to unstyled spaces."""
        self.fill(area if area is not None else self.area)

    def draw_border(
        self,
        area: Rect,
        style: Optional[Style] = None,
        title: Optional[str] = None,
        chars: BorderChars = PLAIN_BORDER,
        title_style: Optional[Style] = None,
    ) -> Rect:
        """
        Draw a one-cell border around area with an optional title on the top edge.

        Returns:
            The inner rect left for content
        """
        if area.width < 2 or area.height < 2:
            return area.inner(1)
        left, right = area.x, area.right - 1
        top, bottom = area.y, area.bottom - 1

        for col in range(left + 1, right):
            self.put_char(col, top, chars.horizontal, style)
            self.put_char(col, bottom, chars.horizontal, style)
        for row in range(top + 1, bottom):
            self.put_char(left, row, chars.vertical, style)
            self.put_char(right, row, chars.vertical, style)
        self.put_char(left, top, chars.top_left, style)
        self.put_char(right, top, chars.top_right, style)
        self.put_char(left, bottom, chars.bottom_left, style)
        self.put_char(right, bottom, chars.bottom_right, style)

        if title:
            label = truncate_to_width(title, area.width - 2)
            self.put_text(left + 1, top, label, title_style or style)
        return area.inner(1)

    def row_text(self, y: int) -> str:
        """Plain text of one row, skipping continuation cells."""
        if not 0 <= y < self.height:
            raise IndexError(f"y={y} out of bounds (height={self.height})")
        return "".join(cell.char for cell in self._buffer[y])

    def lines(self) -> list[str]:
        """Plain text of every row."""
        return [self.row_text(y) for y in range(self.height)]

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for y, row in enumerate(self._buffer):
            for x, cell in enumerate(row):
                yield x, y, cell
