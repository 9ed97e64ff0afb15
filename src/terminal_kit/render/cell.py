"""Cell - one position in the terminal grid."""

from dataclasses import dataclass, field

from rich.style import Style

# Char of the cell to the right of a double-width character.
CONTINUATION = ""


@dataclass(slots=True)
class Cell:
    """
    A single character cell with its style.

    A double-width character occupies its own cell plus a continuation
    cell whose char is empty; renderers skip continuation cells.
    """
    char: str = " "
    style: Style = field(default_factory=Style)

    def copy(self) -> "Cell":
        return Cell(char=self.char, style=self.style)

    @property
    def is_continuation(self) -> bool:
        return self.char == CONTINUATION

    def is_default(self) -> bool:
        """Check if this cell is an unstyled space."""
        return self.char == " " and not self.style
