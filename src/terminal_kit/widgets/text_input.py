"""Editable multi-line text buffer with a cursor.

The buffer is a list of lines with the cursor at (line, char index).
Everything that needs a byte offset (wrapping, visual positions, the
dropdown filter) goes through the flattened text and the cursor mapper,
so logical and visual movement agree on where the cursor is.
"""

from __future__ import annotations

from typing import Optional

from terminal_kit.runtime.input import Key, KeyEvent
from terminal_kit.text.buffer import flatten, split_lines
from terminal_kit.text.cursor import (
    VisualPosition,
    byte_offset_to_cursor,
    cursor_to_byte_offset,
    cursor_visual_position,
    find_visual_row,
    offset_for_column,
)
from terminal_kit.text.wrap import RowRange, wrapped_row_ranges

DEFAULT_PREFIX = "❯"


def _char_class(ch: str) -> int:
    if ch.isspace():
        return 0
    if ch.isalnum() or ch == "_":
        return 1
    return 2


def _word_start_before(line: str, col: int) -> int:
    """Start of the word ending at or before col, skipping whitespace first."""
    i = col
    while i > 0 and _char_class(line[i - 1]) == 0:
        i -= 1
    if i > 0:
        cls = _char_class(line[i - 1])
        while i > 0 and _char_class(line[i - 1]) == cls:
            i -= 1
    return i


def _word_end_after(line: str, col: int) -> int:
    """End of the word starting at or after col, skipping whitespace first."""
    i = col
    n = len(line)
    while i < n and _char_class(line[i]) == 0:
        i += 1
    if i < n:
        cls = _char_class(line[i])
        while i < n and _char_class(line[i]) == cls:
            i += 1
    return i


class TextInput:
    """
    Text entry state: lines, cursor, prompt prefix and placeholder.

    Keyboard handling follows common readline/emacs bindings:

        Ctrl+A / Home    Line start          Ctrl+E / End     Line end
        Ctrl+B / Left    Back one char       Ctrl+F / Right   Forward one char
        Alt+B / Ctrl+←   Back one word       Alt+F / Ctrl+→   Forward one word
        Ctrl+P / Up      Previous line       Ctrl+N / Down    Next line
        Ctrl+H / Bksp    Delete backward     Ctrl+D / Del     Delete forward
        Ctrl+W / Alt+Bksp  Delete word back  Alt+D            Delete word forward
        Ctrl+U           Delete to line start  Ctrl+K         Delete to line end
        Enter            New line
    """

    def __init__(self, text: str = "", prefix: str = DEFAULT_PREFIX, placeholder: Optional[str] = None):
        self._lines: list[str] = [""]
        self._row = 0
        self._col = 0
        self.prefix = prefix
        self._placeholder = placeholder or None
        self.set_text(text)

    # -- buffer ------------------------------------------------------------

    @property
    def text(self) -> str:
        return flatten(self._lines)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def is_empty(self) -> bool:
        return self._lines == [""]

    def set_text(self, text: str) -> None:
        """Replace the buffer; the cursor moves to the end."""
        self._lines = split_lines(text)
        self.cursor_end()

    def clear(self) -> None:
        self.set_text("")

    @property
    def placeholder(self) -> Optional[str]:
        return self._placeholder

    @placeholder.setter
    def placeholder(self, value: Optional[str]) -> None:
        self._placeholder = value or None

    def display_text(self) -> str:
        return f"{self.prefix}{self.text}"

    # -- cursor ------------------------------------------------------------

    @property
    def line_cursor(self) -> tuple[int, int]:
        """Cursor as (line, char index)."""
        return self._row, self._col

    @property
    def cursor(self) -> int:
        """Cursor as a byte offset into the flattened text."""
        return cursor_to_byte_offset(self._lines, (self._row, self._col))

    def set_cursor_byte_offset(self, offset: int) -> None:
        self._row, self._col = byte_offset_to_cursor(self._lines, offset)

    def cursor_left(self) -> None:
        if self._col > 0:
            self._col -= 1
        elif self._row > 0:
            self._row -= 1
            self._col = len(self._lines[self._row])

    def cursor_right(self) -> None:
        if self._col < len(self._lines[self._row]):
            self._col += 1
        elif self._row < len(self._lines) - 1:
            self._row += 1
            self._col = 0

    def cursor_line_start(self) -> None:
        self._col = 0

    def cursor_line_end(self) -> None:
        self._col = len(self._lines[self._row])

    def cursor_start(self) -> None:
        """Move to the start of the current line."""
        self.cursor_line_start()

    def cursor_end(self) -> None:
        """Move to the end of the buffer."""
        self._row = len(self._lines) - 1
        self._col = len(self._lines[self._row])

    def cursor_word_left(self) -> None:
        if self._col == 0:
            self.cursor_left()
            return
        self._col = _word_start_before(self._lines[self._row], self._col)

    def cursor_word_right(self) -> None:
        line = self._lines[self._row]
        if self._col >= len(line):
            self.cursor_right()
            return
        self._col = _word_end_after(line, self._col)

    def cursor_move_vertical(self, up: bool) -> bool:
        """Move one logical line, keeping the column where the line allows."""
        target = self._row - 1 if up else self._row + 1
        if not 0 <= target < len(self._lines):
            return False
        self._row = target
        self._col = min(self._col, len(self._lines[target]))
        return True

    def cursor_up_line(self) -> bool:
        return self.cursor_move_vertical(True)

    def cursor_down_line(self) -> bool:
        return self.cursor_move_vertical(False)

    def cursor_move_visual_vertical(self, up: bool, content_width: int) -> bool:
        """
        Move one wrapped row up or down at content_width.

        The cursor keeps its visual column as closely as the target row
        allows. Returns False when there is no row in that direction.
        """
        if content_width <= 0 or self.is_empty():
            return False
        text = self.text
        ranges = wrapped_row_ranges(text, content_width)
        if len(ranges) <= 1:
            return False

        current = find_visual_row(ranges, self.cursor)
        target = current - 1 if up else current + 1
        if not 0 <= target < len(ranges):
            return False

        goal_col = self.cursor_visual_position(content_width).col
        self.set_cursor_byte_offset(offset_for_column(text, ranges[target], goal_col))
        return True

    def cursor_visual_line_end(self, content_width: int) -> None:
        """Move to the end of the wrapped row holding the cursor."""
        if content_width <= 0 or self.is_empty():
            self.cursor_end()
            return
        ranges = wrapped_row_ranges(self.text, content_width)
        _, end = ranges[find_visual_row(ranges, self.cursor)]
        self.set_cursor_byte_offset(end)

    def cursor_visual_position(self, content_width: int) -> VisualPosition:
        return cursor_visual_position(self.text, self.cursor, content_width)

    def wrapped_rows(self, content_width: int) -> list[RowRange]:
        return wrapped_row_ranges(self.text, content_width)

    def visual_rows(self, content_width: int) -> int:
        return len(self.wrapped_rows(content_width))

    # -- editing -----------------------------------------------------------

    def insert_char(self, ch: str) -> None:
        if ch == "\n":
            self.newline()
            return
        line = self._lines[self._row]
        self._lines[self._row] = line[: self._col] + ch + line[self._col:]
        self._col += 1

    def insert_str(self, s: str) -> None:
        for i, part in enumerate(s.split("\n")):
            if i:
                self.newline()
            line = self._lines[self._row]
            self._lines[self._row] = line[: self._col] + part + line[self._col:]
            self._col += len(part)

    def newline(self) -> None:
        line = self._lines[self._row]
        self._lines[self._row] = line[: self._col]
        self._lines.insert(self._row + 1, line[self._col:])
        self._row += 1
        self._col = 0

    def _join_with_previous(self) -> bool:
        if self._row == 0:
            return False
        prev = self._lines[self._row - 1]
        self._lines[self._row - 1] = prev + self._lines.pop(self._row)
        self._row -= 1
        self._col = len(prev)
        return True

    def _join_with_next(self) -> bool:
        if self._row >= len(self._lines) - 1:
            return False
        self._lines[self._row] += self._lines.pop(self._row + 1)
        return True

    def delete_backward(self) -> bool:
        if self._col == 0:
            return self._join_with_previous()
        line = self._lines[self._row]
        self._lines[self._row] = line[: self._col - 1] + line[self._col:]
        self._col -= 1
        return True

    def delete_forward(self) -> bool:
        line = self._lines[self._row]
        if self._col >= len(line):
            return self._join_with_next()
        self._lines[self._row] = line[: self._col] + line[self._col + 1:]
        return True

    def delete_to_line_start(self) -> bool:
        """Delete from line start to the cursor; at line start, join with the previous line."""
        if self._col == 0:
            return self._join_with_previous()
        self._lines[self._row] = self._lines[self._row][self._col:]
        self._col = 0
        return True

    def delete_to_line_end(self) -> bool:
        line = self._lines[self._row]
        if self._col >= len(line):
            return self._join_with_next()
        self._lines[self._row] = line[: self._col]
        return True

    def delete_word_backward(self) -> bool:
        if self._col == 0:
            return self._join_with_previous()
        line = self._lines[self._row]
        start = _word_start_before(line, self._col)
        self._lines[self._row] = line[:start] + line[self._col:]
        self._col = start
        return True

    def delete_word_forward(self) -> bool:
        line = self._lines[self._row]
        if self._col >= len(line):
            return self._join_with_next()
        end = _word_end_after(line, self._col)
        self._lines[self._row] = line[: self._col] + line[end:]
        return True

    # -- keys --------------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> bool:
        """
        Apply a key event.

        Returns:
            True if the text changed
        """
        before = self.text

        if event.ctrl and event.char:
            self._handle_ctrl(event.char)
        elif event.alt and event.char:
            self._handle_alt(event.char)
        elif event.alt and event.key == Key.BACKSPACE:
            self.delete_word_backward()
        elif event.key is not None:
            self._handle_named(event)
        elif event.char is not None:
            self.insert_char(event.char)

        return self.text != before

    def _handle_ctrl(self, letter: str) -> None:
        actions = {
            "a": self.cursor_line_start,
            "e": self.cursor_line_end,
            "b": self.cursor_left,
            "f": self.cursor_right,
            "p": self.cursor_up_line,
            "n": self.cursor_down_line,
            "h": self.delete_backward,
            "d": self.delete_forward,
            "w": self.delete_word_backward,
            "u": self.delete_to_line_start,
            "k": self.delete_to_line_end,
        }
        action = actions.get(letter)
        if action is not None:
            action()

    def _handle_alt(self, char: str) -> None:
        actions = {
            "b": self.cursor_word_left,
            "f": self.cursor_word_right,
            "d": self.delete_word_forward,
        }
        action = actions.get(char)
        if action is not None:
            action()

    def _handle_named(self, event: KeyEvent) -> None:
        key = event.key
        if key == Key.LEFT and event.ctrl:
            self.cursor_word_left()
        elif key == Key.RIGHT and event.ctrl:
            self.cursor_word_right()
        elif key == Key.LEFT:
            self.cursor_left()
        elif key == Key.RIGHT:
            self.cursor_right()
        elif key == Key.UP:
            self.cursor_up_line()
        elif key == Key.DOWN:
            self.cursor_down_line()
        elif key == Key.HOME:
            self.cursor_line_start()
        elif key == Key.END:
            self.cursor_line_end()
        elif key == Key.ENTER:
            self.newline()
        elif key == Key.BACKSPACE:
            self.delete_backward()
        elif key == Key.DELETE:
            self.delete_forward()

    def handle_search_key(self, event: KeyEvent) -> Optional[str]:
        """Apply a key to a search field; returns the new text only when it changed."""
        if self.handle_key(event):
            return self.text
        return None

    def __repr__(self) -> str:
        return f"TextInput(text={self.text!r}, cursor={self.line_cursor})"
