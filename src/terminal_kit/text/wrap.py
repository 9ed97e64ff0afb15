"""Word-wrap engine - split flattened text into visual row ranges.

Rows are half-open (start, end) UTF-8 byte ranges into the flattened text.
Consecutive rows are ordered and never overlap. The only bytes that fall
between two rows are consumed separators: the newline that ended a logical
line, or the single whitespace character a soft wrap broke on.
"""

from __future__ import annotations

from typing import AbstractSet, Optional

from terminal_kit.text.buffer import byte_slice, char_byte_len, iter_chars
from terminal_kit.text.width import char_width

RowRange = tuple[int, int]

# Path and mention delimiters. Rows may break right after them, which keeps
# long "@src/some/path.py" mentions readable. Whitespace is always a break
# candidate and does not need to be listed.
DEFAULT_BREAK_CHARS: frozenset[str] = frozenset("/@")
PLAIN_BREAK_CHARS: frozenset[str] = frozenset()


def wrapped_row_ranges(
    text: str,
    width: int,
    break_chars: AbstractSet[str] = DEFAULT_BREAK_CHARS,
) -> list[RowRange]:
    """
    Wrap text into visual rows that fit within width columns.

    Args:
        text: Flattened buffer text (lines joined by newlines)
        width: Columns per row; values below 1 are treated as 1
        break_chars: Extra non-whitespace characters after which a row may break

    Returns:
        Row ranges in order. Empty text yields [(0, 0)].
    """
    width = max(1, width)
    chars = [(offset, ch, char_byte_len(ch)) for offset, ch in iter_chars(text)]
    total = chars[-1][0] + chars[-1][2] if chars else 0

    rows: list[RowRange] = []
    start = 0
    cols = 0
    # Most recent break candidate in the current row: (row_end, next_start, resume_index)
    candidate: Optional[tuple[int, int, int]] = None
    i = 0

    while i < len(chars):
        offset, ch, size = chars[i]

        if ch == "\n":
            rows.append((start, offset))
            start = offset + size
            cols = 0
            candidate = None
            i += 1
            continue

        w = char_width(ch)
        if cols > 0 and cols + w > width:
            if ch.isspace():
                # Overflowing whitespace ends the row and is consumed
                rows.append((start, offset))
                start = offset + size
                i += 1
            elif candidate is not None and candidate[0] > start:
                row_end, next_start, resume = candidate
                rows.append((start, row_end))
                start = next_start
                i = resume
            else:
                # Hard break before an unbroken token
                rows.append((start, offset))
                start = offset
            cols = 0
            candidate = None
            continue

        cols += w
        if w > 0:
            if ch.isspace():
                candidate = (offset, offset + size, i + 1)
            elif ch in break_chars:
                candidate = (offset + size, offset + size, i + 1)
        i += 1

    rows.append((start, total))
    return rows


def wrapped_row_count(
    text: str,
    width: int,
    break_chars: AbstractSet[str] = DEFAULT_BREAK_CHARS,
) -> int:
    """Count visual rows needed to render text at the given width."""
    return len(wrapped_row_ranges(text, width, break_chars))


def wrap_text(
    text: str,
    width: int,
    break_chars: AbstractSet[str] = DEFAULT_BREAK_CHARS,
) -> list[str]:
    """Wrap text and return the row strings instead of byte ranges."""
    encoded = text.encode("utf-8")
    return [
        encoded[start:end].decode("utf-8")
        for start, end in wrapped_row_ranges(text, width, break_chars)
    ]


def row_text(text: str, row: RowRange) -> str:
    """Get the text of one row range."""
    return byte_slice(text, row[0], row[1])
