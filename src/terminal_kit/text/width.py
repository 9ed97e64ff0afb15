"""Display-width helpers - measuring, truncating and padding by terminal cells."""

from __future__ import annotations

from functools import lru_cache

from wcwidth import wcwidth


@lru_cache(maxsize=4096)
def char_width(ch: str) -> int:
    """
    Get the number of terminal columns a single character occupies.

    Returns 0 for zero-width characters (combining marks, joiners),
    2 for East Asian wide/fullwidth characters and 1 otherwise.
    Control characters, which wcwidth reports as -1, take one cell so
    that they stay visible and the cursor can still move past them.
    """
    width = wcwidth(ch)
    if width < 0:
        return 1
    return width


def text_width(s: str) -> int:
    """Get visible width of a string in terminal columns."""
    return sum(char_width(ch) for ch in s)


def truncate_to_width(s: str, max_width: int, ellipsis: str = "") -> str:
    """
    Truncate a string so it fits within max_width columns.

    A wide character that would straddle the limit is dropped rather
    than split. If ellipsis is given and truncation happens, it is
    appended within the same budget.
    """
    if max_width <= 0:
        return ""
    if text_width(s) <= max_width:
        return s

    budget = max_width - text_width(ellipsis)
    if budget < 0:
        return truncate_to_width(ellipsis, max_width)

    result: list[str] = []
    used = 0
    for ch in s:
        w = char_width(ch)
        if used + w > budget:
            break
        result.append(ch)
        used += w
    return "".join(result) + ellipsis


def pad_to_width(s: str, width: int, char: str = " ") -> str:
    """Pad string with char to reach exactly width visible columns."""
    current = text_width(s)
    if current >= width:
        return s
    return s + char * (width - current)


def truncate_and_pad(s: str, width: int) -> str:
    """Truncate if too long, pad if too short. Always returns exactly width columns."""
    return pad_to_width(truncate_to_width(s, width), width)
