"""Text buffer coordinates - flattened form and UTF-8 byte offsets.

A buffer is an ordered list of lines. Its flattened form joins the lines
with a single newline, and every "offset" in the toolkit is a UTF-8 byte
offset into that flattened string, not a character index.
"""

from __future__ import annotations

from typing import Iterator, Sequence


def byte_len(s: str) -> int:
    """Length of a string in UTF-8 bytes."""
    return len(s.encode("utf-8"))


def char_byte_len(ch: str) -> int:
    """Length of a single code point in UTF-8 bytes."""
    cp = ord(ch)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


def iter_chars(text: str, start: int = 0) -> Iterator[tuple[int, str]]:
    """
    Iterate over (byte_offset, char) pairs.

    Args:
        text: String to walk
        start: Byte offset of the first character of text, added to every
            yielded offset (useful when text is a slice of a larger buffer)
    """
    offset = start
    for ch in text:
        yield offset, ch
        offset += char_byte_len(ch)


def byte_slice(text: str, start: int, end: int) -> str:
    """Slice a string by UTF-8 byte offsets."""
    return text.encode("utf-8")[start:end].decode("utf-8", errors="ignore")


def flatten(lines: Sequence[str]) -> str:
    """Join buffer lines into the flattened form."""
    return "\n".join(lines)


def split_lines(text: str) -> list[str]:
    """
    Split flattened text back into buffer lines.

    Always returns at least one line; a trailing newline yields a
    trailing empty line so that flatten(split_lines(t)) == t.
    """
    return text.split("\n")


def flattened_len(lines: Sequence[str]) -> int:
    """Byte length of the flattened buffer without building it."""
    if not lines:
        return 0
    return sum(byte_len(line) for line in lines) + len(lines) - 1
