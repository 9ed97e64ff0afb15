"""Shared fixtures for the test suite."""

from __future__ import annotations

from typing import Optional

import pytest

from terminal_kit.render.canvas import Canvas
from terminal_kit.runtime.input import Key, KeyEvent
from terminal_kit.theme import Theme

# Buffers covering the width classes the wrap engine has to handle
WRAP_CORPUS = [
    "",
    "hello world",
    "ab\ncd",
    "the quick brown fox jumps over the lazy dog",
    "trailing space ",
    "\n\nleading newlines",
    "double\n\nnewline",
    "a" * 40,
    "日本語のテキストを折り返す",
    "mixed 日本 and ascii text",
    "emoji 🎉🎉 party 🎉",
    "café and naïve",
    "see @src/widgets/picker.py for details",
    "path/to/some/deeply/nested/file.txt",
    "   many   spaces   between   words   ",
    "tab\tseparated\tvalues",
]

WIDTHS = [1, 2, 3, 5, 8, 13, 40, 80]


@pytest.fixture
def theme() -> Theme:
    return Theme.dark()


@pytest.fixture
def canvas() -> Canvas:
    return Canvas(40, 12)


@pytest.fixture
def sample_lines() -> list[str]:
    """Multi-line buffer with multi-byte and zero-width characters."""
    return ["hello", "日本語", "café", "", "🎉 done"]


def key(k: Key, **mods: bool) -> KeyEvent:
    return KeyEvent(key=k, **mods)


def char(c: str, ctrl: bool = False, alt: bool = False) -> KeyEvent:
    return KeyEvent(char=c, ctrl=ctrl, alt=alt)


def ctrl(letter: str) -> KeyEvent:
    return KeyEvent(char=letter, ctrl=True)


def type_text(handler, text: str) -> Optional[object]:
    """Feed each character of text to handler, returning the last result."""
    result = None
    for c in text:
        result = handler(char(c))
    return result
