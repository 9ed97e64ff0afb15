"""Keyboard and mouse input decoding with an event abstraction."""

from __future__ import annotations

import codecs
import logging
import os
import re
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

logger = logging.getLogger(__name__)


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKTAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    INSERT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F10 = auto()
    F12 = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable, or the letter of a ctrl chord
    raw: str = ""  # Raw escape sequence
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def is_char(self) -> bool:
        """Check if this is a plain printable character."""
        return self.char is not None and self.key is None and not self.ctrl and not self.alt

    def is_ctrl(self, letter: str) -> bool:
        return self.ctrl and self.char == letter


class MouseKind(Enum):
    DOWN = auto()
    UP = auto()
    DRAG = auto()
    MOVED = auto()
    SCROLL_UP = auto()
    SCROLL_DOWN = auto()


class MouseButton(Enum):
    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()
    NONE = auto()


@dataclass(frozen=True)
class MouseEvent:
    """Pointer event in 0-based screen coordinates."""
    kind: MouseKind
    column: int
    row: int
    button: MouseButton = MouseButton.NONE
    ctrl: bool = False
    alt: bool = False
    shift: bool = False


InputEvent = Union[KeyEvent, MouseEvent]

_SGR_MOUSE = re.compile(r"\[<(\d+);(\d+);(\d+)([Mm])")
_MODIFIED_CSI = re.compile(r"\[1;(\d+)([A-DFH])")
_BUTTONS = {0: MouseButton.LEFT, 1: MouseButton.MIDDLE, 2: MouseButton.RIGHT}


class InputReader:
    """
    Non-blocking keyboard and mouse input reader.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    decode() runs the same parser over a string without touching a tty.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        "[A": Key.UP,
        "[B": Key.DOWN,
        "[C": Key.RIGHT,
        "[D": Key.LEFT,
        # Arrow keys (SS3 - application mode)
        "OA": Key.UP,
        "OB": Key.DOWN,
        "OC": Key.RIGHT,
        "OD": Key.LEFT,
        # Navigation
        "[H": Key.HOME,
        "[F": Key.END,
        "OH": Key.HOME,
        "OF": Key.END,
        "[1~": Key.HOME,
        "[4~": Key.END,
        "[5~": Key.PAGE_UP,
        "[6~": Key.PAGE_DOWN,
        "[2~": Key.INSERT,
        "[3~": Key.DELETE,
        "[Z": Key.BACKTAB,
        # Function keys
        "OP": Key.F1,
        "OQ": Key.F2,
        "OR": Key.F3,
        "OS": Key.F4,
        "[15~": Key.F5,
        "[21~": Key.F10,
        "[24~": Key.F12,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        "\r": Key.ENTER,
        "\n": Key.ENTER,
        "\t": Key.TAB,
        "\x7f": Key.BACKSPACE,
        "\x08": Key.BACKSPACE,
    }

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = fd
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def fd(self) -> int:
        if self._fd is None:
            self._fd = sys.stdin.fileno()
        return self._fd

    def decode(self, data: str) -> list[InputEvent]:
        """Decode every complete event in data."""
        self._buffer += data
        events: list[InputEvent] = []
        while self._buffer:
            event = self._process_buffer()
            if event is not None:
                events.append(event)
        return events

    def read(self, timeout: float = 0.1) -> Optional[InputEvent]:
        """
        Read a single input event.

        Returns None if no input available within timeout.
        """
        # Process any buffered input first
        if self._buffer:
            return self._process_buffer()

        if not self._has_input(timeout):
            return None

        # Read all available input using os.read to bypass Python buffering
        self._read_available()

        if self._buffer:
            return self._process_buffer()

        return None

    def read_blocking(self) -> InputEvent:
        """Read an event, blocking until input is available."""
        while True:
            event = self.read(timeout=1.0)
            if event is not None:
                return event

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        try:
            data = os.read(self.fd, 1024)
            self._buffer += self._decoder.decode(data)
        except BlockingIOError:
            pass

        # If buffer is just escape, wait for potential sequence
        if self._buffer == "\x1b":
            self._wait_for_escape_sequence()

    def _wait_for_escape_sequence(self) -> None:
        """Wait for escape sequence to complete with proper timeouts."""
        deadline = time.monotonic() + 0.1  # 100ms total wait

        while time.monotonic() < deadline:
            wait_time = min(deadline - time.monotonic(), 0.025)  # 25ms intervals
            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                try:
                    self._buffer += self._decoder.decode(os.read(self.fd, 1024))
                except BlockingIOError:
                    pass

                # Sequence ends with letter or ~
                rest = self._buffer[1:]
                if rest and (rest[-1].isalpha() or rest[-1] == "~"):
                    return

    def _process_buffer(self) -> Optional[InputEvent]:
        """Process buffered input and return next event."""
        if not self._buffer:
            return None

        head = self._buffer[0]

        # Simple keys
        if head in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=self.SIMPLE_KEYS[head], raw=head)

        # Escape sequence
        if head == "\x1b":
            return self._parse_escape_sequence()

        # Ctrl+letter chords arrive as bytes 0x01-0x1a
        if "\x01" <= head <= "\x1a":
            self._buffer = self._buffer[1:]
            return KeyEvent(char=chr(ord(head) + 96), raw=head, ctrl=True)

        # Printable character
        if head.isprintable():
            self._buffer = self._buffer[1:]
            return KeyEvent(char=head, raw=head)

        # Unknown control character - skip it
        logger.debug("Skipping control character %r", head)
        self._buffer = self._buffer[1:]
        return None

    def _parse_escape_sequence(self) -> InputEvent:
        """Parse an escape sequence from the buffer."""
        # Buffer starts with \x1b
        rest = self._buffer[1:]
        if not rest:
            self._buffer = ""
            return KeyEvent(key=Key.ESCAPE, raw="\x1b")

        # Alt+char: escape followed by anything other than a CSI/SS3 introducer
        if rest[0] not in "[O":
            if rest[0] == "\x1b":
                self._buffer = rest
                return KeyEvent(key=Key.ESCAPE, raw="\x1b")
            self._buffer = rest[1:]
            if rest[0] in self.SIMPLE_KEYS:
                return KeyEvent(key=self.SIMPLE_KEYS[rest[0]], raw="\x1b" + rest[0], alt=True)
            return KeyEvent(char=rest[0], raw="\x1b" + rest[0], alt=True)

        mouse = _SGR_MOUSE.match(rest)
        if mouse:
            self._buffer = rest[mouse.end():]
            return _decode_sgr_mouse(*mouse.groups())

        # Find where this sequence ends
        end_idx = 0
        for i, ch in enumerate(rest[1:], start=1):
            if ch == "\x1b":
                # Start of next escape sequence
                end_idx = i
                break
            if ch.isalpha() or ch == "~":
                end_idx = i + 1
                break
            end_idx = i + 1
        end_idx = max(end_idx, 1)

        seq = rest[:end_idx]
        raw = "\x1b" + seq
        self._buffer = rest[end_idx:]

        if seq in self.SEQUENCES:
            return KeyEvent(key=self.SEQUENCES[seq], raw=raw)

        modified = _MODIFIED_CSI.fullmatch(seq)
        if modified:
            bits = int(modified.group(1)) - 1
            key = self.SEQUENCES["[" + modified.group(2)]
            return KeyEvent(
                key=key,
                raw=raw,
                shift=bool(bits & 1),
                alt=bool(bits & 2),
                ctrl=bool(bits & 4),
            )

        logger.debug("Unknown escape sequence %r", raw)
        return KeyEvent(raw=raw)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self.fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False


def _decode_sgr_mouse(code: str, col: str, row: str, final: str) -> MouseEvent:
    """Decode an SGR (1006) mouse report; coordinates arrive 1-based."""
    b = int(code)
    column = max(0, int(col) - 1)
    line = max(0, int(row) - 1)
    mods = {"shift": bool(b & 4), "alt": bool(b & 8), "ctrl": bool(b & 16)}

    if b & 64:
        kind = MouseKind.SCROLL_DOWN if b & 1 else MouseKind.SCROLL_UP
        return MouseEvent(kind, column, line, **mods)

    button = _BUTTONS.get(b & 3, MouseButton.NONE)
    if final == "m":
        kind = MouseKind.UP
    elif b & 32:
        kind = MouseKind.MOVED if button == MouseButton.NONE else MouseKind.DRAG
    else:
        kind = MouseKind.DOWN
    return MouseEvent(kind, column, line, button, **mods)
