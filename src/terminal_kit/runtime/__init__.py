"""Runtime loop: models, commands, configuration and terminal I/O."""

from terminal_kit.runtime.command import Command, drain_pending, enqueue_command
from terminal_kit.runtime.config import ExitKeys, ProgramConfig
from terminal_kit.runtime.input import (
    InputEvent,
    InputReader,
    Key,
    KeyEvent,
    MouseButton,
    MouseEvent,
    MouseKind,
)
from terminal_kit.runtime.model import Model
from terminal_kit.runtime.program import Program, should_exit_key
from terminal_kit.runtime.terminal import Terminal, TerminalSize

__all__ = [
    "Command",
    "ExitKeys",
    "InputEvent",
    "InputReader",
    "Key",
    "KeyEvent",
    "Model",
    "MouseButton",
    "MouseEvent",
    "MouseKind",
    "Program",
    "ProgramConfig",
    "Terminal",
    "TerminalSize",
    "drain_pending",
    "enqueue_command",
    "should_exit_key",
]
