"""Effect commands returned by Model.init and Model.update."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Callable, Generic, Iterable, Iterator, Optional, TypeVar

if TYPE_CHECKING:
    from terminal_kit.runtime.model import Model

Msg = TypeVar("Msg")


class Command(Generic[Msg]):
    """
    Zero or more thunks, each producing one message.

    Thunks run synchronously on the loop thread, in insertion order, and
    their messages are queued behind any already pending.
    """

    __slots__ = ("_thunks",)

    def __init__(self, thunks: Iterable[Callable[[], Msg]] = ()) -> None:
        self._thunks: list[Callable[[], Msg]] = list(thunks)

    @classmethod
    def none(cls) -> Command[Msg]:
        return cls()

    @classmethod
    def one(cls, thunk: Callable[[], Msg]) -> Command[Msg]:
        return cls([thunk])

    @classmethod
    def batch(cls, thunks: Iterable[Callable[[], Msg]]) -> Command[Msg]:
        return cls(thunks)

    @classmethod
    def message(cls, msg: Msg) -> Command[Msg]:
        """Command that simply emits msg."""
        return cls([lambda: msg])

    def __iter__(self) -> Iterator[Callable[[], Msg]]:
        return iter(self._thunks)

    def __len__(self) -> int:
        return len(self._thunks)

    def __bool__(self) -> bool:
        return bool(self._thunks)

    def __repr__(self) -> str:
        return f"Command({len(self._thunks)} thunk(s))"


def enqueue_command(command: Optional[Command[Msg]], pending: deque[Msg]) -> None:
    """Run every thunk of command and queue the messages it produces."""
    if command is None:
        return
    for thunk in command:
        pending.append(thunk())


def drain_pending(model: Model, pending: deque) -> None:
    """Feed queued messages to model.update until the queue is empty."""
    while pending:
        enqueue_command(model.update(pending.popleft()), pending)
