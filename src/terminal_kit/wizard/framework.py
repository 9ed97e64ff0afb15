"""Multi-step wizard framework for creating and editing configuration items."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Hashable, Optional, Protocol, Sequence, TypeVar, runtime_checkable

from terminal_kit.errors import WizardError
from terminal_kit.layout.rect import Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.runtime.input import KeyEvent
from terminal_kit.theme import Theme
from terminal_kit.widgets.list import ListItem

T = TypeVar("T", bound="WizardItem")

DEFAULT_CONTENT_HEIGHT = 3


@runtime_checkable
class WizardItem(Protocol):
    """An item a wizard can create or edit."""

    @property
    def id(self) -> Hashable:
        ...

    @property
    def display_name(self) -> str:
        ...

    def validate(self) -> Optional[str]:
        """Error message when the item cannot be saved, else None."""
        ...

    @classmethod
    def default_item(cls) -> WizardItem:
        ...


class StepAction(Enum):
    """What a step asks the wizard to do after a key."""
    CONTINUE = auto()
    NEXT = auto()
    PREVIOUS = auto()
    CANCEL = auto()
    SAVE = auto()


@dataclass(frozen=True)
class WizardMode:
    """Creating a new item, or editing the item with editing_id."""
    editing_id: Optional[Hashable] = None

    @classmethod
    def creating(cls) -> WizardMode:
        return cls()

    @classmethod
    def editing(cls, item_id: Hashable) -> WizardMode:
        return cls(item_id)

    @property
    def is_creating(self) -> bool:
        return self.editing_id is None


class WizardStep(ABC, Generic[T]):
    """
    One page of a wizard.

    Steps read and write the wizard's item directly; validate reports
    whether the item is complete enough to leave the step.
    """

    @property
    @abstractmethod
    def title(self) -> str:
        ...

    @property
    @abstractmethod
    def help_text(self) -> str:
        ...

    @abstractmethod
    def render(self, canvas: Canvas, area: Rect, theme: Theme, item: T) -> None:
        ...

    @abstractmethod
    def handle_key(self, event: KeyEvent, item: T) -> StepAction:
        ...

    @abstractmethod
    def validate(self, item: T) -> Optional[str]:
        ...

    def enter(self, item: T) -> None:
        """Called whenever the step becomes current, to load state from the item."""

    @property
    def can_skip(self) -> bool:
        return False

    @property
    def navigation_hint(self) -> Optional[str]:
        """Footer text replacing the default navigation keys, in help bar format."""
        return None

    @property
    def content_height(self) -> int:
        """Rows the step body needs, excluding help text and footer."""
        return DEFAULT_CONTENT_HEIGHT


class WizardFlow(Generic[T]):
    """Ordered steps over one item being edited."""

    def __init__(self, steps: Sequence[WizardStep[T]], mode: WizardMode, item: T):
        if not steps:
            raise WizardError("A wizard needs at least one step")
        self.steps = list(steps)
        self.mode = mode
        self.item = item
        self.current_step_idx = 0
        self.error: Optional[str] = None
        self.current_step.enter(item)

    def set_item(self, item: T) -> None:
        self.item = item
        self.current_step.enter(item)

    @property
    def current_step(self) -> WizardStep[T]:
        return self.steps[self.current_step_idx]

    @property
    def step_count(self) -> int:
        return len(self.steps)

    @property
    def current_step_number(self) -> int:
        """1-based position of the current step."""
        return self.current_step_idx + 1

    def handle_key(self, event: KeyEvent) -> StepAction:
        return self.current_step.handle_key(event, self.item)

    def can_go_back(self) -> bool:
        return self.current_step_idx > 0

    def can_go_forward(self) -> bool:
        return self.current_step_idx < len(self.steps) - 1

    def advance(self) -> None:
        if not self.can_go_forward():
            raise WizardError("Already at last step")
        self.current_step_idx += 1
        self.error = None
        self.current_step.enter(self.item)

    def go_back(self) -> None:
        if not self.can_go_back():
            raise WizardError("Already at first step")
        self.current_step_idx -= 1
        self.error = None
        self.current_step.enter(self.item)

    def __repr__(self) -> str:
        return f"WizardFlow(step={self.current_step_number}/{self.step_count}, mode={self.mode})"


class ItemListView(ABC, Generic[T]):
    """How the wizard's list screen draws and acts on items."""

    @abstractmethod
    def render_item(self, item: T, is_selected: bool, theme: Theme) -> ListItem:
        ...

    def item_actions(self) -> list[tuple[str, str]]:
        """(label, key) pairs shown for the selected item."""
        return [("Edit", "e"), ("Delete", "d")]

    @property
    def supports_toggle(self) -> bool:
        return False

    def toggle_item(self, item: T) -> None:
        pass
