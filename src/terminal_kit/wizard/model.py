"""State and messages of the list-plus-wizard configuration dialog.

The dialog has three screens: a list of items, the wizard editing one
item, and a delete confirmation. Input is mapped to a GenericWizardMsg
with on_key and applied with update, which returns the new item list
whenever items were added, changed or removed so the owner can persist
them (and report back with ItemsSaved).
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Generic, Hashable, Optional, Sequence, Union

from terminal_kit.layout.viewport import ListState
from terminal_kit.runtime.input import Key, KeyEvent
from terminal_kit.widgets.matching import fuzzy_indices_any_field
from terminal_kit.widgets.text_input import TextInput
from terminal_kit.wizard.framework import ItemListView, StepAction, T, WizardFlow, WizardMode, WizardStep

logger = logging.getLogger(__name__)


class ViewMode(Enum):
    LIST = auto()
    WIZARD = auto()
    CONFIRMATION = auto()


# Messages

@dataclass(frozen=True)
class Open:
    items: Sequence


@dataclass(frozen=True)
class Close:
    pass


@dataclass(frozen=True)
class SelectItem:
    index: int


@dataclass(frozen=True)
class ToggleItem:
    index: int


@dataclass(frozen=True)
class DeleteItem:
    item_id: Hashable


@dataclass(frozen=True)
class ConfirmDelete:
    item_id: Hashable


@dataclass(frozen=True)
class CancelDelete:
    pass


@dataclass(frozen=True)
class FilterItems:
    query: str


@dataclass(frozen=True)
class StartCreate:
    pass


@dataclass(frozen=True)
class StartEdit:
    item_id: Hashable


@dataclass(frozen=True)
class WizardNext:
    pass


@dataclass(frozen=True)
class WizardPrevious:
    pass


@dataclass(frozen=True)
class WizardCancel:
    pass


@dataclass(frozen=True)
class WizardSave:
    pass


@dataclass(frozen=True)
class WizardKeyInput:
    event: KeyEvent


@dataclass(frozen=True)
class ItemsSaved:
    """Result of persisting items: the stored list, or an error message."""
    items: Optional[Sequence] = None
    error: Optional[str] = None


GenericWizardMsg = Union[
    Open, Close, SelectItem, ToggleItem, DeleteItem, ConfirmDelete, CancelDelete, FilterItems,
    StartCreate, StartEdit, WizardNext, WizardPrevious, WizardCancel, WizardSave, WizardKeyInput,
    ItemsSaved,
]

_STEP_ACTIONS = {
    StepAction.NEXT: WizardNext,
    StepAction.PREVIOUS: WizardPrevious,
    StepAction.CANCEL: WizardCancel,
    StepAction.SAVE: WizardSave,
}


class GenericWizardModel(Generic[T]):
    """
    Items plus the screen currently shown over them.

    steps builds a fresh list of steps for every wizard run; new items
    start from item_type.default_item() and edits work on a copy, so
    cancelling a wizard never touches the stored items.
    """

    def __init__(
        self,
        item_type: type,
        steps: Callable[[], Sequence[WizardStep[T]]],
        list_view: Optional[ItemListView[T]] = None,
    ):
        self.item_type = item_type
        self.steps = steps
        self.list_view = list_view
        self.items: list[T] = []
        self.selected_idx = 0
        self.list_state = ListState()
        self.filter = TextInput()
        self.wizard: Optional[WizardFlow[T]] = None
        self.view_mode = ViewMode.LIST
        self.pending_delete: Optional[Hashable] = None
        self.is_open = False
        self.last_error: Optional[str] = None

    def open(self, items: Sequence[T]) -> None:
        self.items = list(items)
        self.is_open = True
        self.view_mode = ViewMode.LIST
        self.filter.clear()
        self._select(0)
        self.list_state.viewport_offset = 0

    def close(self) -> None:
        self.is_open = False
        self.wizard = None
        self.view_mode = ViewMode.LIST
        self.pending_delete = None
        self._select(0)
        self.list_state.viewport_offset = 0

    def visible_indices(self) -> list[int]:
        """Indices into items that pass the filter, best match first."""
        return fuzzy_indices_any_field(self.items, self.filter.text, lambda item: [item.display_name])

    def selected_item(self) -> Optional[T]:
        visible = self.visible_indices()
        if 0 <= self.selected_idx < len(visible):
            return self.items[visible[self.selected_idx]]
        return None

    def find(self, item_id: Hashable) -> Optional[int]:
        for idx, item in enumerate(self.items):
            if item.id == item_id:
                return idx
        return None

    def _select(self, idx: int) -> None:
        self.list_state.set_selected(idx, len(self.visible_indices()))
        self.selected_idx = self.list_state.selected

    def _back_to_list(self) -> None:
        self.wizard = None
        self.pending_delete = None
        self.view_mode = ViewMode.LIST
        self._select(self.selected_idx)

    def on_key(self, event: KeyEvent) -> Optional[GenericWizardMsg]:
        """Map a key to a message for the current screen."""
        if not self.is_open:
            return None
        if self.view_mode == ViewMode.WIZARD:
            return WizardKeyInput(event)
        if self.view_mode == ViewMode.CONFIRMATION:
            if event.is_char and event.char == "y" and self.pending_delete is not None:
                return ConfirmDelete(self.pending_delete)
            if event.key == Key.ESCAPE or (event.is_char and event.char == "n"):
                return CancelDelete()
            return None

        selected = self.selected_item()
        if event.key == Key.ESCAPE:
            return Close()
        if event.key == Key.UP:
            return SelectItem(max(0, self.selected_idx - 1))
        if event.key == Key.DOWN:
            return SelectItem(self.selected_idx + 1)
        if event.key == Key.ENTER and selected is not None:
            return StartEdit(selected.id)
        if not event.is_char:
            return None
        if event.char == "n":
            return StartCreate()
        if event.char == "e" and selected is not None:
            return StartEdit(selected.id)
        if event.char == "d" and selected is not None:
            return DeleteItem(selected.id)
        if event.char == " " and self.list_view is not None and self.list_view.supports_toggle:
            return ToggleItem(self.selected_idx)
        return None

    def update(self, msg: GenericWizardMsg) -> Optional[list[T]]:
        """
        Apply a message.

        Returns:
            The full item list when it changed and should be persisted,
            otherwise None
        """
        logger.debug("wizard msg %s", type(msg).__name__)

        if isinstance(msg, Open):
            self.open(msg.items)
        elif isinstance(msg, Close):
            self.close()
        elif isinstance(msg, SelectItem):
            self._select(msg.index)
        elif isinstance(msg, ToggleItem):
            return self._toggle(msg.index)
        elif isinstance(msg, DeleteItem):
            if self.find(msg.item_id) is not None:
                self.pending_delete = msg.item_id
                self.view_mode = ViewMode.CONFIRMATION
        elif isinstance(msg, ConfirmDelete):
            return self._delete(msg.item_id)
        elif isinstance(msg, CancelDelete):
            self._back_to_list()
        elif isinstance(msg, FilterItems):
            self.filter.set_text(msg.query)
            self._select(0)
            self.list_state.viewport_offset = 0
        elif isinstance(msg, StartCreate):
            self._start(WizardMode.creating(), self.item_type.default_item())
        elif isinstance(msg, StartEdit):
            idx = self.find(msg.item_id)
            if idx is None:
                logger.warning("cannot edit unknown item %r", msg.item_id)
            else:
                self._start(WizardMode.editing(msg.item_id), copy.deepcopy(self.items[idx]))
        elif isinstance(msg, WizardNext):
            return self._next()
        elif isinstance(msg, WizardPrevious):
            if self.wizard is not None and self.wizard.can_go_back():
                self.wizard.go_back()
        elif isinstance(msg, WizardCancel):
            self._back_to_list()
        elif isinstance(msg, WizardSave):
            return self._save()
        elif isinstance(msg, WizardKeyInput):
            if self.wizard is not None:
                action = self.wizard.handle_key(msg.event)
                if action in _STEP_ACTIONS:
                    return self.update(_STEP_ACTIONS[action]())
        elif isinstance(msg, ItemsSaved):
            if msg.error is not None:
                logger.error("saving items failed: %s", msg.error)
                self.last_error = msg.error
            else:
                self.items = list(msg.items or [])
                self.last_error = None
                self._select(self.selected_idx)
        return None

    def _start(self, mode: WizardMode, item: T) -> None:
        self.wizard = WizardFlow(self.steps(), mode, item)
        self.view_mode = ViewMode.WIZARD

    def _next(self) -> Optional[list[T]]:
        wizard = self.wizard
        if wizard is None:
            return None
        error = wizard.current_step.validate(wizard.item)
        if error:
            wizard.error = error
            return None
        if not wizard.can_go_forward():
            return self._save()
        wizard.advance()
        return None

    def _save(self) -> Optional[list[T]]:
        wizard = self.wizard
        if wizard is None:
            return None
        error = wizard.item.validate()
        if error:
            wizard.error = error
            return None

        if wizard.mode.is_creating:
            self.items.append(wizard.item)
            logger.info("created item %r", wizard.item.id)
        else:
            idx = self.find(wizard.mode.editing_id)
            if idx is None:
                self.items.append(wizard.item)
            else:
                self.items[idx] = wizard.item
            logger.info("updated item %r", wizard.item.id)
        self._back_to_list()
        return list(self.items)

    def _toggle(self, index: int) -> Optional[list[T]]:
        if self.list_view is None or not self.list_view.supports_toggle:
            return None
        visible = self.visible_indices()
        if not 0 <= index < len(visible):
            return None
        self.list_view.toggle_item(self.items[visible[index]])
        return list(self.items)

    def _delete(self, item_id: Hashable) -> Optional[list[T]]:
        idx = self.find(item_id)
        if idx is None:
            self._back_to_list()
            return None
        del self.items[idx]
        logger.info("deleted item %r", item_id)
        self._back_to_list()
        return list(self.items)
