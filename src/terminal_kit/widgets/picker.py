"""Searchable picker dialog: state, messages, key/mouse mapping and rendering.

A picker owns its items, a search field and the filtered view over the
items. Input is translated into PickerMsg values first and applied with
picker_update_state, so owners can intercept messages (Confirm, Close,
their own Custom values) before or after the state changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, Sequence, TypeVar, Union

from rich.style import Style

from terminal_kit.layout.rect import Rect
from terminal_kit.layout.region import DialogOptions, compute_centered
from terminal_kit.layout.viewport import ListState, index_at
from terminal_kit.render.canvas import Canvas
from terminal_kit.runtime.input import Key, KeyEvent, MouseButton, MouseEvent, MouseKind
from terminal_kit.text.width import text_width
from terminal_kit.text.wrap import wrap_text
from terminal_kit.theme import Theme, ThemeElement
from terminal_kit.widgets.list import ListChrome, ListItem, render_list_with_chrome
from terminal_kit.widgets.matching import fuzzy_indices_any_field, fuzzy_indices_tokenized_surface
from terminal_kit.widgets.tabbed_prompt import SearchSpec, prompt_dialog_opts, render_tabbed_prompt_dialog
from terminal_kit.widgets.text_input import TextInput

T = TypeVar("T")

DEFAULT_PAGE = 10
SCROLL_STEP = 3
DEFAULT_FOOTER = "↑↓ navigate  enter select  esc close"


def picker_dialog_opts(has_title: bool = True, has_search: bool = True) -> DialogOptions:
    """Dialog sizing used by render_picker; pass the same value to mouse_to_picker_msg."""
    return prompt_dialog_opts(has_search, has_title)


# Filtering

@dataclass(frozen=True)
class AnyField(Generic[T]):
    """Keep an item when any of its fields matches the query."""
    fields: Callable[[T], Iterable[str]]


@dataclass(frozen=True)
class TokenizedSurface(Generic[T]):
    """Keep an item when every query token matches one combined search string."""
    surface: Callable[[T], str]


FilterMode = Union[AnyField, TokenizedSurface]


def mouse_select_update_offset(
    state: ListState,
    list_area: Rect,
    total: int,
    visible_height: int,
    col: int,
    row: int,
) -> Optional[int]:
    """Select the row under the pointer and re-anchor the viewport. Returns the new selection."""
    idx = index_at(list_area, state.selected, state.viewport_offset, total, col, row)
    if idx is None:
        return None
    state.selected = min(idx, max(0, total - 1))
    state.update_offset(visible_height)
    return state.selected


class PickerState(Generic[T]):
    """Items, search field and filtered selection of one picker."""

    def __init__(self, filter_mode: FilterMode):
        self.filter_mode = filter_mode
        self.is_open = False
        self.is_loading = False
        self.items: list[T] = []
        self.search_input = TextInput()
        self.filtered_indices: list[int] = []
        self.list = ListState()

    def open(self, items: Sequence[T]) -> None:
        self.is_open = True
        self.is_loading = False
        self.items = list(items)
        self.search_input.clear()
        self.filtered_indices = []
        self.list.selected = 0
        self.update_filter()

    def open_loading(self) -> None:
        """Show the dialog before its items have arrived."""
        self.is_open = True
        self.is_loading = True
        self.items = []
        self.filtered_indices = []
        self.list.selected = 0

    def close(self) -> None:
        self.is_open = False
        self.is_loading = False
        self.search_input.clear()
        self.filtered_indices = []

    def update_filter(self) -> None:
        """Refilter against the current search text; the selection is clamped, not reset."""
        query = self.search_input.text
        mode = self.filter_mode
        if isinstance(mode, AnyField):
            self.filtered_indices = fuzzy_indices_any_field(self.items, query, mode.fields)
        else:
            self.filtered_indices = fuzzy_indices_tokenized_surface(self.items, query, mode.surface)
        self.list.clamp_selection(len(self.filtered_indices))

    @property
    def selectable_len(self) -> int:
        return len(self.filtered_indices)

    def to_item_index(self, visible_idx: int) -> Optional[int]:
        if 0 <= visible_idx < len(self.filtered_indices):
            return self.filtered_indices[visible_idx]
        return None

    def selected_item(self) -> Optional[T]:
        idx = self.to_item_index(self.list.selected)
        return None if idx is None else self.items[idx]


# Messages

@dataclass(frozen=True)
class UpdateSearch:
    query: str


@dataclass(frozen=True)
class ClearSearch:
    pass


@dataclass(frozen=True)
class SelectNext:
    pass


@dataclass(frozen=True)
class SelectPrevious:
    pass


@dataclass(frozen=True)
class SelectIndex:
    index: int


@dataclass(frozen=True)
class PageUp:
    height: int = DEFAULT_PAGE


@dataclass(frozen=True)
class PageDown:
    height: int = DEFAULT_PAGE


@dataclass(frozen=True)
class JumpTop:
    pass


@dataclass(frozen=True)
class JumpBottom:
    pass


@dataclass(frozen=True)
class ScrollUp:
    pass


@dataclass(frozen=True)
class ScrollDown:
    pass


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class Close:
    pass


@dataclass(frozen=True)
class Custom:
    """Owner-defined message produced by PickerHooks."""
    value: Any


PickerMsg = Union[
    UpdateSearch, ClearSearch, SelectNext, SelectPrevious, SelectIndex, PageUp, PageDown,
    JumpTop, JumpBottom, ScrollUp, ScrollDown, Confirm, Close, Custom,
]


def picker_update_state(state: PickerState, msg: PickerMsg) -> None:
    """Apply a message. Confirm and Custom leave the state alone; the owner acts on them."""
    length = state.selectable_len

    if isinstance(msg, (UpdateSearch, ClearSearch)):
        if isinstance(msg, UpdateSearch):
            state.search_input.set_text(msg.query)
        else:
            state.search_input.clear()
        state.update_filter()
        state.list.selected = 0
        state.list.viewport_offset = 0
    elif isinstance(msg, SelectNext):
        state.list.select_next(length)
    elif isinstance(msg, SelectPrevious):
        state.list.select_prev(length)
    elif isinstance(msg, SelectIndex):
        if length > 0:
            state.list.selected = max(0, min(msg.index, length - 1))
    elif isinstance(msg, PageUp):
        if length > 0:
            state.list.page_up(msg.height, length)
    elif isinstance(msg, PageDown):
        if length > 0:
            state.list.page_down(msg.height, length)
    elif isinstance(msg, JumpTop):
        state.list.jump_top()
    elif isinstance(msg, JumpBottom):
        state.list.jump_bottom(length)
    elif isinstance(msg, ScrollUp):
        if length > 0:
            state.list.scroll_lines(-SCROLL_STEP, length)
    elif isinstance(msg, ScrollDown):
        if length > 0:
            state.list.scroll_lines(SCROLL_STEP, length)
    elif isinstance(msg, Close):
        state.close()


class PickerHooks:
    """Extension points around the default key mapping; override either method."""

    def before_key(self, state: PickerState, event: KeyEvent) -> Optional[PickerMsg]:
        return None

    def after_key(self, state: PickerState, event: KeyEvent) -> Optional[PickerMsg]:
        return None


_NAV_KEYS = {
    Key.ESCAPE: Close,
    Key.ENTER: Confirm,
    Key.UP: SelectPrevious,
    Key.DOWN: SelectNext,
    Key.HOME: JumpTop,
    Key.END: JumpBottom,
}


def key_to_picker_msg(
    state: PickerState,
    event: KeyEvent,
    visible_height: Optional[int] = None,
    hooks: Optional[PickerHooks] = None,
) -> Optional[PickerMsg]:
    """
    Translate a key into a message.

    Navigation keys map directly. Anything else is offered to the search
    field, which edits state.search_input in place; a changed search
    yields UpdateSearch (or ClearSearch once emptied). Keys neither
    consumes go to hooks.after_key.
    """
    if not state.is_open:
        return None
    hooks = hooks or PickerHooks()

    msg = hooks.before_key(state, event)
    if msg is not None:
        return msg

    if event.key in _NAV_KEYS:
        return _NAV_KEYS[event.key]()
    if event.key == Key.PAGE_UP:
        return PageUp(visible_height or DEFAULT_PAGE)
    if event.key == Key.PAGE_DOWN:
        return PageDown(visible_height or DEFAULT_PAGE)

    after = state.search_input.handle_search_key(event)
    if after is not None:
        return UpdateSearch(after) if after else ClearSearch()

    return hooks.after_key(state, event)


def mouse_to_picker_msg(
    state: PickerState,
    event: MouseEvent,
    area: Rect,
    dialog_opts: Optional[DialogOptions] = None,
) -> Optional[PickerMsg]:
    """
    Translate a pointer event over the picker drawn in area.

    dialog_opts must match the sizing render_picker drew with; the default
    matches a render_picker call without a title.

    Hover selects, a left press selects and scrolls, a left release on
    a row confirms and the wheel scrolls by three rows.
    """
    if not state.is_open:
        return None
    total = state.selectable_len
    if total == 0:
        return None

    if dialog_opts is None:
        dialog_opts = picker_dialog_opts(has_title=False)
    list_area = compute_centered(area, dialog_opts).body
    lst = state.list

    if event.kind == MouseKind.SCROLL_UP:
        return ScrollUp()
    if event.kind == MouseKind.SCROLL_DOWN:
        return ScrollDown()
    if event.kind == MouseKind.MOVED:
        idx = index_at(list_area, lst.selected, lst.viewport_offset, total, event.column, event.row)
        return None if idx is None else SelectIndex(idx)
    if event.button != MouseButton.LEFT:
        return None
    if event.kind == MouseKind.DOWN:
        visible = max(0, list_area.height - 2)
        idx = mouse_select_update_offset(lst, list_area, total, visible, event.column, event.row)
        return None if idx is None else SelectIndex(idx)
    if event.kind == MouseKind.UP:
        idx = index_at(list_area, lst.selected, lst.viewport_offset, total, event.column, event.row)
        return None if idx is None else Confirm()
    return None


# Rendering

def picker_item_base_style(is_selected: bool, default_style: Style, theme: Theme) -> Style:
    if not is_selected:
        return default_style
    return default_style + theme.style(ThemeElement.SELECTION)


def counted_tab_label(total: int, counted_label: str, inactive_label: str) -> str:
    """Tab label with the item count, or the plain label when there is nothing to count."""
    if total > 0:
        return f" {counted_label} ({total}) "
    return f" {inactive_label} "


def render_centered_message(canvas: Canvas, area: Rect, theme: Theme, text: str) -> None:
    """Dim message centered in area; used for loading and empty states."""
    if area.is_empty:
        return
    style = theme.style(ThemeElement.TERTIARY)
    top = area.y + area.height // 2
    for i, row in enumerate(wrap_text(text, area.width)):
        y = top + i
        if y >= area.bottom:
            break
        row = row.strip()
        x = area.x + max(0, area.width - text_width(row)) // 2
        canvas.put_text(x, y, row, style, area.right - x)


def render_picker(
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    state: PickerState[T],
    render_item: Callable[[T, bool], ListItem],
    *,
    title: str = "",
    tab_label: str = "Items",
    search_title: Optional[str] = None,
    footer_text: str = DEFAULT_FOOTER,
    loading_text: str = "Loading...",
    empty_text: str = "No matches",
    opts: Optional[DialogOptions] = None,
) -> None:
    """
    Draw an open picker centered in area.

    The header holds a one-tab strip showing the match count, an
    optional title and the search field; the body holds the bordered
    result list and the footer a help bar. The list offset used for the
    frame is written back to state.list.
    """
    if not state.is_open:
        return
    label = counted_tab_label(state.selectable_len, tab_label, tab_label)

    def body(target: Canvas, list_area: Rect, body_theme: Theme) -> None:
        if state.is_loading:
            render_centered_message(target, list_area, body_theme, loading_text)
            return
        if state.selectable_len == 0:
            render_centered_message(target, list_area, body_theme, empty_text)
            return

        def item_at(visible_idx: int, selected: bool) -> ListItem:
            return render_item(state.items[state.filtered_indices[visible_idx]], selected)

        state.list.viewport_offset = render_list_with_chrome(
            target,
            list_area,
            body_theme,
            ListChrome.with_border(""),
            state.list.selected,
            state.list.viewport_offset,
            state.selectable_len,
            item_at,
        )

    render_tabbed_prompt_dialog(
        canvas,
        area,
        theme,
        opts or picker_dialog_opts(bool(title)),
        [0],
        0,
        lambda _: label,
        title,
        SearchSpec(state.search_input, search_title),
        body,
        footer_text,
    )
