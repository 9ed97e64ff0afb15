"""Completion dropdown attached to an input field."""

from __future__ import annotations

from typing import Callable, Generic, Optional, Sequence, TypeVar

from rich.style import Style

from terminal_kit.layout.rect import Rect
from terminal_kit.layout.region import paint_background
from terminal_kit.layout.viewport import ListState
from terminal_kit.render.canvas import Canvas
from terminal_kit.theme import Theme, ThemeElement
from terminal_kit.widgets.list import ItemRenderer, ListChrome, render_list_with_chrome
from terminal_kit.widgets.matching import DEFAULT_MATCHER, Matcher

T = TypeVar("T")


class DropdownList(Generic[T]):
    """Filtered entries plus the selection and scroll state over them."""

    def __init__(self) -> None:
        self.filter_text = ""
        self.filtered: list[T] = []
        self.list = ListState()

    def reset(self, filter_text: str, filtered: Sequence[T]) -> None:
        """Replace the entries; selection and scroll return to the top."""
        self.filter_text = filter_text
        self.filtered = list(filtered)
        self.list = ListState()

    def __len__(self) -> int:
        return len(self.filtered)

    @property
    def is_empty(self) -> bool:
        return not self.filtered

    @property
    def items(self) -> list[T]:
        return self.filtered

    def selected_index(self) -> Optional[int]:
        if not self.filtered:
            return None
        return self.list.selected

    def selected(self) -> Optional[T]:
        idx = self.selected_index()
        return None if idx is None else self.filtered[idx]

    def set_selected(self, idx: int) -> None:
        if self.filtered:
            self.list.set_selected(idx, len(self.filtered))

    def select_prev(self) -> None:
        if self.filtered:
            self.list.select_prev(len(self.filtered))

    def select_next(self) -> None:
        if self.filtered:
            self.list.select_next(len(self.filtered))

    def clamp_and_scroll(self, visible_items: int) -> None:
        self.list.clamp_selection(len(self.filtered))
        self.list.update_offset(visible_items)

    @property
    def selected_for_render(self) -> int:
        return self.list.selected

    @property
    def viewport_offset(self) -> int:
        return self.list.viewport_offset

    def __repr__(self) -> str:
        return f"DropdownList(filter={self.filter_text!r}, len={len(self.filtered)})"


class FuzzyDropdown(Generic[T]):
    """
    Dropdown over a fixed item set, filtered by fuzzy score.

    The inner DropdownList holds indices into items, so the items
    themselves are never copied when the filter changes.
    """

    def __init__(self, items: Sequence[T], matcher: Matcher = DEFAULT_MATCHER):
        self.items: list[T] = list(items)
        self.matcher = matcher
        self.list: DropdownList[int] = DropdownList()

    @property
    def is_empty(self) -> bool:
        return self.list.is_empty

    @property
    def visible_count(self) -> int:
        return len(self.list)

    def selected_index(self) -> Optional[int]:
        return self.list.selected()

    def selected_item(self) -> Optional[T]:
        idx = self.selected_index()
        return None if idx is None else self.items[idx]

    def set_selected_index(self, idx: int) -> None:
        self.list.set_selected(idx)

    def select_previous(self) -> None:
        self.list.select_prev()

    def select_next(self) -> None:
        self.list.select_next()

    def update_items(self, items: Sequence[T]) -> None:
        self.items = list(items)

    def update_filter(
        self,
        filter_text: str,
        empty_limit: int,
        filtered_limit: int,
        key_fn: Callable[[T], str],
    ) -> None:
        """
        Refilter the items.

        An empty filter shows the first empty_limit items in order;
        otherwise matching items are ranked best first and capped at
        filtered_limit. Ties keep their original order.
        """
        if not filter_text:
            indices = list(range(min(empty_limit, len(self.items))))
        else:
            scored = []
            for idx, item in enumerate(self.items):
                score = self.matcher.score(filter_text, key_fn(item))
                if score is not None:
                    scored.append((idx, score))
            scored.sort(key=lambda pair: pair[1], reverse=True)
            indices = [idx for idx, _ in scored[:filtered_limit]]
        self.list.reset(filter_text, indices)


def resolve_dropdown_area(
    frame_area: Rect,
    input_area: Rect,
    placement_area: Optional[Rect],
    total_items: int,
) -> Optional[tuple[Rect, int]]:
    """
    Where to draw a dropdown and how many rows it shows.

    An explicit placement area wins. Otherwise the dropdown opens below
    the input when the frame has room there, and above it when not.

    Returns:
        (area, visible_rows), or None when there is nothing to show or
        nowhere to put it
    """
    if total_items <= 0:
        return None

    if placement_area is not None:
        if placement_area.height <= 0:
            return None
        return placement_area, max(1, min(total_items, placement_area.height))

    input_bottom = input_area.bottom
    space_below = max(0, frame_area.bottom - input_bottom)
    if space_below > 0:
        visible = max(1, min(total_items, space_below))
        return Rect(input_area.x, input_bottom, input_area.width, visible), visible

    space_above = input_area.y - frame_area.y
    if space_above <= 0:
        return None
    visible = max(1, min(total_items, space_above))
    return Rect(input_area.x, input_area.y - visible, input_area.width, visible), visible


def render_dropdown(
    canvas: Canvas,
    input_area: Rect,
    placement_area: Optional[Rect],
    theme: Theme,
    dropdown: DropdownList,
    render_item: ItemRenderer,
) -> bool:
    """Draw the dropdown next to input_area. Returns False when nothing was drawn."""
    total = len(dropdown)
    if total == 0:
        return False

    resolved = resolve_dropdown_area(canvas.area, input_area, placement_area, total)
    if resolved is None:
        return False
    area, visible = resolved

    paint_background(canvas, area, theme)
    dropdown.clamp_and_scroll(visible)
    render_list_with_chrome(
        canvas,
        area,
        theme,
        ListChrome.plain(),
        dropdown.selected_for_render,
        dropdown.viewport_offset,
        total,
        render_item,
    )
    return True


def dropdown_item_base_style(theme: Theme, is_selected: bool) -> Style:
    """Row style for dropdown entries: plain surface rows, highlighted selection."""
    if is_selected:
        return theme.style(ThemeElement.SELECTION)
    return theme.surface_style()
