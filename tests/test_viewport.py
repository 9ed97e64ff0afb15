"""Tests for viewport scrolling and list state."""

import pytest

from terminal_kit.engine import compute_viewport
from terminal_kit.layout.rect import Rect
from terminal_kit.layout.viewport import (
    ListState,
    calculate_viewport_offset,
    index_at,
    index_at_content,
    select_next,
    select_prev,
)

# Jumps, single steps, wrap-arounds and repeats
SELECTION_SEQUENCE = [0, 1, 2, 7, 12, 11, 3, 19, 0, 19, 18, 5, 5, 6, 13, 2, 0]


class TestViewportOffset:
    """Directional anchoring."""

    def test_below_anchors_to_bottom(self) -> None:
        assert compute_viewport(12, 5, 0) == 8

    def test_above_anchors_to_top(self) -> None:
        assert calculate_viewport_offset(3, 5, 8) == 3

    def test_visible_selection_keeps_offset(self) -> None:
        assert calculate_viewport_offset(9, 5, 8) == 8
        assert calculate_viewport_offset(12, 5, 8) == 8

    def test_height_floored_at_one(self) -> None:
        assert calculate_viewport_offset(5, 0, 0) == 5
        assert calculate_viewport_offset(5, -3, 9) == 5

    def test_negative_selection_saturates(self) -> None:
        assert compute_viewport(-3, 5, 0) == 0
        assert calculate_viewport_offset(-1, 5, 4) == 0

    @pytest.mark.parametrize("height", [1, 2, 3, 5, 7, 25])
    def test_containment_over_sequence(self, height: int) -> None:
        offset = 0
        for selected in SELECTION_SEQUENCE:
            offset = calculate_viewport_offset(selected, height, offset)
            assert offset <= selected < offset + height

    def test_minimal_movement(self) -> None:
        # one step past the bottom edge scrolls by exactly one row
        assert calculate_viewport_offset(5, 5, 0) == 1
        assert calculate_viewport_offset(0, 5, 1) == 0


class TestSelection:

    def test_select_next_wraps(self) -> None:
        assert select_next(0, 3) == 1
        assert select_next(2, 3) == 0
        assert select_next(0, 0) == 0

    def test_select_prev_wraps(self) -> None:
        assert select_prev(1, 3) == 0
        assert select_prev(0, 3) == 2
        assert select_prev(0, 0) == 0


class TestListState:

    def test_clamp_selection(self) -> None:
        state = ListState(selected=9)
        state.clamp_selection(4)
        assert state.selected == 3
        state.clamp_selection(0)
        assert state.selected == 0

    def test_set_selected(self) -> None:
        state = ListState()
        state.set_selected(10, 4)
        assert state.selected == 3
        state.set_selected(-2, 4)
        assert state.selected == 0

    def test_scroll_lines_clamps(self) -> None:
        state = ListState(selected=2)
        state.scroll_lines(10, 5)
        assert state.selected == 4
        state.scroll_lines(-10, 5)
        assert state.selected == 0

    def test_paging(self) -> None:
        state = ListState()
        state.page_down(3, 10)
        assert state.selected == 3
        state.page_down(3, 10)
        state.page_down(3, 10)
        state.page_down(3, 10)
        assert state.selected == 9
        state.page_up(0, 10)
        assert state.selected == 8

    def test_jumps(self) -> None:
        state = ListState(selected=4)
        state.jump_top()
        assert state.selected == 0
        state.jump_bottom(7)
        assert state.selected == 6
        state.jump_bottom(0)
        assert state.selected == 6

    def test_update_offset(self) -> None:
        state = ListState(selected=12)
        state.update_offset(5)
        assert state.viewport_offset == 8

    def test_visible_range(self) -> None:
        state = ListState(selected=6, viewport_offset=0)
        assert state.visible_range(3, 10) == range(4, 7)
        assert ListState().visible_range(5, 2) == range(0, 2)


class TestHitTest:

    def test_row_maps_to_index(self) -> None:
        area = Rect(0, 0, 10, 5)
        assert index_at_content(area, 0, 0, 20, 3, 2) == 2

    def test_uses_anchored_offset(self) -> None:
        area = Rect(0, 0, 10, 5)
        # selection 12 below a stale offset of 0 anchors to offset 8
        assert index_at_content(area, 12, 0, 20, 0, 0) == 8

    def test_rows_past_end_clamp(self) -> None:
        assert index_at_content(Rect(0, 0, 10, 5), 0, 0, 3, 0, 4) == 2

    def test_outside_empty_or_flat(self) -> None:
        assert index_at_content(Rect(0, 0, 10, 5), 0, 0, 3, 10, 0) is None
        assert index_at_content(Rect(0, 0, 10, 5), 0, 0, 0, 1, 1) is None
        assert index_at_content(Rect(0, 0, 10, 0), 0, 0, 3, 1, 0) is None

    def test_bordered(self) -> None:
        area = Rect(0, 0, 10, 6)
        assert index_at(area, 0, 0, 10, 0, 0) is None
        assert index_at(area, 0, 0, 10, 1, 1) == 0
        assert index_at(area, 0, 0, 10, 5, 4) == 3
