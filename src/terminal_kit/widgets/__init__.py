"""Widgets: text input, lists, dropdowns, pickers, help bars and scrollbars."""

from terminal_kit.widgets.base import BaseWidget, UiComponent, Widget
from terminal_kit.widgets.dropdown import (
    DropdownList,
    FuzzyDropdown,
    dropdown_item_base_style,
    render_dropdown,
    resolve_dropdown_area,
)
from terminal_kit.widgets.help_bar import HelpEntry, parse_help_text, render_help_bar
from terminal_kit.widgets.input_box import InputBox, InputBoxOutcome
from terminal_kit.widgets.key_hints import render_key_hints
from terminal_kit.widgets.lines_viewport import render_lines_slice
from terminal_kit.widgets.list import (
    ListChrome,
    ListItem,
    make_list_item,
    render_list,
    render_list_with_chrome,
)
from terminal_kit.widgets.list_items import ToggleTone, plain_item, toggle_item, value_item
from terminal_kit.widgets.matching import Matcher, SubsequenceMatcher
from terminal_kit.widgets.picker import (
    PickerHooks,
    PickerMsg,
    PickerState,
    key_to_picker_msg,
    mouse_to_picker_msg,
    picker_update_state,
    render_picker,
)
from terminal_kit.widgets.scrollbar import ScrollbarDrag, render_scrollbar
from terminal_kit.widgets.search_bar import render_search_bar
from terminal_kit.widgets.tabbed_prompt import SearchSpec, prompt_dialog_opts, render_tabbed_prompt_dialog
from terminal_kit.widgets.tabs import next_tab, prev_tab, tab_bar_line
from terminal_kit.widgets.text_input import TextInput

__all__ = [
    "BaseWidget",
    "DropdownList",
    "FuzzyDropdown",
    "HelpEntry",
    "InputBox",
    "InputBoxOutcome",
    "ListChrome",
    "ListItem",
    "Matcher",
    "PickerHooks",
    "PickerMsg",
    "PickerState",
    "ScrollbarDrag",
    "SearchSpec",
    "SubsequenceMatcher",
    "TextInput",
    "ToggleTone",
    "UiComponent",
    "Widget",
    "dropdown_item_base_style",
    "key_to_picker_msg",
    "make_list_item",
    "mouse_to_picker_msg",
    "next_tab",
    "parse_help_text",
    "picker_update_state",
    "plain_item",
    "prev_tab",
    "prompt_dialog_opts",
    "render_dropdown",
    "render_help_bar",
    "render_key_hints",
    "render_lines_slice",
    "render_list",
    "render_list_with_chrome",
    "render_picker",
    "render_scrollbar",
    "render_search_bar",
    "render_tabbed_prompt_dialog",
    "resolve_dropdown_area",
    "tab_bar_line",
    "toggle_item",
    "value_item",
]
