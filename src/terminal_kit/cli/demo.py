"""Interactive demo: a prompt with completion, a picker and a profile wizard."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Callable, Optional

from rich.style import Style

from terminal_kit.layout.rect import Padding, Rect, split_vertical
from terminal_kit.layout.section_stack import render_block_stack, wrap_section
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.paths import MentionPathFormatter, PathDisplayConfig
from terminal_kit.render.styled import Line, Span, render_line
from terminal_kit.runtime.command import Command
from terminal_kit.runtime.config import ExitKeys, ProgramConfig
from terminal_kit.runtime.input import InputEvent, Key, KeyEvent, MouseEvent
from terminal_kit.runtime.model import Model
from terminal_kit.runtime.program import Program
from terminal_kit.theme import Theme, ThemeElement
from terminal_kit.widgets.dropdown import FuzzyDropdown, dropdown_item_base_style, render_dropdown
from terminal_kit.widgets.key_hints import render_key_hints
from terminal_kit.widgets.input_box import InputBox
from terminal_kit.widgets.list import ListItem, render_list
from terminal_kit.widgets.list_items import value_item
from terminal_kit.widgets.picker import (
    AnyField,
    Confirm,
    PickerMsg,
    PickerState,
    key_to_picker_msg,
    mouse_to_picker_msg,
    picker_dialog_opts,
    picker_item_base_style,
    picker_update_state,
    render_picker,
)
from terminal_kit.widgets.text_input import TextInput
from terminal_kit.wizard.framework import ItemListView, WizardStep
from terminal_kit.wizard.model import GenericWizardModel, ItemsSaved
from terminal_kit.wizard.steps.summary import SummaryStep
from terminal_kit.wizard.text_step import SimpleTextStep
from terminal_kit.wizard.view import generic_wizard_view

logger = logging.getLogger(__name__)

COMMANDS = [
    "build", "bundle", "checkout", "clean", "commit", "deploy", "diff", "fetch",
    "format", "install", "lint", "merge", "publish", "pull", "push", "rebase",
    "release", "status", "test", "upgrade",
]

WORDS = [
    "アルファ alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf",
    "hotel", "india", "juliett", "kilo", "lima", "mike", "november", "oscar",
    "papa", "quebec", "romeo", "sierra", "tango", "uniform", "victor",
]

DROPDOWN_ROWS = 6
PROMPT_HINTS = ["tab complete", "enter submit", "F2 picker", "F3 profiles", "esc quit"]
INTRO = [
    "Type a command; matching commands drop down as you type.",
    "Absolute paths under the working directory show as @mentions.",
]


@dataclass
class Profile:
    id: str
    name: str = ""
    host: str = ""

    @property
    def display_name(self) -> str:
        return self.name or "(unnamed)"

    def validate(self) -> Optional[str]:
        if not self.name.strip():
            return "Name is required"
        if not self.host.strip():
            return "Host is required"
        return None

    @classmethod
    def default_item(cls) -> Profile:
        return cls(id=uuid.uuid4().hex[:8])


def _required(label: str) -> Callable[[str], Optional[str]]:
    def check(value: str) -> Optional[str]:
        return None if value.strip() else f"{label} is required"
    return check


def _set_name(profile: Profile, value: str) -> None:
    profile.name = value


def _set_host(profile: Profile, value: str) -> None:
    profile.host = value


def profile_steps() -> list[WizardStep[Profile]]:
    return [
        SimpleTextStep(
            "Name", "A short label for this profile.", "Name", "e.g. staging",
            lambda p: p.name, _set_name, _required("Name"),
        ),
        SimpleTextStep(
            "Host", "Host name or address to connect to.", "Host", "e.g. example.com:22",
            lambda p: p.host, _set_host, _required("Host"),
        ),
        SummaryStep(
            "Review", "Check the profile before saving.",
            lambda p: [
                Line([Span("Name  "), Span(p.name, Style(bold=True))]),
                Line([Span("Host  "), Span(p.host, Style(bold=True))]),
            ],
        ),
    ]


class ProfileListView(ItemListView[Profile]):
    def render_item(self, item: Profile, is_selected: bool, theme: Theme) -> ListItem:
        return value_item(item.display_name, item.host, is_selected, theme)


class DemoModel(Model[InputEvent]):
    """
    Prompt with a completion dropdown and a history list.

    F2 opens a fuzzy picker whose choice is copied into the prompt; F3
    opens the profile list with its create/edit wizard.
    """

    def __init__(self) -> None:
        self.input = TextInput(placeholder="Type a command...")
        self.dropdown: FuzzyDropdown[str] = FuzzyDropdown(COMMANDS)
        self.show_dropdown = False
        self.input_scroll = 0
        self.history: list[str] = []
        self.paths = MentionPathFormatter(PathDisplayConfig(bold=True))
        self.picker: PickerState[str] = PickerState(AnyField(lambda word: [word]))
        self.picker_opts = picker_dialog_opts(has_title=True)
        self.profiles: list[Profile] = []
        self.list_view = ProfileListView()
        self.wizard: GenericWizardModel[Profile] = GenericWizardModel(Profile, profile_steps, self.list_view)
        self.area = Rect(0, 0, 0, 0)
        self.quit = False

    def on_key(self, event: KeyEvent) -> Optional[InputEvent]:
        return event

    def on_mouse(self, event: MouseEvent) -> Optional[InputEvent]:
        return event if self.picker.is_open else None

    def should_quit(self) -> bool:
        return self.quit

    def update(self, msg: InputEvent) -> Command[InputEvent]:
        if isinstance(msg, MouseEvent):
            picker_msg = mouse_to_picker_msg(self.picker, msg, self.area, self.picker_opts)
            if picker_msg is not None:
                self._apply_picker(picker_msg)
        elif self.wizard.is_open:
            self._wizard_key(msg)
        elif self.picker.is_open:
            picker_msg = key_to_picker_msg(self.picker, msg)
            if picker_msg is not None:
                self._apply_picker(picker_msg)
        else:
            self._prompt_key(msg)
        return Command.none()

    def _apply_picker(self, msg: PickerMsg) -> None:
        if isinstance(msg, Confirm):
            chosen = self.picker.selected_item()
            if chosen is not None:
                self.input.set_text(chosen)
            self.picker.close()
            return
        picker_update_state(self.picker, msg)

    def _wizard_key(self, event: KeyEvent) -> None:
        msg = self.wizard.on_key(event)
        if msg is None:
            return
        saved = self.wizard.update(msg)
        if saved is not None:
            self.profiles = saved
            logger.info("profiles saved (%d)", len(saved))
            self.wizard.update(ItemsSaved(items=saved))

    def _prompt_key(self, event: KeyEvent) -> None:
        if event.key == Key.ESCAPE:
            if self.show_dropdown:
                self.show_dropdown = False
            else:
                self.quit = True
        elif event.key == Key.F2:
            self.picker.open(WORDS)
        elif event.key == Key.F3:
            self.wizard.open(self.profiles)
        elif event.key == Key.UP and self.show_dropdown:
            self.dropdown.select_previous()
        elif event.key == Key.DOWN and self.show_dropdown:
            self.dropdown.select_next()
        elif event.key == Key.TAB:
            choice = self.dropdown.selected_item() if self.show_dropdown else None
            if choice is not None:
                self.input.set_text(choice)
            self.show_dropdown = False
        elif event.key == Key.ENTER:
            text = self.input.text.strip()
            if text:
                self.history.append(text)
            self.input.clear()
            self.show_dropdown = False
        elif self.input.handle_key(event):
            text = self.input.text
            self.dropdown.update_filter(text, DROPDOWN_ROWS, DROPDOWN_ROWS, lambda cmd: cmd)
            self.show_dropdown = bool(text) and not self.dropdown.is_empty

    def view(self, canvas: Canvas, area: Rect, theme: Theme, inline: bool = False) -> None:
        self.area = area
        canvas.fill(area, theme.base_style())
        title_row, input_area, body, help_row = split_vertical(area, [1, 3, 0, 1], fill_index=2)

        title = Line([Span(" terminal-kit ", theme.style(ThemeElement.SELECTION)),
                      Span(" demo", theme.style(ThemeElement.TERTIARY))])
        render_line(canvas, title_row, title)

        outcome = InputBox(
            self.input, theme, scroll_offset=self.input_scroll, follow_cursor=True,
            right_hint=f"{len(self.history)} sent",
        ).render(canvas, input_area)
        self.input_scroll = outcome.scroll_offset

        def history_item(idx: int, selected: bool) -> ListItem:
            spans = self.paths.transform_text(self.history[idx], Style())
            return ListItem(Line(spans), theme.list_item_style(ThemeElement.BASE, selected, False))

        if self.history:
            render_list(canvas, body, theme, "History", len(self.history) - 1, 0,
                        len(self.history), history_item)
        else:
            intro = [Line.plain(text, theme.style(ThemeElement.TERTIARY)) for text in INTRO]
            profiles = [Line.plain(p.display_name) for p in self.profiles]
            render_block_stack(canvas, body, [
                wrap_section("Getting started", theme, intro),
                wrap_section("Profiles", theme, profiles),
            ], Padding(left=2, top=1))
        render_key_hints(canvas, help_row, theme, PROMPT_HINTS, f"{len(self.profiles)} profiles",
                         fill_background=False)

        if self.show_dropdown:
            def command_item(idx: int, selected: bool) -> ListItem:
                text = self.dropdown.items[self.dropdown.list.items[idx]]
                return ListItem.text(f" {text}", dropdown_item_base_style(theme, selected))

            placement = Rect(input_area.x + 2, input_area.bottom, min(24, input_area.width), DROPDOWN_ROWS)
            render_dropdown(canvas, input_area, placement.intersection(body), theme,
                            self.dropdown.list, command_item)

        if self.picker.is_open:
            opts = self.picker_opts.with_inline(inline)
            self.picker_opts = opts

            def word_item(word: str, selected: bool) -> ListItem:
                style = picker_item_base_style(selected, theme.surface_style(), theme)
                return ListItem.text(f" {word}", style)

            render_picker(canvas, area, theme, self.picker, word_item, title="Pick a word",
                          tab_label="Words", opts=opts)

        if self.wizard.is_open:
            generic_wizard_view(self.wizard, self.list_view, canvas, area, theme, "Profiles",
                                "Profiles", ["Profiles"], inline=inline)


def run_demo(inline: bool = False, config: Optional[ProgramConfig] = None) -> None:
    """Run the demo on the terminal until Ctrl+C or Esc at the prompt."""
    config = (config or ProgramConfig(title="terminal-kit demo")).with_exit_keys(ExitKeys.ctrl_c_only())
    if inline:
        config = config.with_inline(True)
    Program(DemoModel(), config).run()

