"""Tests for the wizard flow, its steps, the list/wizard model and its views."""

import logging
from typing import Optional

import pytest
from conftest import char, ctrl, key, type_text

from terminal_kit.cli.demo import Profile, ProfileListView, profile_steps
from terminal_kit.errors import WizardError
from terminal_kit.layout.rect import Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.styled import Line
from terminal_kit.runtime.input import Key, KeyEvent
from terminal_kit.theme import Theme
from terminal_kit.wizard import (
    GenericWizardModel,
    SimpleTextStep,
    StepAction,
    SummaryStep,
    ViewMode,
    WizardFlow,
    WizardMode,
    generic_wizard_view,
    input_step_layout,
    padded_list_layout,
)
from terminal_kit.wizard.model import (
    FilterItems,
    ItemsSaved,
    StartEdit,
    WizardNext,
    WizardPrevious,
)
from terminal_kit.wizard.view import format_title_with_indicator, navigation_text


def make_model(*profiles: Profile) -> GenericWizardModel:
    model = GenericWizardModel(Profile, profile_steps, ProfileListView())
    model.open(list(profiles))
    return model


def press(model: GenericWizardModel, event: KeyEvent) -> Optional[list]:
    msg = model.on_key(event)
    return None if msg is None else model.update(msg)


def type_into(model: GenericWizardModel, text: str) -> None:
    type_text(lambda event: press(model, event), text)


def name_step() -> SimpleTextStep:
    def set_name(p: Profile, value: str) -> None:
        p.name = value

    return SimpleTextStep(
        "Name", "help", "Name", "e.g. staging", lambda p: p.name, set_name,
        lambda v: None if v else "Name is required",
    )


class TestWizardFlow:

    def test_needs_steps(self) -> None:
        with pytest.raises(WizardError):
            WizardFlow([], WizardMode.creating(), Profile("x"))

    def test_navigation_bounds(self) -> None:
        flow = WizardFlow([name_step(), name_step()], WizardMode.creating(), Profile("x"))
        assert flow.current_step_number == 1
        assert not flow.can_go_back()
        with pytest.raises(WizardError):
            flow.go_back()
        flow.advance()
        assert flow.current_step_number == 2
        with pytest.raises(WizardError):
            flow.advance()

    def test_advance_clears_error(self) -> None:
        flow = WizardFlow([name_step(), name_step()], WizardMode.creating(), Profile("x"))
        flow.error = "bad"
        flow.advance()
        assert flow.error is None

    def test_enter_loads_item(self) -> None:
        step = name_step()
        WizardFlow([step], WizardMode.editing("x"), Profile("x", name="prod"))
        assert step.input.text == "prod"

    def test_mode(self) -> None:
        assert WizardMode.creating().is_creating
        assert not WizardMode.editing("id").is_creating


class TestSteps:

    def test_text_step_writes_through(self) -> None:
        step = name_step()
        item = Profile("x")
        step.enter(item)
        assert type_text(lambda e: step.handle_key(e, item), "ab") == StepAction.CONTINUE
        assert item.name == "ab"

    def test_text_step_enter_validates(self) -> None:
        step = name_step()
        item = Profile("x")
        step.enter(item)
        assert step.handle_key(key(Key.ENTER), item) == StepAction.CONTINUE
        assert step.validation_error == "Name is required"
        step.handle_key(char("a"), item)
        assert step.validation_error is None
        assert step.handle_key(key(Key.ENTER), item) == StepAction.NEXT

    def test_text_step_escape(self) -> None:
        assert name_step().handle_key(key(Key.ESCAPE), Profile("x")) == StepAction.CANCEL

    def test_text_step_renders_status(self, theme: Theme) -> None:
        step = name_step().with_status(lambda p: (True, "looks good"))
        canvas = Canvas(30, 8)
        step.render(canvas, canvas.area, theme, Profile("x", name="a"))
        assert any("✓ looks good" in line for line in canvas.lines())

    def test_summary_keys(self) -> None:
        step = SummaryStep("Review", "help", lambda p: [Line.plain(p.name)])
        item = Profile("x")
        assert step.handle_key(key(Key.ENTER), item) == StepAction.SAVE
        assert step.handle_key(key(Key.LEFT), item) == StepAction.PREVIOUS
        assert step.handle_key(char("h"), item) == StepAction.PREVIOUS
        assert step.handle_key(key(Key.ESCAPE), item) == StepAction.CANCEL
        assert step.handle_key(char("x"), item) == StepAction.CONTINUE
        assert step.content_height == 6
        assert step.validate(item) is None

    def test_summary_key_handler_overrides(self) -> None:
        step = SummaryStep("Review", "help", lambda p: []).with_key_handler(
            lambda e, p: StepAction.NEXT if e.is_char and e.char == "s" else None
        ).with_height(3)
        assert step.handle_key(char("s"), Profile("x")) == StepAction.NEXT
        assert step.handle_key(key(Key.ENTER), Profile("x")) == StepAction.SAVE
        assert step.content_height == 3

    def test_layouts(self) -> None:
        assert [r.height for r in input_step_layout(Rect(0, 0, 10, 10))] == [1, 3, 2, 4]
        assert [r.height for r in padded_list_layout(Rect(0, 0, 10, 10))] == [1, 9]


class TestCreateFlow:

    def test_create_through_all_steps(self) -> None:
        model = make_model()
        press(model, char("n"))
        assert model.view_mode == ViewMode.WIZARD
        assert model.wizard.mode.is_creating

        type_into(model, "prod")
        assert press(model, key(Key.ENTER)) is None
        assert model.wizard.current_step_number == 2

        # empty host keeps the step open with its message
        press(model, key(Key.ENTER))
        assert model.wizard.current_step_number == 2
        assert model.wizard.current_step.validation_error == "Host is required"

        type_into(model, "example.com")
        press(model, key(Key.ENTER))
        assert model.wizard.current_step.title == "Review"

        saved = press(model, key(Key.ENTER))
        assert [(p.name, p.host) for p in saved] == [("prod", "example.com")]
        assert model.view_mode == ViewMode.LIST
        assert model.wizard is None

    def test_back_from_summary(self) -> None:
        model = make_model()
        press(model, char("n"))
        type_into(model, "a")
        press(model, key(Key.ENTER))
        type_into(model, "b")
        press(model, key(Key.ENTER))
        press(model, char("h"))
        assert model.wizard.current_step_number == 2
        assert model.wizard.current_step.input.text == "b"

    def test_previous_on_first_step_is_ignored(self) -> None:
        model = make_model()
        press(model, char("n"))
        assert model.update(WizardPrevious()) is None
        assert model.wizard.current_step_number == 1

    def test_next_with_invalid_step_sets_error(self) -> None:
        model = make_model()
        press(model, char("n"))
        assert model.update(WizardNext()) is None
        assert model.wizard.error == "Name is required"


class TestEditAndDelete:

    def test_cancel_leaves_item_untouched(self) -> None:
        model = make_model(Profile("a", "alpha", "h1"))
        press(model, key(Key.ENTER))
        assert model.wizard.mode.editing_id == "a"
        press(model, ctrl("u"))
        type_into(model, "beta")
        assert model.wizard.item.name == "beta"
        press(model, key(Key.ESCAPE))
        assert model.view_mode == ViewMode.LIST
        assert model.items[0].name == "alpha"

    def test_edit_replaces_in_place(self) -> None:
        model = make_model(Profile("a", "alpha", "h1"), Profile("b", "bravo", "h2"))
        press(model, char("e"))
        press(model, ctrl("u"))
        type_into(model, "renamed")
        for _ in range(3):
            saved = press(model, key(Key.ENTER))
        assert [p.id for p in saved] == ["a", "b"]
        assert saved[0].name == "renamed"

    def test_delete_confirm_and_cancel(self) -> None:
        model = make_model(Profile("a", "alpha", "h1"))
        press(model, char("d"))
        assert model.view_mode == ViewMode.CONFIRMATION
        assert press(model, char("n")) is None
        assert model.view_mode == ViewMode.LIST
        assert len(model.items) == 1

        press(model, char("d"))
        assert press(model, char("y")) == []
        assert model.items == []

    def test_unknown_edit_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        model = make_model(Profile("a", "alpha", "h1"))
        with caplog.at_level(logging.WARNING, logger="terminal_kit.wizard.model"):
            model.update(StartEdit("missing"))
        assert model.view_mode == ViewMode.LIST
        assert "cannot edit unknown item" in caplog.text

    def test_list_keys(self) -> None:
        model = make_model(Profile("a", "alpha", "h1"), Profile("b", "bravo", "h2"))
        press(model, key(Key.DOWN))
        assert model.selected_item().id == "b"
        press(model, key(Key.DOWN))
        assert model.selected_item().id == "b"
        assert model.on_key(char(" ")) is None
        press(model, key(Key.ESCAPE))
        assert not model.is_open
        assert model.on_key(char("n")) is None

    def test_filter(self) -> None:
        model = make_model(Profile("a", "alpha", "h1"), Profile("b", "bravo", "h2"))
        model.update(FilterItems("bra"))
        assert model.visible_indices() == [1]
        assert model.selected_item().id == "b"

    def test_items_saved(self) -> None:
        model = make_model(Profile("a", "alpha", "h1"))
        model.update(ItemsSaved(error="disk full"))
        assert model.last_error == "disk full"
        model.update(ItemsSaved(items=[Profile("z", "zulu", "h")]))
        assert model.last_error is None
        assert model.items[0].id == "z"


class TestWizardView:

    @staticmethod
    def draw(model: GenericWizardModel, theme: Theme) -> list[str]:
        canvas = Canvas(60, 20)
        generic_wizard_view(model, ProfileListView(), canvas, canvas.area, theme, "Profiles",
                            "Profiles", ["Profiles"])
        return canvas.lines()

    def test_empty_list(self, theme: Theme) -> None:
        lines = self.draw(make_model(), theme)
        assert " Profiles " in lines[1]
        assert any("No profiles configured" in line for line in lines)
        assert "esc close  n new item" in lines[18]

    def test_list_rows(self, theme: Theme) -> None:
        lines = self.draw(make_model(Profile("a", "alpha", "h1")), theme)
        assert "alpha h1" in lines[4]
        assert "enter edit" in lines[18]

    def test_wizard_title_indicator(self, theme: Theme) -> None:
        model = make_model()
        press(model, char("n"))
        lines = self.draw(model, theme)
        assert "Profiles - Name" in lines[3]
        assert lines[3].rstrip().endswith("[1/3]")
        assert "enter next  esc cancel" in lines[18]

    def test_wizard_error_line(self, theme: Theme) -> None:
        model = make_model()
        press(model, char("n"))
        model.update(WizardNext())
        assert any("✗ Name is required" in line for line in self.draw(model, theme))

    def test_confirmation(self, theme: Theme) -> None:
        model = make_model(Profile("a", "alpha", "h1"))
        press(model, char("d"))
        lines = self.draw(model, theme)
        assert any("Delete 'alpha'?" in line for line in lines)
        assert "y confirm  n cancel" in lines[18]

    def test_closed_draws_nothing(self, theme: Theme) -> None:
        model = make_model()
        model.close()
        assert all(not line.strip() for line in self.draw(model, theme))

    def test_title_helpers(self) -> None:
        assert format_title_with_indicator(20, "Title", "[1/3]") == "Title" + " " * 10 + "[1/3]"
        assert format_title_with_indicator(8, "Title", "[1/3]") == "Title [1/3]"
        assert navigation_text(1, 3) == "enter next  esc cancel"
        assert navigation_text(2, 3) == "enter next  esc cancel  ← back"
        assert navigation_text(3, 3) == "enter save  esc cancel  ← back"
