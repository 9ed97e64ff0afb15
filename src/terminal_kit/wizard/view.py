"""Rendering of the list, wizard and delete-confirmation screens."""

from __future__ import annotations

from typing import Callable, Sequence

from rich.style import Style

from terminal_kit.layout.rect import Padding, Rect, split_vertical
from terminal_kit.layout.region import DialogLayout, DialogOptions, layout_centered
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.styled import Line, render_line
from terminal_kit.text.width import text_width
from terminal_kit.theme import Theme, ThemeElement
from terminal_kit.widgets.help_bar import render_help_bar
from terminal_kit.widgets.list import ListChrome, ListItem, render_list_with_chrome
from terminal_kit.widgets.picker import render_centered_message
from terminal_kit.widgets.tabs import default_tab_style, tab_bar_line
from terminal_kit.wizard.framework import ItemListView
from terminal_kit.wizard.model import GenericWizardModel, ViewMode

WIZARD_DIALOG_OPTS = DialogOptions(
    max_width=60,
    max_height=20,
    header_rows=3,
    footer_rows=1,
    padding=Padding.uniform(1),
)

HELP_ROWS = 2


def format_title_with_indicator(width: int, base_text: str, indicator: str) -> str:
    """Left title and right-aligned indicator; falls back to a single space when cramped."""
    gap = width - text_width(base_text) - text_width(indicator)
    if gap < 1:
        return f"{base_text} {indicator}"
    return base_text + " " * gap + indicator


def navigation_text(step_number: int, step_count: int) -> str:
    if step_number == 1:
        return "enter next  esc cancel"
    if step_number == step_count:
        return "enter save  esc cancel  ← back"
    return "enter next  esc cancel  ← back"


def render_dialog_shell(
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    tab_labels: Sequence[str],
    active_tab: int,
    title_line: Callable[[int], str],
    inline: bool = False,
) -> DialogLayout:
    """Centered dialog with a tab strip on row 0 and the title on row 2 of the header."""
    layout = layout_centered(canvas, area, theme, WIZARD_DIALOG_OPTS.with_inline(inline))
    tab_row, _, title_row = split_vertical(layout.header, [1, 1, 1])

    if tab_labels:
        active = min(active_tab, len(tab_labels) - 1)
        line = tab_bar_line(
            range(len(tab_labels)),
            active,
            tab_row.width,
            lambda tab: f" {tab_labels[tab]} ",
            lambda _, is_active: default_tab_style(theme, is_active),
        )
        render_line(canvas, tab_row, line, theme.base_style())
    else:
        canvas.fill(tab_row, theme.base_style())

    title_style = theme.style(ThemeElement.PRIMARY) + Style(bold=True)
    render_line(canvas, title_row, Line.plain(title_line(title_row.width), title_style))
    return layout


def _render_footer(canvas: Canvas, area: Rect, theme: Theme, text: str) -> None:
    render_line(canvas, area.with_height(1), Line.plain(text, theme.style(ThemeElement.TERTIARY)))


def generic_wizard_view(
    model: GenericWizardModel,
    list_view: ItemListView,
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    title: str,
    empty_label: str,
    tab_labels: Sequence[str] = (),
    list_active_tab: int = 0,
    wizard_active_tab: int = 0,
    inline: bool = False,
) -> None:
    """Draw whichever screen the model is on; nothing when it is closed."""
    if not model.is_open:
        return
    if model.view_mode == ViewMode.LIST:
        _render_list_view(model, list_view, canvas, area, theme, title, empty_label,
                          tab_labels, list_active_tab, inline)
    elif model.view_mode == ViewMode.WIZARD:
        _render_wizard_view(model, canvas, area, theme, title, tab_labels, wizard_active_tab, inline)
    else:
        _render_confirmation_view(model, canvas, area, theme, tab_labels, wizard_active_tab, inline)


def _render_list_view(
    model: GenericWizardModel,
    list_view: ItemListView,
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    title: str,
    empty_label: str,
    tab_labels: Sequence[str],
    active_tab: int,
    inline: bool,
) -> None:
    layout = render_dialog_shell(canvas, area, theme, tab_labels, active_tab, lambda _: title, inline)
    visible = model.visible_indices()

    if not model.items:
        render_centered_message(canvas, layout.body, theme, f"No {empty_label.lower()} configured")
        tab_hint = "  tab next" if len(tab_labels) > 1 else ""
        help_text = f"esc close{tab_hint}  n new item"
    else:
        def item_at(idx: int, selected: bool) -> ListItem:
            return list_view.render_item(model.items[visible[idx]], selected, theme)

        model.list_state.viewport_offset = render_list_with_chrome(
            canvas,
            layout.body,
            theme,
            ListChrome.plain(),
            model.selected_idx,
            model.list_state.viewport_offset,
            len(visible),
            item_at,
        )
        help_text = "enter edit  esc close  ↑↓ navigate  n new"

    _render_footer(canvas, layout.footer, theme, help_text)


def _render_wizard_view(
    model: GenericWizardModel,
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    base_title: str,
    tab_labels: Sequence[str],
    active_tab: int,
    inline: bool,
) -> None:
    wizard = model.wizard
    if wizard is None:
        return
    step = wizard.current_step
    number, count = wizard.current_step_number, wizard.step_count

    def title_line(width: int) -> str:
        return format_title_with_indicator(width, f"{base_title} - {step.title}", f"[{number}/{count}]")

    layout = render_dialog_shell(canvas, area, theme, tab_labels, active_tab, title_line, inline)
    content, help_area, _ = split_vertical(layout.body, [step.content_height, HELP_ROWS, 0], fill_index=2)

    step.render(canvas, content, theme, wizard.item)
    if wizard.error:
        error_style = Style(color=theme.error, bold=True)
        render_line(canvas, help_area.with_height(1), Line.plain(f"✗ {wizard.error}", error_style))
    else:
        render_help_bar(canvas, help_area, theme, step.help_text)

    _render_footer(canvas, layout.footer, theme, step.navigation_hint or navigation_text(number, count))


def _render_confirmation_view(
    model: GenericWizardModel,
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    tab_labels: Sequence[str],
    active_tab: int,
    inline: bool,
) -> None:
    if model.pending_delete is None:
        return
    idx = model.find(model.pending_delete)
    name = model.items[idx].display_name if idx is not None else "Unknown"

    layout = render_dialog_shell(
        canvas, area, theme, tab_labels, active_tab, lambda _: "Confirm Delete", inline
    )
    body = layout.body
    style = Style(color=theme.foreground)
    for row, text in enumerate([f"Delete '{name}'?", "", "This action cannot be undone."]):
        if row >= body.height:
            break
        x = body.x + max(0, body.width - text_width(text)) // 2
        canvas.put_text(x, body.y + row, text, style, body.right - x)

    _render_footer(canvas, layout.footer, theme, "y confirm  n cancel")
