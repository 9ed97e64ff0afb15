"""Dialog and region layout - centered, fixed and overlay dialogs.

compute_* functions are pure and usable for hit-testing. layout_* functions
compute the same geometry and also paint the dialog chrome onto a canvas.

Inline mode (a dialog rendered into an inline viewport rather than the
alternate screen) is a per-call option on DialogOptions. Inline dialogs
always span the full width of their parent.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from terminal_kit.layout.rect import Padding, Rect, split_rows, split_vertical

if TYPE_CHECKING:
    from terminal_kit.render.canvas import Canvas
    from terminal_kit.theme import Theme

UNBOUNDED = 2**31 - 1


@dataclass(frozen=True)
class DialogOptions:
    """Sizing of a centered dialog relative to its parent area."""
    width_pct: float = 1.0
    height_pct: float = 1.0
    max_width: int = UNBOUNDED
    max_height: int = UNBOUNDED
    header_rows: int = 0
    footer_rows: int = 0
    padding: Padding = field(default_factory=Padding)
    inline: bool = False

    def with_inline(self, inline: bool = True) -> DialogOptions:
        return replace(self, inline=inline)


@dataclass(frozen=True)
class DialogLayout:
    """Outer dialog rect plus its header, body and footer bands."""
    area: Rect
    header: Rect
    body: Rect
    footer: Rect


def _center(container: int, item: int) -> int:
    return max(0, container - item) // 2


def _effective(opts: DialogOptions, parent: Rect) -> DialogOptions:
    if opts.inline:
        return replace(opts, width_pct=1.0, max_width=parent.width)
    return opts


def dialog_area(parent: Rect, opts: DialogOptions) -> Rect:
    """Centered rect sized by percentage of parent, clamped to the maxima."""
    opts = _effective(opts, parent)
    width = max(0, min(int(parent.width * opts.width_pct), opts.max_width))
    height = max(0, min(int(parent.height * opts.height_pct), opts.max_height))
    return Rect(
        parent.x + _center(parent.width, width),
        parent.y + _center(parent.height, height),
        width,
        height,
    )


def compute_centered(parent: Rect, opts: DialogOptions) -> DialogLayout:
    """Compute a centered dialog layout without painting anything."""
    area = dialog_area(parent, opts)
    header, body, footer = split_rows(area.pad(opts.padding), opts.header_rows, opts.footer_rows)
    return DialogLayout(area, header, body, footer)


def compute_fixed(area: Rect, header_rows: int, footer_rows: int) -> DialogLayout:
    """Split a fixed rect into header, body and footer without centering."""
    header, body, footer = split_rows(area, header_rows, footer_rows)
    return DialogLayout(area, header, body, footer)


def paint_background(canvas: Canvas, area: Rect, theme: Theme) -> None:
    """Clear area and paint the dialog surface color over it."""
    canvas.fill(area, theme.surface_style())


def layout_centered(canvas: Canvas, parent: Rect, theme: Theme, opts: DialogOptions) -> DialogLayout:
    """Centered layout with a painted surface background."""
    layout = compute_centered(parent, opts)
    paint_background(canvas, layout.area, theme)
    return layout


def _bordered_frame(canvas: Canvas, area: Rect, theme: Theme, title: str) -> Rect:
    paint_background(canvas, area, theme)
    return canvas.draw_border(
        area,
        theme.border_focused_style(),
        title=title,
        chars=theme.border_chars,
    )


def layout_centered_bordered(
    canvas: Canvas,
    parent: Rect,
    theme: Theme,
    opts: DialogOptions,
    title: str,
) -> DialogLayout:
    """
    Centered dialog with a titled border; the footer sits below the border.

    The footer band is outside the dialog area, one row past its bottom
    edge, aligned with the padded inner content.
    """
    area = dialog_area(parent, opts)
    inner = _bordered_frame(canvas, area, theme, title).pad(opts.padding)
    header, body, _ = split_rows(inner, opts.header_rows, 0)
    footer = Rect(inner.x, area.bottom, inner.width, max(0, opts.footer_rows))
    return DialogLayout(area, header, body, footer)


def layout_centered_bordered_contained(
    canvas: Canvas,
    parent: Rect,
    theme: Theme,
    opts: DialogOptions,
    title: str,
) -> DialogLayout:
    """Centered dialog with a titled border; the footer stays inside the border."""
    area = dialog_area(parent, opts)
    inner = _bordered_frame(canvas, area, theme, title).pad(opts.padding)
    header, body, footer = split_rows(inner, opts.header_rows, opts.footer_rows)
    return DialogLayout(area, header, body, footer)


def layout_fixed(
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    header_rows: int,
    footer_rows: int,
) -> DialogLayout:
    """Fixed layout with a painted surface background."""
    layout = compute_fixed(area, header_rows, footer_rows)
    paint_background(canvas, layout.area, theme)
    return layout


# Overlay dialogs: borderless panels sized to their content


@dataclass(frozen=True)
class OverlayDialogOptions:
    padding: Padding = field(default_factory=lambda: Padding.uniform(1))
    header_rows: int = 0
    footer_gap: int = 1
    footer_rows: int = 0

    @classmethod
    def overlay(cls, header_rows: int, footer_rows: int) -> OverlayDialogOptions:
        return cls(header_rows=header_rows, footer_rows=footer_rows)

    def chrome_rows(self) -> int:
        """Rows taken by everything except the body."""
        return (
            self.header_rows
            + self.footer_gap
            + self.footer_rows
            + self.padding.top
            + self.padding.bottom
        )


@dataclass(frozen=True)
class OverlayDialogLayout:
    area: Rect
    header: Rect
    body: Rect
    footer_gap: Rect
    footer: Rect


def total_height(body_rows: int, opts: OverlayDialogOptions) -> int:
    """Height an overlay needs to show body_rows of content."""
    return max(0, body_rows) + opts.chrome_rows()


def compute_overlay_layout(area: Rect, opts: OverlayDialogOptions) -> OverlayDialogLayout:
    inner = area.pad(opts.padding)
    header, body, gap, footer = split_vertical(
        inner,
        [opts.header_rows, 0, opts.footer_gap, opts.footer_rows],
        fill_index=1,
    )
    return OverlayDialogLayout(area, header, body, gap, footer)


def layout_overlay(
    canvas: Canvas,
    area: Rect,
    theme: Theme,
    opts: OverlayDialogOptions,
) -> OverlayDialogLayout:
    layout = compute_overlay_layout(area, opts)
    paint_background(canvas, layout.area, theme)
    return layout
