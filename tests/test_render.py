"""Tests for the cell grid, styled text, ANSI output, path mentions and theme."""

from pathlib import Path

import pytest
from rich.style import Style

from terminal_kit.layout.rect import Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.render.cell import CONTINUATION, Cell
from terminal_kit.render.paths import MentionPathFormatter, PathDisplayConfig
from terminal_kit.render.styled import Line, Span, render_line, render_lines, render_paragraph
from terminal_kit.render.terminal import RESET, TerminalRenderer
from terminal_kit.theme import ROUNDED_BORDER, Theme, ThemeElement, blend


class TestCell:

    def test_default(self) -> None:
        cell = Cell()
        assert cell.char == " "
        assert cell.is_default()
        assert not cell.is_continuation

    def test_copy(self) -> None:
        cell = Cell("X", Style(bold=True))
        copy = cell.copy()
        assert copy == cell
        assert copy is not cell


class TestCanvas:

    def test_strict_get_set(self) -> None:
        canvas = Canvas(4, 2)
        canvas[1, 1] = Cell("A")
        assert canvas[1, 1].char == "A"
        with pytest.raises(IndexError):
            canvas.get(4, 0)
        with pytest.raises(IndexError):
            canvas.set(0, -1, Cell())

    def test_put_text_returns_columns(self) -> None:
        canvas = Canvas(10, 1)
        assert canvas.put_text(0, 0, "hello") == 5
        assert canvas.row_text(0) == "hello     "

    def test_wide_characters_take_two_cells(self) -> None:
        canvas = Canvas(10, 1)
        assert canvas.put_text(0, 0, "日本") == 4
        assert canvas.get(0, 0).char == "日"
        assert canvas.get(1, 0).char == CONTINUATION
        assert canvas.get(2, 0).char == "本"

    def test_wide_character_not_split_at_edge(self) -> None:
        canvas = Canvas(10, 1)
        assert canvas.put_text(8, 0, "日本") == 2
        assert canvas.put_text(9, 0, "日") == 0
        assert canvas.put_text(0, 0, "日本", max_width=3) == 2

    def test_zero_width_attaches_to_previous(self) -> None:
        canvas = Canvas(10, 1)
        assert canvas.put_text(0, 0, "e\u0301x") == 2
        assert canvas.get(0, 0).char == "e\u0301"
        assert canvas.get(1, 0).char == "x"

    def test_clipping_is_silent(self) -> None:
        canvas = Canvas(5, 2)
        assert canvas.put_text(0, 5, "hidden") == 0
        assert canvas.put_text(3, 0, "abcdef") == 2
        canvas.fill(Rect(-3, -3, 100, 100), Style(bold=True))
        assert canvas.get(4, 1).style.bold

    def test_style_layers(self) -> None:
        canvas = Canvas(3, 1)
        canvas.fill(canvas.area, Style(bgcolor="#000000"))
        canvas.put_text(0, 0, "a", Style(color="#ffffff"))
        style = canvas.get(0, 0).style
        assert style.color.name == "#ffffff"
        assert style.bgcolor.name == "#000000"

    def test_set_style_keeps_chars(self) -> None:
        canvas = Canvas(3, 1)
        canvas.put_text(0, 0, "abc")
        canvas.set_style(Rect(0, 0, 2, 1), Style(italic=True))
        assert canvas.row_text(0) == "abc"
        assert canvas.get(1, 0).style.italic
        assert not canvas.get(2, 0).style.italic

    def test_clear(self) -> None:
        canvas = Canvas(3, 1)
        canvas.put_text(0, 0, "abc", Style(bold=True))
        canvas.clear()
        assert all(cell.is_default() for _, _, cell in canvas.cells())

    def test_draw_border(self) -> None:
        canvas = Canvas(6, 4)
        inner = canvas.draw_border(canvas.area, title="Hi", chars=ROUNDED_BORDER)
        assert inner == Rect(1, 1, 4, 2)
        assert canvas.lines() == ["╭Hi──╮", "│    │", "│    │", "╰────╯"]

    def test_draw_border_too_small(self) -> None:
        canvas = Canvas(6, 4)
        assert canvas.draw_border(Rect(0, 0, 1, 4)).is_empty
        assert canvas.row_text(0) == "      "


class TestStyledText:

    def test_line_width(self) -> None:
        line = Line([Span("ab"), Span("日本")])
        assert line.width == 6
        assert line.text == "ab日本"
        assert Line.plain("x").append("yz").text == "xyz"

    def test_render_line_clips(self) -> None:
        canvas = Canvas(10, 1)
        written = render_line(canvas, Rect(2, 0, 4, 1), Line([Span("abc"), Span("defg")]))
        assert written == 4
        assert canvas.row_text(0) == "  abcd    "

    def test_render_line_fills_base(self) -> None:
        canvas = Canvas(5, 1)
        render_line(canvas, Rect(0, 0, 5, 1), Line.plain("a"), Style(bgcolor="#101010"))
        assert canvas.get(4, 0).style.bgcolor.name == "#101010"

    def test_line_style_under_spans(self) -> None:
        canvas = Canvas(5, 1)
        line = Line([Span("a", Style(bold=True))], Style(italic=True))
        render_line(canvas, canvas.area, line)
        style = canvas.get(0, 0).style
        assert style.bold and style.italic

    def test_render_lines_stops_at_area(self) -> None:
        canvas = Canvas(5, 3)
        rows = render_lines(canvas, Rect(0, 1, 5, 2), [Line.plain(s) for s in "abcd"])
        assert rows == 2
        assert canvas.lines() == ["     ", "a    ", "b    "]

    def test_render_paragraph(self) -> None:
        canvas = Canvas(5, 2)
        needed = render_paragraph(canvas, canvas.area, "hello world again")
        assert needed == 3
        assert canvas.lines() == ["hello", "world"]


class TestMentionPaths:

    def test_relative_display(self, tmp_path: Path) -> None:
        paths = MentionPathFormatter(PathDisplayConfig(base_dir=tmp_path))
        assert paths.format_for_display(str(tmp_path / "src" / "main.py")) == "@src/main.py"
        assert paths.format_for_display("/elsewhere/file.txt") == "@/elsewhere/file.txt"

    def test_absolute_display(self, tmp_path: Path) -> None:
        paths = MentionPathFormatter(PathDisplayConfig(prefix="", show_relative=False, base_dir=tmp_path))
        target = str(tmp_path / "a.txt")
        assert paths.format_for_display(target) == target

    def test_resolves_links(self, tmp_path: Path) -> None:
        real = tmp_path / "real"
        real.mkdir()
        (real / "a.txt").write_text("x")
        link = tmp_path / "link"
        link.symlink_to(real)
        paths = MentionPathFormatter(PathDisplayConfig(base_dir=link))
        assert paths.to_relative_path(str(real / "a.txt")) == "a.txt"

    def test_default_base_is_cwd(self) -> None:
        assert MentionPathFormatter().base_dir == Path.cwd()

    def test_transform_text(self, tmp_path: Path) -> None:
        paths = MentionPathFormatter(PathDisplayConfig(bold=True, color="cyan", base_dir=tmp_path))
        base = Style(italic=True)
        spans = paths.transform_text(f"see @{tmp_path}/a.py, and {tmp_path}/b.py", base)
        assert [span.text for span in spans] == ["see ", "@a.py", ", and ", "@b.py"]
        assert spans[0].style == base
        assert spans[1].style.bold and spans[1].style.italic
        assert spans[1].style.color.name == "cyan"

    def test_text_without_paths(self, tmp_path: Path) -> None:
        paths = MentionPathFormatter(PathDisplayConfig(base_dir=tmp_path))
        assert paths.transform_text("nothing here", Style()) == [Span("nothing here", Style())]
        assert paths.transform_text("", Style()) == []


class TestTerminalRenderer:

    def test_plain_rows_trimmed(self) -> None:
        canvas = Canvas(5, 2)
        canvas.put_text(0, 0, "hi")
        assert TerminalRenderer().render(canvas) == "hi\n" + RESET

    def test_sgr_only_on_style_change(self) -> None:
        canvas = Canvas(6, 1)
        canvas.put_text(0, 0, "abc", Style(bold=True))
        canvas.put_text(3, 0, "def", Style(italic=True))
        out = TerminalRenderer(reset_at_end=False).render(canvas)
        assert out.count("\x1b[1m") == 1
        assert out.count("\x1b[3m") == 1
        assert "abc" in out and "def" in out

    def test_continuation_cells_emit_nothing(self) -> None:
        canvas = Canvas(4, 1)
        canvas.put_text(0, 0, "日x")
        assert TerminalRenderer(reset_at_end=False).render(canvas) == "日x"

    def test_frame_places_cursor(self) -> None:
        canvas = Canvas(3, 2)
        canvas.cursor = (1, 1)
        out = TerminalRenderer().render_frame(canvas)
        assert out.startswith("\x1b[?25l")
        assert "\x1b[2;1H" in out
        assert out.endswith("\x1b[2;2H\x1b[?25h")

    def test_inline_restores_saved_cursor(self) -> None:
        canvas = Canvas(3, 2)
        out = TerminalRenderer().render_inline(canvas)
        assert out.startswith("\x1b[?25l\x1b8")
        assert out.count("\r\n") == 1


class TestTheme:

    def test_invalid_color(self) -> None:
        with pytest.raises(ValueError):
            Theme(accent="not-a-color")

    def test_presets(self) -> None:
        assert Theme.dark().name == "dark"
        assert Theme.light().border_chars == ROUNDED_BORDER

    def test_style_resolution(self, theme: Theme) -> None:
        assert theme.style(ThemeElement.PRIMARY).color.name == theme.primary
        assert theme.style(ThemeElement.BACKGROUND_INPUT).bgcolor.name == theme.background_input
        selection = theme.style(ThemeElement.SELECTION)
        assert selection.bgcolor.name == theme.selection
        assert selection.bold

    def test_list_item_style(self, theme: Theme) -> None:
        assert theme.list_item_style(ThemeElement.BASE, True, True) == theme.style(ThemeElement.SELECTION)
        hovered = theme.list_item_style(ThemeElement.BASE, False, True)
        assert hovered.bgcolor.name == theme.background_hover
        tertiary = theme.list_item_style(ThemeElement.TERTIARY, False, True)
        assert tertiary.color.name == theme.tertiary
        assert tertiary.bgcolor.name == theme.background_hover

    def test_blend(self) -> None:
        assert blend("#ffffff", "#000000", 1.0) == "#ffffff"
        assert blend("#ffffff", "#000000", 0.0) == "#000000"
        assert blend("#ffffff", "#000000", 5.0) == "#ffffff"
