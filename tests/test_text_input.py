"""Tests for TextInput editing, cursor movement and the InputBox renderer."""

from conftest import char, ctrl, key, type_text
from rich.style import Style

from terminal_kit.layout.rect import Rect
from terminal_kit.render.canvas import Canvas
from terminal_kit.runtime.input import Key, KeyEvent
from terminal_kit.text.cursor import VisualPosition
from terminal_kit.theme import Theme
from terminal_kit.widgets.input_box import InputBox, cursor_screen_pos, suggestion_lines, text_lines
from terminal_kit.widgets.search_bar import render_search_bar
from terminal_kit.widgets.text_input import TextInput


class TestEditing:

    def test_set_text_moves_cursor_to_end(self) -> None:
        ti = TextInput("ab\ncd")
        assert ti.lines == ["ab", "cd"]
        assert ti.line_cursor == (1, 2)
        assert ti.cursor == 5

    def test_insert_and_newline(self) -> None:
        ti = TextInput()
        type_text(ti.handle_key, "hi")
        ti.handle_key(key(Key.ENTER))
        ti.insert_str("there\nyou")
        assert ti.text == "hi\nthere\nyou"
        assert ti.line_cursor == (2, 3)

    def test_insert_mid_line(self) -> None:
        ti = TextInput("ac")
        ti.cursor_left()
        ti.insert_char("b")
        assert ti.text == "abc"
        assert ti.line_cursor == (0, 2)

    def test_delete_backward_joins_lines(self) -> None:
        ti = TextInput("ab\ncd")
        ti.cursor_line_start()
        assert ti.delete_backward()
        assert ti.text == "abcd"
        assert ti.line_cursor == (0, 2)

    def test_delete_at_edges(self) -> None:
        ti = TextInput("ab")
        assert not ti.delete_forward()
        ti.cursor_line_start()
        assert not ti.delete_backward()
        assert ti.delete_forward()
        assert ti.text == "b"

    def test_delete_word_backward(self) -> None:
        ti = TextInput("foo bar.baz  ")
        assert ti.delete_word_backward()
        assert ti.text == "foo bar."
        ti.delete_word_backward()
        assert ti.text == "foo bar"
        ti.delete_word_backward()
        assert ti.text == "foo "

    def test_delete_word_forward(self) -> None:
        ti = TextInput("foo bar")
        ti.cursor_line_start()
        ti.delete_word_forward()
        assert ti.text == " bar"
        ti.delete_word_forward()
        assert ti.text == ""

    def test_kill_line(self) -> None:
        ti = TextInput("hello world")
        for _ in range(5):
            ti.cursor_left()
        ti.handle_key(ctrl("k"))
        assert ti.text == "hello "
        ti.handle_key(ctrl("u"))
        assert ti.text == ""

    def test_clear_and_empty(self) -> None:
        ti = TextInput("x")
        assert not ti.is_empty()
        ti.clear()
        assert ti.is_empty()
        assert ti.text == ""

    def test_multibyte_cursor_offsets(self) -> None:
        ti = TextInput("日本語")
        ti.cursor_left()
        assert ti.cursor == 6
        ti.set_cursor_byte_offset(4)
        assert ti.line_cursor == (0, 1)


class TestMovement:

    def test_left_right_cross_lines(self) -> None:
        ti = TextInput("ab\ncd")
        ti.cursor_line_start()
        ti.cursor_left()
        assert ti.line_cursor == (0, 2)
        ti.cursor_right()
        assert ti.line_cursor == (1, 0)

    def test_word_movement(self) -> None:
        ti = TextInput("one two three")
        ti.cursor_word_left()
        assert ti.line_cursor == (0, 8)
        ti.cursor_word_left()
        assert ti.line_cursor == (0, 4)
        ti.cursor_word_right()
        assert ti.line_cursor == (0, 7)

    def test_word_keys(self) -> None:
        ti = TextInput("one two")
        ti.handle_key(char("b", alt=True))
        assert ti.line_cursor == (0, 4)
        ti.handle_key(key(Key.LEFT, ctrl=True))
        assert ti.line_cursor == (0, 0)
        ti.handle_key(char("f", alt=True))
        assert ti.line_cursor == (0, 3)

    def test_logical_vertical_keeps_column(self) -> None:
        ti = TextInput("abcdef\nxy\nlonger")
        ti.cursor_up_line()
        assert ti.line_cursor == (1, 2)
        ti.cursor_up_line()
        assert ti.line_cursor == (0, 2)
        assert not ti.cursor_up_line()

    def test_visual_vertical(self) -> None:
        ti = TextInput("hello world")
        assert ti.visual_rows(5) == 2
        assert ti.cursor_visual_position(5) == VisualPosition(1, 5)
        assert ti.cursor_move_visual_vertical(True, 5)
        assert ti.cursor == 5
        assert not ti.cursor_move_visual_vertical(True, 5)
        assert ti.cursor_move_visual_vertical(False, 5)
        assert ti.cursor == 11

    def test_visual_vertical_single_row(self) -> None:
        ti = TextInput("short")
        assert not ti.cursor_move_visual_vertical(True, 40)
        assert not ti.cursor_move_visual_vertical(False, 0)

    def test_visual_line_end(self) -> None:
        ti = TextInput("hello world")
        ti.set_cursor_byte_offset(1)
        ti.cursor_visual_line_end(5)
        assert ti.cursor == 5

    def test_home_end_keys(self) -> None:
        ti = TextInput("abc")
        ti.handle_key(key(Key.HOME))
        assert ti.line_cursor == (0, 0)
        ti.handle_key(ctrl("e"))
        assert ti.line_cursor == (0, 3)


class TestKeyHandling:

    def test_reports_changes(self) -> None:
        ti = TextInput()
        assert ti.handle_key(char("a"))
        assert not ti.handle_key(key(Key.LEFT))
        assert ti.handle_key(key(Key.BACKSPACE))
        assert not ti.handle_key(key(Key.BACKSPACE))

    def test_alt_backspace_deletes_word(self) -> None:
        ti = TextInput("one two")
        assert ti.handle_key(KeyEvent(key=Key.BACKSPACE, alt=True))
        assert ti.text == "one "

    def test_search_key(self) -> None:
        ti = TextInput()
        assert ti.handle_search_key(char("q")) == "q"
        assert ti.handle_search_key(key(Key.LEFT)) is None
        ti.handle_key(key(Key.END))
        assert ti.handle_search_key(key(Key.BACKSPACE)) == ""

    def test_placeholder(self) -> None:
        ti = TextInput(placeholder="")
        assert ti.placeholder is None
        ti.placeholder = "Search..."
        assert ti.placeholder == "Search..."
        assert ti.display_text() == "❯"


class TestInputBox:

    def test_text_lines(self) -> None:
        assert [line.text for line in text_lines("hello world", 5)] == ["hello", "world"]
        assert [line.text for line in text_lines("", 5)] == [""]

    def test_suggestion_split_across_rows(self) -> None:
        lines = suggestion_lines("hel", "lo world", Style(dim=True), 5)
        assert [line.text for line in lines] == ["hello", "world"]
        assert [span.text for span in lines[0].spans] == ["hel", "lo"]

    def test_cursor_screen_pos_clamps(self) -> None:
        content = Rect(2, 1, 5, 2)
        assert cursor_screen_pos(content, VisualPosition(0, 3), 0) == (5, 1)
        assert cursor_screen_pos(content, VisualPosition(9, 9), 0) == (6, 2)

    def test_render_places_prompt_and_text(self, theme: Theme) -> None:
        canvas = Canvas(20, 3)
        ti = TextInput("hi")
        outcome = InputBox(ti, theme).render(canvas, canvas.area)
        assert canvas.row_text(1).startswith("❯ hi")
        assert outcome.cursor_screen_pos == (4, 1)
        assert canvas.cursor == (4, 1)
        assert outcome.scrollbar is None

    def test_placeholder_when_empty(self, theme: Theme) -> None:
        canvas = Canvas(20, 3)
        InputBox(TextInput(placeholder="type here"), theme).render(canvas, canvas.area)
        assert "type here" in canvas.row_text(1)

    def test_follow_cursor_scrolls(self, theme: Theme) -> None:
        canvas = Canvas(8, 3)
        ti = TextInput("aaaa bbbb cccc")
        box = InputBox(ti, theme, follow_cursor=True, prompt="", prompt_gap=0, padding_top=0,
                       padding_bottom=0, show_scrollbar=True)
        outcome = box.render(canvas, Rect(0, 0, 8, 1))
        assert outcome.scroll_offset == 2
        assert canvas.row_text(0).startswith("cccc")
        assert outcome.scrollbar is not None

    def test_right_hint(self, theme: Theme) -> None:
        canvas = Canvas(20, 3)
        InputBox(TextInput("x"), theme, right_hint="3 sent").render(canvas, canvas.area)
        assert canvas.row_text(1).endswith("3 sent")

    def test_empty_area(self, theme: Theme) -> None:
        canvas = Canvas(20, 3)
        outcome = InputBox(TextInput("x"), theme, scroll_offset=4).render(canvas, Rect(0, 0, 0, 0))
        assert outcome.scroll_offset == 4
        assert canvas.cursor is None

    def test_search_bar_title(self, theme: Theme) -> None:
        canvas = Canvas(20, 3)
        render_search_bar(canvas, canvas.area, theme, TextInput(placeholder="Search"), "Find")
        assert canvas.row_text(0).startswith("Find")
        assert "Search" in canvas.row_text(1)
