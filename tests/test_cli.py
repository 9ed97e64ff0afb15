"""Tests for the typer CLI."""

import pytest
from typer.testing import CliRunner

from terminal_kit.cli.app import create_app
from terminal_kit.errors import ProgramError

runner = CliRunner()


@pytest.fixture
def app():
    return create_app()


class TestInspectCommands:

    def test_help(self, app) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for name in ("wrap", "cursor", "viewport", "scrollbar", "demo"):
            assert name in result.output

    def test_wrap(self, app) -> None:
        result = runner.invoke(app, ["wrap", "hello world", "-w", "5"])
        assert result.exit_code == 0
        assert "'hello'" in result.output
        assert "'world'" in result.output
        assert "6..11" in result.output

    def test_wrap_custom_break_chars(self, app) -> None:
        result = runner.invoke(app, ["wrap", "ab-cd", "-w", "4", "-b", "-"])
        assert result.exit_code == 0
        assert "'ab-'" in result.output

    def test_cursor(self, app) -> None:
        result = runner.invoke(app, ["cursor", "hello world", "-o", "11", "-w", "5"])
        assert result.exit_code == 0
        assert "Row:    1" in result.output
        assert "Column: 5" in result.output

    def test_viewport(self, app) -> None:
        result = runner.invoke(app, ["viewport", "-s", "12", "-h", "5", "-t", "20"])
        assert result.exit_code == 0
        assert "Offset: 8" in result.output
        assert "Visible: 8..12" in result.output

    def test_viewport_nothing_visible(self, app) -> None:
        result = runner.invoke(app, ["viewport", "-s", "0", "-h", "5", "-t", "0"])
        assert "Nothing visible" in result.output

    def test_scrollbar(self, app) -> None:
        result = runner.invoke(
            app, ["scrollbar", "--track", "10", "--visible", "5", "--total", "20", "--offset", "5"]
        )
        assert result.exit_code == 0
        assert "Thumb height" in result.output
        assert "││██││││││" in result.output

    def test_scrollbar_empty_track(self, app) -> None:
        result = runner.invoke(app, ["scrollbar", "--track", "0", "--visible", "5", "--total", "20"])
        assert result.exit_code == 1
        assert "No scrollbar" in result.output


class TestDemoCommand:

    @pytest.fixture
    def calls(self, monkeypatch: pytest.MonkeyPatch) -> list:
        calls = []
        monkeypatch.delenv("TERMINAL_KIT_MOUSE", raising=False)
        monkeypatch.delenv("TERMINAL_KIT_INLINE", raising=False)
        monkeypatch.setenv("TERMINAL_KIT_TICK_MS", "50")
        monkeypatch.setattr(
            "terminal_kit.cli.demo.run_demo",
            lambda inline=False, config=None: calls.append((inline, config)),
        )
        return calls

    def test_passes_flags(self, app, calls: list) -> None:
        result = runner.invoke(app, ["demo", "--inline", "--mouse"])
        assert result.exit_code == 0
        inline, config = calls[0]
        assert inline
        assert config.mouse
        assert config.tick_rate == 0.05

    def test_program_error_exits(self, app, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail(inline=False, config=None):
            raise ProgramError("Terminal I/O failed: no tty")

        monkeypatch.setattr("terminal_kit.cli.demo.run_demo", fail)
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 1
        assert "no tty" in result.output
