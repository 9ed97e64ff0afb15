"""Typer CLI application: engine inspection commands and the interactive demo."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from terminal_kit.engine import compute_cursor_visual, compute_scrollbar, compute_viewport, compute_wrap
from terminal_kit.text.wrap import row_text, wrapped_row_ranges

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="terminal-kit",
        help="Inspect the terminal layout engine and run the widget demo.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.command()
    def wrap(
        text: Annotated[str, typer.Argument(help="Text to wrap (use $'a\\nb' for newlines)")],
        width: Annotated[int, typer.Option("--width", "-w", help="Row width in cells")] = 20,
        break_chars: Annotated[Optional[str], typer.Option(
            "--break-chars", "-b", help="Characters a row may break after (default: / and @)",
        )] = None,
    ) -> None:
        """Show the visual rows of TEXT wrapped at --width."""
        if break_chars is None:
            rows = compute_wrap(text, width)
        else:
            rows = wrapped_row_ranges(text, width, frozenset(break_chars))

        table = Table(title=f"Wrapped at {width}")
        table.add_column("Row", justify="right", style="cyan")
        table.add_column("Bytes", justify="right")
        table.add_column("Text", style="bold")
        for i, row in enumerate(rows):
            table.add_row(str(i), f"{row[0]}..{row[1]}", repr(row_text(text, row)))
        console.print(table)

    @app.command()
    def cursor(
        text: Annotated[str, typer.Argument(help="Buffer text")],
        offset: Annotated[int, typer.Option("--offset", "-o", help="Cursor byte offset")] = 0,
        width: Annotated[int, typer.Option("--width", "-w", help="Row width in cells")] = 20,
    ) -> None:
        """Show the visual (row, column) of a byte-offset cursor."""
        pos = compute_cursor_visual(text, offset, width)
        console.print(f"[bold]Row:[/]    {pos.row}")
        console.print(f"[bold]Column:[/] {pos.col}")

    @app.command()
    def viewport(
        selected: Annotated[int, typer.Option("--selected", "-s", help="Selected row")],
        height: Annotated[int, typer.Option("--height", "-h", help="Visible rows")],
        offset: Annotated[int, typer.Option("--offset", "-o", help="Current scroll offset")] = 0,
        total: Annotated[Optional[int], typer.Option(
            "--total", "-t", help="Total rows, to list what is visible",
        )] = None,
    ) -> None:
        """Show the scroll offset that keeps --selected visible."""
        new_offset = compute_viewport(selected, height, offset)
        console.print(f"[bold]Offset:[/] {new_offset}")
        if total is not None:
            last = min(new_offset + max(1, height), total) - 1
            if last >= new_offset:
                console.print(f"[bold]Visible:[/] {new_offset}..{last}")
            else:
                console.print("[dim]Nothing visible[/]")

    @app.command()
    def scrollbar(
        track: Annotated[int, typer.Option("--track", help="Track height in rows")],
        visible: Annotated[int, typer.Option("--visible", help="Visible content rows")],
        total: Annotated[int, typer.Option("--total", help="Total content rows")],
        offset: Annotated[int, typer.Option("--offset", help="Scroll offset")] = 0,
    ) -> None:
        """Show scrollbar thumb geometry."""
        geom = compute_scrollbar(track, visible, total, offset)
        if geom is None:
            console.print("[yellow]No scrollbar: empty track, no content or nothing visible[/]")
            raise typer.Exit(1)

        table = Table(show_header=False)
        table.add_column(style="bold")
        table.add_column(justify="right")
        table.add_row("Thumb height", str(geom.thumb_height))
        table.add_row("Thumb top", str(geom.thumb_top))
        table.add_row("Max scroll", str(geom.max_scroll))
        console.print(table)
        bar = "".join(
            "█" if geom.thumb_top <= row < geom.thumb_top + geom.thumb_height else "│"
            for row in range(track)
        )
        console.print(f"[dim]{bar}[/]")

    @app.command()
    def demo(
        inline: Annotated[bool, typer.Option(
            "--inline", help="Draw below the prompt instead of full screen",
        )] = False,
        mouse: Annotated[bool, typer.Option("--mouse", "-m", help="Enable mouse reporting")] = False,
        log_file: Annotated[Optional[Path], typer.Option(
            "--log-file", help="Write debug logs to this file",
        )] = None,
    ) -> None:
        """Launch the interactive widget demo."""
        from terminal_kit.cli.demo import run_demo
        from terminal_kit.errors import ProgramError
        from terminal_kit.runtime.config import ProgramConfig

        if log_file is not None:
            logging.basicConfig(filename=log_file, level=logging.DEBUG, format=LOG_FORMAT)

        config = ProgramConfig.from_env("terminal-kit demo")
        if mouse:
            config = config.with_mouse()
        try:
            run_demo(inline=inline, config=config)
        except ProgramError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

    return app
