"""Mention-style path display: absolute paths under a base directory shown as "@relative/path"."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from rich.style import Style

from terminal_kit.render.styled import Span

# Characters that end a path embedded in prose
PATH_BOUNDARY_CHARS = frozenset("\"',;)]}")


class PathFormatter(Protocol):
    def format_for_display(self, path: str) -> str:
        ...

    def transform_text(self, text: str, base_style: Style) -> list[Span]:
        ...


@dataclass(frozen=True)
class PathDisplayConfig:
    """How mentioned paths are displayed."""
    prefix: str = "@"
    show_relative: bool = True
    bold: bool = False
    color: Optional[str] = None
    base_dir: Optional[Path] = None


class MentionPathFormatter:
    """
    Rewrites paths under the base directory for display.

    The base directory defaults to the current working directory. Paths
    are made relative to it when show_relative is set, and every
    displayed path gets the configured prefix.
    """

    def __init__(self, config: Optional[PathDisplayConfig] = None):
        self.config = config or PathDisplayConfig()

    @property
    def base_dir(self) -> Path:
        if self.config.base_dir is not None:
            return self.config.base_dir
        try:
            return Path.cwd()
        except OSError:
            return Path(".")

    def to_relative_path(self, path: str) -> str:
        """Path relative to the base directory, or path unchanged when it lies elsewhere."""
        target = Path(path)
        base = self.base_dir
        try:
            return str(target.relative_to(base))
        except ValueError:
            pass
        try:
            return str(target.resolve(strict=True).relative_to(base.resolve(strict=True)))
        except (OSError, ValueError):
            return path

    def format_for_display(self, path: str) -> str:
        shown = self.to_relative_path(path) if self.config.show_relative else path
        return f"{self.config.prefix}{shown}"

    def path_style(self, base_style: Style) -> Style:
        style = base_style
        if self.config.bold:
            style += Style(bold=True)
        if self.config.color:
            style += Style(color=self.config.color)
        return style

    def _next_segment(self, text: str, base: str) -> Optional[tuple[int, int, int]]:
        """(end of preceding text, path start, path end) of the next mentioned path."""
        pos = text.find(base)
        if pos == -1:
            return None
        # an "@" already in front of the path is replaced by the prefix
        before_end = pos - 1 if pos > 0 and text[pos - 1] == "@" else pos
        end = pos
        while end < len(text) and not (text[end].isspace() or text[end] in PATH_BOUNDARY_CHARS):
            end += 1
        return before_end, pos, end

    def transform_text(self, text: str, base_style: Style) -> list[Span]:
        """Split text into spans, replacing each path under the base directory with its display form."""
        base = str(self.base_dir)
        spans: list[Span] = []
        remaining = text
        while base:
            found = self._next_segment(remaining, base)
            if found is None:
                break
            before_end, start, end = found
            if before_end > 0:
                spans.append(Span(remaining[:before_end], base_style))
            spans.append(Span(self.format_for_display(remaining[start:end]), self.path_style(base_style)))
            remaining = remaining[end:]
        if remaining:
            spans.append(Span(remaining, base_style))
        return spans
