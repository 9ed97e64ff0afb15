"""Program configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

from terminal_kit.theme import Theme

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ExitKeys:
    """Keys that end the program before the model sees them."""
    esc: bool = True
    q: bool = True
    ctrl_c: bool = True

    @classmethod
    def ctrl_c_only(cls) -> ExitKeys:
        """For models that need Esc and q themselves, such as text entry."""
        return cls(esc=False, q=False, ctrl_c=True)


@dataclass(frozen=True)
class ProgramConfig:
    title: str = "terminal-kit"
    theme: Theme = field(default_factory=Theme.dark)
    tick_rate: float = 0.1  # seconds to wait for input before redrawing
    exit_keys: ExitKeys = field(default_factory=ExitKeys)
    mouse: bool = False
    inline: bool = False
    inline_height: int = 12

    def with_theme(self, theme: Theme) -> ProgramConfig:
        return replace(self, theme=theme)

    def with_tick_rate(self, seconds: float) -> ProgramConfig:
        return replace(self, tick_rate=max(0.0, seconds))

    def with_exit_keys(self, exit_keys: ExitKeys) -> ProgramConfig:
        return replace(self, exit_keys=exit_keys)

    def with_mouse(self, enabled: bool = True) -> ProgramConfig:
        return replace(self, mouse=enabled)

    def with_inline(self, inline: bool = True, height: Optional[int] = None) -> ProgramConfig:
        return replace(
            self,
            inline=inline,
            inline_height=self.inline_height if height is None else max(1, height),
        )

    @classmethod
    def from_env(
        cls,
        title: str = "terminal-kit",
        environ: Optional[Mapping[str, str]] = None,
    ) -> ProgramConfig:
        """
        Build a config from TERMINAL_KIT_* environment variables.

        TERMINAL_KIT_TICK_MS: input poll timeout in milliseconds
        TERMINAL_KIT_MOUSE: enable mouse reporting ("1", "true", "yes", "on")
        TERMINAL_KIT_INLINE: draw inline instead of on the alternate screen

        Malformed numbers raise ValueError.
        """
        env = os.environ if environ is None else environ
        config = cls(title=title)

        tick_ms = env.get("TERMINAL_KIT_TICK_MS")
        if tick_ms:
            config = config.with_tick_rate(int(tick_ms) / 1000)
        if env.get("TERMINAL_KIT_MOUSE", "").lower() in TRUE_VALUES:
            config = config.with_mouse()
        if env.get("TERMINAL_KIT_INLINE", "").lower() in TRUE_VALUES:
            config = config.with_inline()
        return config
