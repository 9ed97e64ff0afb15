"""Reusable wizard steps."""

from terminal_kit.wizard.steps.summary import SummaryStep

__all__ = ["SummaryStep"]
