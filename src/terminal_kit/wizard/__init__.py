"""Multi-step wizard for creating and editing configuration items."""

from terminal_kit.wizard.framework import (
    ItemListView,
    StepAction,
    WizardFlow,
    WizardItem,
    WizardMode,
    WizardStep,
)
from terminal_kit.wizard.layout import input_step_layout, padded_list_layout
from terminal_kit.wizard.model import GenericWizardModel, GenericWizardMsg, ViewMode
from terminal_kit.wizard.steps import SummaryStep
from terminal_kit.wizard.text_step import SimpleTextStep
from terminal_kit.wizard.view import generic_wizard_view

__all__ = [
    "GenericWizardModel",
    "GenericWizardMsg",
    "ItemListView",
    "SimpleTextStep",
    "StepAction",
    "SummaryStep",
    "ViewMode",
    "WizardFlow",
    "WizardItem",
    "WizardMode",
    "WizardStep",
    "generic_wizard_view",
    "input_step_layout",
    "padded_list_layout",
]
