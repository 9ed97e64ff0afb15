"""Exceptions raised by the toolkit."""


class TerminalKitError(Exception):
    """Base class for toolkit errors."""


class ProgramError(TerminalKitError):
    """The runtime loop could not talk to the terminal."""


class WizardError(TerminalKitError):
    """Illegal wizard navigation, such as advancing past the last step."""
