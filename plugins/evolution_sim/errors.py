"""
Command Errors

Everything the command interpreter rejects is a CommandError; the input
handler prints it as a single "  ^ err: ..." line and the session keeps
running.
"""


class CommandError(Exception):
    """A command could not be executed. str(err) is shown to the user."""


class SyntaxGuardError(CommandError):
    """Input contains the square brackets used only in documentation."""


class UnknownCommandError(CommandError):
    """First token is not a recognized command."""


class ArityError(CommandError):
    """Wrong number of arguments for a command."""


class UnknownParameterError(CommandError):
    """Config field name is neither namespaced nor a known alias."""


class InvalidValueError(CommandError):
    """Argument value does not parse as the required number kind."""


class EngineConstructionError(CommandError):
    """Engine refused to build a simulation from the given config."""


class EngineLoadError(Exception):
    """Engine class could not be imported."""
