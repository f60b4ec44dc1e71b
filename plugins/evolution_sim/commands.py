"""
Command Interpreter

Parses one line of user input and runs it against a Session.

Commands (full name or single-letter alias):
  p, pause              Pause / resume the simulation
  r, reset [a=N ...]    Start a new simulation, optionally overriding config
  t, train [N]          Fast-forward N generations (default 1)

Square brackets in the help text mark optional parts; typing them is an
error with a hint rather than a parse failure.
"""

from .config import build_config
from .errors import (
    SyntaxGuardError, UnknownCommandError, ArityError,
    InvalidValueError,
)


BRACKETS_HINT = (
    "square brackets are just for documentation purposes - you don't have "
    "to write them, e.g.: reset animals=100"
)

ERROR_PREFIX = "  ^ err: "
ECHO_PREFIX = "$ "


class CommandInterpreter:
    """Runs text commands against a shared Session.

    Only `train` writes to the terminal; everything else reports through
    CommandError.
    """

    def __init__(self, session, terminal):
        self.session = session
        self.terminal = terminal
        self.commands = {
            "p": self.exec_pause,
            "pause": self.exec_pause,
            "r": self.exec_reset,
            "reset": self.exec_reset,
            "t": self.exec_train,
            "train": self.exec_train,
        }

    def handle_input(self, line):
        """Input-boundary callback: echo the line, run it, print any error."""
        self.terminal.println("")
        self.terminal.println(ECHO_PREFIX + line)

        # Nothing a command raises may end the session, engine faults included
        try:
            self.execute(line)
        except Exception as err:
            self.terminal.println(f"{ERROR_PREFIX}{err}")

    def execute(self, line):
        if "[" in line or "]" in line:
            raise SyntaxGuardError(BRACKETS_HINT)

        tokens = line.split()
        cmd, args = (tokens[0], tokens[1:]) if tokens else ("", [])

        handler = self.commands.get(cmd)
        if handler is None:
            raise UnknownCommandError("unknown command")
        handler(args)

    def exec_pause(self, args):
        if args:
            raise ArityError("this command accepts no parameters")
        self.session.toggle_pause()

    def exec_reset(self, args):
        # Overrides land in a local copy; the session only sees the
        # finished config, and only if the engine accepts it.
        config = build_config(self.session.default_config(), args)
        self.session.reset(config)

    def exec_train(self, args):
        if len(args) > 1:
            raise ArityError("this command accepts at most one parameter")

        if args:
            try:
                generations = int(args[0])
            except ValueError:
                raise InvalidValueError(
                    f"expected a number of generations, got: {args[0]!r}") from None
        else:
            generations = 1

        for i in range(generations):
            if i > 0:
                self.terminal.println("")
            self.terminal.println(self.session.simulation.train())
