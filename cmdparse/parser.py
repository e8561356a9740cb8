"""
cmdparse dispatcher: walk the argument vector down the command tree.

CommandParser owns the root command, the global options (accepted at every
level), the program metadata used by help/version screens and a scratch
``data`` store shared by every action.

Resolution loop (per level)
1. separate options with the level's wrappers (its own options merged with
   the global ones): "order" when the command takes sub-commands or the
   environment sets POSIXLY_CORRECT, "permute" otherwise.
2. report (level, name) to the observer, if any.
3. leaf: check arity and run the action with the remaining tokens.
4. interior: consume the next token as a sub-command name (or fall back to
   the default sub-command) and descend.

Exception policy
- PROPAGATE (handle_exceptions=False): parse errors reach the caller.
- HELP (True): print the error and the help of the command reached so far on
  stderr, then exit with EXIT_USAGE.
- NO_HELP ("no-help"): same without the help screen.

Example
    parser = CommandParser(name="net", version="0.1.1", handle_exceptions=True)
    parser.add_command(HelpCommand())
    parser.parse()               # sys.argv[1:]
    parser.parse("ipaddr list")  # shell-like string
"""
import contextlib
import difflib
import os
import shlex
import sys
from collections.abc import Iterable
from enum import Enum

from rich.text import Text

from .commands import Command, HelpCommand
from .faults import *
from .faults import console as error_console
from .options import ArgparseWrapper, _split
from .utils import *


class ExceptionPolicy(Enum):
    """What parse() does with a ParseError raised while resolving or running a command."""
    PROPAGATE = "propagate"
    HELP = "help"
    NO_HELP = "no-help"

    @classmethod
    def normalize(cls, value, /):
        """
        accept the policy itself, a boolean (True -> HELP, False -> PROPAGATE)
        or one of the string values.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.HELP if value else cls.PROPAGATE
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown exception policy {value!r}") from None


class CommandParser:
    """
    Entry point of a command-driven program.

    Parameters (keyword-only)
    - name: program name (default: basename of sys.argv[0]).
    - version: str or sequence of ints (joined with dots when shown).
    - banner: text shown at the top of help and version screens.
    - handle_exceptions: False | True | "no-help" | ExceptionPolicy.
    - partial: allow unambiguous abbreviations of command names (inherited
      by every command that leaves it unset).
    - takes_commands: False turns the program into a single command; give the
      root an action in that case.
    - fancy / colorful: rendering flags for help, version and error screens.
    - environ: environment mapping consulted for POSIXLY_CORRECT (default os.environ).
    """

    def __init__(
            self,
            /,
            *,
            name=Unset,
            version="0.0.0",
            banner=None,
            handle_exceptions=False,
            partial=False,
            takes_commands=True,
            fancy=False,
            colorful=False,
            environ=Unset,
    ):
        self.name = coalesce(name, os.path.basename(sys.argv[0]))
        self.version = version
        self.banner = banner
        self.handle_exceptions = handle_exceptions
        self.fancy = fancy
        self.colorful = colorful
        self.environ = coalesce(environ, os.environ)
        self.data = {}
        self.global_options = ArgparseWrapper(title="global options")
        self._current = None
        self._root = Command(self.name, takes_commands=takes_commands, partial=partial)
        self._root._bind(self)

    @property
    def handle_exceptions(self):
        return self._policy

    @handle_exceptions.setter
    def handle_exceptions(self, value):
        self._policy = ExceptionPolicy.normalize(value)

    @property
    def root(self):
        """the top command; its name is the program name."""
        return self._root

    @property
    def options(self):
        """options of the top command (accepted only before the first command name)."""
        return self._root.options

    @options.setter
    def options(self, value):
        self._root.options = value

    @property
    def current_command(self):
        """the command being resolved while parse() runs, None otherwise."""
        return self._current

    def add_command(self, command, /, default=False):
        """attach ``command`` to the top command (see Command.add_command)."""
        return self._root.add_command(command, default=default)

    def parse(self, argv=Unset, /, observer=None):
        """
        Resolve ``argv`` against the command tree and run the selected leaf.

        argv
        - Unset: sys.argv[1:].
        - str: split with shell-like rules (shlex).
        - iterable of str: used as-is.

        observer
        - optional callable(level, name) called at every level after options
          were separated (the top command is level 0).

        Returns the value returned by the leaf's action.
        """
        tokens = self._tokenize(argv)
        try:
            return self._resolve(tokens, observer)
        except TakesNoCommandError:
            raise
        except ParseError as error:
            if self._policy is ExceptionPolicy.PROPAGATE:
                raise
            trigger(
                error,
                tool=self,
                handle=True,
                help=self._helper() if self._policy is ExceptionPolicy.HELP else None,
                fancy=self.fancy,
                colorful=self.colorful,
            )
        except KeyboardInterrupt:
            if self._policy is ExceptionPolicy.PROPAGATE:
                raise
            error_console.print(Text("Aborted by user.", "bold yellow" if self.colorful else ""))
            sys.exit(EXIT_INTERRUPTED)
        except BrokenPipeError:
            if self._policy is ExceptionPolicy.PROPAGATE:
                raise
            # further writes to the closed pipe would fail again at interpreter exit
            with contextlib.suppress(OSError, ValueError):
                devnull = os.open(os.devnull, os.O_WRONLY)
                try:
                    os.dup2(devnull, sys.stdout.fileno())
                finally:
                    os.close(devnull)
        finally:
            self._current = None

    def _tokenize(self, argv):
        if argv is Unset:
            return sys.argv[1:]
        if isinstance(argv, str):
            return shlex.split(argv)
        if not isinstance(argv, Iterable):
            raise TypeError("parse() argument must be a string or an iterable of strings")
        tokens = list(argv)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("parse() argument must be a string or an iterable of strings")
        return tokens

    def _resolve(self, tokens, observer):
        command, level = self._root, 0
        posixly = "POSIXLY_CORRECT" in self.environ
        while True:
            self._current = command
            options = command.options.merge(self.global_options)
            if command.takes_commands:
                tokens = options.order(tokens)
            elif posixly:
                # a leaf is the last level: everything after the terminator is an argument
                head, tail, _ = _split(tokens)
                tokens = options.order(head) + tail
            else:
                tokens = options.permute(tokens)

            if observer is not None:
                observer(level, command.name)

            if not command.takes_commands:
                return command.invoke(tokens)

            if tokens:
                name, tokens = tokens[0], tokens[1:]
            elif command.default_command is not None:
                name = command.default_command
            else:
                raise NoCommandGivenError(hint=self._hint(command))

            if (child := command.lookup(name)) is None:
                raise InvalidCommandError(name, hint=self._hint(command, name))
            command, level = child, level + 1

    def _hint(self, command, name=None):
        route = " ".join([self.name, "help", *(node.name for node in command.path)])
        if not isinstance(self._root.children.get("help"), HelpCommand):
            route = " ".join([self.name, *(node.name for node in command.path), "--help"])
        if name is not None:
            if candidates := [
                candidate for candidate in command.children if candidate.startswith(name)
            ] or difflib.get_close_matches(name, list(command.children), 3):
                return "did you mean %s? you can also run '%s' to see available commands" % (
                    " or ".join(map(repr, candidates)), route
                )
        return "run '%s' to see available commands" % route

    def _helper(self):
        command = self._current or self._root
        help = self._root.children.get("help")

        def helper():
            if isinstance(help, HelpCommand):
                help.show([node.name for node in command.path], stderr=True)
            else:
                command.show_help(stderr=True)

        return helper

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, version={self.version!r})"


__all__ = (
    "ExceptionPolicy",
    "CommandParser",
)
