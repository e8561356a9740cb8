"""
cmdparse faults (parse errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing error.
  Codes are grouped by domain to keep copy consistent and make logs/searches
  predictable.
- ParseError: base type that carries a fixed reason, the offending value and
  runtime options, and knows how to render itself (rich) and how to surface
  itself (raise, or print and exit).
- trigger(): central entry point to surface any fault with runtime options.
- getdoc(): optional description lookup for a code from the host application.
- EXIT_*: process exit statuses used by the dispatcher.

Message contract
- str(fault) is "<Reason>: <value>" (e.g. "Invalid command: stat"), or just
  "<Reason>" for kinds that carry no value (NoCommandGivenError).

Integration
- The dispatcher raises faults at the point of detection; its top-level parse
  either lets them propagate or calls trigger(fault, handle=True, ...) which
  prints the report (optionally followed by contextual help) and exits with
  EXIT_USAGE.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)

EXIT_SUCCESS = 0
"""Clean exit, also used by the help and version screens."""

EXIT_USAGE = 64
"""The command line was used incorrectly (sysexits EX_USAGE)."""

EXIT_INTERRUPTED = 130
"""The user interrupted the program (128 + SIGINT)."""


class FaultCode(IntEnum):
    """
    canonical fault codes used across the cli (stable identifiers).

    grouping (by high-level domain)
    - routing (1110x)
      • INVALID_COMMAND, NO_COMMAND_GIVEN
    - options (1111x)
      • INVALID_OPTION
    - positionals (1112x)
      • INVALID_ARGUMENT, NOT_ENOUGH_ARGUMENTS, TOO_MANY_ARGUMENTS
    - setup (1113x)
      • TAKES_NO_COMMAND

    rationale
    - codes are discoverable (searchable in logs and docs) and normalized to a string
      via normalize() so hosts can remap them if desired.
    """
    # --- routing errors (11xxx) ---
    INVALID_COMMAND      = 11101
    NO_COMMAND_GIVEN     = 11102

    # --- option errors (11xxx) ---
    INVALID_OPTION       = 11111

    # --- positional errors (11xxx) ---
    INVALID_ARGUMENT     = 11121
    NOT_ENOUGH_ARGUMENTS = 11122
    TOO_MANY_ARGUMENTS   = 11123

    # --- setup errors (11xxx) ---
    TAKES_NO_COMMAND     = 11131

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParseError(Exception):
    """
    base class for all cmdparse errors.

    class attributes
    - reason: short, lowercased title of the fault kind.
    - valued: whether the fault carries an offending value in its message.
    - code: the FaultCode of the fault kind.
    - hint: default one-line hint (overridable per instance via options).

    runtime options (merged by trigger())
    - tool: the CommandParser reporting the fault (program name in headers).
    - handle: print and exit instead of raising.
    - help: optional callable rendering contextual help after the report.
    - fancy, colorful: rendering flags.
    """
    reason = "unknown error"
    valued = True
    code = None
    hint = None

    def __init__(self, message=Unset, /, **options):
        if not isinstance(message, str | Unset):
            message = str(message)
        self.message = message
        self.options = MappingProxyType(options)
        super().__init__(*(() if message is Unset else (message,)))

    def __str__(self):
        reason = self.reason[:1].upper() + self.reason[1:]
        if self.valued and self.message:
            return f"{reason}: {self.message}"
        return reason

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
            "docs": "#6B6F7A",  # slate footer for host docs
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", False)
        fancy = self.options.get("fancy", False)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        tool = self.options.get("tool")
        prog = text(getattr(main, "__prog__", getattr(tool, "name", None) or "error"), styler("prog-name"))

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(self.code.normalize() if self.code else "", styler("code")),
            " | ",
            text(self.reason.title(), styler("error-title")),
            " ]"
        )
        message = text(str(self), styler("error-message"))
        renders = [message]
        if hint := self.options.get("hint", self.hint):
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))
        if self.code and (docs := getdoc(self.code)):
            renders.append(text(docs, styler("docs")))

        if fancy:
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __trigger__(self):
        if not self.options.get("handle", False):
            raise self from None
        console.print(self)
        if callable(help := self.options.get("help")):
            help()
        sys.exit(EXIT_USAGE)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        clone = type(self)(self.message, **{**self.options, **overrides})
        clone.__traceback__ = self.__traceback__
        return clone


class InvalidCommandError(ParseError):
    """a token did not resolve to exactly one sub-command (no match or ambiguous prefix)."""
    reason = "invalid command"
    code = FaultCode.INVALID_COMMAND


class InvalidArgumentError(ParseError):
    """a positional argument failed command-specific validation."""
    reason = "invalid argument"
    code = FaultCode.INVALID_ARGUMENT


class InvalidOptionError(ParseError):
    """the option collaborator rejected a flag or its value."""
    reason = "invalid option"
    code = FaultCode.INVALID_OPTION


class NoCommandGivenError(ParseError):
    """a command-accepting node ran out of tokens and has no default command."""
    reason = "no command given"
    valued = False
    code = FaultCode.NO_COMMAND_GIVEN


class TakesNoCommandError(ParseError):
    """programming error: a sub-command was added to a command configured as a leaf."""
    reason = "this command takes no other commands"
    valued = False
    code = FaultCode.TAKES_NO_COMMAND


class NotEnoughArgumentsError(ParseError):
    reason = "not enough arguments"
    code = FaultCode.NOT_ENOUGH_ARGUMENTS


class TooManyArgumentsError(ParseError):
    reason = "too many arguments"
    code = FaultCode.TOO_MANY_ARGUMENTS


TakesNoChildrenError = TakesNoCommandError


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParseError).
    - options are merged into the fault via copy.replace(fault, **options) before triggering.
    - with handle=True the fault is printed on stderr (then help, then exit);
      otherwise the merged fault is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "ParseError",
    "InvalidCommandError",
    "InvalidArgumentError",
    "InvalidOptionError",
    "NoCommandGivenError",
    "TakesNoCommandError",
    "TakesNoChildrenError",
    "NotEnoughArgumentsError",
    "TooManyArgumentsError",
    "FaultCode",
    "EXIT_SUCCESS",
    "EXIT_USAGE",
    "EXIT_INTERRUPTED",
    "trigger",
    "getdoc",
)
