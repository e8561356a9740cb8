"""
cmdparse command layer: build command trees and run their leaves.

What this module provides
- Command: one node of the command tree.
  • Interior nodes (takes_commands=True) hold sub-commands in a PrefixMap and
    may name a default sub-command used when no further token is given.
  • Leaves (takes_commands=False) declare an arity (minimum positional count,
    plus whether extra arguments are accepted) and run an action.
  • Every node owns an option wrapper (see cmdparse.options).
  • Usage lines and help screens are assembled by walking up the tree.
- command(...): create a leaf Command from a callable (decorator friendly).
- HelpCommand / VersionCommand: ready-made leaves that also register the
  -h/--help and --version/-v switches on the parser's global options.

Quick start
    from cmdparse import CommandParser, Command, HelpCommand

    parser = CommandParser(name="net", version="0.1.1")
    parser.add_command(HelpCommand())

    ipaddr = Command("ipaddr", descr="Manage IP addresses")
    parser.add_command(ipaddr, default=True)

    @ipaddr.command("add", takes_commands=False, variadic=True, descr="Add an IP address")
    def add(*ips):
        parser.data.setdefault("ipaddrs", []).extend(ips)

    parser.parse(["ipaddr", "add", "1.2.3.4"])

Design notes
- Arity is declared, never inferred from the action's signature.
- The parent link is a weak reference; the root's parent is its CommandParser.
- Partial (abbreviated) sub-command matching is a per-node flag inherited by
  descendants that leave it unset.
"""
import argparse
import functools
import itertools
import operator
import re
import sys
import weakref
from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import NamedTuple

from rich.console import Console, Group
from rich.padding import Padding
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .faults import *
from .faults import console as error_console
from .mapping import PrefixMap
from .options import ParserWrapper, ArgparseWrapper
from .utils import *

console = Console()


class Arity(NamedTuple):
    """positional contract of a leaf: ``minimum`` required values, ``variadic`` extras."""
    minimum: int
    variadic: bool


class CommandType(type):
    """
    Metaclass for Command classes.

    Responsibilities
    - Derive a human-friendly __typename__ from the class name (camel-case split
      with hyphens) for error messages ("help-command 'name' must be a string").
    - Expose every name listed in __introspectable__ as a read-only property
      mirroring the private "_{name}" field.
    - Provide stable __repr__/__rich_repr__ driven by __displayable__ (or
      __introspectable__ when unset).
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _process_strings(cls, metadata):
    """
    Normalize scalar string metadata (name, descr).

    - name: required, trimmed, non-empty, no whitespace inside.
    - descr: str | Text | Unset; trimmed; empty strings rejected; Unset -> None.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not (name := name.strip()) or re.search(r"\s", name):
        raise ValueError(f"{cls.__typename__} 'name' must be a non-empty word")
    metadata["name"] = name

    if not isinstance(object := metadata["descr"], str | Text | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    elif isinstance(object, str) and not (object := object.strip()):
        raise ValueError(f"{cls.__typename__} 'descr' cannot be empty")
    metadata["descr"] = coalesce(object)


def _process_iterables(cls, metadata):
    """
    Normalize collection metadata (long_descr, arguments).

    - long_descr: a string (one paragraph, split on newlines) or an iterable of
      lines; stored as a tuple of lines.
    - arguments: mapping NAME -> description, order preserved.
    """
    object = metadata["long_descr"]
    if isinstance(object, str | Text):
        object = str(object).splitlines()
    if not isinstance(object, Iterable):
        raise TypeError(f"{cls.__typename__} 'long_descr' must be a string or an iterable of strings")
    lines = []
    for line in object:
        if not isinstance(line, str | Text):
            raise TypeError(f"{cls.__typename__} 'long_descr' must be an iterable of strings")
        lines.append(line)
    metadata["long_descr"] = tuple(lines)

    if not isinstance(object := metadata["arguments"], Mapping):
        raise TypeError(f"{cls.__typename__} 'arguments' must be a mapping")
    arguments = {}
    for name, descr in object.items():
        if not isinstance(name, str) or not name.strip():
            raise TypeError(f"{cls.__typename__} 'arguments' names must be non-empty strings")
        if not isinstance(descr, str | Text):
            raise TypeError(f"{cls.__typename__} 'arguments' descriptions must be strings")
        arguments[name.strip()] = descr
    metadata["arguments"] = arguments


def _process_arity(cls, minimum, variadic):
    if isinstance(minimum, bool) or not isinstance(minimum, int):
        raise TypeError(f"{cls.__typename__} 'minimum' must be an integer")
    elif minimum < 0:
        raise ValueError(f"{cls.__typename__} 'minimum' must be zero or positive")
    if not isinstance(variadic, bool):
        raise TypeError(f"{cls.__typename__} 'variadic' must be a boolean")
    return Arity(minimum, variadic)


class Command(metaclass=CommandType):
    """
    A node of the command tree.

    Parameters
    - name: str
      Identifier, unique among siblings.
    - takes_commands: bool (keyword-only, default True)
      Whether the node accepts sub-commands. Leaves run an action instead.
    - partial: bool | Unset
      Allow unambiguous abbreviations of sub-command names. Unset inherits
      the parent's setting (False at the top).
    - minimum, variadic: arity for leaves (see Command.invoke).
    - descr: one-line description; long_descr: string or lines.
    - arguments: mapping NAME -> description of positional arguments.
    - options: option wrapper; an empty ArgparseWrapper when omitted.

    Lifecycle
    - Nodes are created during program setup and attached exactly once with
      add_command(); children are never removed or re-parented.
    """

    __introspectable__ = (
        "name",
        "descr",
        "long_descr",
        "arguments",
        "minimum",
        "variadic",
        "default_command",
    )

    __displayable__ = (
        "name",
        "descr",
        "takes_commands",
        "partial",
        "arity",
        "default_command",
        "children",
    )

    def __init__(
            self,
            name,
            /,
            *,
            takes_commands=True,
            partial=Unset,
            minimum=0,
            variadic=False,
            descr=Unset,
            long_descr=(),
            arguments={},
            options=Unset,
    ):
        metadata = {
            "name": name,
            "descr": descr,
            "long_descr": long_descr,
            "arguments": arguments,
        }
        _process_strings(type(self), metadata)
        _process_iterables(type(self), metadata)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)

        if not isinstance(takes_commands, bool):
            raise TypeError(f"{type(self).__typename__} 'takes_commands' must be a boolean")
        if not isinstance(partial, bool | Unset):
            raise TypeError(f"{type(self).__typename__} 'partial' must be a boolean")
        self._minimum, self._variadic = _process_arity(type(self), minimum, variadic)
        self._takes_commands = takes_commands
        self._partial = partial
        self._children = PrefixMap()
        self._default_command = None
        self._parent = None
        self._action = Unset
        self.options = coalesce(options, ArgparseWrapper())

    # ── Tree ──────────────────────────────────────────────────────────────────

    @property
    def parent(self):
        """
        The owning Command, the owning CommandParser (for the root), or None while detached.
        """
        return self._parent() if self._parent is not None else None

    @property
    def children(self):
        """Sub-commands by name (PrefixMap). Mutate only through add_command()."""
        return self._children

    @property
    def root(self):
        """
        Return the topmost command of this hierarchy.
        """
        child, parent = self, self.parent
        while isinstance(parent, Command):
            child, parent = parent, parent.parent
        return child

    @property
    def path(self):
        """
        Commands from the top of the tree down to this one, excluding the root.

        The root stands for the program itself, so ``root.path == ()`` and for
        ``net ipaddr add`` the path of ``add`` is (ipaddr, add). The names of the
        path are exactly the tokens that reach this command from the root.
        """
        path = []
        command = self
        while isinstance(command.parent, Command):
            path.append(command)
            command = command.parent
        return tuple(reversed(path))

    @property
    def parser(self):
        """
        The CommandParser owning this tree, or None while detached.
        """
        parent = self.root.parent
        return parent if parent is not None and not isinstance(parent, Command) else None

    @property
    def data(self):
        """The owning parser's scratch store (None while detached)."""
        return getattr(self.parser, "data", None)

    @property
    def takes_commands(self):
        return self._takes_commands

    @takes_commands.setter
    def takes_commands(self, value):
        if not isinstance(value, bool):
            raise TypeError(f"{type(self).__typename__} 'takes_commands' must be a boolean")
        if not value and self._children:
            raise ValueError(
                f"{type(self).__typename__} {self.name!r} already has sub-commands, it cannot become a leaf"
            )
        self._takes_commands = value

    @property
    def partial(self):
        """
        Whether sub-command names may be abbreviated (inherited when unset).
        """
        if self._partial is not Unset:
            return self._partial
        parent = self.parent
        return parent.partial if isinstance(parent, Command) else False

    @partial.setter
    def partial(self, value):
        if not isinstance(value, bool | Unset):
            raise TypeError(f"{type(self).__typename__} 'partial' must be a boolean")
        self._partial = value

    @property
    def options(self):
        return self._options

    @options.setter
    def options(self, value):
        if not isinstance(value, ParserWrapper):
            raise TypeError(f"{type(self).__typename__} 'options' must be an option wrapper")
        self._options = value

    @property
    def arity(self):
        return Arity(self._minimum, self._variadic)

    def set_arity(self, minimum, /, variadic=False):
        """
        Declare the positional contract of this leaf.

        - minimum: number of required positional arguments (>= 0).
        - variadic: accept any number of extra arguments after the minimum.
        """
        self._minimum, self._variadic = _process_arity(type(self), minimum, variadic)

    def _bind(self, parent):
        if self._parent is not None:
            raise ValueError(f"{type(self).__typename__} {self.name!r} is already attached")
        self._parent = weakref.ref(parent)

    def add_command(self, command, /, default=False):
        """
        Attach ``command`` as a sub-command.

        Rules
        - Raises TakesNoCommandError when this command is a leaf.
        - Names must be unique among siblings (ValueError otherwise).
        - default=True makes it the default sub-command; a later default
          replaces an earlier one.

        Returns the attached command.
        """
        if not isinstance(command, Command):
            raise TypeError(f"{type(self).__typename__} sub-command must be a command")
        if not self.takes_commands:
            raise TakesNoCommandError(self.name)
        if command.name in self._children:
            typeof = "subcommand" if isinstance(self.parent, Command) else "command"
            raise ValueError(f"{type(self).__typename__} {typeof} name {command.name!r} is already in use")
        command._bind(self)
        self._children.insert(command.name, command)
        if default:
            self._default_command = command.name
        command.attached()
        if self.parser is not None:
            # the subtree joined a parser; its nodes were attached while detached
            for node in command._descendants():
                node.attached()
        return command

    def _descendants(self):
        for child in self._children.values():
            yield child
            yield from child._descendants()

    def attached(self):
        """
        Hook called right after this command was added to a parent.

        Descendants of a command are notified again when their subtree is
        attached to a tree owned by a CommandParser, so ``self.parser`` is
        reachable by the time a command has been notified for the last time.
        """

    def command(self, source=Unset, /, *, default=False, **kwargs):
        """
        Create a leaf sub-command from a callable and attach it.

        Forms
        - @node.command                      (name taken from the function)
        - @node.command("add", variadic=True)
        - node.command(callback, name="add")

        Keyword arguments are forwarded to Command (takes_commands defaults to
        False here). Returns the new Command, or a decorator producing it.
        """
        def wrapper(callback, /):
            return self.add_command(command(callback, **kwargs), default=default)

        if isinstance(source, str):
            kwargs["name"] = source
            return rename(wrapper, "command")
        if source is Unset:
            return rename(wrapper, "command")
        return wrapper(source)

    def lookup(self, name, /):
        """
        Resolve a token to a sub-command: exact name first, then (when partial
        matching is on) a unique prefix. Returns None when nothing matches.
        """
        if self.partial:
            return self._children.lookup(name)
        return self._children.get(name)

    def __lt__(self, other):
        if not isinstance(other, Command):
            return NotImplemented
        return self.name < other.name

    # ── Execution ─────────────────────────────────────────────────────────────

    def action(self, callback=Unset, /, *, minimum=Unset, variadic=Unset):
        """
        Install the callable run by execute(); usable as a decorator.

        The callable receives the accepted positional arguments spread out
        (``callback(*args)``). ``minimum``/``variadic`` re-declare the arity.
        """
        def wrapper(callback, /):
            if not callable(callback):
                raise TypeError(f"{type(self).__typename__} action must be callable")
            self.set_arity(coalesce(minimum, self._minimum), coalesce(variadic, self._variadic))
            self._action = callback
            return callback

        return wrapper(callback) if callback is not Unset else rename(wrapper, "action")

    def invoke(self, arguments, /):
        """
        Check the arity against ``arguments`` and run execute() with them.

        - fewer than minimum -> NotEnoughArgumentsError
        - more than minimum on a non-variadic leaf -> TooManyArgumentsError
        """
        arguments = list(arguments)
        if len(arguments) < self._minimum:
            raise NotEnoughArgumentsError(
                "%s expects %d, got %d" % (self.name, self._minimum, len(arguments)),
                hint="run '%s' for the expected usage" % self._helpline(),
            )
        if not self._variadic and len(arguments) > self._minimum:
            raise TooManyArgumentsError(
                "%s expects %d, got %d" % (self.name, self._minimum, len(arguments)),
                hint="remove %s or run '%s' for the expected usage" % (
                    " ".join(arguments[self._minimum:]), self._helpline()
                ),
            )
        return self.execute(*arguments)

    def execute(self, *arguments):
        """
        Run the action. Subclasses may override this instead of installing one.
        """
        if self._action is Unset:
            raise NotImplementedError(f"{type(self).__typename__} {self.name!r} has no action")
        return self._action(*arguments)

    # ── Rendering ─────────────────────────────────────────────────────────────

    def _helpline(self):
        parser = self.parser
        prog = getattr(parser, "name", self.root.name)
        help = self.root.children.get("help") if self.root.takes_commands else None
        if isinstance(help, HelpCommand):
            return " ".join([prog, "help", *(command.name for command in self.path)])
        return " ".join([prog, *(command.name for command in self.path), "--help"])

    def _usage_arguments(self):
        names = list(self._arguments)
        parts = [names[index] if index < len(names) else "ARG" for index in range(self._minimum)]
        if self._variadic:
            parts.append("[%s...]" % (names[self._minimum] if len(names) > self._minimum else "ARG"))
        return " ".join(parts)

    @property
    def usage(self):
        """
        Usage line, e.g. ``Usage: net [options] ipaddr COMMAND [options]``.
        """
        parser = self.parser
        root = self.root
        parts = ["Usage:", getattr(parser, "name", root.name)]
        options = root.options.merge(getattr(parser, "global_options", None))
        if options.summarize():
            parts.append("[options]")
        for command in self.path:
            parts.append(command.name)
            if command.options.summarize():
                parts.append("[options]")
        if self.takes_commands:
            parts.extend(("COMMAND", "[options]"))
        elif arguments := self._usage_arguments():
            parts.append(arguments)
        return " ".join(parts)

    def show_help(self, *, stderr=False):
        """
        Render this command's help screen.

        Sections (each only when non-empty)
        - banner, usage, short description, long description (indented)
        - available commands (recursive, sorted, default marked)
        - arguments, local options, global options

        Palette keys
        - banner-section, usage-section, description-section, long-description-section
        - group-label, children, children-description, default-marker
        - argument-name, argument-description, options-section
        - panel-title

        Customization
        - Define a mapping named __styles__ in __main__ to override any palette entry.
        - When the parser is not colorful, styling is suppressed.
        """
        parser = self.parser
        colorful = bool(getattr(parser, "colorful", False))
        fancy = bool(getattr(parser, "fancy", False))
        styles = defaultdict(str, {
            # === Head sections ===
            "banner-section": "bold #FF4D94",  # MAGENTA-PINK → brand pop
            "usage-section": "bold #36C5F0",  # SKY-BLUE
            "description-section": "italic #A3A3A3",  # Neutral gray
            "long-description-section": "#9CA3AF",  # Muted gray

            # === Groups ===
            "group-label": "bold #FFFFFF",  # Pure white headers
            "children": "bold #00E6FF",  # CYAN sub-commands
            "children-description": "#9CA3AF",
            "default-marker": "italic #22C55E",  # GREEN default marker
            "argument-name": "bold #FFD600",  # AMBER for positionals
            "argument-description": "#9CA3AF",
            "options-section": "#D1D5DB",

            # === Fancy panel ===
            "panel-title": "bold #FF4D94",
        } | getattr(__import__("__main__"), "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            # Always a fresh Text; styles only apply when colorful
            if isinstance(fragment, Text):
                return fragment.copy() if colorful else Text(fragment.plain)
            return Text(str(fragment or ""), style if colorful else "")

        renders = []

        if banner := getattr(parser, "banner", None):
            renders.append(text(banner, styler("banner-section")))

        renders.append(text(self.usage, styler("usage-section")))

        if self.descr:
            renders.append(text(self.descr, styler("description-section")))

        if self._long_descr:
            renders.append(Padding(
                Text("\n").join(text(line, styler("long-description-section")) for line in self._long_descr),
                (0, 0, 0, 4),
            ))

        if self.takes_commands and self._children:
            table = Table.grid(padding=(0, 2))
            table.add_column(no_wrap=True)
            table.add_column()

            def rows(command, level):
                for child in sorted(command.children.values()):
                    descr = text(child.descr, styler("children-description"))
                    if child.name == command.default_command:
                        descr.append_text(text(" (default command)", styler("default-marker")))
                    table.add_row(Text("  " * level) + text(child.name, styler("children")), descr)
                    if child.takes_commands:
                        rows(child, level + 1)

            rows(self, 1)
            renders.append(Group(text("Available commands:", styler("group-label")), table))

        if self._arguments and not self.takes_commands:
            table = Table.grid(padding=(0, 2))
            table.add_column(no_wrap=True)
            table.add_column()
            for name, descr in self._arguments.items():
                table.add_row(
                    Text("  ") + text(name, styler("argument-name")),
                    text(descr, styler("argument-description")),
                )
            renders.append(Group(text("Arguments:", styler("group-label")), table))

        summaries = [self.options.summarize()]
        if parser is not None and parser.global_options is not self.options:
            summaries.append(parser.global_options.summarize())
        for summary in filter(None, summaries):
            renders.append(Text("\n").join(text(line, styler("options-section")) for line in summary))

        renderable = Group(*(
            Padding(render, (0, 0, 1 * (index < len(renders) - 1), 0)) for index, render in enumerate(renders)
        ))

        if fancy:
            renderable = Panel(
                renderable,
                title=Text.assemble(
                    "[", " ", " ".join(itertools.chain(
                        (getattr(parser, "name", self.root.name),),
                        (command.name for command in self.path),
                    )).upper() + " HELP", " ", "]", style=styler("panel-title"),
                ),
                title_align="left",
            )

        (error_console if stderr else console).print(renderable)


def command(source=Unset, /, **kwargs):
    """
    Create a leaf Command running a callable, or return a decorator building it.

    Forms
    - command(callback, name="stat", minimum=2)
    - @command                         (name taken from the function)
    - @command(name="stat", minimum=2)

    Defaults
    - name: the callable's __name__.
    - takes_commands: False.
    - descr: first line of the callable's docstring, if any.
    """
    @rename("command")
    def wrapper(source, /):
        if not callable(source):
            raise TypeError("@command() must be applied to a callable")
        doc = (getattr(source, "__doc__", None) or "").strip().splitlines()
        options = {"takes_commands": False} | kwargs
        if doc and "descr" not in options:
            options["descr"] = doc[0]
        node = Command(options.pop("name", getattr(source, "__name__", None)), **options)
        node.action(source)
        return node

    return wrapper(source) if source is not Unset else wrapper


class HelpCommand(Command):
    """
    Built-in ``help`` leaf.

    - ``help`` renders the root's help; ``help ipaddr add`` walks the tree by
      exact names and renders the help of the last command.
    - Registers -h/--help on the parser's global options: triggered anywhere,
      it shows the help of the command reached so far.
    - Both forms exit the process with status 0 after rendering.
    """

    def __init__(self):
        super().__init__(
            "help",
            takes_commands=False,
            variadic=True,
            descr="Provide help for individual commands",
            long_descr=(
                "This command prints the program help if no arguments are given. If one or",
                "more command names are given as arguments, these arguments are interpreted",
                "as a hierarchy of commands and the help for the right most command is shown.",
            ),
            arguments={"COMMAND": "The command(s) for which help should be shown"},
        )

    @property
    def usage(self):
        return "Usage: %s help [COMMAND SUBCOMMAND ...]" % getattr(self.parser, "name", self.root.name)

    def attached(self):
        parser = self.parser
        if parser is None or not isinstance(parser.global_options, ArgparseWrapper):
            return
        try:
            parser.global_options.on("-h", "--help", help="Show help")(self._switch)
        except argparse.ArgumentError:
            # the host already owns -h/--help
            pass

    def _switch(self):
        parser = self.parser
        current = getattr(parser, "current_command", None) or self.root
        self.execute(*(command.name for command in current.path))

    def resolve(self, names, /):
        """
        Walk the tree from the root by exact names; InvalidArgumentError on the
        first name that does not resolve.
        """
        names = list(names)
        command = self.root
        for index, name in enumerate(names):
            child = command.children.get(name) if command.takes_commands else None
            if child is None:
                raise InvalidArgumentError(
                    " ".join(names[index:]),
                    hint="run '%s help' to see available commands" % getattr(self.parser, "name", command.root.name),
                )
            command = child
        return command

    def show(self, names=(), /, *, stderr=False):
        self.resolve(names).show_help(stderr=stderr)

    def execute(self, *names):
        self.show(names)
        sys.exit(EXIT_SUCCESS)


class VersionCommand(Command):
    """
    Built-in ``version`` leaf: prints the banner (if any) and ``PROG VERSION``,
    then exits with status 0. Registers --version/-v on the global options.
    """

    def __init__(self):
        super().__init__("version", takes_commands=False, descr="Show the version of the program")

    @property
    def usage(self):
        return "Usage: %s version" % getattr(self.parser, "name", self.root.name)

    def attached(self):
        parser = self.parser
        if parser is None or not isinstance(parser.global_options, ArgparseWrapper):
            return
        try:
            parser.global_options.on("--version", "-v", help="Show the version of the program")(self.execute)
        except argparse.ArgumentError:
            # the host already owns --version/-v
            pass

    def show(self):
        """
        Render the version screen.

        Palette keys: banner-section, program-name, program-version, panel-title.
        """
        parser = self.parser
        colorful = bool(getattr(parser, "colorful", False))
        styles = defaultdict(str, {
            "banner-section": "bold #FF4D94",  # Magenta-pink brand pop
            "program-name": "bold #FF4D94",
            "program-version": "bold #00E6FF",  # Cyan version (clear contrast)
            "panel-title": "bold #FF4D94",
        } | getattr(__import__("__main__"), "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        version = getattr(parser, "version", None) or "0.0.0"
        if not isinstance(version, str | Text):
            version = ".".join(map(str, version))
        name = getattr(parser, "name", self.root.name)

        renders = []
        if banner := getattr(parser, "banner", None):
            renders.append(Text(str(banner), styler("banner-section")))
        renders.append(Text.assemble((name, styler("program-name")), " ", (str(version), styler("program-version"))))
        renderable = Group(*renders)

        if getattr(parser, "fancy", False):
            renderable = Panel(
                renderable,
                title=Text.assemble("[", " ", f"{name} VERSION".upper(), " ", "]", style=styler("panel-title")),
                title_align="left",
            )

        console.print(renderable)

    def execute(self):
        self.show()
        sys.exit(EXIT_SUCCESS)


__all__ = (
    "Arity",
    "Command",
    "HelpCommand",
    "VersionCommand",
    "command",
)
