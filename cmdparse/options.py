"""
cmdparse option wrappers: the contract between the command tree and an option parser.

The command tree never parses flags itself. Every command owns a wrapper that
separates option tokens from the rest of the argument vector:

- order(tokens) -> remainder
  stop at the first non-option token and return the suffix starting there.
  recognized options are acted upon (their actions/callbacks run).
- permute(tokens) -> remainder
  act on options found anywhere and return only the non-option tokens, in
  their original relative order.
- summarize() -> list[str]
  human-readable option help, one line per entry.
- merge(base) -> wrapper
  a wrapper accepting both its own options and those of ``base`` (used to
  accept global options at every level of the command tree).

Errors raised by the underlying parser surface as InvalidOptionError.

Wrappers
- ParserWrapper: knows no options; rejects any option-looking token.
- ArgparseWrapper: backed by argparse.ArgumentParser. Parsed values land in
  ``wrapper.namespace``; ``@wrapper.on(...)`` registers a callback option.

Terminator
- "--" ends option processing. Tokens after it are never treated as options;
  the level whose separation reaches it consumes it.

Example
    >>> options = ArgparseWrapper()
    >>> @options.on("-a", "--all", help="Delete all IPs")
    ... def everything():
    ...     ...
    >>> options.permute(["1.2.3.4", "--all"])
    ['1.2.3.4']
"""
import argparse

from .faults import InvalidOptionError
from .utils import Unset, coalesce

_REST = "==rest=="


def _isoption(token):
    return token.startswith("-") and token != "-"


def _split(tokens):
    """
    split ``tokens`` at the first "--" into (head, tail, terminated).
    """
    tokens = list(tokens)
    try:
        index = tokens.index("--")
    except ValueError:
        return tokens, [], False
    return tokens[:index], tokens[index + 1:], True


class _Parser(argparse.ArgumentParser):
    """argument parser whose errors become InvalidOptionError instead of exiting."""

    def error(self, message):
        raise InvalidOptionError(message)


class Callback(argparse.Action):
    """
    argparse action that records the value and calls ``callback``.

    - nargs=0 (default): records True and calls callback().
    - otherwise: records the converted value(s) and calls callback(value).
    """

    def __init__(self, option_strings, dest, callback=None, nargs=0, default=Unset, **kwargs):
        if not callable(callback):
            raise TypeError("callback action 'callback' must be callable")
        super().__init__(option_strings, dest, nargs=nargs, default=coalesce(default, False if nargs == 0 else None), **kwargs)
        self.callback = callback

    def __call__(self, parser, namespace, values, option_string=None):
        if self.nargs == 0:
            setattr(namespace, self.dest, True)
            self.callback()
        else:
            setattr(namespace, self.dest, values)
            self.callback(values)


class ParserWrapper:
    """
    option wrapper for commands without options.

    any token that looks like an option (starts with '-', except a lone '-')
    and appears before the terminator is rejected with InvalidOptionError.
    """

    def order(self, tokens, /):
        head, tail, terminated = _split(tokens)
        if head and _isoption(head[0]):
            raise InvalidOptionError(head[0])
        if head:
            return head + (["--"] + tail if terminated else [])
        return tail

    def permute(self, tokens, /):
        head, tail, terminated = _split(tokens)
        for token in head:
            if _isoption(token):
                raise InvalidOptionError(token)
        return head + tail

    def summarize(self):
        return []

    def merge(self, base, /):
        """
        a wrapper without options of its own defers wholly to ``base``.

        wrappers that know options must override this method.
        """
        return self if base is None or base is self else base


class ArgparseWrapper(ParserWrapper):
    """
    option wrapper backed by argparse.

    parameters
    - instance: an argparse.ArgumentParser created with add_help=False; a
      fresh one is created when omitted (keyword arguments are forwarded).
    - title: heading used for this wrapper's options in summaries.

    notes
    - the wrapped parser is never given positional arguments; separation builds
      a throw-away parser on top of it (argparse parents) on every call.
    - parsed values accumulate in ``namespace`` across calls.
    """

    def __init__(self, instance=Unset, /, *, title="options", **kwargs):
        if instance is not Unset and not isinstance(instance, argparse.ArgumentParser):
            raise TypeError("argparse wrapper 'instance' must be an argument parser")
        self.instance = coalesce(instance, argparse.ArgumentParser(add_help=False, **kwargs))
        self.namespace = argparse.Namespace()
        self.title = title

    def add_argument(self, *args, **kwargs):
        return self.instance.add_argument(*args, **kwargs)

    def on(self, *names, help=None, metavar=None, type=None, nargs=0):
        """
        register a callback option; usable as a decorator.

            @options.on("-v", "--verbose", help="Be verbose")
            def verbose():
                ...
        """
        def wrapper(callback, /):
            self.instance.add_argument(
                *names,
                action=Callback,
                callback=callback,
                nargs=nargs,
                help=help,
                metavar=metavar,
                **({"type": type} if type is not None else {}),
            )
            return callback
        return wrapper

    def order(self, tokens, /):
        return _order((self,), tokens)

    def permute(self, tokens, /):
        return _permute((self,), tokens)

    def summarize(self):
        parser = _Parser(prog=self.instance.prog, add_help=False, usage=argparse.SUPPRESS, parents=[self.instance])
        parser._optionals.title = self.title
        return [line for line in parser.format_help().splitlines() if line.strip()]

    def merge(self, base, /):
        if not isinstance(base, ArgparseWrapper) or base is self:
            return self
        return _Merged((base, self))


class _Merged(ParserWrapper):
    """union of several argparse wrappers, each keeping its own namespace."""

    def __init__(self, wrappers):
        self.wrappers = tuple(wrappers)

    def order(self, tokens, /):
        return _order(self.wrappers, tokens)

    def permute(self, tokens, /):
        return _permute(self.wrappers, tokens)

    def summarize(self):
        return [line for wrapper in self.wrappers for line in wrapper.summarize()]

    def merge(self, base, /):
        if not isinstance(base, ArgparseWrapper) or base in self.wrappers:
            return self
        return _Merged((base, *self.wrappers))


def _build(wrappers, nargs):
    """
    assemble a throw-away parser from the wrappers plus a catch-all positional.
    """
    try:
        parser = _Parser(
            prog=wrappers[-1].instance.prog,
            add_help=False,
            allow_abbrev=all(wrapper.instance.allow_abbrev for wrapper in wrappers),
            parents=[wrapper.instance for wrapper in wrappers],
        )
    except argparse.ArgumentError as error:
        raise ValueError(f"conflicting options: {error}") from None
    parser.add_argument(_REST, nargs=nargs, help=argparse.SUPPRESS)
    return parser


def _parse(wrappers, tokens, nargs, method):
    namespace = argparse.Namespace()
    for wrapper in wrappers:
        vars(namespace).update(vars(wrapper.namespace))
    parser = _build(wrappers, nargs)
    try:
        result = getattr(parser, method)(tokens, namespace)
    except argparse.ArgumentError as error:
        raise InvalidOptionError(str(error)) from None
    for wrapper in wrappers:
        for action in wrapper.instance._actions:
            if action.dest is not argparse.SUPPRESS and hasattr(result, action.dest):
                setattr(wrapper.namespace, action.dest, getattr(result, action.dest))
    return list(getattr(result, _REST, None) or [])


def _order(wrappers, tokens):
    head, tail, terminated = _split(tokens)
    remainder = _parse(wrappers, head, argparse.REMAINDER, "parse_args")
    if remainder:
        return remainder + (["--"] + tail if terminated else [])
    return tail


def _permute(wrappers, tokens):
    head, tail, terminated = _split(tokens)
    return _parse(wrappers, head, "*", "parse_intermixed_args") + tail


__all__ = (
    "ParserWrapper",
    "ArgparseWrapper",
    "Callback",
)
