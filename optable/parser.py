"""
optable parser: option registry, token matcher and usage entry points.

What this module provides
- OptParser: register option definitions once (chainable builders), then
  match any number of token sequences against them.
  • add_argument(...) and the add_* convenience builders
  • choose_strict_style() / choose_free_style()
  • find_opt(name): registry lookup
  • parse_arguments(tokens) -> OptTable, or raises an OptionException
  • usage(brief) / usage_with_format(formatter) / usage_items()
- Style: how non-option tokens are treated (FREE collects, STRICT rejects).

Quick start
    from optable import OptParser

    parser = OptParser("tool")
    parser.add_optional_arg("t", "test", "test times", "TIMES") \\
          .add_optional_flag("v", "verbose", "talk more")

    table = parser.parse_arguments(["--test=20", "-v", "input.txt"])
    table.get_val("test")     # "20"
    table.get_flag("v")       # True
    table.free                # ("input.txt",)

Matching rules
- "-x..." (length > 1) is an option token; "--" ends option scanning and the
  remaining tokens become free arguments untouched.
- "--name[=value]" names one long option; "-abc" names the short options
  a, b and c in order (no inline '=' for short form).
- Value policy decides what is captured:
  • NONE: an inline value is an UnexpectedArgumentError.
  • OPTIONAL: inline value, else the next token unless it is absent or an
    option token (then Given).
  • REQUIRED: inline value, else the next token whatever it looks like; a
    missing one is an UnexpectedArgumentError.
- After the pass, occurrence policies are validated (see optable.table).

Design notes
- The registry is never mutated by parsing; each call builds fresh match
  states, so one built parser can serve concurrent parse calls.
- The first fault wins and aborts the call; nothing partial is returned.
"""
import os
import shlex
import warnings
from collections import deque
from collections.abc import Iterable
from enum import IntEnum

from .arguments import Argument, Value, Occurrence, Val, Given
from .faults import *
from .names import Name
from .table import Arg, OptTable
from .usage import UsageLines, default_format, render
from .utils import *


class Style(IntEnum):
    """How tokens that are not options are handled."""
    FREE = 0
    STRICT = 1


def _is_option(token, /):
    return token.startswith("-") and len(token) > 1


class OptParser:
    """
    Option registry and matcher.

    Lifecycle
    - Mutable phase: register definitions and pick a style (all builders
      return self for chaining).
    - Read-only phase: parse_arguments()/usage*() any number of times.

    Configuration
    - prog: program name shown in rendered faults; falls back to
      __main__.__prog__ and then "optable".
    - colorful/fancy: rich rendering options attached to every fault raised.
    """

    __introspectable__ = (
        "arguments",
        "style",
    )

    arguments = view("arguments")
    style = view("style")

    def __init__(self, prog=Unset, /, *, colorful=True, fancy=False):
        if not isinstance(prog, str | Unset):
            raise TypeError("OptParser() 'prog' must be a string")
        self._arguments = []
        self._style = Style.FREE
        self._options = {"colorful": bool(colorful), "fancy": bool(fancy)}
        if prog is not Unset:
            self._options["prog"] = prog

    @property
    def prog(self):
        return self._options.get("prog", getattr(__import__("__main__"), "__prog__", "optable"))

    # --- registration -----------------------------------------------------

    def add_argument(self, short, long, hint, desc, value, occurrence, /):
        """
        Register one option definition and return self.

        Raises
        - TypeError/ValueError for a malformed definition (see optable.arguments).
        - ValueError when a name is already used by another definition.
        """
        argument = Argument(short, long, hint, desc, value, occurrence)
        for existing in self._arguments:
            for name in argument.names:
                if existing.matches(name):
                    raise ValueError("option name %r is already in use" % name.spelling)
        self._arguments.append(argument)
        return self

    def add_multi_arg(self, short, long, desc, hint, /):
        """Value required, any number of occurrences."""
        return self.add_argument(short, long, hint, desc, Value.REQUIRED, Occurrence.ANY)

    def add_necessary_arg(self, short, long, desc, hint, /):
        """Value required, exactly one occurrence."""
        return self.add_argument(short, long, hint, desc, Value.REQUIRED, Occurrence.EXACTLY_ONE)

    def add_optional_arg(self, short, long, desc, hint, /):
        """Value required, at most one occurrence."""
        return self.add_argument(short, long, hint, desc, Value.REQUIRED, Occurrence.AT_MOST_ONE)

    def add_maybe_arg(self, short, long, desc, hint, /):
        """Value optional, at most one occurrence."""
        return self.add_argument(short, long, hint, desc, Value.OPTIONAL, Occurrence.AT_MOST_ONE)

    def add_necessary_flag(self, short, long, desc, /):
        """No value, exactly one occurrence."""
        return self.add_argument(short, long, "", desc, Value.NONE, Occurrence.EXACTLY_ONE)

    def add_optional_flag(self, short, long, desc, /):
        """No value, at most one occurrence."""
        return self.add_argument(short, long, "", desc, Value.NONE, Occurrence.AT_MOST_ONE)

    def choose_strict_style(self):
        self._style = Style.STRICT
        return self

    def choose_free_style(self):
        self._style = Style.FREE
        return self

    def find_opt(self, name, /):
        """
        Return the index of the first definition owning `name`, or None.

        `name` may be a Name or a bare string (see Name.parse). Each
        definition's long name is compared before its short name.
        """
        if not isinstance(name, Name):
            name = Name.parse(name)
        for index, argument in enumerate(self._arguments):
            if argument.matches(name):
                return index
        return None

    # --- matching ---------------------------------------------------------

    def _fault(self, exception, name, /):
        return exception(name, **self._options)

    def _textify(self, item, /):
        """
        turn one input element into text, or fail with UnknownArgumentError.

        os.PathLike is resolved with os.fspath(); bytes must be valid UTF-8;
        str must encode as UTF-8 (lone surrogates from undecodable argv bytes
        are rejected).
        """
        if isinstance(item, os.PathLike):
            item = os.fspath(item)
        if isinstance(item, bytes):
            try:
                return item.decode("utf-8")
            except UnicodeDecodeError:
                pass
        elif isinstance(item, str):
            try:
                item.encode("utf-8")
            except UnicodeEncodeError:
                pass
            else:
                return item
        raise self._fault(UnknownArgumentError, repr(item))

    def _tokenize(self, args, /):
        if isinstance(args, str):
            return deque(map(self._textify, shlex.split(args)))
        if not isinstance(args, Iterable):
            raise TypeError("parse_arguments() argument must be a string or an iterable of strings")
        return deque(map(self._textify, args))

    def _capture(self, opt, name, inline, tokens, /):
        """
        apply the value policy of `opt` for one occurrence of `name`.

        `inline` is the text after '=' of a long token (None when absent);
        `tokens` is the remaining input, consumed from the left.
        """
        argument = self._arguments[opt.index]

        if inline == "" and argument.value is not Value.NONE:
            warnings.warn(self._fault(EmptyInlineValueWarning, str(name)), stacklevel=4)

        match argument.value:
            case Value.NONE:
                if inline is not None:
                    raise self._fault(UnexpectedArgumentError, str(name))
                opt.capture()
            case Value.OPTIONAL:
                if inline is not None:
                    opt.capture(Val(inline))
                elif not tokens or _is_option(tokens[0]):
                    opt.capture(Given)
                else:
                    opt.capture(Val(tokens.popleft()))
            case Value.REQUIRED:
                if inline is not None:
                    opt.capture(Val(inline))
                elif tokens:
                    opt.capture(Val(tokens.popleft()))
                else:
                    raise self._fault(UnexpectedArgumentError, str(name))

    def _match(self, tokens, /):
        """
        single forward pass over `tokens`; returns (match states, free tokens).
        """
        opts = [Arg(index) for index in range(len(self._arguments))]
        free = []

        while tokens:
            token = tokens.popleft()

            if not _is_option(token):
                if self._style is Style.STRICT:
                    raise self._fault(UnexpectedArgumentError, token)
                free.append(token)
                continue

            if token == "--":
                free.extend(tokens)
                break

            inline = None
            if token[1] == "-":
                name, separator, value = token[2:].partition("=")
                names = [Name.parse(name)]
                if separator:
                    inline = value
            else:
                names = [Name.parse(char) for char in token[1:]]

            for name in names:
                if (index := self.find_opt(name)) is None:
                    raise self._fault(UnknownArgumentError, str(name))
                self._capture(opts[index], name, inline, tokens)

        return opts, free

    def parse_arguments(self, args, /):
        """
        Match `args` against the registry and return the validated OptTable.

        Parameters
        - args:
          • str: split shell-style with shlex.split.
          • Iterable: each element is str, bytes (UTF-8) or os.PathLike;
            text that is not valid UTF-8 is an UnknownArgumentError.
          The program name must not be included.

        Raises
        - UnknownArgumentError, UnexpectedArgumentError,
          MissingArgumentError, DuplicatedArgumentError: the first failure.
        - TypeError: when `args` is neither a string nor an iterable.
        - ValueError: when a string `args` has unbalanced quotes (from shlex.split).
        """
        opts, free = self._match(self._tokenize(args))
        return OptTable(self, opts, free, **self._options).validate()

    # --- usage ------------------------------------------------------------

    def usage_items(self):
        """Lazy, restartable iterable of the usage lines."""
        return UsageLines(self._arguments)

    def usage_with_format(self, formatter, /):
        """Hand an iterator over the usage lines to `formatter` and return its result."""
        if not callable(formatter):
            raise TypeError("usage_with_format() argument must be callable")
        return formatter(iter(self.usage_items()))

    def usage(self, brief, /):
        """Usage text: `brief`, a blank line, "Options:" and one line per option."""
        return self.usage_with_format(lambda lines: default_format(brief, lines))

    def __rich__(self):
        return render(self._arguments, colorful=self._options["colorful"])

    def __len__(self):
        return len(self._arguments)

    def __repr__(self):
        return "opt-parser(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        for name in self.__introspectable__:
            yield name, getattr(self, name)


__all__ = (
    "Style",
    "OptParser",
)
