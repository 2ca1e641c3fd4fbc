"""
optable faults (errors and warnings) and rendering.

Scope
- FaultCode: stable numeric identifiers for every user-facing issue.
- OptionException / OptionWarning: base types carrying the offending option
  name, a one-sentence message and rendering options; both know how to
  render themselves with rich.
- MissingArgumentError, UnknownArgumentError, DuplicatedArgumentError,
  UnexpectedArgumentError: the four parse failures.
- EmptyInlineValueWarning: soft feedback for "--name=" with nothing after '='.

UX goals
- One sentence naming the offending option, plus a single clear hint.
- Lowercased tone with readable styling (configurable via __styles__ in __main__).

Integration
- The parser raises the first fault it meets; nothing is aggregated.
- Hosts print a fault with rich (console.print(fault)) and pair it with the
  usage text; exit handling is left to them.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes used by the parser (stable identifiers).

    grouping
    - errors (211xx)
      • MISSING_ARGUMENT, UNKNOWN_ARGUMENT, DUPLICATED_ARGUMENT, UNEXPECTED_ARGUMENT
    - warnings (221xx)
      • EMPTY_INLINE_VALUE
    """
    # --- errors (211xx) ---
    MISSING_ARGUMENT    = 21101
    UNKNOWN_ARGUMENT    = 21102
    DUPLICATED_ARGUMENT = 21103
    UNEXPECTED_ARGUMENT = 21104

    # --- warnings (221xx) ---
    EMPTY_INLINE_VALUE  = 22101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, palette, /):
    """
    build the rich renderable shared by exceptions and warnings.

    layout
    - header: "[ prog — code | Title ]"
    - body:   the message
    - hint:   " → hint"
    when the fault's 'fancy' option is set, the body and hint are wrapped in a
    Panel titled with the header.
    """
    main = __import__("__main__")
    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))
    colorful = fault.options.get("colorful", True)

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        return Text(str(fragment), styles[style])

    prog = fault.options.get("prog", Unset)
    if prog is Unset:
        prog = getattr(main, "__prog__", "optable")

    header = Text.assemble(
        "[ ",
        text(prog, "prog-name"),
        " — ",
        text(fault.code.normalize(), "code"),
        " | ",
        text(fault.title.title(), "title"),
        " ]"
    )
    message = text(fault.message, "message")
    hint = Text.assemble(text(" → ", "hint-arrow"), text(fault.hint, "hint"))

    if fault.options.get("fancy", False):
        return Panel(Group(message, hint), title=header, title_align="left")

    return Group(header, message, hint)


class _Fault:
    """
    mixin holding the state and accessors shared by every fault.

    every concrete fault declares class-level defaults:
    - __code__:  FaultCode
    - __title__: short title shown in the rendered header
    - __label__: message prefix ("missing argument", ...)
    - __hint__:  default hint; '%s' is replaced by the option spelling
    """
    __code__ = Unset
    __title__ = ""
    __label__ = ""
    __hint__ = ""

    def _setup(self, name, options, /):
        if not isinstance(name, str):
            raise TypeError(f"{type(self).__name__}() argument must be a string")
        self.name = name
        self.options = MappingProxyType(options)

    @property
    def spelled(self):
        """the name with its padding collapsed (e.g. "--test -t"); repr() when blank."""
        return " ".join(self.name.split()) or repr(self.name)

    @property
    def message(self):
        return "%s: %s." % (self.__label__, self.spelled)

    @property
    def code(self):
        return self.options.get("code", type(self).__code__)

    @property
    def title(self):
        return self.options.get("title", type(self).__title__)

    @property
    def hint(self):
        hint = self.options.get("hint", Unset)
        if hint is not Unset:
            return hint
        return type(self).__hint__.replace("%s", self.spelled)

    def __str__(self):
        return self.message

    def __eq__(self, other, /):
        if type(self) is not type(other):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash((type(self), self.name))

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.name, **{**self.options, **overrides})


class OptionException(_Fault, Exception):
    """
    base class of every parse failure.

    attributes
    - name: display name of the offending option (e.g. " --test  -t ") or the
      raw token/name that failed.
    - options: read-only mapping of rendering options (prog, colorful, fancy,
      title, code, hint).
    """

    def __init__(self, name, /, **options):
        self._setup(name, options)
        super().__init__(name)

    def __str__(self):
        return self.message

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "title": "bold #FF4DA6",  # friendly pinky title
            "message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        })


class MissingArgumentError(OptionException):
    """an EXACTLY_ONE option never occurred."""
    __code__ = FaultCode.MISSING_ARGUMENT
    __title__ = "missing argument"
    __label__ = "missing argument"
    __hint__ = "this option is required; pass %s exactly once"


class UnknownArgumentError(OptionException):
    """a token resolves to no registered name, or an input element is not text."""
    __code__ = FaultCode.UNKNOWN_ARGUMENT
    __title__ = "unknown argument"
    __label__ = "unknown argument"
    __hint__ = "check the spelling of %s against the available options"


class DuplicatedArgumentError(OptionException):
    """an AT_MOST_ONE or EXACTLY_ONE option occurred more than once."""
    __code__ = FaultCode.DUPLICATED_ARGUMENT
    __title__ = "duplicated argument"
    __label__ = "duplicated argument"
    __hint__ = "pass %s only once"


class UnexpectedArgumentError(OptionException):
    """
    a value where none is allowed, a required value that is absent, or (strict
    style) a free-form token where only options are permitted.
    """
    __code__ = FaultCode.UNEXPECTED_ARGUMENT
    __title__ = "unexpected argument"
    __label__ = "unexpected argument"
    __hint__ = "%s is not accepted here; check whether it takes a value"


class OptionWarning(_Fault, Warning):
    """base class of non-fatal parse feedback, emitted through the warnings module."""

    def __init__(self, name, /, **options):
        self._setup(name, options)
        super().__init__(name)

    def __str__(self):
        return self.message

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code for warnings
            "title": "bold #FFC2E0",  # softer pinky title for warnings
            "message": "#D6D6DE",  # slightly lighter gray body
            "hint-arrow": "#B8EFAF dim",  # softer green arrow
            "hint": "italic #B8EFAF",  # softer green hint text
        })


class EmptyInlineValueWarning(OptionWarning):
    """a long option was given '=' with nothing after it; the empty string is captured."""
    __code__ = FaultCode.EMPTY_INLINE_VALUE
    __title__ = "empty inline value"
    __label__ = "empty inline value for option"
    __hint__ = "add a value after '=' (for example: --%s=<value>)"


__all__ = (
    "FaultCode",
    "OptionException",
    "MissingArgumentError",
    "UnknownArgumentError",
    "DuplicatedArgumentError",
    "UnexpectedArgumentError",
    "OptionWarning",
    "EmptyInlineValueWarning",
)
