r"""
optable option definitions and captured values.

Overview
- Policies
  • Value: whether an option forbids (NONE), requires (REQUIRED) or optionally
    accepts (OPTIONAL) a value.
  • Occurrence: how many times an option may appear: AT_MOST_ONE,
    EXACTLY_ONE or ANY.
- Definitions
  • Argument: one registered option (short/long names, hint, description and
    both policies). Read-only once built.
- Captures
  • Val(text): a value captured for an option occurrence.
  • Given: singleton capture meaning "present without a value".

Metadata (sanitized on construction)
- short: "" or exactly one character (becomes a Short name or None).
- long: "" or more than one character (becomes a Long name or None).
- At least one of short/long must be present.
- hint/desc: strings, kept verbatim (hint may be empty).
- value/occurrence: members of Value/Occurrence (plain ints are coerced).

Malformed definitions are caller defects: they raise TypeError/ValueError
at construction and never surface as parse faults.

Quick example:
    >>> from optable.arguments import Argument, Value, Occurrence
    >>> test = Argument("t", "test", "TIMES", "test times", Value.REQUIRED, Occurrence.AT_MOST_ONE)
    >>> test.display
    ' --test  -t '
"""
import functools
from enum import IntEnum
from typing import final

from rich.text import Text

from .names import Short, Long
from .utils import *


class Value(IntEnum):
    """Value policy of an option."""
    NONE = 0
    REQUIRED = 1
    OPTIONAL = 2


class Occurrence(IntEnum):
    """Occurrence policy of an option."""
    AT_MOST_ONE = 0
    EXACTLY_ONE = 1
    ANY = 2


def _sanitize_names(metadata, /):
    """
    Internal: validate the short/long spellings and turn them into names.

    Rules
    - short must be a string of length 0 or 1.
    - long must be a string of length 0 or greater than 1.
    - one of them must be non-empty.

    The dict is mutated in place: 'short' becomes Short | None and 'long'
    becomes Long | None.
    """
    if not isinstance(short := metadata["short"], str):
        raise TypeError("argument short name must be a string")
    if not isinstance(long := metadata["long"], str):
        raise TypeError("argument long name must be a string")
    if len(short) > 1:
        raise ValueError("the short name should be a single character, or an empty string for none")
    if len(long) == 1:
        raise ValueError("the long name should be longer than a single character, or an empty string for none")
    if not short and not long:
        raise ValueError("argument must have a short name, a long name, or both")

    metadata["short"] = Short(short) if short else None
    metadata["long"] = Long(long) if long else None


def _sanitize_texts(metadata, /):
    """
    Internal: validate hint/desc and coerce the policies to their enums.
    """
    for field in ("hint", "desc"):
        if not isinstance(metadata[field], str):
            raise TypeError(f"argument {field!r} must be a string")

    try:
        metadata["value"] = Value(metadata["value"])
    except ValueError:
        raise ValueError(f"argument 'value' must be one of {', '.join(Value.__members__)}") from None
    try:
        metadata["occurrence"] = Occurrence(metadata["occurrence"])
    except ValueError:
        raise ValueError(f"argument 'occurrence' must be one of {', '.join(Occurrence.__members__)}") from None


@final
class Argument:
    """
    A registered option definition.

    Properties
    - short: Short | None
    - long: Long | None
    - hint: str, placeholder shown in usage for value-bearing options.
    - desc: str, one-line description shown in usage.
    - value: Value
    - occurrence: Occurrence

    Derived
    - names: the existing names, long first (the lookup order).
    - display: " --<long> " then " -<short> " for whichever names exist; used
      to name the option in faults.
    """

    __introspectable__ = (
        "short",
        "long",
        "hint",
        "desc",
        "value",
        "occurrence",
    )

    short = view("short")
    long = view("long")
    hint = view("hint")
    desc = view("desc")
    value = view("value")
    occurrence = view("occurrence")

    def __init__(self, short, long, hint="", desc="", value=Value.NONE, occurrence=Occurrence.AT_MOST_ONE):
        metadata = {
            "short": short,
            "long": long,
            "hint": hint,
            "desc": desc,
            "value": value,
            "occurrence": occurrence,
        }
        _sanitize_names(metadata)
        _sanitize_texts(metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    @property
    def names(self):
        return tuple(name for name in (self._long, self._short) if name is not None)

    @property
    def display(self):
        display = ""
        if self._long is not None:
            display += " --%s " % self._long
        if self._short is not None:
            display += " -%s " % self._short
        return display

    def matches(self, name, /):
        """Whether `name` is one of this definition's names (long checked first)."""
        return self._long == name or self._short == name

    def __repr__(self):
        return "argument(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        for name in self.__introspectable__:
            yield name, getattr(self, name)


@final
class Val:
    """
    A captured option value.

    Immutable, hashable and compared by its text. str(val) is the text.
    """
    __slots__ = ("_text",)

    def __init__(self, text, /):
        if not isinstance(text, str):
            raise TypeError("Val text must be a string")
        object.__setattr__(self, "_text", text)

    @property
    def text(self):
        return self._text

    def __setattr__(self, name, value, /):
        raise AttributeError("Val is immutable")

    def __eq__(self, other, /):
        if not isinstance(other, Val):
            return NotImplemented
        return self._text == other._text

    def __hash__(self):
        return hash((Val, self._text))

    def __str__(self):
        return self._text

    def __repr__(self):
        return f"Val({self._text!r})"

    def __rich__(self):
        return Text.assemble("Val(", (repr(self._text), "green"), ")")

    def __reduce__(self):
        return Val, (self._text,)


@final
class GivenType:
    """
    Singleton type of the Given capture: the option occurred without a value.

    Falsey, printable as "Given", and preserved by copy/pickle.
    """
    __slots__ = ()

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Given"

    def __rich__(self):
        return Text("Given", "dim")

    def __reduce__(self):
        return GivenType, ()

    def __init_subclass__(cls, **options):
        raise TypeError("type 'GivenType' is not an acceptable base type")


Given = GivenType()


__all__ = (
    # Policies
    "Value",
    "Occurrence",

    # Definitions
    "Argument",

    # Captures
    "Val",
    "GivenType",
    "Given",
)
