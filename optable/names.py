"""
Option names: a closed union of short and long spellings.

Overview
- Name: abstract base, never instantiated directly.
  • Short(char): one-character name, spelled "-x" on the command line.
  • Long(text): multi-character name, spelled "--text" on the command line.
- Structural equality: two names are equal when they have the same kind and
  the same text. Short("t") never equals Long("t").
- Name.parse(text): one character → Short, anything else → Long.

Notes
- Long does not enforce its length; the registry validates name shapes at
  registration and the matcher may build Long("") from a token like "--=x",
  which simply never resolves.
"""
from typing import final

from rich.text import Text


class Name:
    """
    Base of the Short/Long union.

    Subclassing outside this module is forbidden; the union is closed.
    """
    __slots__ = ("_text",)

    #: Dash prefix used to spell the name on the command line.
    prefix = ""

    def __new__(cls, text, /):
        if cls is Name:
            raise TypeError("Name cannot be instantiated directly; use Short, Long or Name.parse()")
        if not isinstance(text, str):
            raise TypeError(f"{cls.__name__} text must be a string")
        self = super().__new__(cls)
        object.__setattr__(self, "_text", text)
        return self

    def __init_subclass__(cls, **options):
        if cls.__module__ != __name__:
            raise TypeError(f"type {Name.__name__!r} is not an acceptable base type")
        super().__init_subclass__(**options)

    @staticmethod
    def parse(text, /):
        """
        Build the name a bare string denotes: Short for one character, Long otherwise.
        """
        if not isinstance(text, str):
            raise TypeError("Name.parse() argument must be a string")
        return Short(text) if len(text) == 1 else Long(text)

    @property
    def text(self):
        return self._text

    @property
    def spelling(self):
        """The name as typed on the command line (e.g. "-t" or "--test")."""
        return self.prefix + self._text

    def __setattr__(self, name, value, /):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other, /):
        if not isinstance(other, Name):
            return NotImplemented
        return type(self) is type(other) and self._text == other._text

    def __hash__(self):
        return hash((type(self).__name__, self._text))

    def __str__(self):
        return self._text

    def __repr__(self):
        return f"{type(self).__name__}({self._text!r})"

    def __rich__(self):
        return Text(self.spelling, "bold")

    def __reduce__(self):
        return type(self), (self._text,)


@final
class Short(Name):
    """Single-character option name."""
    __slots__ = ()
    prefix = "-"

    def __new__(cls, text, /):
        self = super().__new__(cls, text)
        if len(text) != 1:
            raise ValueError("short name must be exactly one character")
        return self


@final
class Long(Name):
    """Multi-character option name."""
    __slots__ = ()
    prefix = "--"


__all__ = (
    "Name",
    "Short",
    "Long",
)
