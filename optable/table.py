"""
optable parse results: per-option match state, occurrence validation and the
read-only result table.

Overview
- Arg: live match state for one definition during one parse call
  (captured values, occurrence counter, index of its definition).
- OptTable: the validated result of a parse call.
  • get_vals(name) / get_val(name) / get_flag(name) / get_count(name)
  • free: leftover positional tokens, in order.

Validation
- OptTable.validate() walks definitions in registration order and raises the
  first cardinality violation:
  • EXACTLY_ONE: 0 → MissingArgumentError, ≥2 → DuplicatedArgumentError
  • AT_MOST_ONE: ≥2 → DuplicatedArgumentError
  • ANY: never fails
- A table handed back by OptParser.parse_arguments() has always passed it.

Querying a name that was never registered is a caller defect: KeyError.
"""
from .arguments import Occurrence, Val
from .faults import MissingArgumentError, DuplicatedArgumentError
from .utils import Unset, view


class Arg:
    """
    Match state of one option for a single parse call.

    Attributes
    - index: position of the definition in the parser's registry.
    - values: captures (Val or Given), append-only in encounter order.
    - occurred: number of times the option was matched.
    """
    __slots__ = ("index", "values", "occurred")

    def __init__(self, index, /):
        self.index = index
        self.values = []
        self.occurred = 0

    def capture(self, value=Unset, /):
        """Record one occurrence and, unless it carries no value at all, its capture."""
        if value is not Unset:
            self.values.append(value)
        self.occurred += 1

    def __repr__(self):
        return f"Arg(index={self.index!r}, values={self.values!r}, occurred={self.occurred!r})"


class OptTable:
    """
    Read-only view of a finished parse.

    Built by OptParser.parse_arguments(); the states are index-aligned with
    parser.arguments and the table keeps the parser only for name lookups.
    """

    free = view("free")

    def __init__(self, parser, opts, free, /, **options):
        self._parser = parser
        self._opts = tuple(opts)
        self._free = list(free)
        self._options = options

        if len(self._opts) != len(parser.arguments):
            raise ValueError("match states must be index-aligned with the parser's arguments")

    @property
    def parser(self):
        return self._parser

    def validate(self):
        """
        Enforce occurrence policies in registration order; return self when all pass.
        """
        for opt in self._opts:
            argument = self._parser.arguments[opt.index]
            match argument.occurrence:
                case Occurrence.EXACTLY_ONE if opt.occurred == 0:
                    raise MissingArgumentError(argument.display, **self._options)
                case Occurrence.EXACTLY_ONE | Occurrence.AT_MOST_ONE if opt.occurred > 1:
                    raise DuplicatedArgumentError(argument.display, **self._options)
        return self

    def _lookup(self, name, /):
        index = self._parser.find_opt(name)
        if index is None:
            raise KeyError("No option %r defined." % str(name))
        return self._opts[index]

    def get_vals(self, name, /):
        """All captures of the option, in encounter order."""
        return tuple(self._lookup(name).values)

    def get_val(self, name, /):
        """Text of the first capture when it is a Val; None otherwise."""
        values = self._lookup(name).values
        if values and isinstance(values[0], Val):
            return values[0].text
        return None

    def get_flag(self, name, /):
        """Whether the option occurred at least once."""
        return self._lookup(name).occurred > 0

    def get_count(self, name, /):
        """How many times the option occurred."""
        return self._lookup(name).occurred

    def __contains__(self, name, /):
        try:
            return self.get_flag(name)
        except (KeyError, TypeError):
            return False

    def __repr__(self):
        return "opt-table(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        for opt in self._opts:
            argument = self._parser.arguments[opt.index]
            yield str(argument.names[0]), tuple(opt.values)
        yield "free", self.free


__all__ = (
    "Arg",
    "OptTable",
)
