"""
optable usage rendering.

Layout (one line per definition, registration order)
- 4-space indent
- "-<short>  " when a short name exists
- "--<long>  " when a long name exists
- value placeholder: hint (REQUIRED), "[hint]" (OPTIONAL), nothing (NONE)
- prefixes under 20 characters are padded to column 24; longer ones break
  to a new line indented by 24 spaces
- description

Entry points
- UsageLines(arguments): lazy, restartable iterable of the plain lines.
- default_format(brief, lines): "<brief>\\n\\nOptions:\\n<lines>\\n".
- render(arguments, brief): the same layout as a styled rich Text; the
  palette can be overridden via __styles__ in __main__.
"""
from collections import defaultdict

from rich.text import Text

from .arguments import Value

INDENT = 4
COLUMN = 24
WRAP = 20


def _segments(argument, /):
    """
    yield (fragment, style-key) pairs making up the prefix of one usage line.
    """
    yield " " * INDENT, ""
    if argument.short is not None:
        yield "-%s" % argument.short, "option-name"
        yield "  ", ""
    if argument.long is not None:
        yield "--%s" % argument.long, "option-name"
        yield "  ", ""
    match argument.value:
        case Value.REQUIRED:
            yield argument.hint, "metavar"
        case Value.OPTIONAL:
            yield "[%s]" % argument.hint, "metavar"


def _gap(length, /):
    """whitespace between a prefix of `length` characters and its description."""
    if length < WRAP:
        return " " * (COLUMN - length)
    return "\n" + " " * COLUMN


def format_line(argument, /):
    """Render the plain usage line of one definition."""
    row = "".join(fragment for fragment, _ in _segments(argument))
    return row + _gap(len(row)) + argument.desc


class UsageLines:
    """
    Lazy, restartable sequence of usage lines.

    Every iteration regenerates the lines from the definitions, so the same
    object can be consumed any number of times.
    """
    __slots__ = ("_arguments",)

    def __init__(self, arguments, /):
        self._arguments = tuple(arguments)

    def __iter__(self):
        return map(format_line, self._arguments)

    def __len__(self):
        return len(self._arguments)

    def __repr__(self):
        return f"UsageLines({len(self._arguments)} lines)"


def default_format(brief, lines, /):
    """Join usage lines under a banner and the "Options:" heading."""
    return "%s\n\nOptions:\n%s\n" % (brief, "\n".join(lines))


def render(arguments, brief="", /, *, colorful=True):
    """
    Render the usage block as rich Text.

    Palette keys
    - brief, options-label, option-name, metavar, argument-description

    Customization
    - Define a mapping named __styles__ in __main__ to override any palette entry.
    - When colorful is False, styling is suppressed.
    """
    styles = defaultdict(str, {
        "brief": "italic #A3A3A3",  # Neutral gray
        "options-label": "bold #FFFFFF",  # Pure white header
        "option-name": "bold #00E6FF",  # CYAN for options
        "metavar": "bold #FFD600",  # AMBER for parameters
        "argument-description": "#9CA3AF",  # Muted gray
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful and style else ""

    usage = Text()
    if brief:
        usage.append(brief, styler("brief")).append("\n\n")
    usage.append("Options:", styler("options-label")).append("\n")

    for index, argument in enumerate(arguments):
        if index:
            usage.append("\n")
        length = 0
        for fragment, style in _segments(argument):
            usage.append(fragment, styler(style))
            length += len(fragment)
        usage.append(_gap(length))
        usage.append(argument.desc, styler("argument-description"))

    return usage


__all__ = (
    "UsageLines",
    "format_line",
    "default_format",
    "render",
)
