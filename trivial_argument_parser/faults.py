"""
Trivial argument parser faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for all user-facing issues
  (errors and warnings). Codes are grouped by domain to keep copy consistent
  and make logs/searches predictable.
- ArgumentException / ArgumentWarning: base types that carry message + options and
  know how to render themselves in a friendly, lowercased, and actionable way.
- trigger(): central entry point to surface any fault (respecting shell/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

UX goals
- Position-first messages: every message includes the ordinal position of the
  offending token (“at second position”, etc.).
- Soft but technical language: short titles, one-sentence bodies, a single clear hint.

Integration
- The parsing engine builds faults while walking the tokens and calls trigger(fault, **ctx).
- In non-shell mode, exceptions are raised and warnings are emitted through the
  warnings module; in shell mode, both are rendered via rich on stderr.
- Handlers raise faults without context (for example ExhaustedInputError from an
  exhausted cursor); the engine enriches them through __replace__ before triggering.
"""
import inspect
import os.path
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the parser (stable identifiers).

    grouping (by high-level domain)
    - identifiers (1111x)
      • UNKNOWN_ARGUMENT, REPEATED_ARGUMENT
    - values (1111x/1112x)
      • EXHAUSTED_INPUT, INVALID_FORMAT
    - bare values (11121)
      • DANGLING_VALUE
    - delegated errors/warnings (11131 / 12131)
      • DELEGATED_ERROR, DELEGATED_WARNING
    """
    # --- identifier errors (11xxx) ---
    UNKNOWN_ARGUMENT    = 11112
    REPEATED_ARGUMENT   = 11115

    # --- value errors (11xxx) ---
    EXHAUSTED_INPUT     = 11117
    INVALID_FORMAT      = 11123

    # --- bare value errors (11xxx) ---
    DANGLING_VALUE      = 11121

    # --- delegated errors (11xxx) ---
    DELEGATED_ERROR     = 11131

    # --- warnings (12xxx) ---
    DELEGATED_WARNING   = 12131

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _palette(kind):
    return defaultdict(str, {
        # header parts
        "prog-name": "bold #E6E6F0",  # near-white program name
        "code": "bold #00E5FF",  # neon cyan fault code
        "error-title": "bold #FF4DA6",  # friendly pinky title
        "warning-title": "bold #FFD166",  # warm yellow title

        # body
        "error-message": "#C8C8D0",
        "warning-message": "#C8C8D0",
        "hint-arrow": "#9CE19C dim",
        "hint": "italic #9CE19C",
    } | getattr(__import__("__main__"), "__styles__", {}))


def _progname(options):
    main = __import__("__main__")
    return coalesce(options.get("prog", Unset), getattr(main, "__prog__", os.path.basename(sys.argv[0]) or "prog"))


def _render(fault, kind):
    """
    build the rich renderable shared by exceptions and warnings.

    layout
    - header: "[ prog — code | title ]"
    - body: message, then "→ hint" when a hint is available.
    - fancy: wraps the body in a Panel titled with the header.
    """
    options = fault.options
    colorful = options.get("colorful", True)
    styles = _palette(kind)

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if isinstance(fragment, Text):
            return fragment if colorful else Text(fragment.plain)
        return Text(str(fragment), style)

    code = options.get("code")
    header = Text.assemble(
        "[ ",
        text(_progname(options), styler("prog-name")),
        " — ",
        text(code.normalize() if isinstance(code, FaultCode) else kind, styler("code")),
        " | ",
        text(str(options.get("title", kind)).title(), styler("%s-title" % kind)),
        " ]"
    )
    message = text(coalesce(fault.message, ""), styler("%s-message" % kind))
    renders = [message]
    if hint := options.get("hint"):
        renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

    if options.get("fancy", False):
        return Panel(Group(*renders), title=header, title_align="left")

    return Group(header, *renders)


class ArgumentException(Exception):
    """
    base type for every parsing error.

    attributes
    - message: str (position-first, lowercased copy).
    - options: read-only mapping with rendering and context options such as
      code, title, hint, input, index, argument, reason, shell, fancy, colorful, prog.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return coalesce(self.message, "")

    def __rich__(self):
        return _render(self, "error")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        message = overrides.pop("message", self.message)
        return type(self)(message, **{**self.options, **overrides})


class ExhaustedInputError(ArgumentException): ...
class InvalidFormatError(ArgumentException): ...
class UnknownArgumentError(ArgumentException): ...
class DanglingValueError(ArgumentException): ...
class RepeatedArgumentError(ArgumentException): ...
class DelegatedHandlerError(ArgumentException): ...


class ArgumentWarning(Warning):
    """
    base type for every parsing warning; mirrors ArgumentException.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return coalesce(self.message, "")

    def __rich__(self):
        return _render(self, "warning")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        message = overrides.pop("message", self.message)
        return type(self)(message, **{**self.options, **overrides})


class DelegatedHandlerWarning(ArgumentWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via rich console; otherwise, exceptions are raised
      and warnings are emitted.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "ArgumentException",
    "ExhaustedInputError",
    "InvalidFormatError",
    "UnknownArgumentError",
    "DanglingValueError",
    "RepeatedArgumentError",
    "DelegatedHandlerError",
    "ArgumentWarning",
    "DelegatedHandlerWarning",
    "trigger",
    "getdoc",
)
