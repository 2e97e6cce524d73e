r"""
Parsable argument declarations and value handlers.

Overview
- ParsableValueArgument
  • An identification (Short/Long/Both), a handler, and an accumulator of
    extracted values in order of appearance on the command line.
  • The handler decides how many tokens follow the identifier: none for flags,
    one for scalar values, as many as it wants for custom forms.

- Handlers
  • Signature: handler(cursor, values) -> value
    - cursor: TokenCursor positioned right after the matched identifier token.
    - values: the live accumulator of the argument (read it, do not mutate it).
  • Failure: raise a fault (ExhaustedInputError, InvalidFormatError, any
    ArgumentException). Any other exception is reported as a delegated failure.
  • flag_handler, integer_handler, string_handler are the predefined ones;
    extractor(validator, convert) builds more one-token handlers.

- Factories
  • ParsableValueArgument.new_flag / new_integer / new_string (scalar)
  • ParsableValueArgument.new_integer_list / new_string_list (repeatable)
  • @parsable(identification): bind a handler function into an argument.

Occurrence policy (multiple)
- False: the identifier may appear once; the registry rejects a second occurrence.
- True: each occurrence appends one value (flags and lists).

Quick example:
    >>> from trivial_argument_parser import Short, Long, ParsableValueArgument, parsable
    >>> number = ParsableValueArgument.new_integer(Short("n"))
    >>> @parsable(Long("size"))
    ... def size(cursor, values):
    ...     return tuple(map(int, cursor.advance().split("x")))
"""
from .cursor import TokenCursor
from .faults import InvalidFormatError
from .identification import ArgumentIdentification
from .utils import Unset, coalesce, mirror, rename
from .validators import validate_integer


def extractor(validator=Unset, /, convert=str):
    """
    Build a handler consuming exactly one token.

    Behavior
    - advances the cursor (ExhaustedInputError when no token is left).
    - runs the validator, if any; a returned message becomes an InvalidFormatError.
    - converts the token with 'convert' and returns the result.
    """
    if validator is not Unset and not callable(validator):
        raise TypeError("extractor() validator must be callable")
    if not callable(convert):
        raise TypeError("extractor() converter must be callable")

    def handler(cursor, values, /):
        token = cursor.advance()
        if validator is not Unset and (message := validator(token)) is not None:
            raise InvalidFormatError(message, reason=message, token=token)
        return convert(token)

    return rename(handler, "%s_handler" % getattr(convert, "__name__", "value"))


def flag_handler(cursor, values, /):
    """
    presence-only handler: consumes nothing and always succeeds.
    """
    return True


integer_handler = rename(extractor(validate_integer, int), "integer_handler")
string_handler = rename(extractor(), "string_handler")


class ParsableValueArgument:
    """
    A declared argument: identification + handler + accumulated values.

    Parameters
    - identification: ArgumentIdentification (Short, Long or Both).
    - handler: Callable[[TokenCursor, list], value].
    - multiple: bool, whether the identifier may repeat on the command line.
    - descr: optional short description (kept for diagnostics).

    Raises
    - TypeError on a wrong identification, a non-callable handler or a non-bool multiple.
    - ValueError on an empty description.
    """

    identification = mirror("identification")
    handler = mirror("handler")
    multiple = mirror("multiple")
    values = mirror("values")

    def __init__(self, identification, handler, /, *, multiple=False, descr=Unset):
        if not isinstance(identification, ArgumentIdentification):
            raise TypeError("argument identification must be a Short, Long or Both instance")
        if not callable(handler):
            raise TypeError("argument handler must be callable")
        if not isinstance(multiple, bool):
            raise TypeError("argument 'multiple' must be a boolean")
        if not isinstance(descr, str | Unset):
            raise TypeError("argument 'descr' must be a string")
        elif isinstance(descr, str) and not (descr := descr.strip()):
            raise ValueError("argument 'descr' cannot be empty")

        self._identification = identification
        self._handler = handler
        self._multiple = multiple
        self._descr = descr
        self._values = []

    @classmethod
    def new_flag(cls, identification, /, *, descr=Unset):
        return cls(identification, flag_handler, multiple=True, descr=descr)

    @classmethod
    def new_integer(cls, identification, /, *, multiple=False, descr=Unset):
        """
        one signed integer per occurrence (validated by validate_integer).
        """
        return cls(identification, integer_handler, multiple=multiple, descr=descr)

    @classmethod
    def new_string(cls, identification, /, *, multiple=False, descr=Unset):
        return cls(identification, string_handler, multiple=multiple, descr=descr)

    @classmethod
    def new_integer_list(cls, identification, /, *, descr=Unset):
        return cls.new_integer(identification, multiple=True, descr=descr)

    @classmethod
    def new_string_list(cls, identification, /, *, descr=Unset):
        return cls.new_string(identification, multiple=True, descr=descr)

    @property
    def descr(self):
        return coalesce(self._descr)

    @property
    def occurred(self):
        return bool(self._values)

    @property
    def count(self):
        return len(self._values)

    def first_value(self, default=None):
        """
        first extracted value, or default when the argument never occurred.
        """
        return self._values[0] if self._values else default

    def matches(self, token, /):
        return self._identification.matches(token)

    def handle(self, cursor, /):
        """
        Run the handler once and append its result.

        The accumulator is only touched when the handler returns; a raised
        fault leaves earlier values untouched.
        """
        if not isinstance(cursor, TokenCursor):
            raise TypeError("handle() argument must be a token cursor")
        value = self._handler(cursor, self._values)
        self._values.append(value)
        return value

    def reset(self):
        self._values.clear()

    def __repr__(self):
        return "%s(%s)" % (
            type(self).__name__,
            ", ".join("%s=%r" % pair for pair in self.__rich_repr__())
        )

    def __rich_repr__(self):
        yield "identification", self._identification
        yield "handler", getattr(self._handler, "__name__", self._handler)
        yield "multiple", self._multiple
        if self._descr is not Unset:
            yield "descr", self._descr
        yield "values", list(self._values)


def parsable(identification, /, *, multiple=False, descr=Unset):
    """
    Decorator: bind a handler function to a new ParsableValueArgument.

    Example
        @parsable(Both("s", "size"), multiple=True)
        def size(cursor, values):
            return int(cursor.advance())
    """
    @rename("parsable")
    def wrapper(handler, /):
        if not callable(handler):
            raise TypeError("@parsable() must be applied to a callable")
        return ParsableValueArgument(identification, handler, multiple=multiple, descr=descr)

    return wrapper


__all__ = (
    "ParsableValueArgument",
    "parsable",
    "extractor",
    "flag_handler",
    "integer_handler",
    "string_handler",
)
