"""
Argument registry and parsing engine.

What this module provides
- ArgumentList: holds caller-owned ParsableValueArgument handles, owns the
  parsing loop and the default value slot (the first bare token).

Parsing (single pass, left to right)
- identifier token of a registered argument → run its handler with the cursor.
- bare token (no leading '-') → default value slot; a second one is dangling.
- '-'-prefixed token nobody registered → unknown argument.
- the first fault wins; accumulators filled before the fault are kept as-is,
  so callers must not trust argument values after a failed parse.

Repeated parsing
- every parse_args() call resets the registered accumulators and the default
  slot first; results always describe the latest call only.

Quick start
    from trivial_argument_parser import ArgumentList, ParsableValueArgument, Short, Long

    number = ParsableValueArgument.new_integer(Short("n"))
    path = ParsableValueArgument.new_string(Long("path"))

    registry = ArgumentList()
    registry.register_parsable(number)
    registry.register_parsable(path)
    registry.parse_args(["-n", "131", "--path", "abc"])

    assert number.first_value() == 131 and path.first_value() == "abc"
"""
import difflib
import shlex
import sys
import warnings
from collections.abc import Iterable

from .arguments import ParsableValueArgument
from .cursor import TokenCursor
from .faults import *
from .utils import Unset, coalesce, mirror, ordinal


class ArgumentList:
    """
    Registry of parsable arguments plus the engine that fills them.

    Runtime options
    - shell: bool. False raises faults (library use); True prints them with rich
      on stderr and exits with status 1 (warnings are printed and parsing goes on).
    - fancy: bool. Render faults inside a rich Panel.
    - colorful: bool. Colorize rendered faults.
    - prog: str. Program name shown in fault headers (defaults to __main__.__prog__
      or the basename of sys.argv[0]).
    """

    shell = mirror("shell")
    fancy = mirror("fancy")
    colorful = mirror("colorful")

    def __init__(self, *, shell=False, fancy=False, colorful=True, prog=Unset):
        for name, value in (("shell", shell), ("fancy", fancy), ("colorful", colorful)):
            if not isinstance(value, bool):
                raise TypeError(f"argument list {name!r} must be a boolean")
        if not isinstance(prog, str | Unset):
            raise TypeError("argument list 'prog' must be a string")
        elif isinstance(prog, str) and not (prog := prog.strip()):
            raise ValueError("argument list 'prog' cannot be empty")

        self._shell = shell
        self._fancy = fancy
        self._colorful = colorful
        self._prog = prog
        self._arguments = []
        self._default = Unset

    @property
    def prog(self):
        return coalesce(self._prog)

    @property
    def arguments(self):
        return tuple(self._arguments)

    @property
    def default_value(self):
        """
        the first bare token of the latest parse, or None.
        """
        return coalesce(self._default)

    def register_parsable(self, argument, /):
        """
        Add a non-owning handle to a caller-owned argument and return it.

        Raises
        - TypeError: when argument is not a ParsableValueArgument.
        - ValueError: when the argument (or one of its identifier tokens) is
          already registered.
        """
        if not isinstance(argument, ParsableValueArgument):
            raise TypeError("register_parsable() argument must be a parsable value argument")
        if any(argument is registered for registered in self._arguments):
            raise ValueError(f"argument {str(argument.identification)!r} is already registered")
        for registered in self._arguments:
            if clash := set(argument.identification.names) & set(registered.identification.names):
                raise ValueError(f"argument identification {min(clash)!r} is already in use")
        self._arguments.append(argument)
        return argument

    def search_by_short_name(self, name, /):
        for argument in self._arguments:
            if argument.identification.is_by_short(name):
                return argument
        raise KeyError(name)

    def search_by_long_name(self, name, /):
        for argument in self._arguments:
            if argument.identification.is_by_long(name):
                return argument
        raise KeyError(name)

    def trigger(self, fault, /, **options):
        """
        surface a fault with this registry's runtime options merged in.
        """
        trigger(
            fault,
            **options,
            shell=self._shell,
            fancy=self._fancy,
            colorful=self._colorful,
            prog=self._prog,
        )

    def _resolve(self, token):
        for argument in self._arguments:
            if argument.matches(token):
                return argument
        return None

    def _delegate(self, argument, input, caught, *, index):
        for warning in map(lambda x: x.message, caught):
            self.trigger(DelegatedHandlerWarning(
                "something occurred in argument %r at %s position: %s" % (input, ordinal(index), warning),
                title="delegated handler warning",
                code=FaultCode.DELEGATED_WARNING,
                hint="check the handler bound to %r" % input,
                input=input,
                index=index,
                argument=argument,
                reason=str(warning),
                warning=warning,
                docs=getdoc(FaultCode.DELEGATED_WARNING),
            ))

    def _handle(self, argument, input, cursor, *, index):
        """
        run one handler and shape whatever it raised or warned.

        fault shaping
        - warnings (captured via catch_warnings): re-surfaced as DelegatedHandlerWarning,
          before the handler's fault when it failed.
        - ArgumentException (e.g. ExhaustedInputError, InvalidFormatError): re-triggered
          with the argument, its token and ordinal position attached; a 'code' option
          that is not a FaultCode falls back to DELEGATED_ERROR.
        - any other Exception: wrapped as DelegatedHandlerError.
        """
        try:
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always")
                argument.handle(cursor)
        except ArgumentException as fault:
            self._delegate(argument, input, caught, index=index)
            reason = fault.options.get("reason", str(fault))
            match fault:
                case ExhaustedInputError():
                    code, title = FaultCode.EXHAUSTED_INPUT, "missing value"
                    hint = "pass a value right after %r" % input
                case InvalidFormatError():
                    code, title = FaultCode.INVALID_FORMAT, "invalid value"
                    hint = "check the value given to %r" % input
                case _:
                    code = fault.options.get("code")
                    if not isinstance(code, FaultCode):
                        code = FaultCode.DELEGATED_ERROR
                    title = fault.options.get("title", "bad argument")
                    hint = fault.options.get("hint", "check the value given to %r" % input)
            return self.trigger(
                fault,
                message="bad argument %r at %s position: %s" % (input, ordinal(index), reason),
                title=title,
                code=code,
                hint=hint,
                input=input,
                index=index,
                argument=argument,
                reason=reason,
                docs=getdoc(code),
            )
        except Exception as exception:
            self._delegate(argument, input, caught, index=index)
            reason = str(exception) or type(exception).__name__
            return self.trigger(DelegatedHandlerError(
                "something occurred in argument %r at %s position: %s" % (input, ordinal(index), reason),
                title="delegated handler error",
                code=FaultCode.DELEGATED_ERROR,
                hint="check the handler bound to %r" % input,
                input=input,
                index=index,
                argument=argument,
                reason=reason,
                exception=exception,
                docs=getdoc(FaultCode.DELEGATED_ERROR),
            ))

        self._delegate(argument, input, caught, index=index)

    def parse_args(self, tokens=Unset, /):
        """
        Parse command-line tokens into the registered arguments.

        Parameters
        - tokens:
          • Unset: read tokens from sys.argv[1:].
          • str: shell-like string; split via shlex.split.
          • Iterable[str]: pre-tokenized sequence, used verbatim.

        Behavior
        - resets every registered accumulator and the default slot.
        - walks the tokens once, classifying then dispatching each one.
        - returns None on success; the first fault is surfaced through trigger()
          (raised outside shell mode).

        Raises
        - TypeError: when tokens is not Unset/str/Iterable[str].
        - UnknownArgumentError, DanglingValueError, RepeatedArgumentError,
          ExhaustedInputError, InvalidFormatError, DelegatedHandlerError.
        """
        if tokens is Unset:
            tokens = sys.argv[1:]
        elif isinstance(tokens, str):
            tokens = shlex.split(tokens)
        elif isinstance(tokens, Iterable):
            tokens = list(tokens)
            if not all(isinstance(token, str) for token in tokens):
                raise TypeError("parse_args() argument must be a string or an iterable of strings")
        else:
            raise TypeError("parse_args() argument must be a string or an iterable of strings")

        for argument in self._arguments:
            argument.reset()
        self._default = Unset

        cursor = TokenCursor(tokens)
        while cursor:
            index = cursor.index
            token = cursor.advance()

            if (argument := self._resolve(token)) is not None:
                if argument.occurred and not argument.multiple:
                    return self.trigger(RepeatedArgumentError(
                        "argument %r at %s position was already given" % (token, ordinal(index)),
                        title="repeated argument",
                        code=FaultCode.REPEATED_ARGUMENT,
                        hint="pass %r only once" % token,
                        input=token,
                        index=index,
                        argument=argument,
                        docs=getdoc(FaultCode.REPEATED_ARGUMENT),
                    ))
                self._handle(argument, token, cursor, index=index)
            elif token.startswith("-"):
                names = [name for registered in self._arguments for name in registered.identification.names]
                suggestions = difflib.get_close_matches(token, names, 5)
                try:
                    hint = "did you mean %r?" % suggestions[0]
                except IndexError:
                    hint = "remove it or register an argument named %r" % token
                return self.trigger(UnknownArgumentError(
                    "unknown argument %r at %s position" % (token, ordinal(index)),
                    title="unknown argument",
                    code=FaultCode.UNKNOWN_ARGUMENT,
                    hint=hint,
                    input=token,
                    index=index,
                    suggestions=suggestions,
                    docs=getdoc(FaultCode.UNKNOWN_ARGUMENT),
                ))
            elif self._default is Unset:
                self._default = token
            else:
                return self.trigger(DanglingValueError(
                    "unexpected dangling value %r at %s position" % (token, ordinal(index)),
                    title="dangling value",
                    code=FaultCode.DANGLING_VALUE,
                    hint="only one bare value is accepted (already got %r)" % self._default,
                    input=token,
                    index=index,
                    docs=getdoc(FaultCode.DANGLING_VALUE),
                ))

    def __len__(self):
        return len(self._arguments)

    def __iter__(self):
        return iter(tuple(self._arguments))

    def __repr__(self):
        return "%s(%s)" % (
            type(self).__name__,
            ", ".join("%s=%r" % pair for pair in self.__rich_repr__())
        )

    def __rich_repr__(self):
        yield "arguments", list(self._arguments)
        yield "default_value", self.default_value


__all__ = (
    "ArgumentList",
)
