r"""
Argument identification: how a declared argument is named on the command line.

Variants
- Short("x")           matches exactly "-x"
- Long("path")         matches exactly "--path"
- Both("p", "path")    matches either form

Rules
- No partial matching and no combined short flags ("-abc" is not three flags).
- No inline values ("--name=value" never matches "--name").
- Identifications are immutable; they compare and hash by their identifier tokens.

Name validation (on construction)
- short: exactly one character, not "-", "=" or whitespace.
- long: non-empty, no whitespace or "=", must not start with "-".
- TypeError for non-string names, ValueError for malformed ones.
"""
import re
from typing import final

from .utils import Unset, coalesce


def _sanitize_short(cls, name, /):
    if not isinstance(name, str):
        raise TypeError(f"{cls.__name__.lower()} identification name must be a string")
    if not re.fullmatch(r"[^\s=-]", name):
        raise ValueError(f"{cls.__name__.lower()} identification name must be a single character (got {name!r})")
    return name


def _sanitize_long(cls, name, /):
    if not isinstance(name, str):
        raise TypeError(f"{cls.__name__.lower()} identification name must be a string")
    if not re.fullmatch(r"[^\s=-][^\s=]*", name):
        raise ValueError(f"{cls.__name__.lower()} identification name must be a non-empty word (got {name!r})")
    return name


class ArgumentIdentification:
    """
    Base of the identification variants; not meant to be instantiated directly.
    """
    __slots__ = ("_short", "_long")

    @property
    def short(self):
        return coalesce(self._short)

    @property
    def long(self):
        return coalesce(self._long)

    def __init__(self, short=Unset, long=Unset):
        if type(self) is ArgumentIdentification:
            raise TypeError("use Short, Long or Both to identify an argument")
        self._short = short
        self._long = long

    @property
    def names(self):
        """
        identifier tokens accepted by this identification, short form first.
        """
        names = ()
        if self._short is not Unset:
            names += ("-" + self._short,)
        if self._long is not Unset:
            names += ("--" + self._long,)
        return names

    def matches(self, token, /):
        return token in self.names

    def is_by_short(self, name, /):
        return self._short is not Unset and self._short == name

    def is_by_long(self, name, /):
        return self._long is not Unset and self._long == name

    def __str__(self):
        return self.names[-1]

    def __eq__(self, other):
        if not isinstance(other, ArgumentIdentification):
            return NotImplemented
        return self.names == other.names

    def __hash__(self):
        return hash(self.names)

    def __setattr__(self, name, value):
        if hasattr(self, "_long"):
            raise AttributeError(f"{type(self).__name__.lower()} identification is immutable")
        super().__setattr__(name, value)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, ", ".join(repr(value) for _, value in self.__rich_repr__()))

    def __rich_repr__(self):
        if self._short is not Unset:
            yield "short", self._short
        if self._long is not Unset:
            yield "long", self._long


@final
class Short(ArgumentIdentification):
    __slots__ = ()

    def __init__(self, name, /):
        super().__init__(short=_sanitize_short(type(self), name))


@final
class Long(ArgumentIdentification):
    __slots__ = ()

    def __init__(self, name, /):
        super().__init__(long=_sanitize_long(type(self), name))


@final
class Both(ArgumentIdentification):
    __slots__ = ()

    def __init__(self, short, long, /):
        super().__init__(_sanitize_short(type(self), short), _sanitize_long(type(self), long))


__all__ = (
    "ArgumentIdentification",
    "Short",
    "Long",
    "Both",
)
