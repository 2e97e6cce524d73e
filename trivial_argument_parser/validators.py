"""
Shared validation helpers for argument handlers.

Every validator takes a raw token and returns an error message, or None when
the token is valid. The predefined handlers use them, and custom handlers can
reuse the same rules:

    >>> validate_integer("-42") is None
    True
    >>> validate_integer("12a")
    "input '12a' is not a number"
    >>> validate_choice("fast", "slow")("medium")
    "input 'medium' is not one of 'fast', 'slow'"
"""
import re


def validate_integer(token, /):
    """
    accept an optional '-' or '+' sign followed by a non-empty run of ASCII digits.
    """
    if re.fullmatch(r"[-+]?[0-9]+", token):
        return None
    return "input %r is not a number" % token


def validate_nonempty(token, /):
    if token:
        return None
    return "input is empty"


def validate_choice(*choices):
    """
    build a validator accepting only the given tokens.
    """
    if not choices:
        raise TypeError("validate_choice() requires at least one choice")
    if not all(isinstance(choice, str) for choice in choices):
        raise TypeError("validate_choice() choices must be strings")

    def validator(token, /):
        if token in choices:
            return None
        return "input %r is not one of %s" % (token, ", ".join(map(repr, choices)))

    return validator


__all__ = (
    "validate_integer",
    "validate_nonempty",
    "validate_choice",
)
