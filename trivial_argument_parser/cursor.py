"""
Token cursor handed to argument handlers.

The cursor walks an in-memory token sequence left to right. Handlers receive it
positioned right after the identifier token that selected them and may peek and
advance any number of times; once a token is consumed it cannot be put back.

    >>> cursor = TokenCursor(["-n", "131"])
    >>> cursor.advance(), cursor.peek(), cursor.index
    ('-n', '131', 2)
"""
from collections import deque

from .faults import ExhaustedInputError
from .utils import Unset, coalesce

EXHAUSTED = "No remaining input values."


class TokenCursor:
    """
    Single-pass peek/advance cursor over command-line tokens.

    Notes
    - index is the 1-based position of the next token in the original sequence;
      the engine uses it for position-first fault messages.
    - truthiness tells whether tokens remain.
    - the iterator protocol consumes tokens (next() stops when exhausted).
    """

    def __init__(self, tokens, /):
        self._tokens = deque(tokens)
        self._index = 1

    @property
    def index(self):
        return self._index

    @property
    def remaining(self):
        return tuple(self._tokens)

    def peek(self, default=None):
        """
        Return the next token without consuming it, or default when exhausted.
        """
        try:
            return self._tokens[0]
        except IndexError:
            return default

    def advance(self, message=Unset):
        """
        Consume and return the next token.

        Raises
        - ExhaustedInputError: when no token remains; message defaults to
          "No remaining input values.".
        """
        try:
            token = self._tokens.popleft()
        except IndexError:
            raise ExhaustedInputError(coalesce(message, EXHAUSTED), reason=coalesce(message, EXHAUSTED)) from None
        self._index += 1
        return token

    def __bool__(self):
        return bool(self._tokens)

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return self

    def __next__(self):
        if not self._tokens:
            raise StopIteration
        return self.advance()

    def __repr__(self):
        return "%s(index=%d, remaining=%r)" % (type(self).__name__, self._index, list(self._tokens))


__all__ = (
    "TokenCursor",
)
