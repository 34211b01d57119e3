"""Errors raised by nullsafe itself.

Errors supplied by callers (``get_or_throw``) are re-raised untouched and
never pass through these types.
"""

from __future__ import annotations

__all__ = [
    'ArityError',
    'NullsafeError',
]


class NullsafeError(Exception):
    """Base class for errors raised by nullsafe."""


class ArityError(NullsafeError, TypeError):
    """A combinator was called with the wrong shape of arguments.

    Raised when the number of values is outside what the combinator accepts,
    or when the trailing block is not callable.

    Attributes:
        function: Name of the combinator that rejected the call.
        expected: Human readable description of the accepted shape.
        received: Description of what was actually passed.
    """

    def __init__(self, function: str, expected: str, received: str) -> None:
        self.function = function
        self.expected = expected
        self.received = received
        super().__init__(f'{function}() expects {expected}, got {received}')
