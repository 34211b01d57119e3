"""Deferred[R]: the thunk returned by the ``when`` combinators, and or_else."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

__all__ = ['ABSENT', 'Deferred', 'or_else']


class Deferred[R](msgspec.Struct, frozen=True, gc=False):
    """A zero-argument computation whose inputs were checked when it was built.

    A Deferred with a block runs ``block(*args)`` every time it is called;
    results are not cached. A Deferred without a block is absent and always
    returns None.

    Examples:
        >>> Deferred(lambda a, b: a + b, (1, 2))()
        3
        >>> ABSENT() is None
        True
        >>> ABSENT.or_else(lambda: 'fallback')
        'fallback'
    """

    block: Callable[..., R | None] | None = None
    args: tuple[Any, ...] = ()

    def __call__(self) -> R | None:
        """Run the block, or return None if this thunk is absent."""
        if self.block is None:
            return None
        return self.block(*self.args)

    def is_present(self) -> bool:
        """Return True if every input was present when this thunk was built.

        Does not run the block.
        """
        return self.block is not None

    def or_else(self, fallback: Callable[[], R]) -> R:
        """Run this thunk, falling back to ``fallback()`` when it yields None."""
        return or_else(self, fallback)


ABSENT: Deferred[Any] = Deferred()
"""Shared absent thunk returned whenever an input is None."""


def or_else[R](thunk: Callable[[], R | None], fallback: Callable[[], R]) -> R:
    """Force ``thunk`` once and return its result, or ``fallback()`` if it is None.

    ``fallback`` is only called when the thunk produced None, either because
    an input was absent or because the block itself returned None.

    Args:
        thunk: Any zero-argument callable, normally a Deferred.
        fallback: Zero-argument callable producing the replacement value.

    Returns:
        The thunk's result if not None, else the fallback's result.

    Example:
        ```python
        name = or_else(when_not_null(user, lambda u: u.name), lambda: 'anonymous')
        ```
    """
    result = thunk()
    if result is not None:
        return result
    return fallback()
