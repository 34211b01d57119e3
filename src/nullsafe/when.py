"""when_not_null and when_all_not_null: build a Deferred result, resolved with or_else."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

from nullsafe._internal.args import all_present, split_block
from nullsafe.deferred import ABSENT, Deferred

__all__ = ['when_all_not_null', 'when_not_null']


@overload
def when_not_null[A, R](value: A | None, block: Callable[[A], R | None], /) -> Deferred[R]: ...


@overload
def when_not_null[A, B, R](
    a: A | None,
    b: B | None,
    block: Callable[[A, B], R | None],
    /,
) -> Deferred[R]: ...


@overload
def when_not_null[A, B, C, R](
    a: A | None,
    b: B | None,
    c: C | None,
    block: Callable[[A, B, C], R | None],
    /,
) -> Deferred[R]: ...


def when_not_null(*args: Any) -> Deferred[Any]:
    """Return a thunk that runs ``block`` with the values if none is None.

    Presence is checked now. The block itself only runs when the returned
    Deferred is called, typically through ``or_else``. If any value is None
    the absent thunk is returned and the block never runs.

    Raises:
        ArityError: If called with fewer than one or more than three values,
            or if the last argument is not callable.

    Example:
        ```python
        label = when_not_null(first, last, lambda f, l: f'{f} {l}').or_else(lambda: 'unknown')
        ```
    """
    values, block = split_block('when_not_null', args, min_values=1, max_values=3)
    if all_present(values):
        return Deferred(block, values)
    return ABSENT


def when_all_not_null(*args: Any) -> Deferred[Any]:
    """Return a thunk that runs the zero-argument ``block`` if no value is None.

    Accepts any number of values of any type followed by the block. With no
    values the thunk is present.

    Raises:
        ArityError: If no block is given or the last argument is not callable.

    Example:
        ```python
        when_all_not_null(a, b, c, d, lambda: build(a, b, c, d)).or_else(lambda: default)
        ```
    """
    values, block = split_block('when_all_not_null', args)
    if all_present(values):
        return Deferred(block)
    return ABSENT
