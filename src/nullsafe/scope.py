"""with_not_null and with_all_not_null: run a block only when values are present."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

from nullsafe._internal.args import all_present, split_block

__all__ = ['with_all_not_null', 'with_not_null']


@overload
def with_not_null[A](value: A | None, block: Callable[[A], object], /) -> None: ...


@overload
def with_not_null[A, B](a: A | None, b: B | None, block: Callable[[A, B], object], /) -> None: ...


@overload
def with_not_null[A, B, C](
    a: A | None,
    b: B | None,
    c: C | None,
    block: Callable[[A, B, C], object],
    /,
) -> None: ...


def with_not_null(*args: Any) -> None:
    """Call ``block`` with the values if none of them is None.

    Takes one, two or three values followed by the block. The block runs at
    most once, synchronously, and its return value is discarded.

    Raises:
        ArityError: If called with fewer than one or more than three values,
            or if the last argument is not callable.

    Example:
        ```python
        with_not_null(user, session, lambda u, s: s.attach(u))
        ```
    """
    values, block = split_block('with_not_null', args, min_values=1, max_values=3)
    if all_present(values):
        block(*values)


def with_all_not_null(*args: Any) -> None:
    """Call the zero-argument ``block`` if none of the values is None.

    Accepts any number of values of any type followed by the block. With no
    values at all the block runs, since nothing is absent.

    Raises:
        ArityError: If no block is given or the last argument is not callable.

    Example:
        ```python
        with_all_not_null(host, port, user, lambda: connect(host, port, user))
        ```
    """
    values, block = split_block('with_all_not_null', args)
    if all_present(values):
        block()
