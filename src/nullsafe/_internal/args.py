"""Splitting ``(*values, block)`` call shapes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from nullsafe.errors import ArityError

__all__ = ['all_present', 'split_block']


def split_block(
    function: str,
    args: tuple[Any, ...],
    *,
    min_values: int = 0,
    max_values: int | None = None,
) -> tuple[tuple[Any, ...], Callable[..., Any]]:
    """Split positional arguments into the values and the trailing block.

    Args:
        function: Public name of the combinator, used in error messages.
        args: Everything passed positionally; the block comes last.
        min_values: Fewest values accepted before the block.
        max_values: Most values accepted before the block, None for unbounded.

    Returns:
        The values and the block.

    Raises:
        ArityError: If the value count is out of range or the block is not callable.
    """
    if max_values is None:
        expected = f'at least {min_values} value(s) followed by a block'
    else:
        expected = f'{min_values} to {max_values} value(s) followed by a block'

    if not args:
        raise ArityError(function, expected, 'no arguments')

    *values, block = args
    if len(values) < min_values or (max_values is not None and len(values) > max_values):
        raise ArityError(function, expected, f'{len(values)} value(s)')
    if not callable(block):
        raise ArityError(function, expected, f'non-callable block of type {type(block).__name__}')
    return tuple(values), block


def all_present(values: tuple[Any, ...]) -> bool:
    """True if no value is None. Vacuously true for no values."""
    return all(value is not None for value in values)
