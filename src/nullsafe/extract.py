"""Unwrapping optionals: get_or_throw, get_or_default, get_or_else."""

from __future__ import annotations

from collections.abc import Callable

__all__ = ['get_or_default', 'get_or_else', 'get_or_throw']


def get_or_throw[T](value: T | None, error: BaseException | type[BaseException]) -> T:
    """Return ``value``, or raise ``error`` if it is None.

    The error is raised exactly as given; it is not wrapped.

    Raises:
        BaseException: ``error`` itself, when value is None.
    """
    if value is None:
        raise error
    return value


def get_or_default[T](value: T | None, default: T) -> T:
    """Return ``value``, or ``default`` if it is None."""
    return default if value is None else value


def get_or_else[T](value: T | None, default_block: Callable[[], T]) -> T:
    """Return ``value``, or the result of ``default_block()`` if it is None.

    The lazy counterpart of get_or_default: the block only runs when needed.
    """
    if value is None:
        return default_block()
    return value
