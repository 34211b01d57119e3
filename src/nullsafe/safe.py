"""try_or_null and @or_null: turn raised exceptions into None."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from nullsafe._config import get_config
from nullsafe._logging import get_logger, logging_configured

__all__ = ['or_null', 'try_or_null']


def _describe(error: BaseException) -> str:
    try:
        return str(error)
    except Exception:
        return f'<unprintable {type(error).__name__}>'


def _suppress(
    error: BaseException,
    on_error: Callable[[BaseException], object] | None,
    source: object,
) -> None:
    if get_config().log_suppressed and logging_configured():
        get_logger(__name__).debug(
            'suppressed_error',
            source=getattr(source, '__qualname__', None) or type(source).__qualname__,
            error_type=type(error).__name__,
            error=_describe(error),
        )
    if on_error is not None:
        on_error(error)


def try_or_null[T](
    block: Callable[[], T],
    on_error: Callable[[BaseException], object] | None = None,
) -> T | None:
    """Call ``block`` and return its result, or None if it raises.

    Any ``Exception`` raised by the block is handed to ``on_error`` (if given,
    its return value is ignored) and then dropped. KeyboardInterrupt,
    SystemExit and other non-Exception signals still propagate.

    Args:
        block: Zero-argument callable to run.
        on_error: Optional observer called with the caught exception.

    Returns:
        The block's result, or None if it raised.

    Example:
        ```python
        port = try_or_null(lambda: int(raw_port), on_error=log.warning)
        ```
    """
    try:
        return block()
    except Exception as e:
        _suppress(e, on_error, block)
        return None


@overload
def or_null[**P, T](func: Callable[P, T]) -> Callable[P, T | None]: ...


@overload
def or_null[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    on_error: Callable[[BaseException], object] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T | None]]: ...


def or_null[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    on_error: Callable[[BaseException], object] | None = None,
) -> Any:
    """Decorator form of try_or_null.

    The wrapped function returns its normal result, or None when one of
    ``exceptions`` is raised.

    Can be used with or without arguments:
        @or_null
        def parse(raw): ...

        @or_null(exceptions=(ValueError,), on_error=report)
        def parse_strict(raw): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).
        on_error: Optional observer called with each caught exception.

    Returns:
        A wrapped function that returns T | None instead of T.

    Example:
        ```python
        @or_null
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # 5.0
        divide(10, 0)
        # None
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> T | None:
        try:
            return wrapped(*args, **kwargs)
        except catch as e:
            _suppress(e, on_error, wrapped)
            return None

    if func is not None:
        return wrapper(func)
    return wrapper
