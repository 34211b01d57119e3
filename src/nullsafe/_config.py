"""Library configuration: NullsafeConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from nullsafe._logging import configure_logging

__all__ = [
    'NullsafeConfig',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class NullsafeConfig:
    """Configuration for nullsafe.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or as console output (False).
        log_suppressed: Log errors swallowed by try_or_null / or_null at debug level.
    """

    log_level: str | None = None
    json_logs: bool = True
    log_suppressed: bool = True


# Global configuration (set by init())
_config: NullsafeConfig | None = None


def _detect_log_level() -> str | None:
    value = os.environ.get('NULLSAFE_LOG_LEVEL', '').strip()
    return value.upper() or None


def _detect_json_logs() -> bool:
    """Read NULLSAFE_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    value = os.environ.get('NULLSAFE_LOG_FORMAT', '').strip().lower()
    if value == 'console':
        return False
    if value and value != 'json':
        logging.warning("Unknown NULLSAFE_LOG_FORMAT value '%s', defaulting to json", value)
    return True


def _detect_log_suppressed() -> bool:
    value = os.environ.get('NULLSAFE_LOG_SUPPRESSED', '').strip().lower()
    if value in _FALSY:
        return False
    if value and value not in _TRUTHY:
        logging.warning("Unknown NULLSAFE_LOG_SUPPRESSED value '%s', defaulting to true", value)
    return True


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    log_suppressed: bool | None = None,
) -> NullsafeConfig:
    """Initialize nullsafe with the given configuration.

    Arguments left as None are read from the environment
    (NULLSAFE_LOG_LEVEL, NULLSAFE_LOG_FORMAT, NULLSAFE_LOG_SUPPRESSED).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON logs rather than console output.
        log_suppressed: Log errors swallowed by try_or_null.

    Returns:
        The NullsafeConfig that was set.

    Example:
        ```python
        import nullsafe

        nullsafe.init(log_level="DEBUG", json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()
    resolved_suppressed = log_suppressed if log_suppressed is not None else _detect_log_suppressed()

    _config = NullsafeConfig(
        log_level=resolved_level,
        json_logs=resolved_json,
        log_suppressed=resolved_suppressed,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> NullsafeConfig:
    """Get the current configuration.

    Unlike a runtime, the combinators need no setup, so this returns the
    defaults when init() has not been called.
    """
    if _config is None:
        return NullsafeConfig()
    return _config
