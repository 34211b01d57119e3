"""nullsafe: small combinators for working with optional (None-able) values.

Flat imports (preferred):
    from nullsafe import with_not_null, when_not_null, or_else
    from nullsafe import get_or_throw, get_or_default, get_or_else
    from nullsafe import try_or_null, or_null

Submodule imports (for organization):
    from nullsafe.scope import with_not_null, with_all_not_null
    from nullsafe.when import when_not_null, when_all_not_null
    from nullsafe.deferred import Deferred, or_else
    from nullsafe.extract import get_or_throw, get_or_default, get_or_else
    from nullsafe.safe import try_or_null, or_null
"""

# Configuration
from nullsafe._config import NullsafeConfig, get_config, init

# Logging
from nullsafe._logging import configure_logging

# Thunks
from nullsafe.deferred import ABSENT, Deferred, or_else

# Errors
from nullsafe.errors import ArityError, NullsafeError

# Extraction
from nullsafe.extract import get_or_default, get_or_else, get_or_throw

# Safe invocation
from nullsafe.safe import or_null, try_or_null

# Conditional execution
from nullsafe.scope import with_all_not_null, with_not_null

# Conditional production
from nullsafe.when import when_all_not_null, when_not_null

__all__ = [
    'ABSENT',
    'ArityError',
    'Deferred',
    'NullsafeConfig',
    'NullsafeError',
    'configure_logging',
    'get_config',
    'get_or_default',
    'get_or_else',
    'get_or_throw',
    'init',
    'or_else',
    'or_null',
    'try_or_null',
    'when_all_not_null',
    'when_not_null',
    'with_all_not_null',
    'with_not_null',
]
