"""
Maybe - call a function with its errors suppressed and replaced by a fallback.

The generator runs with a temporary warning handler installed and its
exceptions intercepted. If it reports an error, the error handler is called
and its return value becomes the result; otherwise the generator's own value
is returned. The previous warning handler is always restored.

Example:
    import json
    from maybe import maybe

    maybe(json.loads, '"foo"', lambda: None)   # "foo"
    maybe(json.loads, "foo", lambda: 123)      # 123

    # Error handlers may take (category, message, filename, lineno, context)
    def fallback(category, message):
        return {"error": message}

    maybe(json.loads, "foo", fallback)
"""

__version__ = "0.1.0"

from .config import MaybeSettings, get_settings
from .errors import (
    ErrorEvent,
    ErrorSeverity,
    ErrorSource,
    InvalidArgumentError,
    MaybeError,
)
from .functions import maybe
from .handlers import ErrorReturn, Maybe, recover_with, suppressed_errors

__all__ = [
    "maybe",
    "Maybe",
    "ErrorReturn",
    "recover_with",
    "suppressed_errors",
    "ErrorEvent",
    "ErrorSeverity",
    "ErrorSource",
    "InvalidArgumentError",
    "MaybeError",
    "MaybeSettings",
    "get_settings",
]
