"""
Suppressed call machinery: capture records, scopes and decorators.
"""

from .capture import ErrorReturn
from .decorators import recover_with
from .interceptor import Maybe
from .protocols import Generator, RecoveryHandler
from .scope import suppressed_errors

__all__ = [
    "ErrorReturn",
    "Generator",
    "Maybe",
    "RecoveryHandler",
    "recover_with",
    "suppressed_errors",
]
