"""
Error models and exceptions for suppressed calls.
"""

from .exceptions import InvalidArgumentError, MaybeError
from .models import ErrorEvent, ErrorSeverity, ErrorSource, classify_severity

__all__ = [
    "ErrorEvent",
    "ErrorSeverity",
    "ErrorSource",
    "InvalidArgumentError",
    "MaybeError",
    "classify_severity",
]
