"""
Configuration for suppressed calls.
"""

from .settings import MaybeSettings, get_settings

__all__ = [
    "MaybeSettings",
    "get_settings",
]
