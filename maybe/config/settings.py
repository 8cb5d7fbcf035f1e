"""
Settings for suppressed calls using Pydantic.

Defaults can be overridden with ``MAYBE_`` prefixed environment variables
or a ``.env`` file.
"""

from functools import lru_cache
from typing import Literal, TypeVar

from pydantic_settings import BaseSettings, SettingsConfigDict

T = TypeVar("T", bound=BaseSettings)


class MaybeSettings(BaseSettings):
    """
    Default behaviour of ``Maybe`` calls.

    Example:
        MAYBE_INTERCEPT_EXCEPTIONS=false  # only warnings reach the error handler
    """

    model_config = SettingsConfigDict(
        env_prefix="MAYBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    intercept_exceptions: bool = True
    capture_warnings: bool = True
    warning_action: Literal["always", "default", "module", "once"] = "always"


@lru_cache
def get_settings(settings_class: type[T] = MaybeSettings) -> T:
    """
    Get cached settings instance.

    Args:
        settings_class: Settings class to instantiate (default: MaybeSettings)

    Returns:
        Cached settings instance
    """
    return settings_class()
