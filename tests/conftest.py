"""
Pytest configuration and shared fixtures.
"""

import json
import warnings
from collections.abc import Callable
from typing import Any

import pytest


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Clear cached settings before and after each test."""
    from maybe.config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def warning_state() -> Callable[[], tuple[Any, list[Any]]]:
    """Snapshot of the active warning handler and filter list."""

    def snapshot() -> tuple[Any, list[Any]]:
        return warnings.showwarning, list(warnings.filters)

    return snapshot


@pytest.fixture
def failing_handler() -> Callable[..., Any]:
    """Error handler that must never run."""

    def handler(*args: Any) -> Any:
        raise AssertionError(f"error handler called with {args!r}")

    return handler


@pytest.fixture
def serialized_foo() -> str:
    """A valid serialized string literal."""
    return json.dumps("foo")
