"""
Decorators turning plain functions into suppressed calls.
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from ..errors.exceptions import ensure_callable
from .interceptor import Maybe
from .protocols import RecoveryHandler

T = TypeVar("T", bound=Callable[..., Any])


def recover_with(
    error_handler: RecoveryHandler,
    *,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Callable[[T], Callable[..., Any]]:
    """
    Decorator calling the wrapped function through ``Maybe``.

    Args:
        error_handler: Produces the value returned when the function fails
        catch: Exception classes routed to the error handler

    Returns:
        Decorator for synchronous functions

    Example:
        @recover_with(lambda: {})
        def load(raw):
            return json.loads(raw)

        load("not json")  # {}
    """
    ensure_callable(error_handler, "error_handler", "error handler")

    def decorator(func: T) -> Callable[..., Any]:
        """Inner decorator function."""
        if inspect.iscoroutinefunction(func):
            raise TypeError(
                f"@recover_with can only be applied to synchronous functions. "
                f"{func.__name__} is async."
            )

        maybe = Maybe(func, error_handler, catch=catch)

        @functools.wraps(func)
        def wrapper(*args: Any) -> Any:
            """Call the wrapped function with errors suppressed."""
            return maybe.call(args)

        wrapper.maybe = maybe  # type: ignore[attr-defined]
        return wrapper

    return decorator
