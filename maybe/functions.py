"""
Functional style ``maybe()`` entry point.

A thin wrapper around ``Maybe`` that reads like a function call with a
fallback: ``maybe(json.loads, raw, lambda: {})``.
"""

from typing import Any

from .errors.exceptions import InvalidArgumentError
from .handlers.interceptor import Maybe


def maybe(
    *args: Any,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """
    Call any callable, suppressing its errors.

    Args:
        *args: The generator, its arguments, and the error handler as the
            final positional argument
        catch: Exception classes routed to the error handler

    Returns:
        Return value from the generator, or from the error handler if the
        generator reported an error

    Raises:
        InvalidArgumentError: If the generator or error handler is missing,
            or either is not callable
    """
    if len(args) < 2:
        raise InvalidArgumentError(
            "Both a generator and an error handler need to be specified",
            parameter="arguments",
        )

    generator, *arguments, error_handler = args

    return Maybe(generator, error_handler, catch=catch).call(arguments)
