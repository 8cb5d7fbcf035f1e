"""
Callable protocols for generators and error handlers.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Generator(Protocol):
    """
    Protocol for the operation attempted by a ``Maybe`` call.

    Any callable qualifies; it returns a value or reports an error through
    a warning or a raised exception.
    """

    def __call__(self, *args: Any) -> Any:
        ...


@runtime_checkable
class RecoveryHandler(Protocol):
    """
    Protocol for error handlers producing a fallback value.

    Handlers may declare fewer positional parameters; only as many leading
    arguments as they have required positional parameters are passed, and
    parameters with defaults keep their defaults. Handlers taking ``*args``
    receive all five.
    """

    def __call__(
        self,
        category: type[BaseException],
        message: str,
        filename: str | None,
        lineno: int | None,
        context: dict[str, Any],
    ) -> Any:
        """
        Produce the value returned in place of the failed generator.

        Args:
            category: Warning or exception class of the event
            message: Event message
            filename: File the event originated from, if known
            lineno: Line the event originated from, if known
            context: Extra details (the warning or exception instance)

        Returns:
            Fallback value
        """
        ...
