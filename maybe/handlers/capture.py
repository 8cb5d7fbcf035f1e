"""
Per-call tracker for handled (failed) generator calls.

``ErrorReturn`` wraps a user defined error handler and exposes sink methods
that can be installed as the active warning handler. When a sink fires, the
user handler produces a value, and the tracker remembers that it was called
at all.
"""

import inspect
import logging
from collections.abc import Callable
from typing import Any, TextIO

from ..errors.exceptions import ensure_callable
from ..errors.models import ErrorEvent
from .protocols import RecoveryHandler

logger = logging.getLogger(__name__)


def _accepted_positional(func: Callable[..., Any]) -> int | None:
    """
    Number of positional arguments to pass ``func``, ``None`` if unbounded.

    Positional parameters with defaults are left to their defaults.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None

    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.default is not inspect.Parameter.empty:
            continue
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


class ErrorReturn:
    """Tracks whether an error handler ran during one call and what it returned."""

    def __init__(self, handler: RecoveryHandler) -> None:
        ensure_callable(handler, "error_handler", "error handler")
        self.handler = handler
        self.called = False
        self.return_value: Any = None
        self.events: list[ErrorEvent] = []
        self.failure: BaseException | None = None
        self.previous_showwarning: Callable[..., Any] | None = None
        self._handling = False
        self._arity = _accepted_positional(handler)

    def error(
        self,
        category: type[BaseException],
        message: str,
        filename: str | None = None,
        lineno: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> bool:
        """
        Error sink.

        Args:
            category: Warning or exception class of the event
            message: Event message
            filename: Originating file, if known
            lineno: Originating line, if known
            context: Extra details

        Returns:
            True, the event counts as handled
        """
        event = ErrorEvent(
            category=category,
            message=message,
            filename=filename,
            lineno=lineno,
            context=context or {},
        )
        self.handle(event)
        return True

    def handle(self, event: ErrorEvent) -> Any:
        """Run the error handler for ``event`` and record its result."""
        args = event.handler_args()
        if self._arity is not None:
            args = args[: self._arity]

        logger.debug(f"Intercepted {event.category.__name__}: {event.message}")
        self._handling = True
        try:
            value = self.handler(*args)
        except BaseException as e:
            self.failure = e
            raise
        finally:
            self._handling = False

        self.called = True
        self.events.append(event)
        self.return_value = value
        return value

    def showwarning(
        self,
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        """Sink with the ``warnings.showwarning`` signature."""
        # Warnings from the error handler itself go to the handler it replaced
        if self._handling and self.previous_showwarning is not None:
            self.previous_showwarning(message, category, filename, lineno, file, line)
            return
        self.handle(ErrorEvent.from_warning(message, category, filename, lineno, line))

    def is_called(self) -> bool:
        """Has the error handler been called?"""
        return self.called

    def get_return_value(self) -> Any:
        """Value returned by the most recent error handler call."""
        return self.return_value
