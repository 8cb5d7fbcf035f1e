"""
Maybe: call a generator with errors suppressed.

Takes two callables, a "generator" and an error handler. The generator is
called with a temporary warning handler installed and its exceptions
intercepted. If it reports an error, the error handler generates the value
returned instead.
"""

import logging
from collections.abc import Sequence
from typing import Any

from ..config.settings import MaybeSettings, get_settings
from ..errors.exceptions import ensure_callable
from ..errors.models import ErrorEvent
from .capture import ErrorReturn
from .protocols import Generator, RecoveryHandler
from .scope import suppressed_errors

logger = logging.getLogger(__name__)


class Maybe:
    """A generator paired with the error handler that replaces its failures."""

    def __init__(
        self,
        generator: Generator,
        error_handler: RecoveryHandler,
        *,
        catch: tuple[type[BaseException], ...] | None = None,
        settings: MaybeSettings | None = None,
    ) -> None:
        """
        Initialize the pair.

        Args:
            generator: Operation to attempt
            error_handler: Produces the fallback value when the generator fails
            catch: Exception classes routed to the error handler
                (default: Exception, unless disabled in settings)
            settings: Behaviour overrides (default: cached MaybeSettings)

        Raises:
            InvalidArgumentError: If either callable is not callable
        """
        self.generator = generator
        self.error_handler = error_handler
        self.settings = settings or get_settings(MaybeSettings)
        if catch is None:
            catch = (Exception,) if self.settings.intercept_exceptions else ()
        self.catch = catch

    @property
    def generator(self) -> Generator:
        return self._generator

    @generator.setter
    def generator(self, generator: Generator) -> None:
        ensure_callable(generator, "generator", "generator")
        self._generator = generator

    @property
    def error_handler(self) -> RecoveryHandler:
        return self._error_handler

    @error_handler.setter
    def error_handler(self, error_handler: RecoveryHandler) -> None:
        ensure_callable(error_handler, "error_handler", "error handler")
        self._error_handler = error_handler

    def call(self, arguments: Sequence[Any] = ()) -> Any:
        """
        Call the generator with a set of arguments.

        Args:
            arguments: Positional arguments for the generator

        Returns:
            The error handler's value if the generator reported an error,
            otherwise the generator's own return value
        """
        record = ErrorReturn(self.error_handler)
        caught: BaseException | None = None

        with suppressed_errors(
            record,
            action=self.settings.warning_action,
            capture_warnings=self.settings.capture_warnings,
        ):
            try:
                result = self.generator(*arguments)
            except self.catch as e:
                if record.failure is None:
                    caught = e
                result = None

        # The error handler's own failure is never swallowed or re-routed,
        # even when the generator caught or wrapped it
        if record.failure is not None:
            raise record.failure

        if caught is not None:
            record.handle(ErrorEvent.from_exception(caught))

        if record.is_called():
            logger.debug(
                f"Generator reported {len(record.events)} error(s), "
                "using error handler value"
            )
            return record.get_return_value()

        return result

    def __call__(self, *arguments: Any) -> Any:
        return self.call(arguments)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(generator={self.generator!r}, "
            f"error_handler={self.error_handler!r})"
        )
