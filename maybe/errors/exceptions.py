"""
Exceptions raised by the maybe package itself.
"""


class MaybeError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgumentError(MaybeError, TypeError):
    """A generator or error handler was missing or not callable."""

    def __init__(self, message: str, parameter: str | None = None) -> None:
        super().__init__(message)
        self.parameter = parameter


def ensure_callable(value: object, parameter: str, label: str) -> None:
    """
    Fail fast when a required callable is not callable.

    Args:
        value: Object to validate
        parameter: Name of the offending parameter, kept on the error
        label: Human readable name used in the message

    Raises:
        InvalidArgumentError: If ``value`` is not callable
    """
    if not callable(value):
        raise InvalidArgumentError(
            f"Invalid {label} given, needs to be callable", parameter=parameter
        )
