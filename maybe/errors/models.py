"""
Error models and data classes for intercepted events.
"""

from dataclasses import dataclass, field
import datetime
from enum import Enum
from typing import Any


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorSource(Enum):
    """Channel an intercepted event arrived through."""

    WARNING = "warning"
    EXCEPTION = "exception"


def classify_severity(category: type[BaseException]) -> ErrorSeverity:
    """
    Classify a warning or exception class into a severity level.

    Args:
        category: Warning or exception class of the event

    Returns:
        ErrorSeverity for the category
    """
    if issubclass(category, (DeprecationWarning, PendingDeprecationWarning)):
        return ErrorSeverity.LOW
    if issubclass(category, Warning):
        return ErrorSeverity.MEDIUM
    if issubclass(category, (PermissionError, MemoryError)):
        return ErrorSeverity.CRITICAL
    if issubclass(category, OSError):
        return ErrorSeverity.HIGH
    if issubclass(category, (ValueError, LookupError)):
        return ErrorSeverity.MEDIUM
    return ErrorSeverity.HIGH


@dataclass
class ErrorEvent:
    """One error or warning reported by a generator."""

    category: type[BaseException]
    message: str
    filename: str | None = None
    lineno: int | None = None
    source: ErrorSource = ErrorSource.WARNING
    exception: BaseException | None = None
    context: dict[str, Any] = field(default_factory=dict)
    severity: ErrorSeverity | None = None
    timestamp: datetime.datetime | None = None

    def __post_init__(self) -> None:
        """Derive severity and timestamp if not provided."""
        if self.severity is None:
            self.severity = classify_severity(self.category)
        if self.timestamp is None:
            self.timestamp = datetime.datetime.now(datetime.UTC)

    @classmethod
    def from_warning(
        cls,
        message: Warning | str,
        category: type[Warning],
        filename: str | None,
        lineno: int | None,
        line: str | None = None,
    ) -> "ErrorEvent":
        """Build an event from the arguments of ``warnings.showwarning``."""
        context: dict[str, Any] = {}
        if line is not None:
            context["line"] = line
        if isinstance(message, Warning):
            context["warning"] = message
        return cls(
            category=category,
            message=str(message),
            filename=filename,
            lineno=lineno,
            source=ErrorSource.WARNING,
            context=context,
        )

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorEvent":
        """Build an event from a raised exception, locating its innermost frame."""
        filename = lineno = None
        tb = exc.__traceback__
        while tb is not None and tb.tb_next is not None:
            tb = tb.tb_next
        if tb is not None:
            filename = tb.tb_frame.f_code.co_filename
            lineno = tb.tb_lineno
        return cls(
            category=type(exc),
            message=str(exc),
            filename=filename,
            lineno=lineno,
            source=ErrorSource.EXCEPTION,
            exception=exc,
            context={"exception": exc},
        )

    def handler_args(self) -> tuple[Any, ...]:
        """Positional arguments handed to a recovery function."""
        return (self.category, self.message, self.filename, self.lineno, self.context)
