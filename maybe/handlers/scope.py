"""
Scoped installation of a temporary warning handler.

The ``warnings`` module keeps one process-wide handler slot and filter list.
``suppressed_errors`` saves both, installs a capture record as the handler,
and restores the saved state on every exit path.
"""

import logging
import threading
import warnings
from collections.abc import Iterator
from contextlib import contextmanager

from .capture import ErrorReturn

logger = logging.getLogger(__name__)

# Held between install and restore; re-entrant so nested calls stack.
_handler_lock = threading.RLock()


@contextmanager
def suppressed_errors(
    record: ErrorReturn,
    *,
    action: str = "always",
    capture_warnings: bool = True,
) -> Iterator[ErrorReturn]:
    """
    Route warnings raised inside the block to ``record``.

    Args:
        record: Capture record receiving the warnings
        action: Warning filter action applied inside the block
        capture_warnings: Install the handler at all (False leaves warnings alone)

    Example:
        record = ErrorReturn(lambda category, message: None)
        with suppressed_errors(record):
            warnings.warn("ignored")
        assert record.is_called()
    """
    if not capture_warnings:
        yield record
        return

    with _handler_lock:
        with warnings.catch_warnings():
            warnings.simplefilter(action)
            record.previous_showwarning = warnings.showwarning
            warnings.showwarning = record.showwarning
            logger.debug("Installed temporary warning handler")
            try:
                yield record
            finally:
                logger.debug("Restoring previous warning handler")
