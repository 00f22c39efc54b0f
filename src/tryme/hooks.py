"""Ready-made catch actions."""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableSequence

DEFAULT_LOG_MESSAGE = "Exception caught by attempt"


def noop(_: Exception, /) -> None:
    """Catch action that does nothing; the default for every config."""


def log_exception(
    logger: logging.Logger | None = None,
    *,
    level: int = logging.ERROR,
    message: str = DEFAULT_LOG_MESSAGE,
) -> Callable[[Exception], None]:
    """Build a catch action that logs the caught exception with its traceback.

    Args:
        logger: Logger to write to. Defaults to the ``tryme`` logger.
        level: Logging level for the record.
        message: Message logged alongside the exception.

    Example:
        >>> import tryme
        >>> tryme.set_catch_action(log_exception(logging.getLogger("app")))

    """
    target = logger if logger is not None else logging.getLogger("tryme")

    def _log(exc: Exception) -> None:
        target.log(level, message, exc_info=(type(exc), exc, exc.__traceback__))

    return _log


def collect_into(bucket: MutableSequence[Exception]) -> Callable[[Exception], None]:
    """Build a catch action that appends every caught exception to ``bucket``."""

    def _collect(exc: Exception) -> None:
        bucket.append(exc)

    return _collect
