"""Try/except replacement that recovers to a value and notifies a shared hook."""

from __future__ import annotations

import threading
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, Protocol, TypeVar

from .hooks import noop

R = TypeVar("R")
P = ParamSpec("P")

# Raised as Exception subclasses, but never recoverable.
FATAL_ERRORS: tuple[type[BaseException], ...] = (MemoryError, RecursionError)


class CatchAction(Protocol):
    """Callable that receives each exception absorbed by ``attempt``.

    The config's current action is looked up when the exception is caught, not
    when the call starts. Ordinary exceptions it raises are suppressed so the
    caller still gets its fallback.
    """

    def __call__(self, exc: Exception, /) -> None:
        """React to ``exc``; the return value is ignored."""
        ...


class TryConfig:
    """Holds the catch action shared by every ``attempt`` bound to this config.

    The catch action defaults to a no-op and may be replaced at any time; the
    last assignment wins. Reads and writes are serialized by a lock so a new
    action is visible to every thread that faults afterwards.

    Example:
        >>> config = TryConfig()
        >>> config.catch_action = lambda e: print(f"Caught: {e}")

    """

    def __init__(self, catch_action: CatchAction | None = None) -> None:
        """Create a config, optionally with an initial catch action."""
        self._lock = threading.Lock()
        self._catch_action: CatchAction = noop
        self.catch_action = catch_action

    @property
    def catch_action(self) -> CatchAction:
        """Action called with every caught exception; ``None`` restores the no-op."""
        with self._lock:
            return self._catch_action

    @catch_action.setter
    def catch_action(self, action: CatchAction | None) -> None:
        if action is not None and not callable(action):
            msg = f"catch_action must be callable, got {type(action).__name__}"
            raise TypeError(msg)
        with self._lock:
            self._catch_action = noop if action is None else action

    def reset(self) -> None:
        """Restore the no-op catch action."""
        self.catch_action = None


def _notify(config: TryConfig, exc: Exception) -> None:
    action = config.catch_action
    try:
        action(exc)
    except FATAL_ERRORS:
        raise
    except Exception:  # noqa: S110, BLE001
        # Suppress hook failures so the caller still gets its fallback
        pass


def _run(config: TryConfig, fallback: R, computation: Callable[[], R]) -> R:
    try:
        return computation()
    except FATAL_ERRORS:
        raise
    except Exception as exc:  # noqa: BLE001
        _notify(config, exc)
        return fallback


class TryMe:
    """Runs computations with exceptions absorbed and reported to one catch action.

    Each instance is bound to a :class:`TryConfig`. Pass the application's
    config in to share a hook across call sites, or omit it for an isolated
    helper with its own no-op hook.

    Args:
        config: Configuration holding the catch action. A fresh ``TryConfig``
            is created when omitted.

    Example:
        >>> helper = TryMe()
        >>> helper.catch_action = lambda e: print(f"Error: {e}")
        >>> helper.attempt_or("fail", lambda: ["element 0"][1])
        Error: list index out of range
        'fail'

    """

    def __init__(self, config: TryConfig | None = None) -> None:
        """Bind the helper to ``config``, or to a fresh one."""
        self.config = config if config is not None else TryConfig()

    @property
    def catch_action(self) -> CatchAction:
        """Catch action of the bound config."""
        return self.config.catch_action

    @catch_action.setter
    def catch_action(self, action: CatchAction | None) -> None:
        self.config.catch_action = action

    def attempt(self, computation: Callable[[], R], /) -> R | None:
        """Run ``computation`` once, returning its result or ``None`` on exception.

        When ``computation`` raises, the current catch action is called with the
        exception first, then ``None`` is returned. ``MemoryError``,
        ``RecursionError`` and exceptions outside ``Exception`` (``SystemExit``,
        ``KeyboardInterrupt``) propagate untouched.
        """
        return self.attempt_or(None, computation)

    def attempt_or(self, fallback: R, computation: Callable[[], R], /) -> R:
        """Run ``computation`` once, returning its result or ``fallback`` on exception.

        Same interception rules as :meth:`attempt`. ``fallback`` is ignored when
        ``computation`` completes normally.
        """
        return _run(self.config, fallback, computation)

    def decorate(self, func: Callable[P, R]) -> Callable[P, R | None]:
        """Wrap a function so each call goes through :meth:`attempt`.

        Useful for UI callbacks (Streamlit ``on_click``/``on_change``) where the
        caller has nowhere to put a ``try``/``except``.

        Returns:
            Wrapped function returning the original result on success, or None
            when an exception occurs.

        """

        @wraps(func)
        def _wrapped(*args: P.args, **kwargs: P.kwargs) -> R | None:
            return self.attempt(lambda: func(*args, **kwargs))

        return _wrapped


config = TryConfig()
_default = TryMe(config)


def attempt(computation: Callable[[], R], /, *, config: TryConfig | None = None) -> R | None:
    """Run ``computation`` and return its result, or ``None`` if it raised.

    The catch action of ``config`` (the shared module-level config by default)
    is called once with the exception before ``None`` is returned.

    Example:
        >>> attempt(lambda: "worked")
        'worked'
        >>> attempt(lambda: ["element 0"][1]) is None
        True

    """
    helper = _default if config is None else TryMe(config)
    return helper.attempt(computation)


def attempt_or(fallback: R, computation: Callable[[], R], /, *, config: TryConfig | None = None) -> R:
    """Run ``computation`` and return its result, or ``fallback`` if it raised.

    Example:
        >>> attempt_or("failed", lambda: ["element 0"][1])
        'failed'

    """
    helper = _default if config is None else TryMe(config)
    return helper.attempt_or(fallback, computation)


def set_catch_action(action: CatchAction | None) -> None:
    """Replace the catch action of the shared module-level config."""
    config.catch_action = action


def reset_catch_action() -> None:
    """Restore the shared module-level config's no-op catch action."""
    config.reset()
