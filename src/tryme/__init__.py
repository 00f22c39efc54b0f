"""Replace a try/except block with a single call, with one shared catch action."""

from __future__ import annotations

from .core import (
    FATAL_ERRORS,
    CatchAction,
    TryConfig,
    TryMe,
    attempt,
    attempt_or,
    config,
    reset_catch_action,
    set_catch_action,
)

__all__ = [
    "FATAL_ERRORS",
    "CatchAction",
    "TryConfig",
    "TryMe",
    "attempt",
    "attempt_or",
    "config",
    "reset_catch_action",
    "set_catch_action",
]
