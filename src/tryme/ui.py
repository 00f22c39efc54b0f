"""Streamlit catch action."""

from __future__ import annotations

from collections.abc import Callable

import streamlit as st

DEFAULT_TOAST_PREFIX = "Try.me call failed"


def toast_catch_action(prefix: str = DEFAULT_TOAST_PREFIX) -> Callable[[Exception], None]:
    """Build a catch action that shows each caught exception in a Streamlit toast.

    Example:
        >>> import tryme
        >>> tryme.set_catch_action(toast_catch_action())

    """

    def _toast(exc: Exception) -> None:
        st.toast(f"{prefix}, {exc}")

    return _toast
