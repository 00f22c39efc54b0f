from __future__ import annotations

from collections.abc import Iterator

import pytest

import tryme


@pytest.fixture(autouse=True)
def _reset_shared_catch_action() -> Iterator[None]:
    tryme.reset_catch_action()
    yield
    tryme.reset_catch_action()
