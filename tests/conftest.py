from __future__ import annotations

from typing import Iterable

import pytest


class FixedRandom:
    """Random source that replays a fixed sequence of values in [0, 1)."""

    def __init__(self, values: Iterable[float]):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value


@pytest.fixture
def fixed_random():
    return FixedRandom
