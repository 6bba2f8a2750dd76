"""
Shared test doubles.
"""


class FixedRandom:
    """Cycles through a fixed sequence of floats."""

    def __init__(self, values):
        self._values = list(values)
        self._i = 0

    def random(self) -> float:
        v = self._values[self._i % len(self._values)]
        self._i += 1
        return v
