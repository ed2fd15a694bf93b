# tests/helpers.py
import numpy as np


class ScriptedRng:
    """Stands in for numpy's Generator, replaying fixed draws."""

    def __init__(self, randoms=(), integers=()):
        self._randoms = list(randoms)
        self._integers = list(integers)

    def random(self, size=None):
        if size is None:
            return self._randoms.pop(0)
        return np.array(self._randoms.pop(0), dtype=float)

    def integers(self, low, high=None):
        return self._integers.pop(0)
