"""Scripted random source for tests that need exact draws."""

import numpy as np


class ScriptedRng:
    """Stands in for numpy.random.Generator: random() and integers() pop from fixed lists."""

    def __init__(self, floats=(), ints=()):
        self.floats = list(floats)
        self.ints = list(ints)

    def random(self, size=None):
        if size is None:
            return self.floats.pop(0)
        n = int(np.prod(size))
        return np.array([self.floats.pop(0) for _ in range(n)], dtype=np.float64).reshape(size)

    def integers(self, low, high=None):
        return self.ints.pop(0)
