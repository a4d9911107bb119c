"""
Random normalized weights for spreading a cell's energy.
Each weight is an independent uniform [0, 1) draw divided by the sum of the draws, so a
weight set always sums to 1 and the spread conserves the source energy.
"""

import numpy as np


def _normalize(p: np.ndarray) -> np.ndarray:
    s = float(np.sum(p))
    if s <= 0.0:
        # Every draw came out 0.0; fall back to an even split.
        return np.full_like(p, 1.0 / p.size)
    return p / s


def random_weights(n: int, rng: np.random.Generator) -> np.ndarray:
    """Weight vector of length n summing to 1. n == 1 gives [1.0]; n == 0 gives an empty vector."""
    if n < 0:
        raise ValueError(f"neighborhood size must be non-negative, got {n}")
    if n == 0:
        return np.zeros(0, dtype=np.float64)
    if n == 1:
        return np.ones(1, dtype=np.float64)
    return _normalize(rng.random(n))


def probability_mat(shape: tuple[int, int], rng: np.random.Generator) -> np.ndarray:
    """(a, b) matrix of weights summing to 1, laid out like the patch it fills."""
    a, b = shape
    return random_weights(a * b, rng).reshape(a, b)


def masked_probabilities(mask: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    """
    Batched weights for a whole grid. mask is (h, w, 3, 3) bool, True where the cell's patch
    reaches; returns float (h, w, 3, 3) with each cell's True entries summing to 1 and the
    rest 0. Draws are fresh on every call.
    """
    mask = np.asarray(mask, dtype=bool)
    p = rng.random(mask.shape) * mask
    s = p.sum(axis=(-2, -1), keepdims=True)
    count = mask.sum(axis=(-2, -1), keepdims=True)
    even = np.where(mask, 1.0 / np.maximum(count, 1), 0.0)
    return np.where(s > 0.0, p / np.where(s > 0.0, s, 1.0), even)
