"""
Per-tick update: every cell hands its energy to its neighborhood, writing into the working
board; the working board is then copied into the lagged board and cleared.

continuous: float energy, spread over the cell's patch with random weights summing to 1.
Conserved up to float rounding.

discrete: integer units. With probability `heat` a cell scatters its units over its Moore
neighborhood (itself included); otherwise its units are dropped for this tick, since the
working board only receives explicit contributions. A scattering cell conserves its units
exactly.
"""

import numpy as np

from world.constants import VACUUM, CONTINUOUS, DISCRETE
from world.neighborhood import patch_mask, moore_neighbors
from world.weights import masked_probabilities, random_weights


def _commit(lagged: np.ndarray, working: np.ndarray) -> None:
    """Copy (not swap) working into lagged so both buffers keep their identity, then clear working."""
    np.copyto(lagged, working)
    working.fill(VACUUM)


def _scatter_patches(contrib: np.ndarray) -> np.ndarray:
    """Sum (h, w, 3, 3) per-cell patch contributions onto an (h, w) board; zero-pad at the edges."""
    nx, ny = contrib.shape[:2]
    pad = np.zeros((nx + 2, ny + 2), dtype=contrib.dtype)
    for ki in range(3):
        for kj in range(3):
            pad[ki : ki + nx, kj : kj + ny] += contrib[:, :, ki, kj]
    return pad[1:-1, 1:-1]


def continuous_step(lagged: np.ndarray, working: np.ndarray, config, rng: np.random.Generator) -> None:
    """One tick of the continuous variant. config is not read."""
    h, w = lagged.shape
    weights = masked_probabilities(patch_mask(h, w), rng)
    contrib = lagged[:, :, np.newaxis, np.newaxis] * weights
    working += _scatter_patches(contrib)
    _commit(lagged, working)


def scatter_units(
    energy: int,
    neighbors: list[tuple[int, int]],
    rng: np.random.Generator,
) -> list[tuple[tuple[int, int], int]]:
    """
    Split `energy` units over `neighbors`. The first count - 1 neighbors get floor(energy * w)
    for random weights w summing to 1; whatever is left goes to one neighbor picked uniformly
    from the full set, which may be one that already got a share. Amounts always sum to energy.
    """
    count = len(neighbors)
    weights = random_weights(count - 1, rng)
    amounts = np.floor(energy * weights).astype(np.int64)
    shares = [(cell, int(a)) for cell, a in zip(neighbors[: count - 1], amounts)]
    remainder = energy - int(amounts.sum())
    lucky = neighbors[int(rng.integers(0, count))]
    shares.append((lucky, remainder))
    return shares


def discrete_step(lagged: np.ndarray, working: np.ndarray, config, rng: np.random.Generator) -> None:
    """One tick of the discrete variant; reads config.heat."""
    h, w = lagged.shape
    heat = config.heat
    for i in range(h):
        for j in range(w):
            if rng.random() > heat:
                continue
            energy = int(lagged[i, j])
            if energy == 0:
                continue
            for (r, c), amount in scatter_units(energy, moore_neighbors(i, j, h, w), rng):
                working[r, c] += amount
    _commit(lagged, working)


STEPPERS = {
    CONTINUOUS: continuous_step,
    DISCRETE: discrete_step,
}


def step(lagged: np.ndarray, working: np.ndarray, config, rng: np.random.Generator) -> None:
    """Advance one tick with the variant named by config.variant."""
    STEPPERS[config.variant](lagged, working, config, rng)
