"""2D energy grid: a lagged board (last finished step, what gets drawn) and a working board being written."""

import numpy as np

from world.constants import VACUUM, DEFAULT_H, DEFAULT_W


def hotspot_energy(h: int, w: int, hotspots: int, integral: bool = False):
    """Energy of each hotspot: (h * w * w / h) / hotspots, i.e. w * w / hotspots. Integer grids floor-divide."""
    if integral:
        return (h * w * w // h) // hotspots
    return (h * w * w / h) / hotspots


def init_board(
    h: int,
    w: int,
    hotspots: int,
    rng: np.random.Generator,
    dtype=np.float64,
) -> np.ndarray:
    """
    Zero board with `hotspots` distinct cells set to hotspot_energy. Cells are picked by
    rejection sampling: draw a uniform coordinate, keep it if the cell is still empty.
    """
    if h <= 0 or w <= 0:
        raise ValueError(f"grid dimensions must be positive, got {h}×{w}")
    if not 0 < hotspots <= h * w:
        raise ValueError(f"hotspots must be in [1, {h * w}] for a {h}×{w} grid, got {hotspots}")
    value = hotspot_energy(h, w, hotspots, integral=np.issubdtype(dtype, np.integer))
    if value <= 0:
        raise ValueError(f"{hotspots} hotspots leave no energy per hotspot on a {h}×{w} grid")

    board = np.full((h, w), VACUUM, dtype=dtype)
    quota = 0
    while quota != hotspots:
        rx = int(rng.integers(0, w))
        ry = int(rng.integers(0, h))
        if board[ry, rx] != 0:
            continue
        board[ry, rx] = value
        quota += 1
    return board


class Grid:
    """Double buffer; only one of the two boards is written during a step."""

    __slots__ = ("shape", "lagged", "working")

    def __init__(self, h: int = DEFAULT_H, w: int = DEFAULT_W, dtype=np.float64) -> None:
        self.shape = (h, w)
        self.lagged = np.zeros(self.shape, dtype=dtype)
        self.working = np.zeros(self.shape, dtype=dtype)

    @property
    def dtype(self) -> np.dtype:
        return self.lagged.dtype

    def total(self):
        return self.lagged.sum().item()

    def seed_hotspots(self, hotspots: int, rng: np.random.Generator) -> None:
        h, w = self.shape
        self.lagged[:] = init_board(h, w, hotspots, rng, dtype=self.dtype)
        self.working.fill(VACUUM)
