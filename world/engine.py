"""Owns the grid and the random source; step() is the only thing that mutates the board."""

import logging

import numpy as np

from world.constants import DISCRETE
from world.diffusion import STEPPERS
from world.grid import Grid, hotspot_energy
from world.seed_util import make_rng

logger = logging.getLogger(__name__)

IDLE = "idle"
READY = "ready"
STEPPED = "stepped"


class EngineStateError(RuntimeError):
    """step() called before initialize()."""


class DiffusionEngine:
    """
    idle -> ready (initialize) -> stepped (step, repeatable). initialize() may be called again
    to reseed hotspots. The config is expected to be validated already (config.SimConfig).
    """

    def __init__(self, config, rng: np.random.Generator | None = None) -> None:
        if config.variant not in STEPPERS:
            raise ValueError(f"unknown diffusion variant {config.variant!r}")
        self.config = config
        self.variant = config.variant
        self._stepper = STEPPERS[config.variant]
        if rng is None:
            rng, self.seed_used = make_rng(config.seed)
        else:
            self.seed_used = None
        self.rng = rng
        h, w = config.dims
        dtype = np.int64 if config.variant == DISCRETE else np.float64
        self.grid = Grid(h, w, dtype=dtype)
        self.state = IDLE
        self.tick = 0
        self.initial_total = None

    def initialize(self) -> np.ndarray:
        h, w = self.config.dims
        self.grid.seed_hotspots(self.config.hotspots, self.rng)
        self.tick = 0
        self.initial_total = self.grid.total()
        self.state = READY
        logger.info(
            "Initialized %s grid %dx%d: %d hotspots of %s energy (total %s, seed %s)",
            self.variant, h, w, self.config.hotspots,
            hotspot_energy(h, w, self.config.hotspots, integral=self.variant == DISCRETE),
            self.initial_total, self.seed_used,
        )
        return self.board

    def step(self) -> None:
        if self.state == IDLE:
            raise EngineStateError("initialize() must be called before step()")
        self._stepper(self.grid.lagged, self.grid.working, self.config, self.rng)
        self.tick += 1
        self.state = STEPPED
        logger.debug("tick %d: total energy %s", self.tick, self.grid.total())

    def run(self, steps: int) -> None:
        for _ in range(steps):
            self.step()

    @property
    def board(self) -> np.ndarray:
        """Read-only view of the lagged board."""
        view = self.grid.lagged.view()
        view.flags.writeable = False
        return view

    def total_energy(self):
        return self.grid.total()
