"""World: grid, neighborhoods, random weights and tick-driven diffusion."""

from world.grid import Grid, init_board, hotspot_energy
from world.diffusion import step, continuous_step, discrete_step, STEPPERS
from world.engine import DiffusionEngine, EngineStateError
from world.constants import DEFAULT_H, DEFAULT_W, CONTINUOUS, DISCRETE, VARIANTS, VACUUM

__all__ = [
    "Grid", "init_board", "hotspot_energy",
    "step", "continuous_step", "discrete_step", "STEPPERS",
    "DiffusionEngine", "EngineStateError",
    "DEFAULT_H", "DEFAULT_W", "CONTINUOUS", "DISCRETE", "VARIANTS", "VACUUM",
]
