"""
Display-only color ramp: energy 0 is blue (hue 240), max_energy and above is red (hue 0),
with green/yellow in between. Energies are clamped to [0, max_energy] before mapping.
"""

import numpy as np

from world.constants import DEFAULT_MAX_ENERGY

MIN_HUE = 240.0  # blue
MAX_HUE = 0.0    # red


def hsv_to_rgb(h, s, v) -> np.ndarray:
    """Vectorized HSV -> RGB. h in degrees [0, 360), s and v in [0, 1]. Returns (..., 3) floats in [0, 1]."""
    h = np.asarray(h, dtype=np.float64)
    s = np.broadcast_to(np.asarray(s, dtype=np.float64), h.shape)
    v = np.broadcast_to(np.asarray(v, dtype=np.float64), h.shape)
    c = v * s
    h_prime = np.mod(h, 360.0) / 60.0
    x = c * (1.0 - np.abs(np.mod(h_prime, 2.0) - 1.0))
    zero = np.zeros_like(c)
    sector = np.clip(np.floor(h_prime), 0, 5).astype(np.int64)
    # One (r, g, b) choice per 60° sector.
    r = np.choose(sector, [c, x, zero, zero, x, c])
    g = np.choose(sector, [x, c, c, x, zero, zero])
    b = np.choose(sector, [zero, zero, x, c, c, x])
    m = v - c
    return np.stack([r + m, g + m, b + m], axis=-1)


def energy_to_rgb(energy: np.ndarray, max_energy: float = DEFAULT_MAX_ENERGY) -> np.ndarray:
    """Returns (h, w, 3) uint8 RGB for an (h, w) energy board."""
    t = np.clip(np.asarray(energy, dtype=np.float64) / max_energy, 0.0, 1.0)
    hue = MIN_HUE - t * (MIN_HUE - MAX_HUE)
    rgb = hsv_to_rgb(hue, 1.0, 1.0)
    return (np.clip(rgb, 0.0, 1.0) * 255).astype(np.uint8)
