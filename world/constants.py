"""Simulation constants. Vacuum = 0; patch offsets span a 3×3 window around the source cell."""

VACUUM = 0.0
# Offsets (di, dj) of the 3×3 window, row-major. Index k maps to (k // 3 - 1, k % 3 - 1).
PATCH_OFFSETS = [(di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1)]
DEFAULT_H, DEFAULT_W = 64, 64
DEFAULT_HOTSPOTS = 4
DEFAULT_HEAT = 0.5
# Energy that maps to full red in the color ramp.
DEFAULT_MAX_ENERGY = 2.0

CONTINUOUS = "continuous"
DISCRETE = "discrete"
VARIANTS = (CONTINUOUS, DISCRETE)
