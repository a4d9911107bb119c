"""Random source for the simulation. Seed -1 = new random each call.
Every function that draws takes the returned generator explicitly; there is no module-level RNG."""

import random
from typing import Tuple

import numpy as np


def make_rng(seed: int = -1) -> Tuple[np.random.Generator, int]:
    """Return (rng, seed_used). If seed == -1, choose a new random seed so the run can be replayed."""
    if seed == -1:
        seed_used = random.randint(0, 2**31 - 1)
    else:
        seed_used = seed
    return np.random.default_rng(seed_used), seed_used
