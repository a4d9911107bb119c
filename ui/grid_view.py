"""Board view: each cell is a size_factor × size_factor block colored by its energy."""

import pygame
import numpy as np

from ui.colors import energy_to_rgb
from world.constants import DEFAULT_MAX_ENERGY


def board_pixels(energy: np.ndarray, size_factor: int = 1, max_energy: float = DEFAULT_MAX_ENERGY) -> np.ndarray:
    """(h * size_factor, w * size_factor, 3) uint8 image of the board, nearest-neighbor upscaled."""
    rgb = energy_to_rgb(energy, max_energy)
    if size_factor > 1:
        rgb = np.repeat(np.repeat(rgb, size_factor, axis=0), size_factor, axis=1)
    return np.ascontiguousarray(rgb)


def draw_grid(
    surface: pygame.Surface,
    energy: np.ndarray,
    size_factor: int = 1,
    max_energy: float = DEFAULT_MAX_ENERGY,
    topleft: tuple[int, int] = (0, 0),
) -> None:
    """Draw the board onto surface at topleft."""
    nx, ny = energy.shape
    if nx == 0 or ny == 0:
        return
    pixels = board_pixels(energy, size_factor, max_energy)
    H, W = pixels.shape[0], pixels.shape[1]
    # pygame: size (width, height); pixels is (H, W, 3) row-major
    img = pygame.image.frombytes(pixels.tobytes(), (W, H), "RGB")
    surface.blit(img, topleft)
