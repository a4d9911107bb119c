"""Color ramp and board drawing (no display needed)."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import numpy as np
import pygame

from ui.colors import energy_to_rgb, hsv_to_rgb
from ui.grid_view import board_pixels, draw_grid


def test_hsv_primary_hues():
    rgb = hsv_to_rgb(np.array([0.0, 120.0, 240.0]), 1.0, 1.0)
    assert np.allclose(rgb, [[1, 0, 0], [0, 1, 0], [0, 0, 1]])


def test_hsv_desaturated_is_grey():
    rgb = hsv_to_rgb(np.array([77.0]), 0.0, 0.5)
    assert np.allclose(rgb, [[0.5, 0.5, 0.5]])


def test_energy_ramp_blue_to_red():
    energy = np.array([[0.0, 1.0, 2.0, 50.0, -1.0]])
    rgb = energy_to_rgb(energy, max_energy=2.0)
    assert rgb.shape == (1, 5, 3)
    assert rgb.dtype == np.uint8
    assert rgb[0, 0].tolist() == [0, 0, 255]
    assert rgb[0, 1].tolist() == [0, 255, 0]
    assert rgb[0, 2].tolist() == [255, 0, 0]
    # clamped outside [0, max_energy]
    assert rgb[0, 3].tolist() == [255, 0, 0]
    assert rgb[0, 4].tolist() == [0, 0, 255]


def test_board_pixels_upscale():
    energy = np.zeros((2, 3))
    energy[1, 2] = 2.0
    pixels = board_pixels(energy, size_factor=4)
    assert pixels.shape == (8, 12, 3)
    assert pixels[4:, 8:].reshape(-1, 3).tolist() == [[255, 0, 0]] * 16
    assert pixels[0, 0].tolist() == [0, 0, 255]


def test_draw_grid_on_surface():
    energy = np.zeros((2, 3), dtype=np.int64)
    energy[0, 1] = 2
    surface = pygame.Surface((3 * 2, 2 * 2))
    draw_grid(surface, energy, size_factor=2, max_energy=2.0)
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 255)
    assert tuple(surface.get_at((2, 0)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((3, 1)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((4, 3)))[:3] == (0, 0, 255)
