"""UI: board view and color ramp."""

from ui.grid_view import draw_grid, board_pixels
from ui.colors import energy_to_rgb, hsv_to_rgb

__all__ = ["draw_grid", "board_pixels", "energy_to_rgb", "hsv_to_rgb"]
