"""
Neighborhoods of a cell inside an h × w grid.

Continuous diffusion spreads into a patch whose shape depends on where the cell sits:
2×2 in the four corners, 2×3 on the top/bottom rows, 3×2 on the left/right columns and
3×3 everywhere else. Border patches are anchored at the border, not centred on the cell.
Discrete diffusion uses the in-bounds Moore neighborhood, the cell itself included.
"""

import numpy as np

CORNER = "corner"
TOP = "top"
BOTTOM = "bottom"
LEFT = "left"
RIGHT = "right"
INTERIOR = "interior"


def _check_patch_dims(h: int, w: int) -> None:
    if h < 2 or w < 2:
        raise ValueError(f"patches need a grid of at least 2×2, got {h}×{w}")


def classify_cell(i: int, j: int, h: int, w: int) -> str:
    """Corners first, then top/bottom rows, then left/right columns, else interior."""
    on_row_edge = i == 0 or i == h - 1
    on_col_edge = j == 0 or j == w - 1
    if on_row_edge and on_col_edge:
        return CORNER
    if i == 0:
        return TOP
    if i == h - 1:
        return BOTTOM
    if j == 0:
        return LEFT
    if j == w - 1:
        return RIGHT
    return INTERIOR


def patch_slices(i: int, j: int, h: int, w: int) -> tuple[slice, slice]:
    """(rows, cols) slices of the window cell (i, j) spreads into."""
    _check_patch_dims(h, w)
    kind = classify_cell(i, j, h, w)
    rows = slice(i - 1, i + 2)
    cols = slice(j - 1, j + 2)
    if kind in (CORNER, TOP, BOTTOM):
        rows = slice(0, 2) if i == 0 else slice(h - 2, h)
    if kind in (CORNER, LEFT, RIGHT):
        cols = slice(0, 2) if j == 0 else slice(w - 2, w)
    return rows, cols


def patch_shape(i: int, j: int, h: int, w: int) -> tuple[int, int]:
    rows, cols = patch_slices(i, j, h, w)
    return rows.stop - rows.start, cols.stop - cols.start


def patch_mask(h: int, w: int) -> np.ndarray:
    """
    (h, w, 3, 3) bool; mask[i, j, di + 1, dj + 1] is True iff (i + di, j + dj) is inside the
    patch of (i, j). Same windows as patch_slices, for the whole grid at once.
    """
    _check_patch_dims(h, w)
    mask = np.ones((h, w, 3, 3), dtype=bool)
    mask[0, :, 0, :] = False
    mask[h - 1, :, 2, :] = False
    mask[:, 0, :, 0] = False
    mask[:, w - 1, :, 2] = False
    return mask


def moore_neighbors(i: int, j: int, h: int, w: int) -> list[tuple[int, int]]:
    """In-bounds cells of [i-1, i+1] × [j-1, j+1], row-major, (i, j) included."""
    return [
        (r, c)
        for r in range(max(i - 1, 0), min(i + 2, h))
        for c in range(max(j - 1, 0), min(j + 2, w))
    ]
