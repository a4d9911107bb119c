"""Patch classification and Moore neighborhoods."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import numpy as np
import pytest

from world.neighborhood import (
    classify_cell, patch_slices, patch_shape, patch_mask, moore_neighbors,
    CORNER, TOP, BOTTOM, LEFT, RIGHT, INTERIOR,
)


def test_classification_precedence():
    h, w = 5, 6
    assert classify_cell(0, 0, h, w) == CORNER
    assert classify_cell(0, w - 1, h, w) == CORNER
    assert classify_cell(h - 1, 0, h, w) == CORNER
    assert classify_cell(h - 1, w - 1, h, w) == CORNER
    assert classify_cell(0, 2, h, w) == TOP
    assert classify_cell(h - 1, 3, h, w) == BOTTOM
    assert classify_cell(2, 0, h, w) == LEFT
    assert classify_cell(3, w - 1, h, w) == RIGHT
    assert classify_cell(2, 2, h, w) == INTERIOR


def test_patch_shapes_on_grids_of_at_least_four():
    for h, w in [(4, 4), (5, 7), (8, 4)]:
        for i in range(h):
            for j in range(w):
                kind = classify_cell(i, j, h, w)
                expected = {
                    CORNER: (2, 2),
                    TOP: (2, 3),
                    BOTTOM: (2, 3),
                    LEFT: (3, 2),
                    RIGHT: (3, 2),
                    INTERIOR: (3, 3),
                }[kind]
                assert patch_shape(i, j, h, w) == expected


def test_border_patches_are_anchored():
    h, w = 6, 7
    assert patch_slices(0, 0, h, w) == (slice(0, 2), slice(0, 2))
    assert patch_slices(h - 1, w - 1, h, w) == (slice(h - 2, h), slice(w - 2, w))
    assert patch_slices(0, 3, h, w) == (slice(0, 2), slice(2, 5))
    assert patch_slices(h - 1, 3, h, w) == (slice(h - 2, h), slice(2, 5))
    assert patch_slices(2, 0, h, w) == (slice(1, 4), slice(0, 2))
    # right column uses the width, not the height, on non-square grids
    assert patch_slices(2, w - 1, h, w) == (slice(1, 4), slice(w - 2, w))
    assert patch_slices(3, 3, h, w) == (slice(2, 5), slice(2, 5))


def test_patch_mask_matches_patch_slices():
    for h, w in [(2, 2), (2, 5), (5, 2), (4, 4), (5, 7)]:
        mask = patch_mask(h, w)
        for i in range(h):
            for j in range(w):
                rows, cols = patch_slices(i, j, h, w)
                expected = np.zeros((3, 3), dtype=bool)
                for r in range(rows.start, rows.stop):
                    for c in range(cols.start, cols.stop):
                        expected[r - i + 1, c - j + 1] = True
                assert np.array_equal(mask[i, j], expected), (h, w, i, j)


def test_patches_need_two_by_two():
    with pytest.raises(ValueError):
        patch_mask(1, 5)
    with pytest.raises(ValueError):
        patch_slices(0, 0, 3, 1)


def test_moore_neighbors_include_self():
    h, w = 5, 5
    corner = moore_neighbors(0, 0, h, w)
    edge = moore_neighbors(0, 2, h, w)
    inner = moore_neighbors(2, 2, h, w)
    assert len(corner) == 4 and (0, 0) in corner
    assert len(edge) == 6 and (0, 2) in edge
    assert len(inner) == 9 and (2, 2) in inner
    assert inner == [(r, c) for r in (1, 2, 3) for c in (1, 2, 3)]


def test_moore_neighbors_are_in_bounds():
    h, w = 3, 4
    for i in range(h):
        for j in range(w):
            for r, c in moore_neighbors(i, j, h, w):
                assert 0 <= r < h and 0 <= c < w


def test_moore_neighbors_on_degenerate_grids():
    assert moore_neighbors(0, 0, 1, 1) == [(0, 0)]
    assert moore_neighbors(0, 1, 1, 3) == [(0, 0), (0, 1), (0, 2)]
