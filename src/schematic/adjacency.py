#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Schematic - Adjacency Evaluator"""

import numpy as np
from typing import List

from .types import Grid, PartToken, Rect, Schematic, symbol_mask

# =============================================================================
# Neighborhood Rectangle
# =============================================================================

def neighborhood(part: PartToken) -> Rect:
    """
    Cells within Chebyshev distance 1 of the part's footprint.

    Rows [row-1, row+1], columns [col-1, col+length], lower bounds clamped
    at 0. Upper bounds are clamped against the grid by Rect.clip.
    """
    r, c = part.start
    return Rect(max(r - 1, 0), max(c - 1, 0), r + 1, c + part.length)


# =============================================================================
# Part Validity
# =============================================================================

def touches_symbol(grid: Grid, rect: Rect) -> bool:
    """True if any clipped cell of rect holds a symbol."""
    for r, c_lo, c_hi in rect.clip(grid):
        if symbol_mask(grid[r][c_lo:c_hi + 1]).any():
            return True
    return False


def is_valid_part(grid: Grid, part: PartToken) -> bool:
    """A part is valid when its neighborhood contains a symbol."""
    return touches_symbol(grid, neighborhood(part))


def valid_parts(s: Schematic) -> List[PartToken]:
    return [p for p in s.parts if is_valid_part(s.grid, p)]


def part_number_sum(s: Schematic) -> int:
    """Part 1: sum of values over valid parts."""
    return int(sum(p.value for p in valid_parts(s)))


def adjacency_map(s: Schematic) -> np.ndarray:
    """Boolean vector, one entry per part in discovery order."""
    return np.array([is_valid_part(s.grid, p) for p in s.parts], dtype=bool)
