"""
Adjacency tests.

Neighborhood rectangles must clamp at every edge of the grid (row 0,
column 0, last row, last column, short rows) without wrapping and
without out-of-range access.
"""

import os
import sys

import numpy as np

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from schematic.adjacency import (
    adjacency_map, is_valid_part, neighborhood, part_number_sum, valid_parts
)
from schematic.parser import parse_schematic
from schematic.types import G, PartToken, Rect


def make_sample():
    return parse_schematic(
        "467..114..\n"
        "...*......\n"
        "..35..633.\n"
        "......#...\n"
        "617*......\n"
        ".....+.58.\n"
        "..592.....\n"
        "......755.\n"
        "...$.*....\n"
        ".664.598..\n"
    )


# ==============================================================================
# Neighborhood Rectangle
# ==============================================================================

def test_neighborhood_interior():
    """Footprint plus one ring: rows r-1..r+1, cols c-1..c+length."""
    rect = neighborhood(PartToken((2, 2), 2, 35))
    assert rect == Rect(1, 1, 3, 4)


def test_neighborhood_clamps_lower_bounds():
    rect = neighborhood(PartToken((0, 0), 3, 467))
    assert rect == Rect(0, 0, 1, 3)


def test_clip_clamps_upper_bounds():
    """Clipping against a grid never yields a row or column past the edge."""
    grid = G(["..", ".1"])
    rect = neighborhood(PartToken((1, 1), 1, 1))
    assert list(rect.clip(grid)) == [(0, 0, 1), (1, 0, 1)]


def test_clip_skips_short_rows():
    """A row too short to reach the rectangle contributes no cells."""
    grid = G(["", ".....12"])
    rect = neighborhood(PartToken((1, 5), 2, 12))
    assert list(rect.clip(grid)) == [(1, 4, 6)]


# ==============================================================================
# Part Validity
# ==============================================================================

def test_corner_digit_with_symbol_neighbor():
    """A lone digit at (0,0) with a symbol at (0,1) is counted."""
    s = parse_schematic("1#")
    assert is_valid_part(s.grid, s.parts[0])
    assert part_number_sum(s) == 1


def test_last_row_last_column():
    s = parse_schematic("...\n..$\n..7")
    assert valid_parts(s) == [PartToken((2, 2), 1, 7)]


def test_diagonal_adjacency():
    s = parse_schematic("*...\n.12.\n....")
    assert part_number_sum(s) == 12


def test_isolated_part_excluded():
    """114 in the sample has no neighboring symbol."""
    s = make_sample()
    mask = adjacency_map(s)
    excluded = [p.value for p, ok in zip(s.parts, mask) if not ok]
    assert excluded == [114, 58], f"Got {excluded}"


def test_symbol_two_columns_away_does_not_count():
    s = parse_schematic("12.#")
    assert part_number_sum(s) == 0


def test_symbol_on_longer_row_beyond_token():
    """Ragged rows: a symbol further right on a longer row is out of reach."""
    s = parse_schematic("5\n..*")
    assert part_number_sum(s) == 0
    s = parse_schematic("5\n.*")
    assert part_number_sum(s) == 5


def test_part_one_sample():
    assert part_number_sum(make_sample()) == 4361


def test_adjacency_map_dtype():
    m = adjacency_map(make_sample())
    assert m.dtype == bool
    assert int(np.sum(m)) == 8
