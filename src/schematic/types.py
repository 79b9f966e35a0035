#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schematic - Type Definitions
============================

Core types used throughout the schematic engine:
- Grid: tuple of read-only character rows (ragged, never padded)
- PartToken: maximal horizontal run of digits
- Symbol: any non-digit, non-blank character
- Gear: '*' symbol annotated with its adjacent parts
- Rect: inclusive neighborhood rectangle shared by both adjacency tests
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .config import BLANK, GEAR_GLYPH

# =============================================================================
# Core Types
# =============================================================================

Row = np.ndarray                 # dtype='<U1', shape (W_r,), writeable=False
Grid = Tuple[Row, ...]           # one row per input line
Position = Tuple[int, int]       # (row, col)


@dataclass(frozen=True)
class PartToken:
    """A run of digits with its start coordinate and integer value."""
    start: Position
    length: int
    value: int

    @property
    def row(self) -> int:
        return self.start[0]

    @property
    def col(self) -> int:
        return self.start[1]

    @property
    def end_col(self) -> int:
        """Last column occupied by the token (inclusive)."""
        return self.start[1] + self.length - 1


@dataclass(frozen=True)
class Symbol:
    """A non-digit, non-blank character at a grid position."""
    position: Position
    glyph: str

    @property
    def is_gear(self) -> bool:
        return self.glyph == GEAR_GLYPH


@dataclass(frozen=True)
class Gear:
    """Gear candidate annotated with the parts adjacent to it."""
    symbol: Symbol
    parts: Tuple[PartToken, ...]

    @property
    def position(self) -> Position:
        return self.symbol.position

    @property
    def is_resolved(self) -> bool:
        """True when exactly two parts touch the gear."""
        return len(self.parts) == 2

    @property
    def ratio(self) -> int:
        if not self.is_resolved:
            return 0
        a, b = self.parts
        return a.value * b.value


@dataclass(frozen=True)
class Rect:
    """
    Inclusive rectangle (r0, c0, r1, c1).

    Lower bounds are clamped at 0; upper bounds are left open so the same
    rectangle can be tested against any position (gear side) or clipped
    against the rows of a concrete grid (scan side).
    """
    r0: int
    c0: int
    r1: int
    c1: int

    def contains(self, pos: Position) -> bool:
        r, c = pos
        return self.r0 <= r <= self.r1 and self.c0 <= c <= self.c1

    def clip(self, grid: Grid) -> Iterator[Tuple[int, int, int]]:
        """
        Yield (row, c_lo, c_hi) for every grid row the rectangle covers,
        with columns clamped to [0, len(row) - 1]. Rows shorter than c0
        yield nothing.
        """
        last_row = min(self.r1, len(grid) - 1)
        for r in range(self.r0, last_row + 1):
            c_hi = min(self.c1, len(grid[r]) - 1)
            if c_hi >= self.c0:
                yield r, self.c0, c_hi


@dataclass(frozen=True, eq=False)
class Schematic:
    """Parsed grid together with its token and symbol lists."""
    grid: Grid
    parts: Tuple[PartToken, ...]
    symbols: Tuple[Symbol, ...]

    @property
    def n_rows(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self.grid), default=0)

    def row_length(self, r: int) -> int:
        return len(self.grid[r])

    def char_at(self, pos: Position) -> str:
        r, c = pos
        return str(self.grid[r][c])

    @property
    def gear_candidates(self) -> List[Symbol]:
        return [s for s in self.symbols if s.is_gear]


# =============================================================================
# Type Utilities
# =============================================================================

def is_symbol_char(ch: str) -> bool:
    """Symbols are every character that is neither a digit nor blank."""
    return not ch.isdigit() and ch != BLANK


def make_row(line: str) -> Row:
    """Build a read-only character row from a line of text."""
    row = np.array(list(line), dtype='<U1')
    row.setflags(write=False)
    return row


def symbol_mask(row: Row) -> np.ndarray:
    """Boolean mask of symbol cells in a row."""
    if row.size == 0:
        return np.zeros(0, dtype=bool)
    return ~(np.char.isdigit(row) | (row == BLANK))


def G(lines: List[str]) -> Grid:
    """Helper to build a grid from a list of strings."""
    return tuple(make_row(line) for line in lines)


def grid_to_lines(grid: Grid) -> List[str]:
    """Convert a grid back into its lines of text."""
    return [''.join(row.tolist()) for row in grid]
