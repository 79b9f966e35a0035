#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schematic - Invariant Checks
============================

Precompute summary statistics for a schematic and verify that the
grid-side and gear-side adjacency tests agree on every (part, gear) pair.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .adjacency import neighborhood, touches_symbol, valid_parts
from .gears import resolve_gears
from .types import Gear, PartToken, Rect, Schematic, Symbol

# =============================================================================
# Statistics
# =============================================================================

@dataclass
class SchematicStats:
    """Counts describing a parsed schematic."""
    shape: Tuple[int, int]          # (rows, longest row)
    n_parts: int
    n_valid_parts: int
    n_symbols: int
    n_gear_candidates: int
    n_resolved_gears: int


def describe(s: Schematic) -> SchematicStats:
    return summarize(s, valid_parts(s), resolve_gears(s))


def summarize(s: Schematic, valid: List[PartToken], gears: List[Gear]) -> SchematicStats:
    """Build stats from already computed valid parts and gears."""
    return SchematicStats(
        shape=(s.n_rows, s.width),
        n_parts=len(s.parts),
        n_valid_parts=len(valid),
        n_symbols=len(s.symbols),
        n_gear_candidates=len(gears),
        n_resolved_gears=sum(1 for g in gears if g.is_resolved),
    )


# =============================================================================
# Adjacency Symmetry
# =============================================================================

def scan_sees(s: Schematic, part: PartToken, sym: Symbol) -> bool:
    """
    Grid-side test: the clipped neighborhood scan visits sym's cell and
    touches_symbol reports a symbol there.
    """
    r, c = sym.position
    for row, c_lo, c_hi in neighborhood(part).clip(s.grid):
        if row == r and c_lo <= c <= c_hi:
            return touches_symbol(s.grid, Rect(r, c, r, c))
    return False


def symmetry_violations(s: Schematic) -> List[Tuple[PartToken, Symbol]]:
    """(part, gear) pairs on which the two adjacency tests disagree."""
    bad = []
    for sym in s.gear_candidates:
        for part in s.parts:
            if scan_sees(s, part, sym) != neighborhood(part).contains(sym.position):
                bad.append((part, sym))
    return bad


def adjacency_symmetric(s: Schematic) -> bool:
    return not symmetry_violations(s)
