#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schematic - Gear Resolver
=========================

A gear is a '*' symbol. A part is adjacent to a gear when the gear's
position lies inside the part's neighborhood rectangle (the same Rect
the adjacency evaluator scans). Only gears with exactly two adjacent
parts contribute their ratio (the product of the two values).
"""

from typing import List, Sequence

from .adjacency import neighborhood
from .types import Gear, PartToken, Schematic, Symbol


def adjacent_parts(parts: Sequence[PartToken], gear: Symbol) -> List[PartToken]:
    """Parts whose neighborhood contains the gear position."""
    return [p for p in parts if neighborhood(p).contains(gear.position)]


def resolve_gears(s: Schematic) -> List[Gear]:
    """Annotate every gear candidate with its adjacent parts."""
    return [
        Gear(sym, tuple(adjacent_parts(s.parts, sym)))
        for sym in s.gear_candidates
    ]


def gear_ratio_sum(s: Schematic) -> int:
    """Part 2: sum of ratios over gears with exactly two adjacent parts."""
    return sum(g.ratio for g in resolve_gears(s))
