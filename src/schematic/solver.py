#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Schematic - Main Solver Harness"""

import logging
import time
from dataclasses import dataclass
from typing import List

from .adjacency import valid_parts
from .gears import resolve_gears
from .invariants import summarize
from .parser import parse_schematic
from .receipts import Receipt, text_sha
from .types import Gear, PartToken, Schematic

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    """Both answers plus everything derived on the way."""
    part1: int
    part2: int
    schematic: Schematic
    valid_parts: List[PartToken]
    gears: List[Gear]
    receipt: Receipt


def solve(text: str) -> SolveResult:
    """
    Parse once, then evaluate part validity and gear ratios.

    Parse errors propagate; there are no partial results.
    """
    t0 = time.perf_counter()
    s = parse_schematic(text)

    valid = valid_parts(s)
    gears = resolve_gears(s)
    part1 = sum(p.value for p in valid)
    part2 = sum(g.ratio for g in gears)
    timing_ms = (time.perf_counter() - t0) * 1000.0

    receipt = Receipt(
        input_sha=text_sha(text),
        stats=summarize(s, valid, gears),
        part1=part1,
        part2=part2,
        timing_ms=round(timing_ms, 3),
    )
    logger.info(
        "Solved %dx%d schematic: part1=%d (%d/%d parts), part2=%d (%d gears)",
        receipt.stats.shape[0], receipt.stats.shape[1],
        part1, len(valid), len(s.parts),
        part2, receipt.stats.n_resolved_gears,
    )
    return SolveResult(part1, part2, s, valid, gears, receipt)


def calculate_part_1(text: str) -> int:
    return solve(text).part1


def calculate_part_2(text: str) -> int:
    return solve(text).part2


def format_answers(result: SolveResult) -> str:
    return f"Part 1 Answer: {result.part1}\nPart 2 Answer: {result.part2}"
