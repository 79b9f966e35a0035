#!/usr/bin/env python3
"""
Determinism and symmetry verification for a schematic input.

Checks:
1. Same input -> same parts, symbols and answers across runs
2. Shuffled part order -> same gear ratio total
3. Grid-scan and gear-containment adjacency agree on every pair

Usage:
    PYTHONPATH=src python scripts/verify_determinism.py [input.txt]
"""

import os
import random
import sys

# Add src to path if not already there
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from schematic.adjacency import part_number_sum
from schematic.gears import gear_ratio_sum
from schematic.invariants import symmetry_violations
from schematic.parser import parse_schematic
from schematic.solver import solve
from schematic.types import Schematic

SAMPLE = """\
467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""


def check_repeat_runs(text: str, runs: int = 10) -> bool:
    """Same input produces the same parse and answers across runs."""
    print("Check 1: Repeat runs")

    first = solve(text)
    all_same = True
    for _ in range(runs - 1):
        again = solve(text)
        if (again.schematic.parts != first.schematic.parts
                or again.schematic.symbols != first.schematic.symbols
                or (again.part1, again.part2) != (first.part1, first.part2)):
            all_same = False
            break

    print(f"  {runs} runs: {'PASS - identical' if all_same else 'FAIL - different outputs'}")
    print(f"    part1={first.part1} part2={first.part2}")
    return all_same


def check_shuffled_parts(text: str, rounds: int = 5) -> bool:
    """Both sums do not depend on part or symbol order."""
    print("\nCheck 2: Shuffled part order")

    s = parse_schematic(text)
    result = solve(text)
    expected = (result.part1, result.part2)
    parts = list(s.parts)
    symbols = list(s.symbols)
    rng = random.Random(0)

    totals = []
    for _ in range(rounds):
        rng.shuffle(parts)
        rng.shuffle(symbols)
        shuffled = Schematic(s.grid, tuple(parts), tuple(symbols))
        totals.append((part_number_sum(shuffled), gear_ratio_sum(shuffled)))

    ok = all(t == expected for t in totals)
    print(f"  {rounds} shuffles: {'PASS - same totals' if ok else 'FAIL - totals differ'}")
    return ok


def check_symmetry(text: str) -> bool:
    """Both adjacency tests agree on every (part, gear) pair."""
    print("\nCheck 3: Adjacency symmetry")

    bad = symmetry_violations(parse_schematic(text))
    print(f"  violations: {len(bad)}")
    for part, gear in bad[:5]:
        print(f"    part {part.value} at {part.start} vs gear at {gear.position}")
    return not bad


def main():
    if len(sys.argv) > 1:
        with open(sys.argv[1]) as f:
            text = f.read()
    else:
        text = SAMPLE

    print("=" * 60)
    print("SCHEMATIC DETERMINISM VERIFICATION")
    print("=" * 60)

    checks = [check_repeat_runs, check_shuffled_parts, check_symmetry]
    results = [check(text) for check in checks]

    print("\n" + "=" * 60)
    print(f"OVERALL: {sum(results)}/{len(results)} checks passed")
    print("=" * 60)

    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
