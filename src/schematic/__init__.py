"""
Schematic - Part Number and Gear Ratio Engine

Parses an engine schematic grid, sums the part numbers adjacent to a
symbol, and sums the ratios of gears touching exactly two parts.
"""

from .types import (
    Grid, Position, PartToken, Symbol, Gear, Rect, Schematic,
    G, grid_to_lines, is_symbol_char
)
from .errors import SchematicError, MalformedGrid, NumberParseFailure
from .parser import (
    parse_schematic, build_grid, split_lines, decode_input, RowScanner, ScanState
)
from .adjacency import (
    neighborhood, is_valid_part, valid_parts, part_number_sum, adjacency_map
)
from .gears import adjacent_parts, resolve_gears, gear_ratio_sum
from .invariants import (
    SchematicStats, describe, symmetry_violations, adjacency_symmetric
)
from .receipts import Receipt, text_sha, log_receipt
from .solver import (
    SolveResult, solve, calculate_part_1, calculate_part_2, format_answers
)

__all__ = [
    # Types
    'Grid', 'Position', 'PartToken', 'Symbol', 'Gear', 'Rect', 'Schematic',
    'G', 'grid_to_lines', 'is_symbol_char',

    # Errors
    'SchematicError', 'MalformedGrid', 'NumberParseFailure',

    # Parser
    'parse_schematic', 'build_grid', 'split_lines', 'decode_input',
    'RowScanner', 'ScanState',

    # Adjacency
    'neighborhood', 'is_valid_part', 'valid_parts', 'part_number_sum',
    'adjacency_map',

    # Gears
    'adjacent_parts', 'resolve_gears', 'gear_ratio_sum',

    # Invariants
    'SchematicStats', 'describe', 'symmetry_violations', 'adjacency_symmetric',

    # Receipts
    'Receipt', 'text_sha', 'log_receipt',

    # Solver
    'SolveResult', 'solve', 'calculate_part_1', 'calculate_part_2',
    'format_answers',
]
