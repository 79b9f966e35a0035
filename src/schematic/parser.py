#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schematic - Grid Parser
=======================

Single pass over the input, row by row, column by column. Each row is
scanned by a two-state machine:

- IDLE:   outside a digit run. A digit opens a run; a symbol is recorded.
- IN_RUN: accumulating digits. Any non-digit closes the run and emits a
          PartToken; if the closing character is a symbol it is recorded
          in the same step.

At end of row an open run is flushed, so runs never span rows.
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple

from .config import BLANK, MAX_PART_VALUE
from .errors import MalformedGrid, NumberParseFailure
from .types import Grid, PartToken, Position, Schematic, Symbol, make_row

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")


class ScanState(Enum):
    IDLE = "idle"
    IN_RUN = "in_run"


class RowScanner:
    """Scans one row, emitting part tokens and symbols in column order."""

    def __init__(self, row: int):
        self.row = row
        self.state = ScanState.IDLE
        self.start: Optional[Position] = None
        self.digits: List[str] = []
        self.parts: List[PartToken] = []
        self.symbols: List[Symbol] = []

    def feed(self, col: int, ch: str):
        if ch in DIGITS:
            if self.state is ScanState.IDLE:
                self.state = ScanState.IN_RUN
                self.start = (self.row, col)
            self.digits.append(ch)
            return

        if self.state is ScanState.IN_RUN:
            self.close()
        if ch != BLANK:
            self.symbols.append(Symbol((self.row, col), ch))

    def close(self):
        """Close the open run and emit its token."""
        text = ''.join(self.digits)
        if not text:
            raise NumberParseFailure("empty digit run", line=self.row + 1)
        value = int(text)
        if value > MAX_PART_VALUE:
            raise NumberParseFailure(
                f"part number exceeds {MAX_PART_VALUE}",
                line=self.row + 1, column=self.start[1] + 1, text=text,
            )
        self.parts.append(PartToken(self.start, len(text), value))
        self.state = ScanState.IDLE
        self.start = None
        self.digits = []

    def finish(self) -> Tuple[List[PartToken], List[Symbol]]:
        if self.state is ScanState.IN_RUN:
            self.close()
        return self.parts, self.symbols


# =============================================================================
# Input Normalisation
# =============================================================================

def split_lines(text: str) -> List[str]:
    """
    Split raw text into grid lines.

    Only '\\n', '\\r\\n' and '\\r' end a line; every other control character
    stays in its row and is rejected by validate_line. Trailing spaces and
    tabs are stripped from every line and trailing empty lines are dropped.
    Interior empty lines are kept as zero-length rows.
    """
    text = text.replace('\r\n', '\n').replace('\r', '\n')
    lines = [line.rstrip(' \t') for line in text.split('\n')]
    while lines and not lines[-1]:
        lines.pop()
    return lines


def decode_input(data: bytes) -> str:
    """Decode raw input bytes as UTF-8, locating any invalid byte."""
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        line_start = data.rfind(b'\n', 0, e.start) + 1
        raise MalformedGrid(
            "input is not valid UTF-8",
            line=data.count(b'\n', 0, e.start) + 1,
            column=e.start - line_start + 1,
            text=data[e.start:e.end].hex(),
        ) from e


def validate_line(line: str, lineno: int):
    """Raise MalformedGrid for whitespace, control or non-ASCII characters."""
    for col, ch in enumerate(line):
        if not ch.isascii() or not ch.isprintable() or ch.isspace():
            raise MalformedGrid(
                "unexpected character in grid row",
                line=lineno, column=col + 1, text=ch,
            )


def build_grid(lines: List[str]) -> Grid:
    """Validate lines and freeze them into a Grid."""
    for i, line in enumerate(lines):
        validate_line(line, i + 1)
    return tuple(make_row(line) for line in lines)


# =============================================================================
# Parsing
# =============================================================================

def scan_row(row: int, line: str) -> Tuple[List[PartToken], List[Symbol]]:
    """Scan one validated line into its tokens and symbols."""
    scanner = RowScanner(row)
    for col, ch in enumerate(line):
        scanner.feed(col, ch)
    return scanner.finish()


def parse_schematic(text: str) -> Schematic:
    """
    Parse raw text into a Schematic.

    Tokens and symbols are returned in row-major, left-to-right order.

    Raises:
        MalformedGrid: a row contains a character outside the alphabet
        NumberParseFailure: a digit run does not fit MAX_PART_VALUE
    """
    lines = split_lines(text)
    grid = build_grid(lines)

    parts: List[PartToken] = []
    symbols: List[Symbol] = []
    for r, line in enumerate(lines):
        row_parts, row_symbols = scan_row(r, line)
        parts.extend(row_parts)
        symbols.extend(row_symbols)

    logger.debug("Parsed %d rows: %d parts, %d symbols", len(grid), len(parts), len(symbols))
    return Schematic(grid, tuple(parts), tuple(symbols))
